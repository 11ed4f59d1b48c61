# schemas/submissions.py
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class SubmitAnswerRequest(BaseModel):
    # camelCase on the wire to match the front-end.
    # Both optional here so a missing field gets our 400 message, not a schema error.
    sessionId: Optional[str] = None
    # left raw: grading.to_number coerces, and rejects booleans/non-finite values
    userAnswer: Any = None


class SubmitAnswerResponse(BaseModel):
    is_correct: bool
    feedback: str
    correct_answer: float
