# schemas/problems.py
from typing import Optional

from pydantic import BaseModel


class ProblemOut(BaseModel):
    session_id: str
    problem_text: str
    # null when REVEAL_ANSWER_ON_GENERATE is off
    correct_answer: Optional[float] = None
