from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from db import get_db
from deps.providers import get_rng, get_text_generator
from fallbacks import RandomSource, pick_fallback_feedback
from grading import is_within_tolerance, num_to_clean_str, to_number
from models import AnswerSubmission, ProblemSession
from prompts import FEEDBACK_MAX_OUTPUT_TOKENS, FEEDBACK_TEMPERATURE, build_feedback_prompt
from schemas.submissions import SubmitAnswerRequest, SubmitAnswerResponse
from textgen import TextGenerator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["submissions"])

_MISSING_FIELDS_MSG = "Session ID and user answer are required"


def _generate_feedback(
    generator: TextGenerator,
    rng: RandomSource,
    problem_text: str,
    user_answer: float,
    correct_answer: float,
    is_correct: bool,
) -> str:
    prompt = build_feedback_prompt(
        problem_text,
        num_to_clean_str(user_answer),
        num_to_clean_str(correct_answer),
        is_correct,
    )
    try:
        text = generator.generate(
            prompt,
            temperature=FEEDBACK_TEMPERATURE,
            max_output_tokens=FEEDBACK_MAX_OUTPUT_TOKENS,
        )
    except Exception as e:
        logger.error("AI feedback generation failed, using fallback: %s", e)
        text = ""

    text = (text or "").strip()
    if not text:
        return pick_fallback_feedback(rng, is_correct, correct_answer)
    return text


@router.post("/submit-answer", response_model=SubmitAnswerResponse)
def submit_answer(
    req: SubmitAnswerRequest,
    db: Session = Depends(get_db),
    generator: TextGenerator = Depends(get_text_generator),
    rng: RandomSource = Depends(get_rng),
):
    # Reject before touching the database or the model
    if not req.sessionId or req.userAnswer is None:
        raise HTTPException(status_code=400, detail=_MISSING_FIELDS_MSG)
    try:
        user_val = to_number(req.userAnswer)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        session = db.get(ProblemSession, req.sessionId)
    except Exception as e:
        logger.exception("Error loading problem session %s", req.sessionId)
        raise HTTPException(status_code=500, detail=f"Failed to load problem session: {e}")
    if session is None:
        raise HTTPException(status_code=500, detail=f"Problem session not found: {req.sessionId}")

    correct_val = to_number(session.correct_answer)
    is_correct = is_within_tolerance(user_val, correct_val)

    feedback = _generate_feedback(
        generator, rng, session.problem_text, user_val, correct_val, is_correct
    )

    submission = AnswerSubmission(
        session_id=session.id,
        user_answer=user_val,
        is_correct=is_correct,
        feedback_text=feedback,
    )
    try:
        db.add(submission)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.exception("Error saving answer submission for session %s", session.id)
        raise HTTPException(status_code=500, detail=f"Failed to save answer submission: {e}")

    return SubmitAnswerResponse(
        is_correct=is_correct, feedback=feedback, correct_answer=correct_val
    )
