from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

import config
from db import get_db
from deps.providers import get_rng, get_text_generator
from fallbacks import RandomSource, pick_fallback_problem
from models import ProblemSession
from parsing import GeneratedProblem, ProblemParseError, parse_problem
from prompts import PROBLEM_MAX_OUTPUT_TOKENS, PROBLEM_PROMPT, PROBLEM_TEMPERATURE
from schemas.problems import ProblemOut
from textgen import TextGenerator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["problems"])


def _generate_problem(generator: TextGenerator, rng: RandomSource) -> GeneratedProblem:
    """Ask the model for a problem; any failure yields a canned one."""
    try:
        raw = generator.generate(
            PROBLEM_PROMPT,
            temperature=PROBLEM_TEMPERATURE,
            max_output_tokens=PROBLEM_MAX_OUTPUT_TOKENS,
        )
        return parse_problem(raw)
    except ProblemParseError as e:
        logger.warning("Failed to parse AI response, using fallback: %s", e)
    except Exception as e:
        logger.error("AI problem generation failed, using fallback: %s", e)

    fb = pick_fallback_problem(rng)
    return GeneratedProblem(
        problem_text=fb["problem_text"], correct_answer=float(fb["correct_answer"])
    )


@router.post("/math-problem", response_model=ProblemOut)
def create_math_problem(
    db: Session = Depends(get_db),
    generator: TextGenerator = Depends(get_text_generator),
    rng: RandomSource = Depends(get_rng),
):
    problem = _generate_problem(generator, rng)

    # Only persist once the problem is fully decided
    session = ProblemSession(
        problem_text=problem.problem_text, correct_answer=problem.correct_answer
    )
    try:
        db.add(session)
        db.commit()
        db.refresh(session)
    except Exception as e:
        db.rollback()
        logger.exception("Error saving math problem")
        raise HTTPException(status_code=500, detail=f"Failed to save math problem: {e}")

    return ProblemOut(
        session_id=session.id,
        problem_text=problem.problem_text,
        correct_answer=problem.correct_answer if config.REVEAL_ANSWER_ON_GENERATE else None,
    )
