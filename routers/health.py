from fastapi import APIRouter, HTTPException
from sqlalchemy import inspect, text

from db import engine
from models import AnswerSubmission, ProblemSession

router = APIRouter(prefix="/health", tags=["health"])

# Both handlers fail at persist time if either table is missing
REQUIRED_TABLES = (ProblemSession.__tablename__, AnswerSubmission.__tablename__)


@router.get("/db")
def health_db():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"ok": True}
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"db_error: {type(e).__name__}: {e}")


@router.get("/schema")
def health_schema():
    """Report whether the problem/submission tables exist (i.e. `alembic upgrade head` ran)."""
    try:
        with engine.connect() as conn:
            present = set(inspect(conn).get_table_names())
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"db_error: {type(e).__name__}: {e}")

    missing = [t for t in REQUIRED_TABLES if t not in present]
    return {
        "ok": not missing,
        "tables": {t: t in present for t in REQUIRED_TABLES},
        "missing": missing,
    }
