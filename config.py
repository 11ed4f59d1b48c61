from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# Load once at module import
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Local Next.js dev server is always allowed; production origins come from env
CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
] + [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

# The generation response carries the answer so the UI can show it after submit.
# Turn off to return correct_answer=null until the learner has answered.
REVEAL_ANSWER_ON_GENERATE = _env_flag("REVEAL_ANSWER_ON_GENERATE", True)
