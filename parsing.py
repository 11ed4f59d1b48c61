from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional


class ProblemParseError(ValueError):
    """Model output could not be turned into a usable problem."""


@dataclass(frozen=True)
class GeneratedProblem:
    problem_text: str
    correct_answer: float


def extract_json_object(text: str) -> Optional[str]:
    """
    Return the first balanced {...} substring of text, or None.
    Braces inside JSON strings (and escaped quotes) do not count.
    """
    start = text.find("{")
    if start < 0:
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start : i + 1]
    return None


def _try_parse_object(text: str) -> Optional[Dict[str, Any]]:
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return None
    return data if isinstance(data, dict) else None


def _validate(data: Dict[str, Any]) -> GeneratedProblem:
    problem_text = data.get("problem_text")
    if not isinstance(problem_text, str) or not problem_text.strip():
        raise ProblemParseError("problem_text missing or empty")

    answer = data.get("correct_answer")
    # JSON true/false decode to bool, which is an int subclass
    if isinstance(answer, bool) or not isinstance(answer, (int, float)):
        raise ProblemParseError("correct_answer is not a number")
    if not math.isfinite(answer):
        raise ProblemParseError("correct_answer is not finite")

    return GeneratedProblem(problem_text=problem_text, correct_answer=float(answer))


def parse_problem(raw_text: Optional[str]) -> GeneratedProblem:
    """Parse model output into a GeneratedProblem or raise ProblemParseError."""
    if not raw_text or not raw_text.strip():
        raise ProblemParseError("empty response")

    text = raw_text.strip()

    # Strict parse first; only then look for an object wrapped in prose or fences
    data = _try_parse_object(text)
    if data is None:
        candidate = extract_json_object(text)
        if candidate is not None:
            data = _try_parse_object(candidate)

    if data is None:
        raise ProblemParseError("no JSON object in response")

    return _validate(data)
