from __future__ import annotations

import math
from typing import Any

from sympy import Rational

# Answers within this distance of the stored answer count as correct (strict <).
TOLERANCE = 0.01
_TOLERANCE_EXACT = Rational(1, 100)

_NOT_NUMERIC_MSG = "Answer must be a number."
_NON_FINITE_MSG = "Answer must be a finite number."


def to_number(value: Any) -> float:
    """
    Coerce an int/float or a numeric string to a finite float.
    Booleans are rejected even though Python treats them as ints.
    """
    if isinstance(value, bool):
        raise ValueError(_NOT_NUMERIC_MSG)
    if isinstance(value, (int, float)):
        val = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            val = float(value.strip())
        except ValueError:
            raise ValueError(_NOT_NUMERIC_MSG) from None
    else:
        raise ValueError(_NOT_NUMERIC_MSG)
    if not math.isfinite(val):
        raise ValueError(_NON_FINITE_MSG)
    return val


def _exact(x: float) -> Rational:
    # repr() is the shortest decimal that round-trips, i.e. what the learner typed
    return Rational(repr(float(x)))


def is_within_tolerance(user_answer: float, correct_answer: float) -> bool:
    """
    True iff |user_answer - correct_answer| < TOLERANCE.

    Compared as exact decimals: in binary floating point 10.6 - 10.59 comes out
    just under 0.01, which would wrongly accept an answer that is off by 0.01.
    """
    diff = abs(_exact(user_answer) - _exact(correct_answer))
    return bool(diff < _TOLERANCE_EXACT)


def num_to_clean_str(x: float) -> str:
    if math.isfinite(x) and abs(x - round(x)) < 1e-12:
        return str(int(round(x)))
    return str(x)
