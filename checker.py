from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel

from models import EquationProblem

LEN_LIMIT = 100

# Whole numbers, optionally written with a zero fractional part ("4.0", "4.00")
_INTEGER_RE = re.compile(r"^([+-]?\d+)(?:\.0*)?$")


class AnswerCheck(BaseModel):
    correct: bool
    # parsed value, None when the text isn't a whole number
    answer: Optional[int] = None


def parse_answer(raw: Optional[str]) -> Optional[int]:
    if raw is None or not isinstance(raw, str):
        return None
    if len(raw) > LEN_LIMIT:
        return None
    s = raw.strip()
    if not s:
        return None
    m = _INTEGER_RE.fullmatch(s)
    if m is None:
        return None
    return int(m.group(1))


def check_answer(raw: Optional[str], problem: EquationProblem) -> AnswerCheck:
    """Malformed input is not an error here; it is simply a wrong answer."""
    value = parse_answer(raw)
    return AnswerCheck(correct=value is not None and value == problem.solution, answer=value)
