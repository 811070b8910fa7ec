# schemas/problems.py
from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator

from models import Difficulty, EquationProblem, ExerciseKind

# ---------- Generate ----------


class GenerateRequest(BaseModel):
    kind: ExerciseKind
    difficulty: Difficulty = Difficulty.EASY
    # Reproducible draws for worksheets and debugging
    seed: Optional[int] = None


class GenerateResponse(BaseModel):
    kind: ExerciseKind
    difficulty: Difficulty
    prompt: str
    problem: EquationProblem


# ---------- Check ----------


def answer_as_text(v: Any) -> Any:
    # numeric input widgets send numbers; answers are always checked as text
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


AnswerText = Annotated[str, BeforeValidator(answer_as_text)]


class CheckRequest(BaseModel):
    answer: AnswerText = ""
    problem: EquationProblem
    kind: Optional[ExerciseKind] = None


class CheckResponse(BaseModel):
    correct: bool
    answer: Optional[int] = None
    feedback: Optional[str] = None


# ---------- Explain ----------


class ExplainRequest(BaseModel):
    problem: EquationProblem
