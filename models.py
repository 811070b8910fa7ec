from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ExerciseKind(str, Enum):
    BALANCE = "balance"
    PERIMETER = "perimeter"
    FRUIT_STALL = "fruitStall"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    DIFFICULT = "difficult"


# Order is the contract; display labels live in exercises.py
DIFFICULTY_ORDER = (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.DIFFICULT)


class Feedback(str, Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"


class EquationProblem(BaseModel):
    """One instance of ``a*x + b = c`` whose unknown ``x`` is ``solution``."""

    model_config = ConfigDict(frozen=True)

    a: int = Field(ge=1)
    b: int = Field(ge=0)
    c: int = Field(ge=1)
    solution: int = Field(ge=1)

    @model_validator(mode="after")
    def _check_balanced(self) -> "EquationProblem":
        if self.a * self.solution + self.b != self.c:
            raise ValueError(
                f"c must equal a*solution + b ({self.a}*{self.solution} + {self.b} != {self.c})"
            )
        return self


class ProgressState(BaseModel):
    model_config = ConfigDict(frozen=True)

    difficulty: Difficulty = Difficulty.EASY
    correct_streak: int = Field(default=0, ge=0)
