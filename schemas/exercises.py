# schemas/exercises.py
from typing import List

from pydantic import BaseModel

from models import Difficulty, ExerciseKind


class DifficultyOut(BaseModel):
    id: Difficulty
    label: str


class ExerciseOut(BaseModel):
    kind: ExerciseKind
    title: str
    unit: str
    difficulties: List[DifficultyOut]


class RangeRowOut(BaseModel):
    difficulty: Difficulty
    a: List[int]
    x: List[int]
    b: List[int]
