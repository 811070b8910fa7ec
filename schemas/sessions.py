from typing import Dict, Optional

from pydantic import BaseModel

from models import Difficulty, ExerciseKind, Feedback, ProgressState
from schemas.problems import AnswerText


class ProblemView(BaseModel):
    # solution intentionally absent; the server keeps it
    a: int
    b: int
    c: int


class ExerciseView(BaseModel):
    kind: ExerciseKind
    title: str
    prompt: str
    difficulty: Difficulty
    correct_streak: int
    problem: ProblemView
    feedback: Optional[Feedback] = None
    feedback_text: Optional[str] = None
    advance_pending: bool = False


class SessionOut(BaseModel):
    id: str
    active: ExerciseView
    progress: Dict[ExerciseKind, ProgressState]


class SwitchExerciseRequest(BaseModel):
    kind: ExerciseKind


class DifficultyRequest(BaseModel):
    difficulty: Difficulty
    # defaults to the active exercise
    kind: Optional[ExerciseKind] = None


class AnswerRequest(BaseModel):
    answer: AnswerText = ""


class AnswerOut(BaseModel):
    accepted: bool
    correct: bool
    promoted: bool = False
    mastered: bool = False
    rotated_to: Optional[ExerciseKind] = None
    session: SessionOut
