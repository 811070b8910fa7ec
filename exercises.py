# Static exercise catalogue. Text only; numbers come from ranges.py.

from __future__ import annotations

from typing import Dict, List

from models import Difficulty, ExerciseKind

ROTATION: List[ExerciseKind] = [
    ExerciseKind.BALANCE,
    ExerciseKind.PERIMETER,
    ExerciseKind.FRUIT_STALL,
]

DIFFICULTY_LABELS: Dict[Difficulty, str] = {
    Difficulty.EASY: "Easy",
    Difficulty.MEDIUM: "Medium",
    Difficulty.DIFFICULT: "Difficult",
}

EXERCISES: Dict[ExerciseKind, Dict[str, str]] = {
    ExerciseKind.BALANCE: {
        "title": "Balance Scale",
        "prompt": (
            "Every 'x' box weighs the same. How much does one 'x' box weigh "
            "for the scale to balance?"
        ),
        "unit": "",
        "correct": "Correct! You balanced the scale!",
        "incorrect": "Try again! Maths takes practice.",
    },
    ExerciseKind.PERIMETER: {
        "title": "Fencing the Field",
        "prompt": (
            "You have {c} metres of fence for three sides of a rectangular field; "
            "the fourth side runs along a river. The known side is {b} m. "
            "How long, in metres, is each of the other two sides (x)?"
        ),
        "unit": "m",
        "correct": "Great work! Field measured correctly!",
        "incorrect": "Almost there! Check your calculations.",
    },
    ExerciseKind.FRUIT_STALL: {
        "title": "Fruit Stall",
        "prompt": (
            "You bought {a} apples at x each and one melon for {b}. "
            "The total was {c}. How much does one apple cost?"
        ),
        "unit": "$",
        "correct": "Exactly! Good buy!",
        "incorrect": "Oops, the change won't add up. Try again!",
    },
}


def next_exercise(kind: ExerciseKind) -> ExerciseKind:
    i = ROTATION.index(ExerciseKind(kind))
    return ROTATION[(i + 1) % len(ROTATION)]


def render_prompt(kind: ExerciseKind, a: int, b: int, c: int) -> str:
    return EXERCISES[ExerciseKind(kind)]["prompt"].format(a=a, b=b, c=c)


def feedback_text(kind: ExerciseKind, correct: bool) -> str:
    return EXERCISES[ExerciseKind(kind)]["correct" if correct else "incorrect"]
