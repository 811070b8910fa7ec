from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException

from exercises import DIFFICULTY_LABELS, EXERCISES, ROTATION
from models import DIFFICULTY_ORDER, ExerciseKind
from ranges import get_ranges
from schemas.exercises import DifficultyOut, ExerciseOut, RangeRowOut

router = APIRouter(tags=["exercises"])


def _parse_kind(kind: str) -> ExerciseKind:
    try:
        return ExerciseKind(kind)
    except ValueError:
        raise HTTPException(status_code=404, detail="exercise not found")


@router.get("/exercises", response_model=List[ExerciseOut])
def list_exercises():
    difficulties = [DifficultyOut(id=d, label=DIFFICULTY_LABELS[d]) for d in DIFFICULTY_ORDER]
    return [
        ExerciseOut(
            kind=kind,
            title=EXERCISES[kind]["title"],
            unit=EXERCISES[kind]["unit"],
            difficulties=difficulties,
        )
        for kind in ROTATION
    ]


@router.get("/exercises/{kind}/ranges", response_model=List[RangeRowOut])
def get_exercise_ranges(kind: str):
    tiers = get_ranges()[_parse_kind(kind)]
    return [
        RangeRowOut(
            difficulty=d,
            a=[tiers[d].a.min, tiers[d].a.max],
            x=[tiers[d].x.min, tiers[d].x.max],
            b=[tiers[d].b.min, tiers[d].b.max],
        )
        for d in DIFFICULTY_ORDER
    ]
