from __future__ import annotations

import logging
from typing import Dict, Optional

from pydantic import BaseModel

import config
from exercises import next_exercise
from models import DIFFICULTY_ORDER, Difficulty, ExerciseKind, ProgressState

logger = logging.getLogger("linear-tutor.progression")


class ProgressUpdate(BaseModel):
    state: ProgressState
    promoted: bool = False
    # highest tier cleared again; the active exercise should rotate
    mastered: bool = False
    rotate_to: Optional[ExerciseKind] = None


def next_tier(tier: Difficulty) -> Optional[Difficulty]:
    i = DIFFICULTY_ORDER.index(Difficulty(tier))
    if i + 1 < len(DIFFICULTY_ORDER):
        return DIFFICULTY_ORDER[i + 1]
    return None


# --- Pure transitions -------------------------------------------------------------


def apply_correct(state: ProgressState, threshold: Optional[int] = None) -> ProgressUpdate:
    threshold = config.PROMOTION_STREAK if threshold is None else threshold
    if threshold < 1:
        raise ValueError(f"promotion threshold must be >= 1, got {threshold}")

    streak = state.correct_streak + 1
    if streak < threshold:
        return ProgressUpdate(
            state=ProgressState(difficulty=state.difficulty, correct_streak=streak)
        )

    promoted_to = next_tier(state.difficulty)
    if promoted_to is not None:
        return ProgressUpdate(
            state=ProgressState(difficulty=promoted_to, correct_streak=0), promoted=True
        )

    # Top tier: streak restarts, tier stays; rotation is decided by the caller's kind
    return ProgressUpdate(
        state=ProgressState(difficulty=state.difficulty, correct_streak=0), mastered=True
    )


def apply_override(state: ProgressState, tier: Difficulty) -> ProgressState:
    return ProgressState(difficulty=Difficulty(tier), correct_streak=0)


# --- State container --------------------------------------------------------------


class ProgressTracker:
    """Per-exercise progress, one independent record per exercise kind."""

    def __init__(self, threshold: Optional[int] = None):
        self.threshold = config.PROMOTION_STREAK if threshold is None else threshold
        if self.threshold < 1:
            raise ValueError(f"promotion threshold must be >= 1, got {self.threshold}")
        self._states: Dict[ExerciseKind, ProgressState] = {
            kind: ProgressState() for kind in ExerciseKind
        }

    def state(self, kind: ExerciseKind) -> ProgressState:
        return self._states[ExerciseKind(kind)]

    def snapshot(self) -> Dict[ExerciseKind, ProgressState]:
        return dict(self._states)

    def on_correct_answer(self, kind: ExerciseKind) -> ProgressUpdate:
        kind = ExerciseKind(kind)
        update = apply_correct(self._states[kind], self.threshold)
        self._states[kind] = update.state

        if update.promoted:
            logger.info("%s promoted to %s", kind.value, update.state.difficulty.value)
        if update.mastered:
            update = update.model_copy(update={"rotate_to": next_exercise(kind)})
            logger.info("%s mastered; rotating to %s", kind.value, update.rotate_to.value)
        return update

    def on_difficulty_change(self, kind: ExerciseKind, tier: Difficulty) -> ProgressState:
        kind = ExerciseKind(kind)
        self._states[kind] = apply_override(self._states[kind], tier)
        return self._states[kind]
