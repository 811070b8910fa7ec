from __future__ import annotations

import logging
import threading
import time
import uuid
from typing import Callable, Dict, Optional

from pydantic import BaseModel

import config
from checker import AnswerCheck, check_answer
from exercises import ROTATION
from generator import IntSampler, generate_problem
from models import Difficulty, EquationProblem, ExerciseKind, Feedback, ProgressState
from progression import ProgressTracker, ProgressUpdate
from scheduler import Scheduler, ThreadingScheduler, TimerHandle

logger = logging.getLogger("linear-tutor.session")


class SessionClosedError(RuntimeError):
    pass


class SubmitResult(BaseModel):
    # False when the problem was already solved and is waiting to advance
    accepted: bool
    check: Optional[AnswerCheck] = None
    feedback: Optional[Feedback] = None
    progress: Optional[ProgressUpdate] = None
    rotated_to: Optional[ExerciseKind] = None


class ExerciseController:
    """
    Holds the live problem for one exercise and its pending auto-advance.

    At most one deferred advance is pending. Every path that replaces the
    problem or hides the exercise cancels it first, and a callback that fires
    after being superseded is ignored.
    """

    def __init__(
        self,
        kind: ExerciseKind,
        tracker: ProgressTracker,
        scheduler: Scheduler,
        lock: threading.RLock,
        sampler: Optional[IntSampler] = None,
        delay: Optional[float] = None,
    ):
        self.kind = ExerciseKind(kind)
        self.tracker = tracker
        self.scheduler = scheduler
        self.sampler = sampler
        self.delay = config.ADVANCE_DELAY_SECONDS if delay is None else delay
        self._lock = lock

        self.problem: Optional[EquationProblem] = None
        self.feedback: Optional[Feedback] = None
        self.active = False
        self.generated = 0
        self._pending: Optional[TimerHandle] = None
        self._pending_token: Optional[object] = None

    @property
    def difficulty(self) -> Difficulty:
        return self.tracker.state(self.kind).difficulty

    @property
    def advance_pending(self) -> bool:
        return self._pending is not None

    def generate(self) -> EquationProblem:
        self.problem = generate_problem(self.kind, self.difficulty, sampler=self.sampler)
        self.feedback = None
        self.generated += 1
        return self.problem

    def activate(self) -> EquationProblem:
        self.cancel_pending()
        self.active = True
        return self.generate()

    def deactivate(self) -> None:
        self.cancel_pending()
        self.active = False

    def next_problem(self) -> EquationProblem:
        self.cancel_pending()
        return self.generate()

    def schedule_advance(self) -> None:
        self.cancel_pending()
        token = object()
        self._pending_token = token
        self._pending = self.scheduler.call_later(self.delay, lambda: self._advance(token))

    def cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
        self._pending = None
        self._pending_token = None

    def _advance(self, token: object) -> None:
        with self._lock:
            if token is not self._pending_token or not self.active:
                logger.debug("Ignoring stale auto-advance for %s", self.kind.value)
                return
            self._pending = None
            self._pending_token = None
            self.generate()


class TutorSession:
    """One learner's run through the three exercises."""

    def __init__(
        self,
        session_id: Optional[str] = None,
        scheduler: Optional[Scheduler] = None,
        sampler: Optional[IntSampler] = None,
        delay: Optional[float] = None,
        threshold: Optional[int] = None,
    ):
        self.id = session_id or uuid.uuid4().hex
        self.tracker = ProgressTracker(threshold)
        self._lock = threading.RLock()
        scheduler = scheduler or ThreadingScheduler()
        self.controllers: Dict[ExerciseKind, ExerciseController] = {
            kind: ExerciseController(kind, self.tracker, scheduler, self._lock, sampler, delay)
            for kind in ROTATION
        }
        self.closed = False
        self.active_kind = ROTATION[0]
        self.controllers[self.active_kind].activate()

    @property
    def active(self) -> ExerciseController:
        return self.controllers[self.active_kind]

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def _ensure_open(self) -> None:
        if self.closed:
            raise SessionClosedError(f"session {self.id} is closed")

    def switch_exercise(self, kind: ExerciseKind) -> ExerciseController:
        kind = ExerciseKind(kind)
        with self._lock:
            self._ensure_open()
            if kind == self.active_kind:
                return self.active
            self.active.deactivate()
            self.active_kind = kind
            self.active.activate()
            return self.active

    def submit_answer(self, raw: Optional[str]) -> SubmitResult:
        with self._lock:
            self._ensure_open()
            ctl = self.active
            if ctl.feedback == Feedback.CORRECT:
                return SubmitResult(accepted=False, feedback=ctl.feedback)

            check = check_answer(raw, ctl.problem)
            if not check.correct:
                ctl.feedback = Feedback.INCORRECT
                return SubmitResult(accepted=True, check=check, feedback=ctl.feedback)

            ctl.feedback = Feedback.CORRECT
            update = self.tracker.on_correct_answer(ctl.kind)
            if update.rotate_to is not None:
                self.switch_exercise(update.rotate_to)
                return SubmitResult(
                    accepted=True,
                    check=check,
                    feedback=Feedback.CORRECT,
                    progress=update,
                    rotated_to=update.rotate_to,
                )

            ctl.schedule_advance()
            return SubmitResult(accepted=True, check=check, feedback=ctl.feedback, progress=update)

    def next_problem(self) -> EquationProblem:
        with self._lock:
            self._ensure_open()
            return self.active.next_problem()

    def change_difficulty(
        self, tier: Difficulty, kind: Optional[ExerciseKind] = None
    ) -> ProgressState:
        with self._lock:
            self._ensure_open()
            kind = self.active_kind if kind is None else ExerciseKind(kind)
            state = self.tracker.on_difficulty_change(kind, tier)
            ctl = self.controllers[kind]
            if ctl.active:
                ctl.next_problem()
            return state

    def close(self) -> None:
        with self._lock:
            for ctl in self.controllers.values():
                ctl.deactivate()
            self.closed = True


class SessionStore:
    """In-memory sessions, dropped once idle for longer than the TTL."""

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        sampler: Optional[IntSampler] = None,
        delay: Optional[float] = None,
        ttl: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._scheduler = scheduler or ThreadingScheduler()
        self._sampler = sampler
        self._delay = delay
        self.ttl = config.SESSION_TTL_SECONDS if ttl is None else ttl
        self._clock = clock
        self._sessions: Dict[str, TutorSession] = {}
        self._last_seen: Dict[str, float] = {}
        self._lock = threading.Lock()

    def _pop_idle(self, now: float) -> list:
        # caller holds self._lock
        idle = [sid for sid, seen in self._last_seen.items() if now - seen > self.ttl]
        expired = []
        for sid in idle:
            self._last_seen.pop(sid, None)
            expired.append(self._sessions.pop(sid))
        return expired

    def _close_expired(self, expired: list) -> None:
        for s in expired:
            s.close()
            logger.info("Session %s expired", s.id)

    def create(self) -> TutorSession:
        s = TutorSession(scheduler=self._scheduler, sampler=self._sampler, delay=self._delay)
        with self._lock:
            now = self._clock()
            expired = self._pop_idle(now)
            self._sessions[s.id] = s
            self._last_seen[s.id] = now
        self._close_expired(expired)
        logger.info("Session %s started", s.id)
        return s

    def get(self, session_id: str) -> Optional[TutorSession]:
        with self._lock:
            now = self._clock()
            expired = self._pop_idle(now)
            s = self._sessions.get(session_id)
            if s is not None:
                self._last_seen[session_id] = now
        self._close_expired(expired)
        return s

    def evict_idle(self) -> int:
        with self._lock:
            expired = self._pop_idle(self._clock())
        self._close_expired(expired)
        return len(expired)

    def close(self, session_id: str) -> bool:
        with self._lock:
            s = self._sessions.pop(session_id, None)
            self._last_seen.pop(session_id, None)
        if s is None:
            return False
        s.close()
        logger.info("Session %s closed", session_id)
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._sessions)

    def close_all(self) -> None:
        with self._lock:
            ids = list(self._sessions)
        for sid in ids:
            self.close(sid)


_store = SessionStore()


def get_store() -> SessionStore:
    return _store
