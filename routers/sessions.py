# routers/sessions.py

from fastapi import APIRouter, Depends, HTTPException

from exercises import EXERCISES, feedback_text, render_prompt
from explain import Explanation, explain_problem
from models import Feedback
from schemas.sessions import (
    AnswerOut,
    AnswerRequest,
    DifficultyRequest,
    ExerciseView,
    ProblemView,
    SessionOut,
    SwitchExerciseRequest,
)
from session import SessionClosedError, SessionStore, TutorSession, get_store

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _get_session(session_id: str, store: SessionStore) -> TutorSession:
    s = store.get(session_id)
    if s is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return s


def _view(s: TutorSession) -> SessionOut:
    with s.lock:
        ctl = s.active
        p = ctl.problem
        return SessionOut(
            id=s.id,
            active=ExerciseView(
                kind=ctl.kind,
                title=EXERCISES[ctl.kind]["title"],
                prompt=render_prompt(ctl.kind, p.a, p.b, p.c),
                difficulty=ctl.difficulty,
                correct_streak=s.tracker.state(ctl.kind).correct_streak,
                problem=ProblemView(a=p.a, b=p.b, c=p.c),
                feedback=ctl.feedback,
                feedback_text=(
                    feedback_text(ctl.kind, ctl.feedback == Feedback.CORRECT)
                    if ctl.feedback is not None
                    else None
                ),
                advance_pending=ctl.advance_pending,
            ),
            progress=s.tracker.snapshot(),
        )


@router.post("", response_model=SessionOut, status_code=201)
def create_session(store: SessionStore = Depends(get_store)):
    return _view(store.create())


@router.get("/{session_id}", response_model=SessionOut)
def get_session(session_id: str, store: SessionStore = Depends(get_store)):
    return _view(_get_session(session_id, store))


@router.post("/{session_id}/exercise", response_model=SessionOut)
def switch_exercise(
    session_id: str, req: SwitchExerciseRequest, store: SessionStore = Depends(get_store)
):
    s = _get_session(session_id, store)
    try:
        s.switch_exercise(req.kind)
    except SessionClosedError:
        raise HTTPException(status_code=404, detail="Session not found")
    return _view(s)


@router.post("/{session_id}/answer", response_model=AnswerOut)
def submit_answer(session_id: str, req: AnswerRequest, store: SessionStore = Depends(get_store)):
    s = _get_session(session_id, store)
    try:
        res = s.submit_answer(req.answer)
    except SessionClosedError:
        raise HTTPException(status_code=404, detail="Session not found")
    return AnswerOut(
        accepted=res.accepted,
        correct=bool(res.check and res.check.correct),
        promoted=bool(res.progress and res.progress.promoted),
        mastered=bool(res.progress and res.progress.mastered),
        rotated_to=res.rotated_to,
        session=_view(s),
    )


@router.post("/{session_id}/next", response_model=SessionOut)
def next_problem(session_id: str, store: SessionStore = Depends(get_store)):
    s = _get_session(session_id, store)
    try:
        s.next_problem()
    except SessionClosedError:
        raise HTTPException(status_code=404, detail="Session not found")
    return _view(s)


@router.post("/{session_id}/difficulty", response_model=SessionOut)
def change_difficulty(
    session_id: str, req: DifficultyRequest, store: SessionStore = Depends(get_store)
):
    s = _get_session(session_id, store)
    try:
        s.change_difficulty(req.difficulty, req.kind)
    except SessionClosedError:
        raise HTTPException(status_code=404, detail="Session not found")
    return _view(s)


@router.get("/{session_id}/explanation", response_model=Explanation)
def get_explanation(session_id: str, store: SessionStore = Depends(get_store)):
    s = _get_session(session_id, store)
    with s.lock:
        problem = s.active.problem
    return explain_problem(problem)


@router.delete("/{session_id}")
def close_session(session_id: str, store: SessionStore = Depends(get_store)):
    if not store.close(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"ok": True}
