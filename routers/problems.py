from __future__ import annotations

import random

from fastapi import APIRouter, HTTPException

from checker import check_answer
from exercises import feedback_text, render_prompt
from explain import EXAMPLE, Explanation, explain_problem
from generator import generate_problem
from schemas.problems import (
    CheckRequest,
    CheckResponse,
    ExplainRequest,
    GenerateRequest,
    GenerateResponse,
)

# Stateless endpoints: the caller holds the problem (and its solution)
router = APIRouter(tags=["problems"])


@router.post("/generate", response_model=GenerateResponse)
def generate(req: GenerateRequest):
    sampler = random.Random(req.seed) if req.seed is not None else None
    problem = generate_problem(req.kind, req.difficulty, sampler=sampler)
    return {
        "kind": req.kind,
        "difficulty": req.difficulty,
        "prompt": render_prompt(req.kind, problem.a, problem.b, problem.c),
        "problem": problem,
    }


@router.post("/check", response_model=CheckResponse)
def check(req: CheckRequest):
    result = check_answer(req.answer, req.problem)
    feedback = feedback_text(req.kind, result.correct) if req.kind is not None else None
    return {"correct": result.correct, "answer": result.answer, "feedback": feedback}


@router.post("/explain", response_model=Explanation)
def explain(req: ExplainRequest):
    try:
        return explain_problem(req.problem)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/explain/example", response_model=Explanation)
def explain_example():
    return EXAMPLE
