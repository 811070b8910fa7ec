"""Worked, two-step solutions for ``a*x + b = c``.

The steps mirror how the equation is taught: undo the addition by subtracting
``b`` from both sides, then undo the multiplication by dividing both sides by
``a``. sympy does the algebra so each intermediate equation is the one a
student would write down, and ``solve`` double-checks the final value.
"""

from __future__ import annotations

from typing import List

import sympy as sp
from pydantic import BaseModel

from models import EquationProblem

X = sp.Symbol("x")


class ExplanationStep(BaseModel):
    title: str
    description: str
    before: str
    operation: str
    result: str


class Explanation(BaseModel):
    equation: str
    steps: List[ExplanationStep]
    solution: int


def _fmt(eq: sp.Eq) -> str:
    return f"{sp.sstr(eq.lhs)} = {sp.sstr(eq.rhs)}"


def explain_equation(a: int, b: int, c: int) -> Explanation:
    original = sp.Eq(a * X + b, c)

    # Step 1: isolate the x term
    subtract_op = f"{sp.sstr(original.lhs)} - {b} = {c} - {b}"
    isolated = sp.Eq(original.lhs - b, original.rhs - b)

    # Step 2: divide out the coefficient
    divide_op = f"({sp.sstr(isolated.lhs)}) / {a} = {sp.sstr(isolated.rhs)} / {a}"
    solved = sp.Eq(isolated.lhs / a, isolated.rhs / a)

    roots = sp.solve(original, X)
    if len(roots) != 1 or roots[0] != solved.rhs or not roots[0].is_integer:
        raise ValueError(f"{_fmt(original)} does not have a single whole-number solution")

    steps = [
        ExplanationStep(
            title="Step 1: Isolate the term with 'x'",
            description=(
                f"Remove the number added to the x term ({b}) by doing the opposite "
                "operation on both sides: subtract it."
            ),
            before=_fmt(original),
            operation=subtract_op,
            result=_fmt(isolated),
        ),
        ExplanationStep(
            title="Step 2: Find the value of 'x'",
            description=(
                f"x is multiplied by {a}. Do the opposite operation on both sides: divide."
            ),
            before=_fmt(isolated),
            operation=divide_op,
            result=_fmt(solved),
        ),
    ]
    return Explanation(equation=_fmt(original), steps=steps, solution=int(roots[0]))


def explain_problem(problem: EquationProblem) -> Explanation:
    return explain_equation(problem.a, problem.b, problem.c)


# Worked example shown before any problem is attempted
EXAMPLE = explain_equation(2, 4, 10)
