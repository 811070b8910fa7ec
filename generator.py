from __future__ import annotations

import random
from typing import Optional, Protocol

from models import Difficulty, EquationProblem, ExerciseKind
from ranges import IntRange, RangeTableData, ranges_for


class IntSampler(Protocol):
    """Anything that can draw a uniform integer from an inclusive range.

    ``random.Random`` satisfies this already; tests pass scripted samplers.
    """

    def randint(self, a: int, b: int) -> int: ...


_default_sampler = random.Random()


def _draw(sampler: IntSampler, bounds: IntRange) -> int:
    # Fixed values (e.g. the two equal fence sides) don't consume randomness
    if bounds.min == bounds.max:
        return bounds.min
    value = sampler.randint(bounds.min, bounds.max)
    if value not in bounds:
        raise RuntimeError(f"sampler returned {value} outside [{bounds.min}, {bounds.max}]")
    return value


def generate_problem(
    kind: ExerciseKind,
    tier: Difficulty,
    sampler: Optional[IntSampler] = None,
    table: Optional[RangeTableData] = None,
) -> EquationProblem:
    """
    Build a fresh ``a*x + b = c`` problem for ``kind`` at ``tier``.

    a, x and b are drawn in that order; c is computed so the solution is
    always a positive integer.
    """
    if table is not None:
        try:
            bounds = table[ExerciseKind(kind)][Difficulty(tier)]
        except (KeyError, ValueError):
            raise ValueError(f"Unknown exercise/difficulty: {kind!r}/{tier!r}") from None
    else:
        bounds = ranges_for(kind, tier)

    sampler = sampler or _default_sampler
    a = _draw(sampler, bounds.a)
    x = _draw(sampler, bounds.x)
    b = _draw(sampler, bounds.b)
    return EquationProblem(a=a, b=b, c=a * x + b, solution=x)
