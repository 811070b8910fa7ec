# Range table: (exercise kind, difficulty) -> inclusive bounds for a, x and b.

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, model_validator

import config
from models import Difficulty, ExerciseKind

logger = logging.getLogger("linear-tutor.ranges")


class IntRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: int
    max: int

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, raw: Any) -> Any:
        # Accept [lo, hi] pairs and bare ints (fixed value) as well as dicts
        if isinstance(raw, int) and not isinstance(raw, bool):
            return {"min": raw, "max": raw}
        if isinstance(raw, (list, tuple)) and len(raw) == 2:
            return {"min": raw[0], "max": raw[1]}
        return raw

    @model_validator(mode="after")
    def _ordered(self) -> "IntRange":
        if self.min > self.max:
            raise ValueError(f"range min {self.min} > max {self.max}")
        return self

    def __contains__(self, value: int) -> bool:
        return self.min <= value <= self.max


class TierRanges(BaseModel):
    model_config = ConfigDict(frozen=True)

    a: IntRange
    x: IntRange
    b: IntRange

    @model_validator(mode="after")
    def _positive(self) -> "TierRanges":
        if self.a.min < 1:
            raise ValueError("a must be >= 1")
        if self.x.min < 1:
            raise ValueError("x must be >= 1")
        if self.b.min < 0:
            raise ValueError("b must be >= 0")
        return self


RangeTableData = Dict[ExerciseKind, Dict[Difficulty, TierRanges]]
_TABLE_ADAPTER = TypeAdapter(RangeTableData)

DEFAULT_RANGES: Dict[str, Dict[str, Dict[str, Any]]] = {
    "balance": {
        "easy": {"a": [2, 3], "x": [2, 5], "b": [1, 10]},
        "medium": {"a": [3, 5], "x": [5, 10], "b": [5, 20]},
        "difficult": {"a": [4, 7], "x": [8, 15], "b": [10, 30]},
    },
    # two equal sides + the known side; the river side is not fenced
    "perimeter": {
        "easy": {"a": 2, "x": [5, 10], "b": [10, 30]},
        "medium": {"a": 2, "x": [10, 25], "b": [20, 50]},
        "difficult": {"a": 2, "x": [20, 50], "b": [40, 100]},
    },
    "fruitStall": {
        "easy": {"a": [2, 4], "x": [2, 5], "b": [3, 8]},
        "medium": {"a": [3, 6], "x": [5, 10], "b": [5, 15]},
        "difficult": {"a": [5, 8], "x": [8, 12], "b": [10, 25]},
    },
}


def build_table(raw: Dict[str, Any]) -> RangeTableData:
    """
    Validate a raw mapping into a complete range table.
    Raises pydantic.ValidationError on bad bounds and ValueError on missing entries.
    """
    table = _TABLE_ADAPTER.validate_python(raw)
    missing = [
        f"{kind.value}/{tier.value}"
        for kind in ExerciseKind
        for tier in Difficulty
        if tier not in table.get(kind, {})
    ]
    if missing:
        raise ValueError(f"Range table is missing entries: {missing}")
    return table


def _read_file(p: Path) -> Dict[str, Any]:
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{p}: range table root must be an object")
    return data


class RangeTable:
    _table: Optional[RangeTableData] = None
    _source: str = "builtin"

    @classmethod
    def load(cls) -> RangeTableData:
        if cls._table is None:
            cls.reload()
        return cls._table

    @classmethod
    def reload(cls, path: Optional[str] = None) -> int:
        # Validate fully before swapping, so a bad file leaves the old table live
        path = path or config.RANGES_FILE
        if path:
            table = build_table(_read_file(Path(path)))
            source = str(path)
        else:
            table = build_table(DEFAULT_RANGES)
            source = "builtin"

        cls._table = table
        cls._source = source
        count = sum(len(tiers) for tiers in table.values())
        logger.info("Loaded %d range rows from %s", count, source)
        return count

    @classmethod
    def source(cls) -> str:
        return cls._source


# Public API
def get_ranges() -> RangeTableData:
    return RangeTable.load()


def reload_ranges(path: Optional[str] = None) -> int:
    return RangeTable.reload(path)


def ranges_for(kind: ExerciseKind, tier: Difficulty) -> TierRanges:
    try:
        return get_ranges()[ExerciseKind(kind)][Difficulty(tier)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown exercise/difficulty: {kind!r}/{tier!r}") from None
