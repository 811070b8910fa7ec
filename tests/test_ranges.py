import copy
import json

import pytest
from pydantic import ValidationError

import config
from models import Difficulty, ExerciseKind
from ranges import DEFAULT_RANGES, IntRange, RangeTable, build_table, ranges_for, reload_ranges


@pytest.fixture(autouse=True)
def _restore_table(monkeypatch):
    monkeypatch.setattr(config, "RANGES_FILE", None)
    yield
    # put RANGES_FILE back before reloading, or a bad test file gets reloaded
    monkeypatch.undo()
    reload_ranges()


def test_default_table_matches_documented_rows():
    r = ranges_for(ExerciseKind.BALANCE, Difficulty.MEDIUM)
    assert (r.a.min, r.a.max, r.x.min, r.x.max, r.b.min, r.b.max) == (3, 5, 5, 10, 5, 20)
    r = ranges_for(ExerciseKind.PERIMETER, Difficulty.DIFFICULT)
    assert (r.a.min, r.a.max) == (2, 2)
    assert (r.x.min, r.x.max, r.b.min, r.b.max) == (20, 50, 40, 100)
    r = ranges_for(ExerciseKind.FRUIT_STALL, Difficulty.EASY)
    assert (r.a.min, r.a.max, r.x.min, r.x.max, r.b.min, r.b.max) == (2, 4, 2, 5, 3, 8)


def test_range_min_greater_than_max_rejected():
    with pytest.raises(ValidationError):
        IntRange(min=5, max=3)


def test_table_with_inverted_range_rejected():
    raw = copy.deepcopy(DEFAULT_RANGES)
    raw["fruitStall"]["medium"]["x"] = [10, 5]
    with pytest.raises(ValidationError):
        build_table(raw)


def test_table_with_nonpositive_coefficient_rejected():
    raw = copy.deepcopy(DEFAULT_RANGES)
    raw["balance"]["easy"]["a"] = [0, 3]
    with pytest.raises(ValidationError):
        build_table(raw)


def test_table_missing_rows_rejected():
    raw = copy.deepcopy(DEFAULT_RANGES)
    del raw["perimeter"]["medium"]
    with pytest.raises(ValueError, match="perimeter/medium"):
        build_table(raw)


def test_reload_from_file(tmp_path):
    raw = copy.deepcopy(DEFAULT_RANGES)
    raw["balance"]["easy"] = {"a": [2, 2], "x": [3, 3], "b": [1, 1]}
    p = tmp_path / "ranges.json"
    p.write_text(json.dumps(raw), encoding="utf-8")

    assert reload_ranges(str(p)) == 9
    assert RangeTable.source() == str(p)
    r = ranges_for(ExerciseKind.BALANCE, Difficulty.EASY)
    assert (r.a.max, r.x.max, r.b.max) == (2, 3, 1)


def test_failed_reload_keeps_previous_table(tmp_path):
    reload_ranges()
    before = ranges_for(ExerciseKind.BALANCE, Difficulty.EASY)

    raw = copy.deepcopy(DEFAULT_RANGES)
    raw["balance"]["easy"]["b"] = [30, 1]
    p = tmp_path / "bad.json"
    p.write_text(json.dumps(raw), encoding="utf-8")

    with pytest.raises(ValidationError):
        reload_ranges(str(p))
    assert ranges_for(ExerciseKind.BALANCE, Difficulty.EASY) == before
    assert RangeTable.source() == "builtin"
