# routers/health.py
from fastapi import APIRouter, HTTPException

from generator import generate_problem
from models import Difficulty, ExerciseKind
from ranges import RangeTable, get_ranges

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/ranges")
def health_ranges():
    try:
        table = get_ranges()
        # one draw per row proves the table is usable end to end
        for kind in ExerciseKind:
            for tier in Difficulty:
                generate_problem(kind, tier)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"ranges_error: {type(e).__name__}: {e}")

    rows = sum(len(tiers) for tiers in table.values())
    return {"ok": True, "rows": rows, "source": RangeTable.source()}
