from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from pydantic import ValidationError

from deps.auth import require_admin
from ranges import RangeTable, reload_ranges
from session import SessionStore, get_store

logger = logging.getLogger("linear-tutor.admin")

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.post("/reload")
def reload_range_table():
    try:
        n = reload_ranges()
    except (OSError, ValueError, ValidationError) as e:
        # Previous table stays live
        logger.warning("Range table reload failed: %s", e)
        return {"ok": False, "error": f"{type(e).__name__}: {e}", "source": RangeTable.source()}
    return {"ok": True, "count": n, "source": RangeTable.source()}


@router.get("/sessions")
def session_count(store: SessionStore = Depends(get_store)):
    evicted = store.evict_idle()
    return {"ok": True, "count": store.count(), "evicted": evicted}
