import os
from typing import Annotated

from fastapi import Header, HTTPException


def require_admin(
    x_admin_token: Annotated[str | None, Header(alias="x-admin-token")] = None,
) -> None:
    """
    Admin-only guard. Requires the X-Admin-Token header to match ADMIN_TOKEN.
    The token is read per request so it can be rotated without a restart.
    """
    expected = os.getenv("ADMIN_TOKEN") or ""
    if not expected:
        raise HTTPException(status_code=500, detail="ADMIN_TOKEN not configured on server.")
    if x_admin_token != expected:
        raise HTTPException(status_code=401, detail="Unauthorized.")
