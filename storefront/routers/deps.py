"""
Shared Dependencies for Routers

Every browser session gets an id (cookie or header) that namespaces its cart
and order history in storage.
"""
import re
import uuid
from typing import Optional

from fastapi import Header, HTTPException, Request, Response

SESSION_COOKIE = "session_id"
SESSION_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{1,64}")


async def get_session_id(
    request: Request,
    response: Response,
    x_session_id: Optional[str] = Header(None),
) -> str:
    """
    Resolve the caller's session id.

    Order: ``X-Session-Id`` header, then the ``session_id`` cookie. A new id
    is issued (and set as a cookie) when neither is present.
    """
    session_id = x_session_id or request.cookies.get(SESSION_COOKIE)
    if session_id is None:
        session_id = uuid.uuid4().hex
        response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
        return session_id

    if not SESSION_ID_PATTERN.fullmatch(session_id):
        raise HTTPException(status_code=400, detail="Invalid session id")
    return session_id
