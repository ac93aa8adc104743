# jackut/api/v1/deps.py
from fastapi import Header, HTTPException, Request, status
from jackut.core.system import System

SESSION_COOKIE = "sessionToken"

def get_system(request: Request) -> System:
    """
    FastAPI dependency returning the System served by this app.

    The instance is created at startup (see jackut.main) and kept on
    ``app.state.system``; tests install their own isolated instance there.

    Raises:
        HTTPException (503): If the app has no System yet (SYSTEM_NOT_READY)
    """
    system = getattr(request.app.state, "system", None)
    if system is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="SYSTEM_NOT_READY")
    return system

async def get_session_token(
    request: Request,
    authorization: str | None = Header(default=None),
) -> str:
    """
    FastAPI dependency to extract the caller's session token.

    The token is read from either:
    1. Authorization header (Bearer token) - preferred method
    2. HttpOnly cookie (sessionToken) - fallback method

    Only presence is checked here. Whether the token belongs to a live
    session is decided by the System, which raises SessionInvalid.

    Raises:
        HTTPException (401): If no token is provided (AUTH_REQUIRED)

    Usage:
        @router.post("/friends")
        async def add_friend(token: str = Depends(get_session_token), ...):
            system.add_friend(token, ...)
    """
    token = None
    # 1) Prioritize Authorization: Bearer xxx
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
    # 2) Secondly HttpOnly Cookie: sessionToken
    if not token:
        token = request.cookies.get(SESSION_COOKIE)

    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_REQUIRED")
    return token
