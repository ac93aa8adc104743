# jackut/api/v1/routers/auth.py
from fastapi import APIRouter, Depends, Response
from jackut.api.v1.deps import SESSION_COOKIE, get_session_token, get_system
from jackut.core.system import System
from jackut.schemas.auth import LoginRequest, LoginResponse, RegisterIn

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register")
async def register(body: RegisterIn, system: System = Depends(get_system)):
    """
    Register a new user account.

    Args:
        body: Request body containing login, password and display name

    Returns:
        dict: Success response with the new login and name

    Error codes:
        - INVALID_LOGIN: Login is empty or blank
        - INVALID_PASSWORD: Password is empty or blank
        - ACCOUNT_EXISTS: Login already taken
    """
    system.create_account(body.login, body.password, body.name)
    return {"success": True, "data": {"login": body.login, "name": body.name}}

@router.post("/login")
async def login(payload: LoginRequest, response: Response, system: System = Depends(get_system)):
    """
    Authenticate a user and open a session.

    The token is returned in the body and also set as an HttpOnly cookie
    for browser-based clients.

    Returns:
        dict: Response containing:
            - success: bool (always True on success)
            - data: dict with login and sessionToken

    Error codes:
        - AUTH_INVALID_CREDENTIALS (401): Unknown login or wrong password
    """
    token = system.login(payload.login, payload.password)
    response.set_cookie(SESSION_COOKIE, token, httponly=True, secure=False, samesite="lax")
    return {"success": True, "data": LoginResponse(login=payload.login, sessionToken=token).model_dump()}

@router.post("/logout")
async def logout(response: Response):
    """
    Clear the session cookie.

    Note:
        The session itself stays valid; Jackut sessions only end on system
        reset or account removal.
    """
    response.delete_cookie(SESSION_COOKIE)
    return {"success": True}

@router.delete("/account")
async def remove_account(
    response: Response,
    token: str = Depends(get_session_token),
    system: System = Depends(get_system),
):
    """
    Remove the caller's account.

    Owned communities are deleted, the login disappears from every other
    user's relationships, and recados it sent are purged.
    """
    system.remove_account(token)
    response.delete_cookie(SESSION_COOKIE)
    return {"success": True, "data": {"deleted": True}}
