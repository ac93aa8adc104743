# jackut/schemas/auth.py
"""
Pydantic schemas for account and session endpoints.
Defines request/response models for registration and login.
"""
from pydantic import BaseModel

__all__ = ["RegisterIn", "LoginRequest", "LoginResponse"]

class RegisterIn(BaseModel):
    """
    Request model for account creation.
    Blank login/password are rejected by the System, not by the schema,
    so the caller gets the Jackut error instead of a 422.
    """
    login: str  # Unique login
    password: str  # Plain text password (hashed server-side)
    name: str = ""  # Display name

class LoginRequest(BaseModel):
    """
    Request model for opening a session.
    """
    login: str  # User login
    password: str  # User password

class LoginResponse(BaseModel):
    """
    Response model for a successful login.
    Returns the login and the session token for later requests.
    """
    login: str  # Authenticated login
    sessionToken: str  # Token to send as "Authorization: Bearer <token>"
