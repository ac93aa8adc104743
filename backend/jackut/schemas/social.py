# jackut/schemas/social.py
"""
Pydantic schemas for profile, friendship, recado and relationship endpoints.
"""
from pydantic import BaseModel

__all__ = ["ProfileEditIn", "TargetIn", "MessageIn"]

class ProfileEditIn(BaseModel):
    """
    Request model for editing one profile attribute.
    Editing "nome" changes the display name.
    """
    attribute: str  # Attribute name (open-ended key set)
    value: str  # New value

class TargetIn(BaseModel):
    """
    Request model for operations aimed at another user
    (friend request, idol, crush, enemy).
    """
    target: str  # Login of the other user

class MessageIn(BaseModel):
    """
    Request model for sending a recado.
    """
    target: str  # Recipient login
    body: str  # Message text
