# jackut/schemas/community.py
"""
Pydantic schemas for community endpoints.
"""
from pydantic import BaseModel

__all__ = ["CommunityCreateIn", "CommunityMessageIn", "CommunityOut"]

class CommunityCreateIn(BaseModel):
    """
    Request model for creating a community.
    The caller becomes owner and first member.
    """
    name: str  # Unique community name
    description: str = ""  # Free text description

class CommunityMessageIn(BaseModel):
    """
    Request model for broadcasting a message to a community.
    """
    body: str  # Message text

class CommunityOut(BaseModel):
    """
    Community detail returned by GET /communities/{name}.
    """
    name: str  # Community name
    description: str  # Community description
    owner: str  # Owner login
    members: str  # Members formatted as "{a,b,c}"
