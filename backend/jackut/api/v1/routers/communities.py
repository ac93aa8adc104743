# jackut/api/v1/routers/communities.py
from fastapi import APIRouter, Depends
from jackut.api.v1.deps import get_session_token, get_system
from jackut.core.system import System
from jackut.schemas.community import CommunityCreateIn, CommunityMessageIn, CommunityOut

router = APIRouter(prefix="/communities", tags=["communities"])

@router.post("")
async def create_community(
    body: CommunityCreateIn,
    token: str = Depends(get_session_token),
    system: System = Depends(get_system),
):
    """
    Create a community owned by the caller.

    Error codes:
        - COMMUNITY_EXISTS (409): Name already taken
    """
    system.create_community(token, body.name, body.description)
    return {"success": True, "data": {"name": body.name}}

# Declared before "/{name}" routes so "messages" is not taken for a community name
@router.post("/messages/read")
async def read_community_message(token: str = Depends(get_session_token), system: System = Depends(get_system)):
    """
    Read (and remove) the first unread message across the caller's communities.

    Communities are scanned in creation order.

    Error codes:
        - NO_COMMUNITY_MESSAGES (404): Nothing waiting in any community
    """
    return {"success": True, "data": {"message": system.read_community_message(token)}}

@router.get("/{name}")
async def get_community(name: str, system: System = Depends(get_system)):
    """
    Get description, owner and members of a community.

    Error codes:
        - COMMUNITY_NOT_FOUND (404): Unknown community
    """
    out = CommunityOut(
        name=name,
        description=system.community_description(name),
        owner=system.community_owner(name),
        members=system.community_members(name),
    )
    return {"success": True, "data": out.model_dump()}

@router.post("/{name}/members")
async def join_community(
    name: str,
    token: str = Depends(get_session_token),
    system: System = Depends(get_system),
):
    """
    Join a community as the caller.

    Error codes:
        - COMMUNITY_NOT_FOUND (404): Unknown community
        - ALREADY_MEMBER (409): Caller already belongs to it
    """
    system.join_community(token, name)
    return {"success": True, "data": {"name": name, "members": system.community_members(name)}}

@router.post("/{name}/messages")
async def broadcast(
    name: str,
    body: CommunityMessageIn,
    token: str = Depends(get_session_token),
    system: System = Depends(get_system),
):
    system.broadcast(token, name, body.body)
    return {"success": True, "data": {"name": name}}
