# jackut/api/v1/routers/users.py
from fastapi import APIRouter, Depends
from jackut.api.v1.deps import get_session_token, get_system
from jackut.core.system import System
from jackut.schemas.social import ProfileEditIn, TargetIn

router = APIRouter(tags=["users"])

# ===== Profile =====
@router.get("/users/{login}/attributes/{attribute}")
async def get_attribute(login: str, attribute: str, system: System = Depends(get_system)):
    """
    Read one profile attribute of a user.

    "nome" always returns the display name.

    Error codes:
        - USER_NOT_FOUND (404): Unknown login
        - ATTRIBUTE_NOT_SET (404): Attribute never filled in
    """
    value = system.get_attribute(login, attribute)
    return {"success": True, "data": {"login": login, "attribute": attribute, "value": value}}

@router.put("/profile")
async def edit_profile(
    body: ProfileEditIn,
    token: str = Depends(get_session_token),
    system: System = Depends(get_system),
):
    system.edit_profile(token, body.attribute, body.value)
    return {"success": True, "data": {"attribute": body.attribute, "value": body.value}}

# ===== Friendship =====
@router.post("/friends")
async def add_friend(
    body: TargetIn,
    token: str = Depends(get_session_token),
    system: System = Depends(get_system),
):
    """
    Send a friend request, or accept the target's pending request.

    Error codes:
        - SELF_FRIENDSHIP, ALREADY_FRIENDS, FRIEND_REQUEST_PENDING
        - ENEMY_RELATION (403): Either side tagged the other as enemy
    """
    system.add_friend(token, body.target)
    return {"success": True, "data": {"target": body.target}}

@router.get("/users/{login}/friends")
async def friends_of(login: str, system: System = Depends(get_system)):
    return {"success": True, "data": {"login": login, "friends": system.friends_of(login)}}

@router.get("/users/{login}/friends/{other}")
async def is_friend(login: str, other: str, system: System = Depends(get_system)):
    return {"success": True, "data": {"login": login, "other": other, "isFriend": system.is_friend(login, other)}}

# ===== Fans =====
@router.get("/users/{login}/fans")
async def fans_of(login: str, system: System = Depends(get_system)):
    return {"success": True, "data": {"login": login, "fans": system.fans_of(login)}}

@router.get("/users/{login}/idols/{idol}")
async def is_fan(login: str, idol: str, system: System = Depends(get_system)):
    return {"success": True, "data": {"login": login, "idol": idol, "isFan": system.is_fan(login, idol)}}

# ===== Communities of a user =====
@router.get("/users/{login}/communities")
async def communities_of(login: str, system: System = Depends(get_system)):
    return {"success": True, "data": {"login": login, "communities": system.communities_of(login)}}
