# jackut/api/v1/routers/relations.py
from fastapi import APIRouter, Depends
from jackut.api.v1.deps import get_session_token, get_system
from jackut.core.system import System
from jackut.schemas.social import TargetIn

router = APIRouter(prefix="/relations", tags=["relations"])

# ===== Tags set by the caller =====
@router.post("/idols")
async def add_idol(
    body: TargetIn,
    token: str = Depends(get_session_token),
    system: System = Depends(get_system),
):
    system.add_idol(token, body.target)
    return {"success": True, "data": {"idol": body.target}}

@router.post("/crushes")
async def add_crush(
    body: TargetIn,
    token: str = Depends(get_session_token),
    system: System = Depends(get_system),
):
    """
    Tag the target as a crush of the caller.

    If the crush is mutual, both users get a recado from Jackut.
    """
    system.add_crush(token, body.target)
    return {"success": True, "data": {"crush": body.target}}

@router.post("/enemies")
async def add_enemy(
    body: TargetIn,
    token: str = Depends(get_session_token),
    system: System = Depends(get_system),
):
    """
    Tag the target as an enemy of the caller.

    From then on friendship, idol, crush and recados between the two are refused.
    """
    system.add_enemy(token, body.target)
    return {"success": True, "data": {"enemy": body.target}}

# ===== Private crush queries (session owner only) =====
@router.get("/crushes")
async def crushes_of(token: str = Depends(get_session_token), system: System = Depends(get_system)):
    return {"success": True, "data": {"crushes": system.crushes_of(token)}}

@router.get("/crushes/{target}")
async def is_crush(target: str, token: str = Depends(get_session_token), system: System = Depends(get_system)):
    return {"success": True, "data": {"target": target, "isCrush": system.is_crush(token, target)}}
