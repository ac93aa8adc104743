# jackut/api/v1/routers/system.py
from fastapi import APIRouter, Depends
from jackut.api.v1.deps import get_system
from jackut.core.system import System

router = APIRouter(prefix="/system", tags=["system"])

@router.post("/reset")
async def reset_system(system: System = Depends(get_system)):
    """
    Wipe every user, community and session and delete the snapshot file.

    Warning:
        Unconditional and unrecoverable.
    """
    system.reset_system()
    return {"success": True, "data": {"reset": True}}

@router.post("/shutdown")
async def shutdown(system: System = Depends(get_system)):
    """
    Write the current users and communities to the snapshot file.

    Sessions are never saved; the process keeps serving afterwards.
    """
    system.shutdown()
    return {"success": True, "data": {"saved": str(system.store.path)}}
