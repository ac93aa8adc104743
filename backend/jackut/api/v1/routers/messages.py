# jackut/api/v1/routers/messages.py
from fastapi import APIRouter, Depends
from jackut.api.v1.deps import get_session_token, get_system
from jackut.core.system import System
from jackut.schemas.social import MessageIn

router = APIRouter(prefix="/messages", tags=["messages"])

@router.post("")
async def send_message(
    body: MessageIn,
    token: str = Depends(get_session_token),
    system: System = Depends(get_system),
):
    """
    Send a recado to another user.

    Error codes:
        - SELF_MESSAGE (400): Sender and recipient are the same user
        - USER_NOT_FOUND (404): Unknown recipient
        - ENEMY_RELATION (403): Either side tagged the other as enemy
    """
    system.send_message(token, body.target, body.body)
    return {"success": True, "data": {"target": body.target}}

@router.post("/read")
async def read_message(token: str = Depends(get_session_token), system: System = Depends(get_system)):
    """
    Read (and remove) the caller's oldest recado.

    This is a POST because reading consumes the message.

    Error codes:
        - NO_MESSAGES (404): Queue is empty
    """
    return {"success": True, "data": {"message": system.read_message(token)}}
