"""Chat-completion proxy endpoint."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from dependencies import get_chat_service
from infrastructure.interfaces import ChatService

router = APIRouter(tags=["chat"])

ChatServiceDep = Annotated[ChatService, Depends(get_chat_service)]


@router.post("/chat")
async def chat(
    chat_service: ChatServiceDep,
    params: Annotated[dict[str, Any], Body()],
) -> dict[str, Any]:
    """Forwards the body as chat-completion parameters."""
    return await chat_service.complete(params)
