from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from app.api import deps
from app.db.mock_db import MemoryStore
from app.models.content import MessageCreate, MessageResponse

router = APIRouter()
admin_router = APIRouter()


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_message(
    message_in: MessageCreate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    """Contact form submission."""
    return store.create_message(message_in.model_dump())


@admin_router.get("", response_model=List[MessageResponse])
async def read_messages(store: MemoryStore = Depends(deps.get_store)) -> Any:
    """Inbox for the admin dashboard, oldest first."""
    return store.get_all_messages()


@admin_router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_message(message_id: int, store: MemoryStore = Depends(deps.get_store)) -> Response:
    if not store.messages.delete(message_id):
        raise HTTPException(status_code=404, detail="Message not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
