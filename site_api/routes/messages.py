"""Contact message endpoints."""

import logging

from fastapi import APIRouter, Depends, status

from site_api.routes.deps import get_store
from site_api.schemas import MessageCreate, MessageRead, MessageResponse
from site_api.services.validation import MESSAGE_REQUIRED, require_fields
from site_api.stores import RecordStore

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_message(
    payload: MessageCreate,
    store: RecordStore = Depends(get_store),
) -> MessageResponse:
    """Store a contact message. The stored record is not echoed back."""
    fields = payload.model_dump()
    require_fields(fields, MESSAGE_REQUIRED)

    message = await store.messages.insert(fields)
    logger.info(f"Message received id={message.id}")

    return MessageResponse(message="Message received successfully!")


@router.get("", response_model=list[MessageRead])
async def list_messages(store: RecordStore = Depends(get_store)) -> list[MessageRead]:
    messages = await store.messages.find_all(sort="newest")
    return [MessageRead.model_validate(m) for m in messages]
