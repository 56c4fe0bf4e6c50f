"""Contact message endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from homeharbor.core.database.entities.messages import Message
from homeharbor.core.logging_config import get_logger
from homeharbor.core.models.io.common import MessageResponse
from homeharbor.core.models.io.messages import MessageCreate, MessageListResponse, MessageRead, MessageUpdate

from ...services.deps import RepositoriesDep

logger = get_logger(__name__)

router = APIRouter(tags=["messages"])

NOT_FOUND = "Message not found"


@router.get(
    "",
    response_model=MessageListResponse,
    summary="List Messages",
    description="Filter messages by status, property, recipient or free text; newest first.",
)
async def list_messages(
    repos: RepositoriesDep,
    status_: Optional[str] = Query(default=None, alias="status"),
    property_id: Optional[int] = Query(default=None, alias="propertyId"),
    user_id: Optional[int] = Query(default=None, alias="userId"),
    search: Optional[str] = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=500),
) -> MessageListResponse:
    messages, total = await repos.messages.search(status_, property_id, user_id, search, page, limit)
    return MessageListResponse(messages=[MessageRead.model_validate(m) for m in messages], total=total)


@router.get("/user/{user_id}", response_model=List[MessageRead], summary="Messages of a User")
async def user_messages(user_id: int, repos: RepositoriesDep) -> List[MessageRead]:
    """Messages the user received or sent."""
    return [MessageRead.model_validate(m) for m in await repos.messages.for_user(user_id)]


@router.get("/property/{property_id}", response_model=List[MessageRead], summary="Messages about a Property")
async def property_messages(property_id: int, repos: RepositoriesDep) -> List[MessageRead]:
    return [MessageRead.model_validate(m) for m in await repos.messages.for_property(property_id)]


@router.get("/{message_id}", response_model=MessageRead, summary="Get Message")
async def get_message(message_id: int, repos: RepositoriesDep) -> MessageRead:
    message = await repos.messages.get_by_id(message_id)
    if message is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return MessageRead.model_validate(message)


@router.post("", response_model=MessageRead, status_code=status.HTTP_201_CREATED, summary="Send Message")
async def create_message(body: MessageCreate, repos: RepositoriesDep) -> MessageRead:
    message = await repos.messages.create(Message(**body.model_dump(), status="unread"))
    logger.info(f"Message {message.id} received for property {message.property_id}")
    return MessageRead.model_validate(message)


@router.put("/{message_id}", response_model=MessageRead, summary="Update Message")
async def update_message(message_id: int, body: MessageUpdate, repos: RepositoriesDep) -> MessageRead:
    message = await repos.messages.get_by_id(message_id)
    if message is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    message = await repos.messages.apply_changes(message, body.model_dump(exclude_unset=True))
    return MessageRead.model_validate(message)


@router.delete("/{message_id}", response_model=MessageResponse, summary="Delete Message")
async def delete_message(message_id: int, repos: RepositoriesDep) -> MessageResponse:
    if not await repos.messages.delete(message_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return MessageResponse(message="Message deleted successfully")


async def _set_status(repos, message_id: int, new_status: str) -> MessageRead:
    message = await repos.messages.set_status(message_id, new_status)
    if message is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return MessageRead.model_validate(message)


@router.put("/{message_id}/read", response_model=MessageRead, summary="Mark as Read")
async def mark_read(message_id: int, repos: RepositoriesDep) -> MessageRead:
    return await _set_status(repos, message_id, "read")


@router.put("/{message_id}/replied", response_model=MessageRead, summary="Mark as Replied")
async def mark_replied(message_id: int, repos: RepositoriesDep) -> MessageRead:
    return await _set_status(repos, message_id, "replied")
