"""Contact message I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import EmailStr, Field

from .common import IOModel

MessageStatus = Literal["unread", "read", "replied"]


class MessageRead(IOModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    status: str
    property_id: Optional[int] = None
    user_id: Optional[int] = None
    sender_user_id: Optional[int] = None
    created_at: datetime


class MessageCreate(IOModel):
    """New contact message. The status is always ``unread`` on creation."""

    name: str = Field(min_length=1)
    email: EmailStr
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)
    property_id: Optional[int] = None
    user_id: Optional[int] = None
    sender_user_id: Optional[int] = None


class MessageUpdate(IOModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    subject: Optional[str] = Field(default=None, min_length=1)
    message: Optional[str] = Field(default=None, min_length=1)
    status: Optional[MessageStatus] = None
    property_id: Optional[int] = None
    user_id: Optional[int] = None


class MessageListResponse(IOModel):
    messages: List[MessageRead]
    total: int
