"""
Message entity model.

Contact-form messages. ``user_id`` is the recipient (usually the listing
owner), ``sender_user_id`` the signed-in sender when there is one.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field, Text

from ..base import Base, utc_now

MESSAGE_STATUSES = ("unread", "read", "replied")


class Message(Base, table=True):
    """Contact message.

    Table: messages
    """

    __tablename__ = "messages"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    subject: str = Field(max_length=255)
    message: str = Field(sa_type=Text)
    status: str = Field(default="unread", max_length=20, index=True)
    property_id: Optional[int] = Field(default=None, index=True)
    user_id: Optional[int] = Field(default=None, index=True)
    sender_user_id: Optional[int] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Message(id={self.id}, subject={self.subject!r}, status={self.status})"
