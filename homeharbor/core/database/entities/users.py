"""
User entity model.

Users are buyers, agents or administrators. A user signs in either with a
password (stored as a bcrypt hash) or through a Firebase Google account, in
which case ``hashed_password`` stays empty and ``firebase_uid`` links the
account.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now

USER_ROLES = ("user", "agent", "admin")


class User(Base, table=True):
    """Registered user.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255, unique=True, index=True)
    username: str = Field(max_length=255, unique=True, index=True)
    hashed_password: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    role: str = Field(default="user", max_length=20, index=True)
    photo_url: Optional[str] = Field(default=None)
    firebase_uid: Optional[str] = Field(default=None, max_length=128, unique=True)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username}, role={self.role})"
