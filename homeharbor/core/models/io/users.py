"""
User I/O models for API requests and responses.

``UserRead`` is the only shape a user leaves the API in; it has no field for
the password hash.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Optional

from pydantic import AfterValidator, EmailStr, Field, HttpUrl

from homeharbor.core.security import check_password_length

from .common import IOModel

# Password chosen by a user; must fit bcrypt's input limit.
NewPassword = Annotated[str, Field(min_length=6), AfterValidator(check_password_length)]


class UserRead(IOModel):
    """Public view of a user."""

    id: int
    name: str
    email: str
    username: str
    phone: Optional[str] = None
    role: str
    photo_url: Optional[str] = Field(default=None, alias="photoURL")
    firebase_uid: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class UserSummary(IOModel):
    """Compact user row for dashboards and author blocks."""

    id: int
    name: str
    username: str
    email: str
    role: str
    created_at: datetime


class LoginRequest(IOModel):
    username_or_email: str = Field(min_length=1, description="Username or email address")
    password: str = Field(min_length=6)


class RegisterRequest(IOModel):
    """Self-service registration. Administrators are created through the admin API."""

    name: str = Field(min_length=1)
    email: EmailStr
    username: str = Field(min_length=3)
    password: NewPassword
    role: Literal["user", "agent"] = "user"
    phone: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoURL")


class FirebaseAuthRequest(IOModel):
    """Identity asserted by the Firebase client SDK after Google sign-in."""

    email: EmailStr
    name: str = Field(min_length=1)
    uid: str = Field(min_length=1)
    photo_url: Optional[HttpUrl] = Field(default=None, alias="photoURL")


class AuthResponse(IOModel):
    success: bool = True
    message: Optional[str] = None
    user: UserRead


class AdminUserCreate(IOModel):
    name: str = Field(min_length=1)
    email: EmailStr
    username: str = Field(min_length=3)
    password: Optional[NewPassword] = None
    role: Literal["user", "agent", "admin"] = "user"
    phone: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoURL")


class AdminUserUpdate(IOModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    username: Optional[str] = Field(default=None, min_length=3)
    password: Optional[NewPassword] = None
    role: Optional[Literal["user", "agent", "admin"]] = None
    phone: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoURL")
