"""
User account and authentication endpoints.

Authentication is stateless: login answers with the public user and the SPA
keeps it client side. ``/current`` trusts the ``userId`` the client sends and
``/firebase-auth`` trusts the identity asserted by the Firebase SDK; neither
verifies a token.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from homeharbor.core.database.base import utc_now
from homeharbor.core.database.entities.users import User
from homeharbor.core.database.repositories.users import username_base
from homeharbor.core.logging_config import get_logger
from homeharbor.core.models.io.common import IOModel
from homeharbor.core.models.io.users import (
    AuthResponse,
    FirebaseAuthRequest,
    LoginRequest,
    RegisterRequest,
    UserRead,
)
from homeharbor.core.security import hash_password, verify_password

from ...core.config import settings
from ...services.deps import RepositoriesDep

logger = get_logger(__name__)

router = APIRouter(tags=["users"])

INVALID_CREDENTIALS = {"success": False, "message": "Invalid credentials"}


class LogoutResponse(IOModel):
    success: bool = True
    message: str


class DebugUser(IOModel):
    id: int
    username: str
    name: str
    email: str
    role: str
    created_at: datetime
    firebase_uid: Optional[str] = None


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Log In",
    description="Authenticate with a username or email address and a password.",
    responses={
        200: {"description": "Credentials accepted"},
        401: {"description": "Unknown user, account without password, or wrong password"},
    },
)
async def login(body: LoginRequest, repos: RepositoriesDep) -> AuthResponse:
    """
    Log a user in.

    - **usernameOrEmail**: matched against both the username and the email column.
    - **password**: checked with bcrypt. Accounts created through Google sign-in
      have no password and can never log in here.
    """
    user = await repos.users.get_by_username_or_email(body.username_or_email)
    if user is None or not verify_password(body.password, user.hashed_password):
        logger.info(f"Failed login for {body.username_or_email}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    logger.info(f"User {user.username} logged in")
    return AuthResponse(success=True, user=UserRead.model_validate(user))


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    description="Create a user or agent account with a password.",
    responses={409: {"description": "Username or email already taken"}},
)
async def register(body: RegisterRequest, repos: RepositoriesDep) -> AuthResponse:
    if await repos.users.exists_with(body.username, body.email):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"success": False, "message": "Username or email already exists"},
        )

    now = utc_now()
    user = User(
        name=body.name,
        email=body.email,
        username=body.username,
        hashed_password=hash_password(body.password),
        role=body.role,
        phone=body.phone,
        photo_url=body.photo_url,
        created_at=now,
        updated_at=now,
    )
    user = await repos.users.create(user)
    logger.info(f"Registered {user.role} {user.username} (id={user.id})")
    return AuthResponse(success=True, message="User registered successfully", user=UserRead.model_validate(user))


@router.post(
    "/firebase-auth",
    response_model=AuthResponse,
    summary="Google Sign-In",
    description="Link a Firebase (Google) identity to an account, creating the account on first sign-in.",
)
async def firebase_auth(body: FirebaseAuthRequest, repos: RepositoriesDep) -> AuthResponse:
    """
    Sign in with a Firebase identity.

    An existing account with the same email is linked to the Firebase UID and
    gets its name and photo refreshed. Otherwise a passwordless ``user``
    account is created with a username derived from the display name.
    """
    photo_url = str(body.photo_url) if body.photo_url else None
    user = await repos.users.get_by_email(body.email)

    if user is not None:
        changes = {"firebase_uid": body.uid, "updated_at": utc_now()}
        if body.name != user.name:
            changes["name"] = body.name
        if photo_url and photo_url != user.photo_url:
            changes["photo_url"] = photo_url
        user = await repos.users.apply_changes(user, changes)
        logger.info(f"Linked Firebase account to user {user.username}")
    else:
        username = await repos.users.unique_username(username_base(body.name, body.email))
        now = utc_now()
        user = await repos.users.create(
            User(
                name=body.name,
                email=body.email,
                username=username,
                role="user",
                photo_url=photo_url,
                firebase_uid=body.uid,
                created_at=now,
                updated_at=now,
            )
        )
        logger.info(f"Created user {username} from Firebase sign-in")

    return AuthResponse(success=True, user=UserRead.model_validate(user))


@router.get("/current", response_model=UserRead, summary="Current User")
async def current_user(repos: RepositoriesDep, user_id: Optional[str] = Query(default=None, alias="userId")) -> UserRead:
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    try:
        uid = int(user_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid user ID")

    user = await repos.users.get_by_id(uid)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserRead.model_validate(user)


@router.get("/profile", response_model=AuthResponse, summary="User Profile by Email")
async def profile(repos: RepositoriesDep, email: Optional[str] = None) -> AuthResponse:
    if not email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"success": False, "message": "Email query parameter is required"},
        )
    user = await repos.users.get_by_email(email)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail={"success": False, "message": "User not found"})
    return AuthResponse(success=True, user=UserRead.model_validate(user))


@router.get("/agents", response_model=List[UserRead], summary="List Agents")
async def list_agents(repos: RepositoriesDep) -> List[UserRead]:
    agents = await repos.users.list_by_role("agent")
    return [UserRead.model_validate(a) for a in agents]


@router.post("/logout", response_model=LogoutResponse, summary="Log Out")
async def logout() -> LogoutResponse:
    # Nothing is stored server side; the client drops its copy of the user.
    return LogoutResponse(message="Logout successful (client should clear token/session)")


@router.get("/debug", response_model=List[DebugUser], include_in_schema=False)
async def debug_users(repos: RepositoriesDep) -> List[DebugUser]:
    if settings.is_production:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    users = await repos.users.list()
    return [DebugUser.model_validate(u) for u in users]
