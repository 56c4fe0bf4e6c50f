"""
Admin console endpoints.

Dashboard statistics, user/property/location management, moderation flags
and the bulk data operations. Settings, static pages and logs live in their
own routers mounted under the same ``/api/admin`` prefix.
"""

from __future__ import annotations

import math
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from homeharbor.core.database.base import utc_now
from homeharbor.core.database.entities.properties import Property
from homeharbor.core.database.entities.users import User
from homeharbor.core.logging_config import get_logger
from homeharbor.core.models.io.admin import (
    DashboardCharts,
    DashboardCounts,
    DashboardResponse,
    GenerateDataRequest,
    OperationResult,
)
from homeharbor.core.models.io.common import MessageResponse, Pagination
from homeharbor.core.models.io.locations import LocationCreate, LocationRead, LocationUpdate
from homeharbor.core.models.io.properties import (
    AdminPropertyListResponse,
    PropertyCreate,
    PropertyFilters,
    PropertyRead,
    PropertyUpdate,
)
from homeharbor.core.models.io.users import AdminUserCreate, AdminUserUpdate, UserRead, UserSummary
from homeharbor.core.security import hash_password

from ...services.deps import RepositoriesDep, SessionDep
from ...services.seed import clear_listings, seed_database
from . import locations as location_routes
from .properties import property_filters

logger = get_logger(__name__)

router = APIRouter(tags=["admin"])

USER_NOT_FOUND = "User not found"
PROPERTY_NOT_FOUND = "Property not found"


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    summary="Dashboard",
    description="Headline counts, chart series and the newest properties and users.",
)
async def dashboard(repos: RepositoriesDep) -> DashboardResponse:
    counts = DashboardCounts(
        properties=await repos.properties.count(),
        users=await repos.users.count(),
        active_users=await repos.users.count(User.role != "admin"),
        agents=await repos.users.count(User.role == "agent"),
        locations=await repos.locations.count(),
        favorites=await repos.favorites.count(),
        featured_properties=await repos.properties.count(Property.featured == True),  # noqa: E712
        verified_properties=await repos.properties.count(Property.verified == True),  # noqa: E712
    )
    charts = DashboardCharts(
        properties_by_type=await repos.properties.count_by("property_type"),
        properties_by_listing_type=await repos.properties.count_by("listing_type"),
        properties_by_city=await repos.properties.count_by_city(),
    )
    return DashboardResponse(
        counts=counts,
        charts=charts,
        recent_properties=[PropertyRead.model_validate(p) for p in await repos.properties.recent(5)],
        recent_users=[UserSummary.model_validate(u) for u in await repos.users.recent(5)],
    )


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


@router.get("/users", response_model=List[UserRead], summary="List Users")
async def list_users(repos: RepositoriesDep) -> List[UserRead]:
    return [UserRead.model_validate(u) for u in await repos.users.list()]


@router.get("/users/{user_id}", response_model=UserRead, summary="Get User")
async def get_user(user_id: int, repos: RepositoriesDep) -> UserRead:
    user = await repos.users.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return UserRead.model_validate(user)


@router.post("/users", response_model=UserRead, status_code=status.HTTP_201_CREATED, summary="Create User")
async def create_user(body: AdminUserCreate, repos: RepositoriesDep) -> UserRead:
    if await repos.users.exists_with(body.username, body.email):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username or email already exists")
    data = body.model_dump(exclude={"password"})
    now = utc_now()
    user = User(
        **data,
        hashed_password=hash_password(body.password) if body.password else None,
        created_at=now,
        updated_at=now,
    )
    user = await repos.users.create(user)
    logger.info(f"Admin created {user.role} {user.username}")
    return UserRead.model_validate(user)


@router.put("/users/{user_id}", response_model=UserRead, summary="Update User")
async def update_user(user_id: int, body: AdminUserUpdate, repos: RepositoriesDep) -> UserRead:
    user = await repos.users.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)

    changes = body.model_dump(exclude_unset=True, exclude={"password"})
    if (body.username or body.email) and await repos.users.exists_with(
        changes.get("username", user.username), changes.get("email", user.email), exclude_id=user_id
    ):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username or email already exists")
    if body.password:
        changes["hashed_password"] = hash_password(body.password)
    changes["updated_at"] = utc_now()

    user = await repos.users.apply_changes(user, changes)
    return UserRead.model_validate(user)


@router.delete("/users/{user_id}", response_model=MessageResponse, summary="Delete User")
async def delete_user(user_id: int, repos: RepositoriesDep) -> MessageResponse:
    if not await repos.users.delete(user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return MessageResponse(message="User deleted successfully")


@router.get("/agents", response_model=List[UserRead], summary="List Agents")
async def list_agents(repos: RepositoriesDep) -> List[UserRead]:
    return [UserRead.model_validate(u) for u in await repos.users.list_by_role("agent")]


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


@router.get("/properties", response_model=AdminPropertyListResponse, summary="List Properties")
async def list_properties(
    repos: RepositoriesDep,
    filters: PropertyFilters = Depends(property_filters),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=500),
) -> AdminPropertyListResponse:
    """Same filters as the public listing, 20 per page by default."""
    result = await repos.properties.search(filters.model_copy(update={"page": page, "limit": limit}))
    return AdminPropertyListResponse(
        properties=[PropertyRead.model_validate(p) for p in result.properties],
        pagination=Pagination(page=page, limit=limit, total=result.total, pages=math.ceil(result.total / limit)),
    )


@router.get("/properties/{property_id}", response_model=PropertyRead, summary="Get Property")
async def get_property(property_id: int, repos: RepositoriesDep) -> PropertyRead:
    prop = await repos.properties.get_by_id(property_id)
    if prop is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PROPERTY_NOT_FOUND)
    return PropertyRead.model_validate(prop)


@router.post("/properties", response_model=PropertyRead, status_code=status.HTTP_201_CREATED, summary="Create Property")
async def create_property(body: PropertyCreate, repos: RepositoriesDep) -> PropertyRead:
    prop = await repos.properties.create(Property(**body.model_dump()))
    return PropertyRead.model_validate(prop)


@router.put("/properties/{property_id}", response_model=PropertyRead, summary="Update Property")
async def update_property(property_id: int, body: PropertyUpdate, repos: RepositoriesDep) -> PropertyRead:
    prop = await repos.properties.get_by_id(property_id)
    if prop is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PROPERTY_NOT_FOUND)
    prop = await repos.properties.apply_changes(prop, body.model_dump(exclude_unset=True))
    return PropertyRead.model_validate(prop)


@router.delete("/properties/{property_id}", response_model=MessageResponse, summary="Delete Property")
async def delete_property(property_id: int, repos: RepositoriesDep) -> MessageResponse:
    if not await repos.properties.delete(property_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PROPERTY_NOT_FOUND)
    return MessageResponse(message="Property deleted successfully")


async def _set_flag(repos, property_id: int, flag: str, value: bool) -> PropertyRead:
    prop = await repos.properties.set_flag(property_id, flag, value)
    if prop is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PROPERTY_NOT_FOUND)
    logger.info(f"Property {property_id}: {flag}={value}")
    return PropertyRead.model_validate(prop)


@router.put("/properties/{property_id}/verify", response_model=PropertyRead, summary="Verify Property")
async def verify_property(property_id: int, repos: RepositoriesDep) -> PropertyRead:
    return await _set_flag(repos, property_id, "verified", True)


@router.put("/properties/{property_id}/unverify", response_model=PropertyRead, summary="Unverify Property")
async def unverify_property(property_id: int, repos: RepositoriesDep) -> PropertyRead:
    return await _set_flag(repos, property_id, "verified", False)


@router.put("/properties/{property_id}/feature", response_model=PropertyRead, summary="Feature Property")
async def feature_property(property_id: int, repos: RepositoriesDep) -> PropertyRead:
    return await _set_flag(repos, property_id, "featured", True)


@router.put("/properties/{property_id}/unfeature", response_model=PropertyRead, summary="Unfeature Property")
async def unfeature_property(property_id: int, repos: RepositoriesDep) -> PropertyRead:
    return await _set_flag(repos, property_id, "featured", False)


# ---------------------------------------------------------------------------
# Locations
# ---------------------------------------------------------------------------


@router.get("/locations", response_model=List[LocationRead], summary="List Locations")
async def list_locations(repos: RepositoriesDep) -> List[LocationRead]:
    rows = await repos.locations.with_property_counts()
    return [location_routes.location_read(location, count) for location, count in rows]


@router.get("/locations/{location_id}", response_model=LocationRead, summary="Get Location")
async def get_location(location_id: int, repos: RepositoriesDep) -> LocationRead:
    return await location_routes.get_location(location_id, repos)


@router.post("/locations", response_model=LocationRead, status_code=status.HTTP_201_CREATED, summary="Create Location")
async def create_location(body: LocationCreate, repos: RepositoriesDep) -> LocationRead:
    return await location_routes.create_location(repos, body)


@router.put("/locations/{location_id}", response_model=LocationRead, summary="Update Location")
async def update_location(location_id: int, body: LocationUpdate, repos: RepositoriesDep) -> LocationRead:
    return await location_routes.update_location(repos, location_id, body)


@router.delete("/locations/{location_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete Location")
async def delete_location(location_id: int, repos: RepositoriesDep) -> Response:
    await location_routes.delete_location(repos, location_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ---------------------------------------------------------------------------
# Bulk data operations
# ---------------------------------------------------------------------------


@router.delete("/clear-all-data", response_model=OperationResult, summary="Clear Listing Data")
async def clear_all_data(session: SessionDep) -> OperationResult:
    await clear_listings(session)
    return OperationResult(message="All favorites, messages, properties and locations have been deleted")


@router.post(
    "/generate-data",
    response_model=OperationResult,
    summary="Regenerate Demo Data",
    responses={400: {"description": "Only a full reseed is supported"}},
)
async def generate_data(body: GenerateDataRequest, session: SessionDep) -> OperationResult:
    if not body.clear_existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Full reseed is required. Partial seeding is not supported.",
        )
    await seed_database(session)
    return OperationResult(message="Database reseeded with demo data")
