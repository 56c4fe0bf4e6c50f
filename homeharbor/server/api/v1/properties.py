"""
Property listing endpoints.

The listing route assembles ``PropertyFilters`` from camelCase query
parameters. List-valued filters accept repeated parameters
(``?propertyType=Villa&propertyType=House``) as well as comma-separated
values.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from homeharbor.core.database.entities.properties import PROPERTY_TYPES, Property
from homeharbor.core.logging_config import get_logger
from homeharbor.core.models.io.properties import (
    PropertyCreate,
    PropertyDetail,
    PropertyFilters,
    PropertyListResponse,
    PropertyRead,
    PropertyTypeOption,
    PropertyUpdate,
)

from ...services.deps import RepositoriesDep

logger = get_logger(__name__)

router = APIRouter(tags=["properties"])


def _split(values: Optional[List[str]]) -> Optional[List[str]]:
    if not values:
        return None
    items = [item.strip() for value in values for item in value.split(",") if item.strip()]
    return items or None


def property_filters(
    search: Optional[str] = None,
    property_type: Optional[List[str]] = Query(default=None, alias="propertyType"),
    listing_type: Optional[str] = Query(default=None, alias="listingType"),
    city: Optional[str] = None,
    status_: Optional[str] = Query(default=None, alias="status"),
    transaction_type: Optional[str] = Query(default=None, alias="transactionType"),
    bedrooms: Optional[int] = None,
    bathrooms: Optional[int] = None,
    featured: Optional[bool] = None,
    verified: Optional[bool] = None,
    heating_available: Optional[bool] = Query(default=None, alias="heatingAvailable"),
    min_price: Optional[float] = Query(default=None, alias="minPrice"),
    max_price: Optional[float] = Query(default=None, alias="maxPrice"),
    min_area: Optional[float] = Query(default=None, alias="minArea"),
    max_area: Optional[float] = Query(default=None, alias="maxArea"),
    ownership: Optional[List[str]] = Query(default=None),
    furnishing_details: Optional[List[str]] = Query(default=None, alias="furnishingDetails"),
    amenities: Optional[List[str]] = Query(default=None),
    only_with_photos: bool = Query(default=False, alias="onlyWithPhotos"),
    posted_by: Optional[List[str]] = Query(default=None, alias="postedBy"),
    lat: Optional[float] = None,
    lng: Optional[float] = None,
    radius: Optional[float] = None,
    sort_by: Optional[Literal["price", "area"]] = Query(default=None, alias="sortBy"),
    sort_dir: Literal["asc", "desc"] = Query(default="desc", alias="sortDir"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=500),
) -> PropertyFilters:
    """Query-string dependency building ``PropertyFilters``."""
    return PropertyFilters(
        search=search or None,
        property_type=_split(property_type),
        listing_type=listing_type,
        city=city,
        status=status_,
        transaction_type=transaction_type,
        bedrooms=bedrooms,
        bathrooms=bathrooms,
        featured=featured,
        verified=verified,
        heating_available=heating_available,
        min_price=min_price,
        max_price=max_price,
        min_area=min_area,
        max_area=max_area,
        ownership=_split(ownership),
        furnishing_details=_split(furnishing_details),
        amenities=_split(amenities),
        only_with_photos=only_with_photos,
        posted_by=_split(posted_by),
        lat=lat,
        lng=lng,
        radius=radius,
        sort_by=sort_by,
        sort_dir=sort_dir,
        page=page,
        limit=limit,
    )


@router.get(
    "",
    response_model=PropertyListResponse,
    summary="Search Properties",
    description="Filtered, sorted and paginated property listing.",
    response_description="One page of properties and the total number of matches.",
)
async def list_properties(
    repos: RepositoriesDep, filters: PropertyFilters = Depends(property_filters)
) -> PropertyListResponse:
    """
    Search the property listing.

    Every filter is optional and they combine with AND. When ``lat``, ``lng``
    and a positive ``radius`` (km) are all given, the returned page is further
    narrowed to listings inside that circle; ``total`` still counts the
    matches before this distance filter.
    """
    page = await repos.properties.search(filters)
    return PropertyListResponse(
        properties=[PropertyRead.model_validate(p) for p in page.properties],
        total=page.total,
    )


@router.get("/featured", response_model=List[PropertyRead], summary="Featured Properties")
async def featured_properties(repos: RepositoriesDep, limit: int = Query(default=16, ge=1, le=100)) -> List[PropertyRead]:
    return [PropertyRead.model_validate(p) for p in await repos.properties.featured(limit)]


@router.get("/search", response_model=List[PropertyRead], summary="Text Search")
async def search_properties(repos: RepositoriesDep, q: Optional[str] = None) -> List[PropertyRead]:
    """Case-insensitive match on title, city, address and description."""
    if not q:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Search query 'q' is required")
    return [PropertyRead.model_validate(p) for p in await repos.properties.text_search(q)]


@router.get("/types", response_model=List[PropertyTypeOption], summary="Property Types")
async def property_types() -> List[PropertyTypeOption]:
    return [PropertyTypeOption(label=t, value=t) for t in PROPERTY_TYPES]


@router.get("/user/{user_id}", response_model=List[PropertyRead], summary="Properties of a User")
async def user_properties(user_id: int, repos: RepositoriesDep) -> List[PropertyRead]:
    return [PropertyRead.model_validate(p) for p in await repos.properties.by_user(user_id)]


@router.get(
    "/{property_id}",
    response_model=PropertyDetail,
    summary="Get Property",
    responses={404: {"description": "Property not found"}},
)
async def get_property(property_id: int, repos: RepositoriesDep) -> PropertyDetail:
    """Property with the owner's contact details and the municipality code of its city."""
    prop = await repos.properties.get_by_id(property_id)
    if prop is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
    owner_details, municipality_code = await repos.properties.owner_and_municipality(prop)
    detail = PropertyDetail.model_validate(prop)
    return detail.model_copy(update={"owner_details": owner_details, "municipality_code": municipality_code})


@router.get("/{property_id}/recommendations", response_model=List[PropertyRead], summary="Similar Properties")
async def property_recommendations(
    property_id: int, repos: RepositoriesDep, limit: int = Query(default=5, ge=1, le=50)
) -> List[PropertyRead]:
    recommended = await repos.properties.recommendations(property_id, limit)
    return [PropertyRead.model_validate(p) for p in recommended]


@router.post(
    "",
    response_model=PropertyRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Property",
    responses={400: {"description": "Validation failed"}},
)
async def create_property(body: PropertyCreate, repos: RepositoriesDep) -> PropertyRead:
    prop = await repos.properties.create(Property(**body.model_dump()))
    logger.info(f"Created property {prop.id} for user {prop.user_id}")
    return PropertyRead.model_validate(prop)


@router.put("/{property_id}", response_model=PropertyRead, summary="Update Property")
async def update_property(property_id: int, body: PropertyUpdate, repos: RepositoriesDep) -> PropertyRead:
    prop = await repos.properties.get_by_id(property_id)
    if prop is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
    prop = await repos.properties.apply_changes(prop, body.model_dump(exclude_unset=True))
    return PropertyRead.model_validate(prop)


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete Property")
async def delete_property(property_id: int, repos: RepositoriesDep) -> Response:
    if not await repos.properties.delete(property_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
    logger.info(f"Deleted property {property_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
