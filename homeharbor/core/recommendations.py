"""
Similar-property recommendations.

A linear scan that scores every other listing against the source listing
and keeps the best ``limit``. Each rule adds points independently:

======================================  ======
rule                                    points
======================================  ======
distance < 5 / 10 / 15 km               30 / 20 / 10
same property type                      15
same listing type                       15
price within 20 % of the source         15
area within 20 % of the source          10
bedrooms equal / off by one             10 / 5
bathrooms equal / off by one            5 / 2
shared features                         2 per source entry, at most 10
======================================  ======
"""

from __future__ import annotations

from typing import Iterable, List, Protocol, Sequence

from homeharbor.core.geo import haversine_distance


class Listing(Protocol):
    id: int | None
    property_type: str
    listing_type: str
    price: float
    area: float
    bedrooms: int
    bathrooms: int
    latitude: float | None
    longitude: float | None
    features: Sequence[str] | None


def _distance_points(source: Listing, other: Listing) -> int:
    if None in (source.latitude, source.longitude, other.latitude, other.longitude):
        return 0
    distance = haversine_distance(source.latitude, source.longitude, other.latitude, other.longitude)  # type: ignore[arg-type]
    if distance < 5:
        return 30
    if distance < 10:
        return 20
    if distance < 15:
        return 10
    return 0


def _within(value: float, reference: float, ratio: float) -> bool:
    return abs(value - reference) <= reference * ratio


def similarity_score(source: Listing, other: Listing) -> int:
    """Points ``other`` earns as a recommendation for ``source``."""
    score = _distance_points(source, other)

    if other.property_type == source.property_type:
        score += 15
    if other.listing_type == source.listing_type:
        score += 15
    if _within(other.price, source.price, 0.2):
        score += 15
    if _within(other.area, source.area, 0.2):
        score += 10

    bedroom_gap = abs(other.bedrooms - source.bedrooms)
    if bedroom_gap == 0:
        score += 10
    elif bedroom_gap == 1:
        score += 5

    bathroom_gap = abs(other.bathrooms - source.bathrooms)
    if bathroom_gap == 0:
        score += 5
    elif bathroom_gap == 1:
        score += 2

    # Counted over the source list, so a repeated source feature scores twice
    other_features = set(other.features or ())
    shared = [f for f in source.features or () if f in other_features]
    score += min(len(shared) * 2, 10)
    return score


def recommend(source: Listing, candidates: Iterable[Listing], limit: int = 5) -> List[Listing]:
    """Top ``limit`` candidates by score. Ties keep candidate order; the source itself is skipped."""
    scored = [(similarity_score(source, c), c) for c in candidates if c.id != source.id]
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [candidate for _, candidate in scored[:limit]]
