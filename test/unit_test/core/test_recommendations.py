"""Unit tests for the similar-property scoring."""

from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from homeharbor.core.recommendations import recommend, similarity_score


@dataclass
class FakeListing:
    id: int
    property_type: str = "Apartment"
    listing_type: str = "sell"
    price: float = 200000.0
    area: float = 60.0
    bedrooms: int = 2
    bathrooms: int = 1
    latitude: Optional[float] = 60.1699
    longitude: Optional[float] = 24.9384
    features: Optional[List[str]] = field(default_factory=list)


SOURCE = FakeListing(id=1, features=["Sauna", "Balcony"])


def test_identical_listing_scores_every_rule():
    twin = FakeListing(id=2, features=["Sauna", "Balcony"])
    # distance 30 + type 15 + listing 15 + price 15 + area 10 + bedrooms 10 + bathrooms 5 + features 4
    assert similarity_score(SOURCE, twin) == 104


def test_distance_bands():
    def at(lat):
        return similarity_score(SOURCE, FakeListing(id=2, latitude=lat, property_type="x", listing_type="x",
                                                    price=1e9, area=1e9, bedrooms=9, bathrooms=9))

    assert at(60.1699 + 0.03) == 30  # ~3 km
    assert at(60.1699 + 0.07) == 20  # ~8 km
    assert at(60.1699 + 0.12) == 10  # ~13 km
    assert at(60.1699 + 0.5) == 0


def test_missing_coordinates_score_no_distance_points():
    other = FakeListing(id=2, latitude=None, property_type="x", listing_type="x", price=1e9, area=1e9,
                        bedrooms=9, bathrooms=9)
    assert similarity_score(SOURCE, other) == 0


def test_near_misses():
    other = FakeListing(id=2, latitude=None, property_type="x", listing_type="x", price=1e9, area=1e9,
                        bedrooms=3, bathrooms=2)
    assert similarity_score(SOURCE, other) == 5 + 2


def test_shared_feature_points_are_capped():
    features = [f"f{i}" for i in range(8)]
    source = FakeListing(id=1, features=features)
    other = FakeListing(id=2, latitude=None, property_type="x", listing_type="x", price=1e9, area=1e9,
                        bedrooms=9, bathrooms=9, features=features)
    assert similarity_score(source, other) == 10


@pytest.mark.parametrize(
    "source_features,other_features,points",
    [
        (["Sauna", "Sauna"], ["Sauna"], 4),
        (["Sauna"], ["Sauna", "Sauna"], 2),
        (["Sauna", "Balcony"], None, 0),
    ],
)
def test_shared_features_counted_per_source_entry(source_features, other_features, points):
    source = FakeListing(id=1, features=source_features)
    other = FakeListing(id=2, latitude=None, property_type="x", listing_type="x", price=1e9, area=1e9,
                        bedrooms=9, bathrooms=9, features=other_features)
    assert similarity_score(source, other) == points


def test_recommend_orders_by_score_and_skips_source():
    close = FakeListing(id=2)
    far = FakeListing(id=3, latitude=65.0, longitude=25.4)
    different = FakeListing(id=4, property_type="Villa", listing_type="rent", latitude=None)

    result = recommend(SOURCE, [different, SOURCE, far, close], limit=2)

    assert [listing.id for listing in result] == [2, 3]


def test_recommend_ties_keep_candidate_order():
    a, b = FakeListing(id=2), FakeListing(id=3)
    assert [listing.id for listing in recommend(SOURCE, [b, a])] == [3, 2]
