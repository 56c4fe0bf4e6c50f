"""Unit tests for great-circle distance helpers."""

import pytest

from homeharbor.core.geo import haversine_distance, within_radius

HELSINKI = (60.1699, 24.9384)
OULU = (65.0121, 25.4651)


def test_distance_to_self_is_zero():
    assert haversine_distance(*HELSINKI, *HELSINKI) == pytest.approx(0.0)


def test_helsinki_to_oulu():
    assert haversine_distance(*HELSINKI, *OULU) == pytest.approx(540, abs=5)


def test_distance_is_symmetric():
    assert haversine_distance(*HELSINKI, *OULU) == pytest.approx(haversine_distance(*OULU, *HELSINKI))


def test_within_radius():
    assert within_radius(*HELSINKI, 60.1719, 24.9414, 1)
    assert not within_radius(*HELSINKI, *OULU, 100)


@pytest.mark.parametrize("other", [(None, 24.9), (60.1, None), (None, None)])
def test_missing_coordinates_never_match(other):
    assert within_radius(*HELSINKI, *other, 10000) is False
