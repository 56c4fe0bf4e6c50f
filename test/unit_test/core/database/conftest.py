"""Sample rows for the database unit tests."""

from __future__ import annotations

import pytest


@pytest.fixture(scope="function")
def sample_user_data() -> dict:
    """Sample user data for testing."""
    return {
        "name": "Aino Virtanen",
        "email": "aino@example.com",
        "username": "aino",
        "hashed_password": None,
        "phone": "+358 40 123 4567",
        "role": "agent",
    }


@pytest.fixture(scope="function")
def sample_property_data() -> dict:
    """Sample property data for testing; ``user_id`` is filled in by the test."""
    return {
        "title": "Bright apartment near the market square",
        "description": "Two bedrooms, balcony and sea view.",
        "price": 250000.0,
        "address": "Kauppurienkatu 5",
        "city": "Oulu",
        "area": 64.0,
        "bedrooms": 2,
        "bathrooms": 1,
        "property_type": "Apartment",
        "listing_type": "sell",
        "features": ["Balcony", "Sauna"],
        "images": ["https://images.example.com/1.jpg"],
        "latitude": 65.0121,
        "longitude": 25.4651,
    }
