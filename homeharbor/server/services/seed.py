"""
Demo data seeding.

``seed_database`` wipes the listing tables and loads a small but complete
data set: three accounts, four locations, a property for every
location x property type x listing type combination, and the site content
the SPA expects on first start.
"""

from __future__ import annotations

import random
from typing import Any, Dict, List

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from homeharbor.core.database.base import utc_now
from homeharbor.core.database.entities import (
    Favorite,
    FooterContent,
    Location,
    Message,
    Neighborhood,
    Post,
    Property,
    Setting,
    User,
)
from homeharbor.core.database.entities.properties import LISTING_TYPES, PROPERTY_TYPES
from homeharbor.core.database.repositories.settings import SettingRepository, StaticPageRepository
from homeharbor.core.logging_config import get_logger
from homeharbor.core.models.io.settings import default_site_settings
from homeharbor.core.security import hash_password

logger = get_logger(__name__)

SEED_USERS: List[Dict[str, Any]] = [
    {
        "username": "admin",
        "password": "admin123",
        "email": "admin@homeharbor.com",
        "name": "Admin User",
        "role": "admin",
        "photo_url": "https://randomuser.me/api/portraits/men/1.jpg",
    },
    {
        "username": "demouser",
        "password": "password123",
        "email": "demouser@homeharbor.com",
        "name": "Demo User",
        "role": "user",
        "photo_url": "https://randomuser.me/api/portraits/women/2.jpg",
    },
    {
        "username": "agent",
        "password": "agent123",
        "email": "agent@homeharbor.com",
        "name": "Agent User",
        "role": "agent",
        "photo_url": "https://randomuser.me/api/portraits/men/3.jpg",
    },
]

SEED_LOCATIONS: List[Dict[str, Any]] = [
    {
        "name": "Helsinki",
        "city": "Helsinki",
        "country": "Finland",
        "image": "https://images.unsplash.com/photo-1464983953574-0892a716854b?auto=format&fit=crop&w=800&q=80",
        "latitude": 60.1699,
        "longitude": 24.9384,
        "description": "Capital of Finland, vibrant and modern.",
        "municipality_code": "091",
    },
    {
        "name": "Oulu",
        "city": "Oulu",
        "country": "Finland",
        "image": "https://images.unsplash.com/photo-1506744038136-46273834b3fb?auto=format&fit=crop&w=800&q=80",
        "latitude": 65.0121,
        "longitude": 25.4651,
        "description": "Northern city known for tech and education.",
        "municipality_code": "564",
    },
    {
        "name": "Stockholm",
        "city": "Stockholm",
        "country": "Sweden",
        "image": "https://images.unsplash.com/photo-1500534314209-a25ddb2bd429?auto=format&fit=crop&w=800&q=80",
        "latitude": 59.3293,
        "longitude": 18.0686,
        "description": "Sweden's capital, built on 14 islands.",
        "municipality_code": None,
    },
    {
        "name": "Gothenburg",
        "city": "Gothenburg",
        "country": "Sweden",
        "image": "https://images.unsplash.com/photo-1465101046530-73398c7f28ca?auto=format&fit=crop&w=800&q=80",
        "latitude": 57.7089,
        "longitude": 11.9746,
        "description": "Major port city on Sweden's west coast.",
        "municipality_code": None,
    },
]

SEED_NEIGHBORHOODS: List[Dict[str, Any]] = [
    {
        "name": "Punavuori",
        "city": "Helsinki",
        "description": "Trendy, bohemian neighborhood in Helsinki.",
        "image": "https://images.unsplash.com/photo-1502082553048-f009c37129b9?auto=format&fit=crop&w=800&q=80",
        "average_price": 480000,
        "population_density": 9000,
        "walk_score": 97,
        "transit_score": 94,
        "latitude": 60.1602,
        "longitude": 24.9395,
    },
    {
        "name": "Kungsholmen",
        "city": "Stockholm",
        "description": "Island district in central Stockholm.",
        "image": "https://images.unsplash.com/photo-1500534314209-a25ddb2bd429?auto=format&fit=crop&w=800&q=80",
        "average_price": 610000,
        "population_density": 7800,
        "walk_score": 89,
        "transit_score": 87,
        "latitude": 59.3326,
        "longitude": 18.0298,
    },
]

# (section, title, link, icon, open_in_new_tab)
SEED_FOOTER_LINKS = [
    ("company", "About Us", "/about", "ri-information-line", False),
    ("company", "Careers", "/careers", "ri-briefcase-line", False),
    ("resources", "Blog", "/blog", "ri-article-line", False),
    ("resources", "FAQ", "/faq", "ri-question-line", False),
    ("legal", "Privacy Policy", "/privacy-policy", "ri-lock-line", False),
    ("legal", "Terms of Service", "/terms-of-service", "ri-file-list-2-line", False),
    ("social", "Facebook", "https://facebook.com", "ri-facebook-fill", True),
    ("social", "Twitter", "https://twitter.com", "ri-twitter-fill", True),
    ("bottom", "Privacy Policy", "/privacy-policy", "", False),
    ("bottom", "Terms of Service", "/terms-of-service", "", False),
]

SEED_STATIC_PAGES: Dict[str, str] = {
    "about": (
        "<h1>About HomeHarbor</h1>"
        "<p>We're on a mission to make finding your dream home easier than ever before.</p>"
        "<h2>Our Story</h2>"
        "<p>Founded in 2022, HomeHarbor started with a simple idea: make the real estate journey "
        "transparent, efficient and enjoyable for everyone.</p>"
        "<h2>Join Our Journey</h2>"
        "<p>Whether you're looking for your dream home or want to list your property, we're here to help.</p>"
    ),
    "faq": (
        "<h1>Frequently Asked Questions</h1>"
        "<h2>General Questions</h2>"
        "<ul>"
        "<li><strong>What is HomeHarbor?</strong> A real estate platform with property listings, "
        "advanced search and personalised recommendations.</li>"
        "<li><strong>Is the service free to use?</strong> Browsing listings, saving favorites and "
        "contacting agents are free.</li>"
        "</ul>"
    ),
    "privacy-policy": (
        "<h1>Privacy Policy</h1>"
        "<p>HomeHarbor is committed to protecting your privacy. This policy explains how we collect, use "
        "and safeguard your information when you use the Service.</p>"
        "<h2>Contact Information</h2>"
        "<p>If you have any questions about this Privacy Policy, please contact us at privacy@homeharbor.com.</p>"
    ),
    "terms-of-service": (
        "<h1>Terms of Service</h1>"
        "<p>These Terms govern your access to and use of the HomeHarbor website and services. "
        "By using the Service you agree to be bound by these Terms.</p>"
        "<h2>Contact Information</h2>"
        "<p>If you have any questions about these Terms, please contact us at legal@homeharbor.com.</p>"
    ),
}


async def _clear(session: AsyncSession) -> None:
    for model in (Message, Favorite, Property, Location, Neighborhood, Post, FooterContent, Setting, User):
        await session.execute(delete(model))


def _users() -> List[User]:
    now = utc_now()
    users = []
    for seed in SEED_USERS:
        fields = {k: v for k, v in seed.items() if k != "password"}
        users.append(User(**fields, hashed_password=hash_password(seed["password"]), created_at=now, updated_at=now))
    return users


def build_properties(locations: List[Location], admin: User, agent: User, rng: random.Random) -> List[Property]:
    """One listing per location, property type and listing type."""
    properties = []
    number = 1
    for location in locations:
        for property_type in PROPERTY_TYPES:
            for listing_type in LISTING_TYPES:
                owner = agent if number % 2 == 0 else admin
                properties.append(
                    Property(
                        title=f"{property_type} for {listing_type} in {location.name}",
                        description=f"A nice {property_type.lower()} for {listing_type} in {location.name}.",
                        price=300000 + rng.randrange(400000),
                        address=f"{number} Main St, {location.name}, {location.country}",
                        city=location.name,
                        area=50 + rng.randrange(150),
                        bedrooms=0 if property_type == "Studio" else 1 + rng.randrange(4),
                        bathrooms=1 + rng.randrange(2),
                        property_type=property_type,
                        listing_type=listing_type,
                        features=["Balcony", "Elevator", "Parking"],
                        images=[location.image] if location.image else [],
                        user_id=owner.id,  # type: ignore[arg-type]
                        latitude=(location.latitude or 0) + (rng.random() - 0.5) * 0.01,
                        longitude=(location.longitude or 0) + (rng.random() - 0.5) * 0.01,
                        featured=number % 5 == 0,
                        verified=number % 3 == 0,
                        status="active",
                        transaction_type="new",
                        property_ownership="freehold",
                        flooring_details="Wooden flooring",
                        furnishing_details="Fully Furnished",
                        heating_available=True,
                        water_details="Municipal supply",
                        gas_details="Piped gas",
                        owner_details={"name": owner.name, "email": owner.email},
                        average_nearby_prices=320000 + rng.randrange(30000),
                        registration_details="Fully registered with clear title",
                    )
                )
                number += 1
    return properties


def _posts(agent: User, demo: User) -> List[Post]:
    now = utc_now()
    return [
        Post(
            title="Buying a Home in Finland: What to Know",
            slug="buying-home-finland",
            content=(
                "Finland offers a stable and transparent real estate market. This guide walks through "
                "financing, viewings and the closing process for locals and expats alike."
            ),
            author_id=agent.id,
            author_name=agent.name,
            category="Buying",
            excerpt="A guide to buying property in Finland for locals and expats.",
            image_url="https://images.unsplash.com/photo-1464983953574-0892a716854b?auto=format&fit=crop&w=800&q=80",
            read_time_minutes=5,
            is_published=True,
            published_at=now,
            tags="Finland,Buying,Guide",
        ),
        Post(
            title="Stockholm Neighborhoods: Where to Live",
            slug="stockholm-neighborhoods",
            content=(
                "Stockholm is a city of islands, each with its own character. We compare the districts "
                "that suit families, students and commuters."
            ),
            author_id=demo.id,
            author_name=demo.name,
            category="Neighborhoods",
            excerpt="Explore the best areas to live in Stockholm.",
            image_url="https://images.unsplash.com/photo-1500534314209-a25ddb2bd429?auto=format&fit=crop&w=800&q=80",
            read_time_minutes=4,
            is_published=True,
            published_at=now,
            tags="Stockholm,Neighborhoods,Guide",
        ),
    ]


def _messages(first_property: Property, agent: User, demo: User) -> List[Message]:
    return [
        Message(
            name=demo.name,
            email=demo.email,
            subject=f"Inquiry about {first_property.title}",
            message="Is the apartment still available?",
            status="unread",
            property_id=first_property.id,
            user_id=agent.id,
            sender_user_id=demo.id,
        ),
        Message(
            name=agent.name,
            email=agent.email,
            subject=f"Re: Inquiry about {first_property.title}",
            message="Yes, it is available. Would you like to schedule a viewing?",
            status="unread",
            property_id=first_property.id,
            user_id=demo.id,
            sender_user_id=agent.id,
        ),
    ]


def _footer() -> List[FooterContent]:
    items = []
    positions: Dict[str, int] = {}
    for section, title, link, icon, new_tab in SEED_FOOTER_LINKS:
        position = positions.get(section, 0)
        positions[section] = position + 1
        items.append(
            FooterContent(
                section=section, title=title, content="", link=link, icon=icon, position=position,
                active=True, open_in_new_tab=new_tab,
            )
        )
    return items


async def seed_database(session: AsyncSession, rng: random.Random | None = None) -> None:
    """Replace the demo tables with a fresh data set."""
    rng = rng or random.Random()
    logger.info("Starting database seeding")
    try:
        await _clear(session)

        admin, demo, agent = _users()
        session.add_all([admin, demo, agent])
        await session.flush()
        logger.info("Seeded 3 users")

        locations = [Location(**seed) for seed in SEED_LOCATIONS]
        session.add_all(locations)
        session.add_all([Neighborhood(**seed) for seed in SEED_NEIGHBORHOODS])
        await session.flush()

        properties = build_properties(locations, admin, agent, rng)
        session.add_all(properties)
        await session.flush()
        logger.info(f"Seeded {len(locations)} locations and {len(properties)} properties")

        session.add_all(_posts(agent, demo))
        session.add_all(_messages(properties[0], agent, demo))
        session.add_all(_footer())
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    await SettingRepository(session).put_json("site", default_site_settings())
    pages = StaticPageRepository(session)
    for slug, content in SEED_STATIC_PAGES.items():
        await pages.upsert(slug, content)
    logger.info("Database seeding completed")


async def initialize_database(session: AsyncSession) -> bool:
    """Seed only an empty database. Returns whether seeding ran."""
    user_count = (await session.execute(select(func.count()).select_from(User))).scalar_one()
    if user_count:
        logger.info(f"Database already has {user_count} users, skipping seed")
        return False
    await seed_database(session)
    return True


async def clear_listings(session: AsyncSession) -> None:
    """Delete favorites, messages, properties and locations; accounts and content stay."""
    try:
        for model in (Favorite, Message, Property, Location):
            await session.execute(delete(model))
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    logger.info("Cleared favorites, messages, properties and locations")
