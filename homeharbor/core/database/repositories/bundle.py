"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
sharing one session, used by services that touch several tables.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .content import FooterContentRepository, PageContentRepository
from .crime_data import CrimeDataRepository
from .favorites import FavoriteRepository
from .locations import LocationRepository
from .messages import MessageRepository
from .neighborhoods import NeighborhoodRepository
from .posts import PostRepository
from .properties import PropertyRepository
from .settings import SettingRepository, StaticPageRepository
from .users import UserRepository


@dataclass(frozen=True)
class RepositoryBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    users: UserRepository
    properties: PropertyRepository
    locations: LocationRepository
    favorites: FavoriteRepository
    messages: MessageRepository
    neighborhoods: NeighborhoodRepository
    posts: PostRepository
    settings: SettingRepository
    static_pages: StaticPageRepository
    footer: FooterContentRepository
    page_content: PageContentRepository
    crime_data: CrimeDataRepository


def build_repositories(session: AsyncSession) -> RepositoryBundle:
    """Build a ``RepositoryBundle`` over an existing session.

    Args:
        session: Async session shared by every repository

    Returns:
        Bundle containing all repository instances
    """
    return RepositoryBundle(
        users=UserRepository(session),
        properties=PropertyRepository(session),
        locations=LocationRepository(session),
        favorites=FavoriteRepository(session),
        messages=MessageRepository(session),
        neighborhoods=NeighborhoodRepository(session),
        posts=PostRepository(session),
        settings=SettingRepository(session),
        static_pages=StaticPageRepository(session),
        footer=FooterContentRepository(session),
        page_content=PageContentRepository(session),
        crime_data=CrimeDataRepository(session),
    )
