"""
Route dependencies.

Annotated aliases so route signatures stay short.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from homeharbor.core.database import get_session
from homeharbor.core.database.repositories.bundle import RepositoryBundle, build_repositories

from .oulu_data import OuluDataClient, get_oulu_client
from .places import PlacesClient, get_places_client


def get_repositories(session: AsyncSession = Depends(get_session)) -> RepositoryBundle:
    return build_repositories(session)


SessionDep = Annotated[AsyncSession, Depends(get_session)]
RepositoriesDep = Annotated[RepositoryBundle, Depends(get_repositories)]
OuluClientDep = Annotated[OuluDataClient, Depends(get_oulu_client)]
PlacesClientDep = Annotated[PlacesClient, Depends(get_places_client)]
