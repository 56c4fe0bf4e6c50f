"""
Repositories: data access per aggregate.

Every repository derives from ``SQLModelRepository`` (create, get_by_id,
update, delete, list) and adds the queries its routes need.
"""

from .base import AsyncBaseRepository, QueryBuilder, SQLModelRepository
from .bundle import RepositoryBundle, build_repositories

__all__ = [
    "AsyncBaseRepository",
    "QueryBuilder",
    "RepositoryBundle",
    "SQLModelRepository",
    "build_repositories",
]
