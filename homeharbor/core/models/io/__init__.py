"""
I/O models for API requests and responses.

These models are separate from the database entities so that the JSON
contract (camelCase, no password hashes, computed fields) can evolve
independently of the tables.

Modules:
- common: Base model and shared response shapes
- users, properties, locations, favorites, messages, neighborhoods, posts:
  per-resource Read/Create/Update models
- settings, content: site settings, footer, page and static content
- admin, crime, logs: dashboard, crime statistics and log viewer responses
"""

from .common import IOModel, MessageResponse, Pagination, SuccessResponse

__all__ = [
    "IOModel",
    "MessageResponse",
    "Pagination",
    "SuccessResponse",
]
