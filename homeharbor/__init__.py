"""HomeHarbor.

Backend for a real-estate listing site. The package is split in two layers:

- ``homeharbor.core``: logging, monitoring, geographic helpers, password
  hashing and the database layer (entities, repositories, I/O models).
- ``homeharbor.server``: the FastAPI application, its routers and the
  services that talk to external open-data feeds.

The JSON contract uses camelCase keys because the single-page frontend
consumes the API directly; Python code stays snake_case and relies on
pydantic aliases for the translation.
"""

__version__ = "0.1.0"
