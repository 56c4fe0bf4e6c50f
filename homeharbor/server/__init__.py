"""
HomeHarbor Server Package.

This package contains the web server implementation for HomeHarbor.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Server configuration and constants.
    exception_handlers: JSON error responses.
    middleware: Request tracing.
    services: Open-data ingestion, seeding and other long-running logic.
"""
