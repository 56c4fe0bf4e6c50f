"""
Middleware modules for the HomeHarbor server.

This package contains custom middleware for request/response logging
and performance tracking.
"""

from .logfire_middleware import LogfireMiddleware

__all__ = ["LogfireMiddleware"]
