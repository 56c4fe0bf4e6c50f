"""
Exception handlers for the HomeHarbor server.

This package contains the handlers that turn exceptions into the JSON error
bodies the frontend expects, and a setup function to register them.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
