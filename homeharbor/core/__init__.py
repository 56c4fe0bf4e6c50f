"""
Core utilities for HomeHarbor.

This package provides logging configuration, monitoring, the database layer
and small shared helpers (geography, password hashing, municipality codes).
"""

from homeharbor.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
