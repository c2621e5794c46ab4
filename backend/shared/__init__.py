"""
Shared infrastructure for the Shelter Trials backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- clock: Injectable time sources
- database: Supabase client factory
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .clock import Clock, SystemClock, FixedClock
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    ShelterError,
    NotFoundError,
    ConflictError,
    ValidationError,
    ExternalServiceError,
)

__all__ = [
    "Settings",
    "get_settings",
    "Clock",
    "SystemClock",
    "FixedClock",
    "get_supabase_client",
    "reset_client_cache",
    "ShelterError",
    "NotFoundError",
    "ConflictError",
    "ValidationError",
    "ExternalServiceError",
]
