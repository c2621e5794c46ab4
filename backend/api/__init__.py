"""
Shelter Trials API package.

Provides the FastAPI application for adoption trial tracking.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
