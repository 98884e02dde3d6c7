"""
DevConnector API package.

Provides the FastAPI application for the developer profiles service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
