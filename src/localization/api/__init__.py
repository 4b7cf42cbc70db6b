"""Localization web package."""

from localization.api.routes import router

__all__ = ["router"]
