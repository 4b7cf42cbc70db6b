"""Catalogue web package."""

from catalogue.api.routes import get_catalogue, router

__all__ = ["router", "get_catalogue"]
