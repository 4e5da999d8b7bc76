"""HTTP adapter for the player endpoints."""

from .transport import create_app

__all__ = ["create_app"]
