"""Observability adapter for the player service."""

from .logging_service import LoggingPlayerService

__all__ = ["LoggingPlayerService"]
