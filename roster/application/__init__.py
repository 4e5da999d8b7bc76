"""Application layer for the Roster service."""

from .endpoints import Endpoints

__all__ = ["Endpoints"]
