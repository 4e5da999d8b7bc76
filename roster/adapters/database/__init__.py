"""Database adapter for the players table."""

from .manager import DatabaseManager
from .models import Base

__all__ = ["DatabaseManager", "Base"]
