"""Core layer for the roster service.

This module provides the player entity, the domain errors and the
player service contract.
"""

from .entities import Player
from .errors import BadRequestError, ErrorKind, NotFoundError, RosterError
from .services import PlayerService, RosterPlayerService

__all__ = [
    "Player",
    "BadRequestError",
    "ErrorKind",
    "NotFoundError",
    "RosterError",
    "PlayerService",
    "RosterPlayerService",
]
