"""Core player service for the roster service."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Tuple

from .entities import Player
from .errors import NotFoundError

if TYPE_CHECKING:
    from ..adapters.database.manager import DatabaseManager


class PlayerService(ABC):
    """Operations on the roster of players.

    Implementations raise NotFoundError when no stored player matches;
    any other failure propagates unchanged.
    """

    @abstractmethod
    async def list_players(self, position: str = "") -> List[Player]:
        """List players ordered by jersey number, optionally for one position."""

    @abstractmethod
    async def get_player(self, player_id: int) -> Player:
        """Get a single player by ID."""

    @abstractmethod
    async def save_player(self, player: Player) -> Tuple[Player, bool]:
        """Create or update a player.

        Returns:
            Tuple of (saved_player, created)
        """

    @abstractmethod
    async def delete_player(self, player_id: int) -> None:
        """Delete a player by ID."""


class RosterPlayerService(PlayerService):
    """Player service backed by the players table."""

    def __init__(self, db_manager: "DatabaseManager"):
        self.db_manager = db_manager

    async def list_players(self, position: str = "") -> List[Player]:
        players = await self.db_manager.list_players(position)
        if not players:
            raise NotFoundError()
        return players

    async def get_player(self, player_id: int) -> Player:
        player = await self.db_manager.get_player(player_id)
        if player is None:
            raise NotFoundError()
        return player

    async def save_player(self, player: Player) -> Tuple[Player, bool]:
        if player.is_new():
            return await self.db_manager.create_player(player), True

        if not await self.db_manager.update_player(player):
            raise NotFoundError()
        return player, False

    async def delete_player(self, player_id: int) -> None:
        if not await self.db_manager.delete_player(player_id):
            raise NotFoundError()
