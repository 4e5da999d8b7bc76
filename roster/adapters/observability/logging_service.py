"""Logging decorator for the player service."""

import time
from typing import Any, List, Optional, Tuple

import structlog

from ...core.entities import Player
from ...core.services import PlayerService


def _err(exc: Optional[BaseException]) -> Optional[str]:
    return str(exc) if exc is not None else None


class LoggingPlayerService(PlayerService):
    """Wraps a PlayerService and logs every call.

    One event is emitted per call, whether it succeeds or fails, with the
    error text and the elapsed time. Results and exceptions are passed
    through unchanged, so decorators can be stacked.
    """

    def __init__(self, logger: Any, next_service: PlayerService):
        self.logger = logger if logger is not None else structlog.get_logger()
        self.next = next_service

    async def list_players(self, position: str = "") -> List[Player]:
        begin = time.time()
        players: List[Player] = []
        error = None
        try:
            players = await self.next.list_players(position)
            return players
        except Exception as e:
            error = e
            raise
        finally:
            self.logger.info(
                "listing players",
                pos=position,
                num=len(players),
                err=_err(error),
                took=time.time() - begin,
            )

    async def get_player(self, player_id: int) -> Player:
        begin = time.time()
        error = None
        try:
            return await self.next.get_player(player_id)
        except Exception as e:
            error = e
            raise
        finally:
            self.logger.info(
                "getting a player",
                id=player_id,
                err=_err(error),
                took=time.time() - begin,
            )

    async def save_player(self, player: Player) -> Tuple[Player, bool]:
        begin = time.time()
        created = False
        error = None
        try:
            saved, created = await self.next.save_player(player)
            return saved, created
        except Exception as e:
            error = e
            raise
        finally:
            self.logger.info(
                "saving a player",
                id=player.id,
                name=player.name,
                created=created,
                err=_err(error),
                took=time.time() - begin,
            )

    async def delete_player(self, player_id: int) -> None:
        begin = time.time()
        error = None
        try:
            await self.next.delete_player(player_id)
        except Exception as e:
            error = e
            raise
        finally:
            self.logger.info(
                "deleting a player",
                id=player_id,
                err=_err(error),
                took=time.time() - begin,
            )
