"""Tests for the logging player service decorator."""

from unittest.mock import ANY, AsyncMock, MagicMock

import pytest

from roster.adapters.observability.logging_service import LoggingPlayerService
from roster.core.entities import Player
from roster.core.errors import NotFoundError
from roster.core.services import PlayerService


@pytest.fixture
def next_service():
    return AsyncMock(spec=PlayerService)


@pytest.fixture
def logger():
    return MagicMock()


class TestLoggingPlayerService:
    """Test that every call is forwarded unchanged and logged once."""

    @pytest.mark.asyncio
    async def test_list_players_calls_next_and_logs_count(self, logger, next_service):
        players = [Player(id=1, name="Blake Bortles", number="5", position="QB")]
        next_service.list_players.return_value = players
        service = LoggingPlayerService(logger, next_service)

        result = await service.list_players("QB")

        assert result is players
        next_service.list_players.assert_awaited_once_with("QB")
        logger.info.assert_called_once_with(
            "listing players", pos="QB", num=1, err=None, took=ANY
        )

    @pytest.mark.asyncio
    async def test_get_player_logs_error_and_reraises(self, logger, next_service):
        error = NotFoundError()
        next_service.get_player.side_effect = error
        service = LoggingPlayerService(logger, next_service)

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_player(9)

        assert exc_info.value is error
        logger.info.assert_called_once_with(
            "getting a player", id=9, err="not found", took=ANY
        )

    @pytest.mark.asyncio
    async def test_save_player_logs_created_flag(self, logger, next_service):
        saved = Player(id=4, name="Jalen Ramsey")
        next_service.save_player.return_value = (saved, True)
        service = LoggingPlayerService(logger, next_service)

        result = await service.save_player(Player(name="Jalen Ramsey"))

        assert result == (saved, True)
        logger.info.assert_called_once_with(
            "saving a player", id=0, name="Jalen Ramsey", created=True, err=None, took=ANY
        )

    @pytest.mark.asyncio
    async def test_delete_player_calls_next(self, logger, next_service):
        service = LoggingPlayerService(logger, next_service)

        assert await service.delete_player(3) is None

        next_service.delete_player.assert_awaited_once_with(3)
        logger.info.assert_called_once_with("deleting a player", id=3, err=None, took=ANY)

    @pytest.mark.asyncio
    async def test_elapsed_time_is_logged(self, logger, next_service):
        next_service.delete_player.side_effect = RuntimeError("database error")
        service = LoggingPlayerService(logger, next_service)

        with pytest.raises(RuntimeError):
            await service.delete_player(1)

        kwargs = logger.info.call_args.kwargs
        assert kwargs["err"] == "database error"
        assert kwargs["took"] >= 0

    @pytest.mark.asyncio
    async def test_decorators_stack(self, logger, next_service):
        next_service.list_players.return_value = [Player(id=1)]
        outer_logger = MagicMock()
        service = LoggingPlayerService(outer_logger, LoggingPlayerService(logger, next_service))

        await service.list_players()

        next_service.list_players.assert_awaited_once_with("")
        logger.info.assert_called_once()
        outer_logger.info.assert_called_once()
