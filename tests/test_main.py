"""Tests for the entry point and the service lifecycle."""

import asyncio

import pytest

from roster.config import Config
from roster.main import list_roster
from roster.service import RosterService


@pytest.mark.integration
class TestListRoster:

    @pytest.mark.asyncio
    async def test_prints_one_line_per_player(self, test_config: Config, seeded_players, capsys):
        assert await list_roster(test_config, "QB") == 0

        out = capsys.readouterr().out
        assert "[1] Blake Bortles (QB) -- #5, 6'5\", 236lb, 25yo, 4exp -- Central Florida" in out
        assert "Chad Henne" in out
        assert "Jalen Ramsey" not in out

    @pytest.mark.asyncio
    async def test_returns_error_code_when_nobody_plays_position(self, test_config: Config, seeded_players):
        assert await list_roster(test_config, "WR") == 1


@pytest.mark.integration
class TestRosterService:

    @pytest.mark.asyncio
    async def test_start_and_stop(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'service.db'}")
        monkeypatch.setenv("DATABASE_CREATE_TABLES", "true")
        monkeypatch.setenv("HTTP_SERVER_HOST", "127.0.0.1")
        monkeypatch.setenv("HTTP_SERVER_PORT", "0")
        monkeypatch.setenv("GRPC_SERVER_PORT", "0")
        service = RosterService(Config.from_env())

        task = asyncio.create_task(service.start())
        for _ in range(100):
            if service._http_runner is not None and service._http_runner.addresses:
                break
            await asyncio.sleep(0.05)

        assert service.grpc_server is not None
        assert service.endpoints is not None

        await service.stop()
        await asyncio.wait_for(task, timeout=5)

        assert service.grpc_server is None
        assert service._http_runner is None
