"""Pytest fixtures for Roster tests."""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from roster.config import Config
from roster.adapters.database.manager import DatabaseManager
from roster.application.endpoints import Endpoints
from roster.core.services import RosterPlayerService
from tests.factories import PlayerFactory


@pytest.fixture
def test_config(tmp_path, monkeypatch) -> Config:
    """Create test configuration backed by a throwaway SQLite file."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'roster.db'}")
    monkeypatch.setenv("ENVIRONMENT", "CI")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("GRPC_SERVER_REFLECTION", "false")

    return Config.from_env()


@pytest_asyncio.fixture
async def db_manager(test_config):
    """Initialized database manager with the players table created."""
    manager = DatabaseManager(test_config)
    await manager.initialize()
    await manager.create_tables()

    yield manager

    await manager.close()


@pytest_asyncio.fixture
async def seeded_players(db_manager):
    """Store the sample roster and return the stored players."""
    return [
        await db_manager.create_player(player)
        for player in PlayerFactory.create_roster()
    ]


@pytest.fixture
def mock_db_manager():
    """Database manager double for driving the service from tests."""
    return AsyncMock(spec=DatabaseManager)


@pytest.fixture
def player_service(db_manager) -> RosterPlayerService:
    return RosterPlayerService(db_manager)


@pytest.fixture
def endpoints(player_service) -> Endpoints:
    return Endpoints.from_service(player_service)


@pytest.fixture
def mock_endpoints(mock_db_manager) -> Endpoints:
    """Endpoints over a service whose database is a mock."""
    return Endpoints.from_service(RosterPlayerService(mock_db_manager))
