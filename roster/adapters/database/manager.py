"""Database infrastructure layer for the players table."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from ...config import Config
from ...core.entities import Player
from .models import Base, Player as PlayerModel

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manages the database connection and provides the player queries.

    Missing rows are reported as None, False or an empty list; every other
    failure is raised by the driver unchanged.
    """

    def __init__(self, config: Config):
        self.config = config
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    async def initialize(self) -> None:
        """Initialize database engine and session factory."""
        if self._engine is not None:
            logger.warning("Database manager already initialized")
            return

        self._engine = create_async_engine(
            self.config.get_database_url(),
            echo=self.config.log_level == "DEBUG",
            poolclass=NullPool,
            pool_pre_ping=True,
        )

        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        logger.info("Database manager initialized successfully")

    async def close(self) -> None:
        """Close database engine and clean up resources."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database manager closed")

    async def create_tables(self) -> None:
        """Create the players table if it does not exist."""
        if self._engine is None:
            raise RuntimeError(
                "Database manager not initialized. Call initialize() first."
            )

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a database session with automatic cleanup."""
        if self._session_factory is None:
            raise RuntimeError(
                "Database manager not initialized. Call initialize() first."
            )

        async with self._session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    def _convert_db_player_to_core_entity(self, player_record: PlayerModel) -> Player:
        """Convert database Player model to core Player entity."""
        return Player(
            id=player_record.id,
            name=player_record.name,
            number=player_record.number,
            position=player_record.position,
            height=player_record.height,
            weight=player_record.weight,
            age=player_record.age,
            experience=player_record.experience,
            college=player_record.college,
        )

    def _player_columns(self, player: Player) -> dict:
        return {
            "name": player.name,
            "number": player.number,
            "position": player.position,
            "height": player.height,
            "weight": player.weight,
            "age": player.age,
            "experience": player.experience,
            "college": player.college,
        }

    async def list_players(self, position: str = "") -> List[Player]:
        """List players ordered by jersey number, optionally for one position."""
        async with self.get_session() as session:
            query = select(PlayerModel)
            if position:
                query = query.where(PlayerModel.position == position)
            result = await session.execute(query.order_by(PlayerModel.number.asc()))
            return [self._convert_db_player_to_core_entity(p) for p in result.scalars().all()]

    async def get_player(self, player_id: int) -> Optional[Player]:
        """Get a player by ID."""
        async with self.get_session() as session:
            result = await session.execute(
                select(PlayerModel).where(PlayerModel.id == player_id)
            )
            player_record = result.scalar_one_or_none()
            return self._convert_db_player_to_core_entity(player_record) if player_record else None

    async def create_player(self, player: Player) -> Player:
        """Insert a player and return it with its assigned ID.

        The given player is left untouched.
        """
        async with self.get_session() as session:
            player_record = PlayerModel(**self._player_columns(player))
            session.add(player_record)
            await session.commit()
            await session.refresh(player_record)
            return self._convert_db_player_to_core_entity(player_record)

    async def update_player(self, player: Player) -> bool:
        """Update every column of an existing player.

        Returns:
            False if no row has the player's ID
        """
        async with self.get_session() as session:
            result = await session.execute(
                update(PlayerModel)
                .where(PlayerModel.id == player.id)
                .values(**self._player_columns(player))
            )
            await session.commit()
            return result.rowcount == 1

    async def delete_player(self, player_id: int) -> bool:
        """Delete a player.

        Returns:
            False if no row has the given ID
        """
        async with self.get_session() as session:
            result = await session.execute(
                delete(PlayerModel).where(PlayerModel.id == player_id)
            )
            await session.commit()
            return result.rowcount == 1
