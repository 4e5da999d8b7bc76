#!/usr/bin/env python3
"""
Roster Service - Main entry point

This service exposes the roster of players over HTTP/JSON and gRPC,
backed by the players table.
"""
import argparse
import asyncio
import logging
import signal
import sys
from typing import Optional

import structlog

from roster.config import Config
from roster.logging_config import configure_logging
from roster.service import RosterService
from roster.adapters.database.manager import DatabaseManager
from roster.adapters.observability.logging_service import LoggingPlayerService
from roster.core.errors import NotFoundError
from roster.core.services import RosterPlayerService


logger = logging.getLogger(__name__)


async def list_roster(config: Config, position: str = "") -> int:
    """Print one summary line per player, optionally for one position.

    Returns:
        Process exit code
    """
    db_manager = DatabaseManager(config)
    await db_manager.initialize()
    try:
        service = LoggingPlayerService(
            structlog.get_logger(), RosterPlayerService(db_manager)
        )
        try:
            players = await service.list_players(position)
        except NotFoundError:
            logger.error("No players found")
            return 1

        for player in players:
            print(player)
        return 0
    finally:
        await db_manager.close()


async def main(list_position: Optional[str] = None) -> int:
    """Main entry point for the Roster service.

    Args:
        list_position: When given, print the roster for this position
            ("" for everyone) and exit instead of serving
    """
    config = Config.from_env()
    configure_logging(config.log_level, config.log_format)

    if list_position is not None:
        return await list_roster(config, list_position)

    logger.info("Starting Roster service")

    service = RosterService(config)

    # Handle graceful shutdown
    def signal_handler(sig, frame):
        logger.info(f"Received signal {sig}, shutting down gracefully...")
        asyncio.create_task(service.stop())

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        await service.start()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
    except Exception as e:
        logger.error(f"Service failed with error: {e}")
        return 1
    finally:
        await service.stop()
        logger.info("Roster service stopped")
    return 0


def run() -> None:
    """Console script entry point."""
    parser = argparse.ArgumentParser(description="Roster Service")
    parser.add_argument(
        "--list",
        nargs="?",
        const="",
        default=None,
        metavar="POSITION",
        dest="list_position",
        help="Print the roster (optionally for one position) and exit",
    )
    args = parser.parse_args()
    sys.exit(asyncio.run(main(list_position=args.list_position)))


if __name__ == "__main__":
    run()
