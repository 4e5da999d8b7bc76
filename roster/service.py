"""Main service class for the Roster service."""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import grpc
import structlog
from aiohttp import web
from grpc_reflection.v1alpha import reflection

from roster.config import Config
from roster.adapters.database.manager import DatabaseManager
from roster.adapters.grpc.players_service import PlayersService
from roster.adapters.http.transport import create_app
from roster.adapters.observability.logging_service import LoggingPlayerService
from roster.application.endpoints import Endpoints
from roster.core.services import PlayerService, RosterPlayerService
from roster.proto import players_pb2, players_pb2_grpc


logger = logging.getLogger(__name__)


class RosterService:
    """Main service class that serves the roster over HTTP and gRPC.

    Both transports share one set of endpoints over one logged player
    service and one database manager.
    """

    def __init__(self, config: Config):
        """Initialize the Roster service.

        Args:
            config: Service configuration
        """
        self.config = config
        self._running = False
        self._stopped: Optional[asyncio.Event] = None

        # Infrastructure components
        self._database_manager: Optional[DatabaseManager] = None
        self.player_service: Optional[PlayerService] = None
        self.endpoints: Optional[Endpoints] = None

        # Servers
        self.grpc_server = None
        self._http_runner: Optional[web.AppRunner] = None

    async def _initialize_infrastructure(self) -> None:
        """Initialize the database and compose the player service."""
        logger.info("Initializing infrastructure components")

        self._database_manager = DatabaseManager(self.config)
        await self._database_manager.initialize()

        if self.config.database_create_tables:
            await self._database_manager.create_tables()

        self.player_service = LoggingPlayerService(
            structlog.get_logger().bind(component="players"),
            RosterPlayerService(self._database_manager),
        )
        self.endpoints = Endpoints.from_service(self.player_service)

        logger.info("Infrastructure initialization completed")

    async def _start_grpc_server(self):
        """Start the gRPC server."""
        logger.info("Starting gRPC server...")

        self.grpc_server = grpc.aio.server(
            ThreadPoolExecutor(max_workers=self.config.grpc_server_max_workers)
        )

        players_pb2_grpc.add_PlayersServicer_to_server(
            PlayersService(self.endpoints), self.grpc_server
        )

        if self.config.grpc_server_reflection:
            SERVICE_NAMES = (
                players_pb2.DESCRIPTOR.services_by_name["Players"].full_name,
                reflection.SERVICE_NAME,
            )
            reflection.enable_server_reflection(SERVICE_NAMES, self.grpc_server)

        listen_addr = f"[::]:{self.config.grpc_server_port}"
        self.grpc_server.add_insecure_port(listen_addr)
        await self.grpc_server.start()

        logger.info(f"gRPC server started on port {self.config.grpc_server_port}")

    async def _start_http_server(self):
        """Start the HTTP server."""
        logger.info("Starting HTTP server...")

        self._http_runner = web.AppRunner(create_app(self.endpoints))
        await self._http_runner.setup()
        site = web.TCPSite(
            self._http_runner,
            self.config.http_server_host,
            self.config.http_server_port,
        )
        await site.start()

        logger.info(f"HTTP server started on port {self.config.http_server_port}")

    async def start(self):
        """Start the Roster service and serve until stopped."""
        logger.info("Starting Roster service")
        self._running = True
        self._stopped = asyncio.Event()

        try:
            await self._initialize_infrastructure()
            await self._start_grpc_server()
            await self._start_http_server()

            await self._stopped.wait()
        except Exception:
            self._running = False
            raise

    async def stop(self):
        """Stop the Roster service."""
        logger.info("Stopping Roster service")
        self._running = False

        if self._http_runner:
            logger.info("Stopping HTTP server...")
            await self._http_runner.cleanup()
            self._http_runner = None
            logger.info("HTTP server stopped")

        if self.grpc_server:
            logger.info("Stopping gRPC server...")
            await self.grpc_server.stop(grace=30)
            self.grpc_server = None
            logger.info("gRPC server stopped")

        if self._database_manager:
            try:
                await self._database_manager.close()
            except Exception as e:
                logger.error(f"Error during database disconnect: {e}")

        if self._stopped is not None:
            self._stopped.set()

        logger.info("Roster service stopped")
