"""Configuration management for the Roster service."""

from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlparse, urlunparse

from decouple import Choices, config


class Environment(Enum):
    """Supported deployment environments."""

    DEVELOPMENT = "development"
    CI = "CI"
    PRODUCTION = "production"


@dataclass
class Config:
    """Configuration for the Roster service."""

    # Required fields
    database_url: str

    # Environment configuration
    environment: Environment = Environment.DEVELOPMENT

    # Database configuration
    database_create_tables: bool = False

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"

    # HTTP server configuration
    http_server_host: str = "0.0.0.0"
    http_server_port: int = 8080

    # gRPC server configuration
    grpc_server_port: int = 50051
    grpc_server_max_workers: int = 10
    grpc_server_reflection: bool = True

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(
            config(
                "ENVIRONMENT",
                default="development",
                cast=Choices(["development", "CI", "production"]),
            )
        )

        return cls(
            # Required
            database_url=config("DATABASE_URL"),
            # Environment
            environment=env,
            # Database
            database_create_tables=config("DATABASE_CREATE_TABLES", default=False, cast=bool),
            # Logging
            log_level=config("LOG_LEVEL", default="INFO"),
            log_format=config("LOG_FORMAT", default="json", cast=Choices(["json", "text"])),
            # HTTP server
            http_server_host=config("HTTP_SERVER_HOST", default="0.0.0.0"),
            http_server_port=config("HTTP_SERVER_PORT", default=8080, cast=int),
            # gRPC server
            grpc_server_port=config("GRPC_SERVER_PORT", default=50051, cast=int),
            grpc_server_max_workers=config("GRPC_SERVER_MAX_WORKERS", default=10, cast=int),
            grpc_server_reflection=config("GRPC_SERVER_REFLECTION", default=True, cast=bool),
        )

    def get_database_url(self) -> str:
        """Return the SQLAlchemy URL, forcing the asyncpg driver for PostgreSQL."""
        parsed = urlparse(self.database_url)

        # Other drivers (e.g. sqlite+aiosqlite) are used as given
        if parsed.scheme not in ("postgres", "postgresql"):
            return self.database_url

        return urlunparse(
            ("postgresql+asyncpg", parsed.netloc, parsed.path, parsed.params, parsed.query, parsed.fragment)
        )
