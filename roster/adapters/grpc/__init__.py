"""gRPC adapter for the player endpoints."""

from .players_service import PlayersService, player_from_proto, player_to_proto

__all__ = ["PlayersService", "player_from_proto", "player_to_proto"]
