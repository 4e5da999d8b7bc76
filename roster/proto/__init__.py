"""Protobuf imports for the Roster service."""

from . import players_pb2, players_pb2_grpc

from .players_pb2 import (
    Player,
    ListPlayersRequest,
    ListPlayersResponse,
    GetPlayerRequest,
    GetPlayerResponse,
    SavePlayerRequest,
    SavePlayerResponse,
    DeletePlayerRequest,
    DeletePlayerResponse,
)

__all__ = [
    # Modules
    "players_pb2",
    "players_pb2_grpc",

    # Messages
    "Player",
    "ListPlayersRequest",
    "ListPlayersResponse",
    "GetPlayerRequest",
    "GetPlayerResponse",
    "SavePlayerRequest",
    "SavePlayerResponse",
    "DeletePlayerRequest",
    "DeletePlayerResponse",
]
