"""gRPC transport for the player endpoints."""

from typing import Any

import grpc
import structlog

from roster.proto import players_pb2
from roster.proto import players_pb2_grpc

from ...application.endpoints import (
    DeletePlayerRequest,
    DeletePlayerResponse,
    Endpoints,
    GetPlayerRequest,
    GetPlayerResponse,
    ListPlayersRequest,
    ListPlayersResponse,
    SavePlayerRequest,
    SavePlayerResponse,
)
from ...core.entities import Player
from ...core.errors import BadRequestError


def player_to_proto(player: Player) -> players_pb2.Player:
    """Convert a core Player to its protobuf message.

    Raises:
        ValueError: If id or experience does not fit in an int32
    """
    return players_pb2.Player(
        id=player.id,
        name=player.name,
        number=player.number,
        position=player.position,
        height=player.height,
        weight=player.weight,
        age=player.age,
        experience=player.experience,
        college=player.college,
    )


def player_from_proto(message: players_pb2.Player) -> Player:
    """Convert a protobuf Player message to a core Player."""
    return Player(
        id=int(message.id),
        name=message.name,
        number=message.number,
        position=message.position,
        height=message.height,
        weight=message.weight,
        age=message.age,
        experience=int(message.experience),
        college=message.college,
    )


def decode_list_players_request(request: players_pb2.ListPlayersRequest) -> ListPlayersRequest:
    return ListPlayersRequest(position=request.position)


def encode_list_players_response(response: ListPlayersResponse) -> players_pb2.ListPlayersResponse:
    return players_pb2.ListPlayersResponse(
        players=[player_to_proto(p) for p in response.players],
        err=response.err,
    )


def decode_get_player_request(request: players_pb2.GetPlayerRequest) -> GetPlayerRequest:
    return GetPlayerRequest(id=int(request.id))


def encode_get_player_response(response: GetPlayerResponse) -> players_pb2.GetPlayerResponse:
    if response.player is None:
        return players_pb2.GetPlayerResponse(err=response.err)
    return players_pb2.GetPlayerResponse(
        player=player_to_proto(response.player),
        err=response.err,
    )


def decode_save_player_request(request: players_pb2.SavePlayerRequest) -> SavePlayerRequest:
    if not request.HasField("player"):
        raise BadRequestError()
    return SavePlayerRequest(player=player_from_proto(request.player))


def encode_save_player_response(response: SavePlayerResponse) -> players_pb2.SavePlayerResponse:
    if response.player is None:
        return players_pb2.SavePlayerResponse(created=response.created, err=response.err)
    return players_pb2.SavePlayerResponse(
        player=player_to_proto(response.player),
        created=response.created,
        err=response.err,
    )


def decode_delete_player_request(request: players_pb2.DeletePlayerRequest) -> DeletePlayerRequest:
    return DeletePlayerRequest(id=int(request.id))


def encode_delete_player_response(response: DeletePlayerResponse) -> players_pb2.DeletePlayerResponse:
    return players_pb2.DeletePlayerResponse(err=response.err)


class PlayersService(players_pb2_grpc.PlayersServicer):
    """gRPC service exposing the player endpoints.

    Domain errors travel in the err field of each reply; only malformed
    requests are reported with a gRPC status.
    """

    def __init__(self, endpoints: Endpoints, logger: Any = None):
        """Initialize the players service.

        Args:
            endpoints: Endpoints shared with the HTTP transport
            logger: Optional structlog logger, tagged "grpc"
        """
        self.endpoints = endpoints
        self.logger = (logger if logger is not None else structlog.get_logger()).bind(tag="grpc")

    async def _serve(self, endpoint, decode, encode, request, context):
        try:
            endpoint_request = decode(request)
        except BadRequestError as e:
            self.logger.warning("failed to decode request", err=str(e))
            await context.abort(grpc.StatusCode.INVALID_ARGUMENT, str(e))

        try:
            return encode(await endpoint(endpoint_request))
        except Exception as e:
            self.logger.error("endpoint failed", err=str(e))
            raise

    async def ListPlayers(self, request, context):
        return await self._serve(
            self.endpoints.list_players,
            decode_list_players_request,
            encode_list_players_response,
            request,
            context,
        )

    async def GetPlayer(self, request, context):
        return await self._serve(
            self.endpoints.get_player,
            decode_get_player_request,
            encode_get_player_response,
            request,
            context,
        )

    async def SavePlayer(self, request, context):
        return await self._serve(
            self.endpoints.save_player,
            decode_save_player_request,
            encode_save_player_response,
            request,
            context,
        )

    async def DeletePlayer(self, request, context):
        return await self._serve(
            self.endpoints.delete_player,
            decode_delete_player_request,
            encode_delete_player_response,
            request,
            context,
        )
