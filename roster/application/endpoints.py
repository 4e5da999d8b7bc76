"""Transport-agnostic endpoints for the player service.

Each endpoint takes a typed request and returns a typed response. Domain
and persistence failures are captured in the response's ``err`` text (and
``kind``) instead of being raised, so every transport can render them its
own way.
"""

from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional

from ..core.entities import Player
from ..core.errors import BadRequestError, ErrorKind
from ..core.services import PlayerService


@dataclass
class ListPlayersRequest:
    position: str = ""


@dataclass
class ListPlayersResponse:
    players: List[Player] = field(default_factory=list)
    err: str = ""
    kind: Optional[ErrorKind] = None


@dataclass
class GetPlayerRequest:
    id: int = 0


@dataclass
class GetPlayerResponse:
    player: Optional[Player] = None
    err: str = ""
    kind: Optional[ErrorKind] = None


@dataclass
class SavePlayerRequest:
    player: Optional[Player] = None


@dataclass
class SavePlayerResponse:
    player: Optional[Player] = None
    created: bool = False
    err: str = ""
    kind: Optional[ErrorKind] = None


@dataclass
class DeletePlayerRequest:
    id: int = 0


@dataclass
class DeletePlayerResponse:
    err: str = ""
    kind: Optional[ErrorKind] = None


ListPlayersEndpoint = Callable[[ListPlayersRequest], Awaitable[ListPlayersResponse]]
GetPlayerEndpoint = Callable[[GetPlayerRequest], Awaitable[GetPlayerResponse]]
SavePlayerEndpoint = Callable[[SavePlayerRequest], Awaitable[SavePlayerResponse]]
DeletePlayerEndpoint = Callable[[DeletePlayerRequest], Awaitable[DeletePlayerResponse]]


def make_list_players_endpoint(service: PlayerService) -> ListPlayersEndpoint:
    async def endpoint(request: ListPlayersRequest) -> ListPlayersResponse:
        try:
            players = await service.list_players(request.position)
        except Exception as e:
            return ListPlayersResponse(err=str(e), kind=ErrorKind.of(e))
        return ListPlayersResponse(players=players)

    return endpoint


def make_get_player_endpoint(service: PlayerService) -> GetPlayerEndpoint:
    async def endpoint(request: GetPlayerRequest) -> GetPlayerResponse:
        try:
            player = await service.get_player(request.id)
        except Exception as e:
            return GetPlayerResponse(err=str(e), kind=ErrorKind.of(e))
        return GetPlayerResponse(player=player)

    return endpoint


def make_save_player_endpoint(service: PlayerService) -> SavePlayerEndpoint:
    async def endpoint(request: SavePlayerRequest) -> SavePlayerResponse:
        if request.player is None:
            raise BadRequestError()
        try:
            player, created = await service.save_player(request.player)
        except Exception as e:
            return SavePlayerResponse(err=str(e), kind=ErrorKind.of(e))
        return SavePlayerResponse(player=player, created=created)

    return endpoint


def make_delete_player_endpoint(service: PlayerService) -> DeletePlayerEndpoint:
    async def endpoint(request: DeletePlayerRequest) -> DeletePlayerResponse:
        try:
            await service.delete_player(request.id)
        except Exception as e:
            return DeletePlayerResponse(err=str(e), kind=ErrorKind.of(e))
        return DeletePlayerResponse()

    return endpoint


@dataclass
class Endpoints:
    """The endpoints shared by the HTTP and gRPC transports."""

    list_players: ListPlayersEndpoint
    get_player: GetPlayerEndpoint
    save_player: SavePlayerEndpoint
    delete_player: DeletePlayerEndpoint

    @classmethod
    def from_service(cls, service: PlayerService) -> "Endpoints":
        return cls(
            list_players=make_list_players_endpoint(service),
            get_player=make_get_player_endpoint(service),
            save_player=make_save_player_endpoint(service),
            delete_player=make_delete_player_endpoint(service),
        )
