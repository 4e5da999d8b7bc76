"""HTTP/JSON transport for the player endpoints."""

import re
from typing import Any, Awaitable, Callable, Optional

import structlog
from aiohttp import web

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
from ...core.errors import BadRequestError, ErrorKind

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Origin, Content-Type",
}

HTTP_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.INTERNAL: 500,
}

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_MIN_ID = -(2 ** 63)
_MAX_ID = 2 ** 63 - 1

Decoder = Callable[[web.Request], Awaitable[Any]]
Encoder = Callable[[Any], web.Response]


@web.middleware
async def access_control(request: web.Request, handler) -> web.StreamResponse:
    """Allow cross-origin access on every response."""
    if request.method == "OPTIONS":
        response = web.Response()
    else:
        try:
            response = await handler(request)
        except web.HTTPException as exc:
            # Routing failures (404, 405) raised by aiohttp
            exc.headers.update(CORS_HEADERS)
            raise
    response.headers.update(CORS_HEADERS)
    return response


def encode_error(message: str, kind: Optional[ErrorKind] = None) -> web.Response:
    """Encode an error as {"error": message}, with the status chosen by kind."""
    if kind is None:
        kind = ErrorKind.from_message(message)
    return web.json_response(
        {"error": message}, status=HTTP_STATUS_BY_KIND.get(kind, 500)
    )


def encode_response(status: int, body: Optional[dict]) -> web.Response:
    if body is None:
        return web.Response(status=status)
    return web.json_response(body, status=status)


def _path_id(request: web.Request) -> int:
    segment = request.match_info["id"]
    # ASCII digits only, in the 64-bit signed range
    if not _ID_PATTERN.fullmatch(segment):
        raise BadRequestError()
    player_id = int(segment)
    if not _MIN_ID <= player_id <= _MAX_ID:
        raise BadRequestError()
    return player_id


async def _body_player(request: web.Request) -> Player:
    try:
        data = await request.json()
    except ValueError:
        # Empty or malformed JSON
        raise BadRequestError()
    return Player.from_dict(data)


async def decode_list_players_request(request: web.Request) -> ListPlayersRequest:
    return ListPlayersRequest(position=request.query.get("position", ""))


def encode_list_players_response(response: ListPlayersResponse) -> web.Response:
    if response.err:
        return encode_error(response.err, response.kind)
    return encode_response(200, {"players": [p.to_dict() for p in response.players]})


async def decode_get_player_request(request: web.Request) -> GetPlayerRequest:
    return GetPlayerRequest(id=_path_id(request))


def encode_get_player_response(response: GetPlayerResponse) -> web.Response:
    if response.err:
        return encode_error(response.err, response.kind)
    return encode_response(200, {"player": response.player.to_dict()})


async def decode_create_player_request(request: web.Request) -> SavePlayerRequest:
    player = await _body_player(request)
    if not player.is_new():
        raise BadRequestError()
    return SavePlayerRequest(player=player)


async def decode_update_player_request(request: web.Request) -> SavePlayerRequest:
    player_id = _path_id(request)
    player = await _body_player(request)
    if player.id != player_id:
        raise BadRequestError()
    return SavePlayerRequest(player=player)


def encode_save_player_response(response: SavePlayerResponse) -> web.Response:
    if response.err:
        return encode_error(response.err, response.kind)
    body = {"player": response.player.to_dict()}
    if response.created:
        body["created"] = True
    return encode_response(201 if response.created else 200, body)


async def decode_delete_player_request(request: web.Request) -> DeletePlayerRequest:
    return DeletePlayerRequest(id=_path_id(request))


def encode_delete_player_response(response: DeletePlayerResponse) -> web.Response:
    if response.err:
        return encode_error(response.err, response.kind)
    return encode_response(204, None)


def make_handler(endpoint, decode: Decoder, encode: Encoder, logger: Any):
    """Bind an endpoint to its request decoder and response encoder."""

    async def handler(request: web.Request) -> web.Response:
        try:
            endpoint_request = await decode(request)
        except BadRequestError as e:
            logger.warning("failed to decode request", path=request.path, err=str(e))
            return encode_error(str(e), e.kind)

        try:
            endpoint_response = await endpoint(endpoint_request)
        except Exception as e:
            logger.error("endpoint failed", path=request.path, err=str(e))
            return encode_error(str(e), ErrorKind.of(e))

        return encode(endpoint_response)

    return handler


def create_app(endpoints: Endpoints, logger: Any = None) -> web.Application:
    """Create the aiohttp application serving the /v1/players routes."""
    logger = (logger if logger is not None else structlog.get_logger()).bind(tag="http")

    app = web.Application(middlewares=[access_control])
    app.router.add_get(
        "/v1/players",
        make_handler(endpoints.list_players, decode_list_players_request, encode_list_players_response, logger),
    )
    app.router.add_get(
        "/v1/players/{id}",
        make_handler(endpoints.get_player, decode_get_player_request, encode_get_player_response, logger),
    )
    app.router.add_post(
        "/v1/players",
        make_handler(endpoints.save_player, decode_create_player_request, encode_save_player_response, logger),
    )
    app.router.add_put(
        "/v1/players/{id}",
        make_handler(endpoints.save_player, decode_update_player_request, encode_save_player_response, logger),
    )
    app.router.add_delete(
        "/v1/players/{id}",
        make_handler(endpoints.delete_player, decode_delete_player_request, encode_delete_player_response, logger),
    )
    return app
