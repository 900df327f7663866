"""WSGI application routing the RESTful games endpoints.

- ``GET /games``: return JSON list of games
- ``POST /games``: create a new game entry
- ``PUT /games/:id``: update a specific game
- ``DELETE /games/:id``: delete a specific game
"""

import json

from werkzeug.exceptions import (
    BadRequest,
    HTTPException,
    LengthRequired,
    MethodNotAllowed,
    RequestEntityTooLarge,
    UnsupportedMediaType,
)
from werkzeug.routing import BaseConverter, Map, Rule, ValidationError
from werkzeug.wrappers import Request, Response

from gamesapi import handlers
from gamesapi.schema import Game, ListOptions

MAX_BODY_LENGTH = 1024 * 32

_U64_MAX = 2**64 - 1

_ENDPOINT_METHODS = {
    "list": "GET",
    "create": "POST",
    "update": "PUT",
    "delete": "DELETE",
}


class _U64Converter(BaseConverter):
    """Path segment holding an unsigned 64-bit integer."""

    regex = r"[0-9]+"

    def to_python(self, value):
        number = int(value)
        if number > _U64_MAX:
            raise ValidationError()
        return number

    def to_url(self, value):
        return str(value)


def _unique_object(pairs):
    result = {}
    for key, value in pairs:
        if key in result:
            raise ValueError(f"duplicate field `{key}`")
        result[key] = value
    return result


def _reject_constant(name):
    raise ValueError(f"invalid number: {name}")


def _is_json_mimetype(mimetype):
    if mimetype == "application/json":
        return True
    return mimetype.startswith("application/") and mimetype.endswith("+json")


def list_options(request):
    """Read optional ``offset`` and ``limit`` pagination parameters from the query."""
    args = request.args
    for name in ("offset", "limit"):
        if len(args.getlist(name)) > 1:
            raise BadRequest("Invalid query string")
    try:
        return ListOptions.from_query(args)
    except ValueError:
        raise BadRequest("Invalid query string") from None


def json_body(request):
    """Decode a game from a JSON body of at most 32 KiB."""
    length = request.content_length
    if length is None:
        raise LengthRequired("A content-length header is required")
    if length > MAX_BODY_LENGTH:
        raise RequestEntityTooLarge("Payload too large")
    mimetype = request.mimetype
    if mimetype and not _is_json_mimetype(mimetype):
        raise UnsupportedMediaType("The request's content-type is not supported")
    raw = request.get_data(cache=False)
    try:
        data = json.loads(
            raw,
            object_pairs_hook=_unique_object,
            parse_constant=_reject_constant,
        )
        return Game.from_dict(data)
    except ValueError as exc:
        raise BadRequest(f"Request body deserialize error: {exc}") from None


def _rejection_response(exc):
    return Response(exc.description or "", status=exc.code, mimetype="text/plain")


class GamesApi:
    """WSGI application serving the games endpoints backed by ``db``."""

    def __init__(self, db):
        self.db = db
        self._url_map = Map(
            [
                Rule("/games", endpoint="list", methods=["GET"]),
                Rule("/games", endpoint="create", methods=["POST"]),
                Rule("/games/<u64:game_id>", endpoint="update", methods=["PUT"]),
                Rule("/games/<u64:game_id>", endpoint="delete", methods=["DELETE"]),
            ],
            converters={"u64": _U64Converter},
            strict_slashes=False,
            merge_slashes=False,
        )

    def _dispatch(self, request):
        adapter = self._url_map.bind_to_environ(request.environ)
        endpoint, args = adapter.match()
        if request.method != _ENDPOINT_METHODS[endpoint]:
            raise MethodNotAllowed(description="HTTP method not allowed")
        if endpoint == "list":
            return handlers.list_games(list_options(request), self.db)
        if endpoint == "create":
            return handlers.create_game(json_body(request), self.db)
        if endpoint == "update":
            return handlers.update_game(args["game_id"], json_body(request), self.db)
        return handlers.delete_game(args["game_id"], self.db)

    def __call__(self, environ, start_response):
        request = Request(environ)
        try:
            response = self._dispatch(request)
        except HTTPException as exc:
            response = _rejection_response(exc)
        return response(environ, start_response)


def games_routes(db):
    """Return the WSGI application combining all games routes."""
    return GamesApi(db)