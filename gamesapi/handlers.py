"""Request handlers for the games endpoints."""

import json
import logging
from http import HTTPStatus

from werkzeug.wrappers import Response

_log = logging.getLogger(__name__)


def _json_response(payload):
    body = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return Response(body, status=HTTPStatus.OK, mimetype="application/json")


def _status_response(status):
    response = Response(b"", status=int(status))
    del response.headers["Content-Type"]
    return response


def list_games(options, db):
    """`GET /games`: return the games as a JSON array, honouring offset and limit."""
    _log.debug("list all games")
    start = options.offset or 0
    stop = None if options.limit is None else start + options.limit
    with db.locked() as games:
        selected = list(games[start:stop])
    try:
        payload = [game.to_dict() for game in selected]
    except ValueError as exc:
        _log.error("reply::json error: %s", exc)
        return _status_response(HTTPStatus.INTERNAL_SERVER_ERROR)
    return _json_response(payload)


def create_game(new_game, db):
    """`POST /games`: add a game unless one with the same id exists."""
    _log.debug("create new game: %r", new_game)
    with db.locked() as games:
        if any(game.id == new_game.id for game in games):
            _log.debug("game of given id already exists: %s", new_game.id)
            return _status_response(HTTPStatus.BAD_REQUEST)
        games.append(new_game)
    return _status_response(HTTPStatus.CREATED)


def update_game(game_id, updated_game, db):
    """`PUT /games/:id`: replace the first game with the given id."""
    _log.debug("update existing game: id=%s, game=%r", game_id, updated_game)
    with db.locked() as games:
        index = next(
            (position for position, game in enumerate(games) if game.id == game_id),
            None,
        )
        if index is None:
            _log.debug("game of given id not found")
            return _status_response(HTTPStatus.NOT_FOUND)
        games[index] = updated_game
    return _status_response(HTTPStatus.OK)


def delete_game(game_id, db):
    """`DELETE /games/:id`: remove every game with the given id."""
    _log.debug("delete game: id=%s", game_id)
    with db.locked() as games:
        kept = [game for game in games if game.id != game_id]
        deleted = len(kept) != len(games)
        games[:] = kept
    if deleted:
        return _status_response(HTTPStatus.NO_CONTENT)
    _log.debug("game of given id not found")
    return _status_response(HTTPStatus.NOT_FOUND)