# gamesapi

A small RESTful JSON API that keeps a catalogue of games in memory and
serves it as a WSGI application built on Werkzeug.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
gamesapi
```

By default the server listens on `127.0.0.1:8080`. Both can be changed:

```
gamesapi --host 0.0.0.0 --port 9000
```

The server starts with a small example catalogue already loaded and logs
one line per request. The log level is read from the `GAMESAPI_LOG`
environment variable (for example `info` or `warning`) and defaults to
`debug`; an unknown level name is reported as a usage error.

## Endpoints

| Method   | Path           | Description                                   |
|----------|----------------|-----------------------------------------------|
| `GET`    | `/games`       | List games as a JSON array                    |
| `POST`   | `/games`       | Add a game from a JSON body                   |
| `PUT`    | `/games/<id>`  | Replace the game with the given id            |
| `DELETE` | `/games/<id>`  | Remove every game with the given id           |

### Listing and pagination

`GET /games` accepts the optional query parameters `offset` and `limit`:

```
GET /games?offset=1&limit=5
```

An offset past the end gives an empty array. Parameters that are not
non-negative integers, or that are given more than once, are answered with
`400 Bad Request`.

### The game document

```json
{
  "id": 3,
  "title": "Another game",
  "rating": 65,
  "genre": "STRATEGY",
  "description": null,
  "releaseDate": "2016-03-11T00:00:00"
}
```

- `id` is a non-negative 64-bit integer.
- `rating` must be a whole number from 0 to 100.
- `genre` is one of `ROLE_PLAYING`, `STRATEGY` or `SHOOTER`.
- `description` may be `null` or left out.
- `releaseDate` is a date and time without a time zone, optionally with
  fractional seconds.

### Status codes

- `GET /games`: `200 OK` with the JSON array.
- `POST /games`: `201 Created`, or `400 Bad Request` if a game with that id
  already exists or the body is not a valid game.
- `PUT /games/<id>`: `200 OK`, `404 Not Found` if no game has that id, or
  `400 Bad Request` for an invalid body.
- `DELETE /games/<id>`: `204 No Content`, or `404 Not Found`.
- Bodies for `POST` and `PUT` need a `Content-Length` header (`411` without
  one); bodies larger than 32 KiB are refused with `413 Payload Too Large`;
  a content type other than JSON gets `415 Unsupported Media Type`.
- A known path with an unsupported method gets `405 Method Not Allowed`.

## Using it as a library

The application is an ordinary WSGI callable and can be mounted under any
WSGI server:

```python
from gamesapi.routes import games_routes
from gamesapi.schema import example_db

app = games_routes(example_db())
```

`gamesapi.schema` holds the data types: `Game` (with `to_dict()` and
`Game.from_dict()`, which raises `ValueError` on bad data), the `Genre`
enum, `ListOptions` (with `ListOptions.from_query()`), and `GameStore`, a
list of games guarded by a lock:

```python
from gamesapi.schema import GameStore

store = GameStore()
with store.locked() as games:
    games.append(game)
```

The handlers in `gamesapi.handlers` (`list_games`, `create_game`,
`update_game`, `delete_game`) work directly on a `GameStore` and return
Werkzeug `Response` objects, so they can be called without going through
routing. `gamesapi.validators.validate_rating` checks a single rating.

## Limitations

The catalogue lives only in memory: nothing is written to disk, every
change is lost when the process stops, and each start begins again from the
example catalogue. There is no authentication.