"""Types shared across the games API and the in-memory store."""

import re
import threading
from collections.abc import Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from gamesapi.validators import validate_rating

_U64_MAX = 2**64 - 1

_DATETIME_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
)
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


class Genre(Enum):
    """Game genre, serialized in screaming snake case."""

    ROLE_PLAYING = "ROLE_PLAYING"
    STRATEGY = "STRATEGY"
    SHOOTER = "SHOOTER"


def _format_datetime(value):
    value = value.replace(tzinfo=None)
    if value.microsecond == 0:
        timespec = "seconds"
    elif value.microsecond % 1000 == 0:
        timespec = "milliseconds"
    else:
        timespec = "microseconds"
    return value.isoformat(timespec=timespec)


def _parse_datetime(text):
    if not isinstance(text, str):
        raise ValueError(f"invalid type: {text!r}, expected a datetime string")
    match = _DATETIME_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid datetime: {text!r}")
    year, month, day, hour, minute, second, fraction = match.groups()
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    try:
        return datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second), microsecond,
        )
    except ValueError as exc:
        raise ValueError(f"invalid datetime: {text!r}") from exc


def _parse_genre(value):
    try:
        return Genre(value)
    except ValueError:
        expected = ", ".join(f"`{genre.value}`" for genre in Genre)
        raise ValueError(
            f"unknown variant `{value}`, expected one of {expected}"
        ) from None


@dataclass
class Game:
    """A single game entry."""

    id: int
    title: str
    rating: int
    genre: Genre
    description: Optional[str]
    release_date: datetime

    _REQUIRED = ("id", "title", "rating", "genre", "releaseDate")

    def to_dict(self):
        """Return the JSON-ready mapping of this game with camel-case keys."""
        return {
            "id": self.id,
            "title": self.title,
            "rating": validate_rating(self.rating),
            "genre": self.genre.value,
            "description": self.description,
            "releaseDate": _format_datetime(self.release_date),
        }

    @classmethod
    def from_dict(cls, data):
        """Build a game from a decoded JSON object, raising ``ValueError`` on bad data."""
        if not isinstance(data, Mapping):
            raise ValueError(f"invalid type: {data!r}, expected struct Game")
        for name in cls._REQUIRED:
            if name not in data:
                raise ValueError(f"missing field `{name}`")

        game_id = data["id"]
        if isinstance(game_id, bool) or not isinstance(game_id, int):
            raise ValueError(f"invalid type: {game_id!r}, expected u64")
        if not 0 <= game_id <= _U64_MAX:
            raise ValueError(f"invalid value: integer `{game_id}`, expected u64")

        title = data["title"]
        if not isinstance(title, str):
            raise ValueError(f"invalid type: {title!r}, expected a string")

        description = data.get("description")
        if description is not None and not isinstance(description, str):
            raise ValueError(f"invalid type: {description!r}, expected a string")

        return cls(
            id=game_id,
            title=title,
            rating=validate_rating(data["rating"]),
            genre=_parse_genre(data["genre"]),
            description=description,
            release_date=_parse_datetime(data["releaseDate"]),
        )


def _parse_unsigned(name, raw):
    if not isinstance(raw, str) or _UNSIGNED_RE.fullmatch(raw) is None:
        raise ValueError(f"invalid digit found in {name}: {raw!r}")
    value = int(raw)
    if value > _U64_MAX:
        raise ValueError(f"number too large to fit in target type: {name}")
    return value


@dataclass(frozen=True)
class ListOptions:
    """Optional pagination parameters for listing games."""

    offset: Optional[int] = None
    limit: Optional[int] = None

    @classmethod
    def from_query(cls, query):
        """Parse ``offset`` and ``limit`` from a mapping of query-string values."""
        values = {}
        for name in ("offset", "limit"):
            raw = query.get(name)
            values[name] = None if raw is None else _parse_unsigned(name, raw)
        return cls(**values)


class GameStore:
    """In-memory list of games guarded by a lock."""

    def __init__(self, games=()):
        self._games = list(games)
        self._lock = threading.Lock()

    @contextmanager
    def locked(self):
        """Hold the lock and yield the underlying list of games."""
        with self._lock:
            yield self._games


def example_db():
    """Return a store filled with sample games."""
    return GameStore(
        [
            Game(
                id=1,
                title="Dark Souls",
                rating=91,
                genre=Genre.ROLE_PLAYING,
                description=(
                    "Takes place in the fictional kingdom of Lordran, where players "
                    "assume the role of a cursed undead character who begins a "
                    "pilgrimage to discover the fate of their kind."
                ),
                release_date=datetime(2011, 9, 22),
            ),
            Game(
                id=2,
                title="Dark Souls 2",
                rating=87,
                genre=Genre.ROLE_PLAYING,
                description=None,
                release_date=datetime(2014, 3, 11),
            ),
            Game(
                id=3,
                title="Dark Souls 3",
                rating=89,
                genre=Genre.ROLE_PLAYING,
                description=(
                    "The latest chapter in the series with its trademark sword and "
                    "sorcery combat and rewarding action RPG gameplay."
                ),
                release_date=datetime(2016, 3, 24),
            ),
        ]
    )