import json
from datetime import datetime

import pytest

from gamesapi.schema import Game, GameStore, Genre, ListOptions, example_db


def _test_game():
    return Game(
        id=1,
        title="Test",
        rating=90,
        genre=Genre.SHOOTER,
        description=None,
        release_date=datetime(2019, 11, 12),
    )


def test_game_serialize_correctly():
    data = _test_game().to_dict()
    assert data == {
        "id": 1,
        "title": "Test",
        "rating": 90,
        "genre": "SHOOTER",
        "description": None,
        "releaseDate": "2019-11-12T00:00:00",
    }
    assert list(data) == ["id", "title", "rating", "genre", "description", "releaseDate"]


def test_game_round_trip():
    game = _test_game()
    assert Game.from_dict(game.to_dict()) == game


def test_game_deserialize_correctly():
    data = (
        '{"id":3,"title":"Another game","rating":65,"genre":"STRATEGY",'
        '"description":null,"releaseDate":"2016-03-11T00:00:00"}'
    )
    game = Game.from_dict(json.loads(data))
    assert game == Game(
        id=3,
        title="Another game",
        rating=65,
        genre=Genre.STRATEGY,
        description=None,
        release_date=datetime(2016, 3, 11),
    )


def test_game_error_when_wrong_rating_passed():
    data = (
        '{"id":3,"title":"Another game","rating":120,"genre":"STRATEGY",'
        '"description":null,"releaseDate":"2016-03-11T00:00:00"}'
    )
    with pytest.raises(ValueError, match="rating must be a number between 0 and 100"):
        Game.from_dict(json.loads(data))


def test_serializing_invalid_rating_fails():
    game = _test_game()
    game.rating = 120
    with pytest.raises(ValueError):
        game.to_dict()


@pytest.mark.parametrize(
    "genre, text",
    [
        (Genre.SHOOTER, "SHOOTER"),
        (Genre.ROLE_PLAYING, "ROLE_PLAYING"),
        (Genre.STRATEGY, "STRATEGY"),
    ],
)
def test_genre_serialize_correctly(genre, text):
    game = _test_game()
    game.genre = genre
    assert game.to_dict()["genre"] == text


@pytest.mark.parametrize(
    "text, genre",
    [("SHOOTER", Genre.SHOOTER), ("ROLE_PLAYING", Genre.ROLE_PLAYING)],
)
def test_genre_deserialize_correctly(text, genre):
    data = _test_game().to_dict()
    data["genre"] = text
    assert Game.from_dict(data).genre is genre


def test_genre_error_when_unknown_variant():
    data = _test_game().to_dict()
    data["genre"] = "SPORT"
    with pytest.raises(ValueError, match="unknown variant `SPORT`"):
        Game.from_dict(data)


def test_missing_fields_are_rejected():
    with pytest.raises(ValueError, match="missing field `title`"):
        Game.from_dict({"id": 4})


def test_missing_description_defaults_to_none():
    data = _test_game().to_dict()
    del data["description"]
    assert Game.from_dict(data).description is None


@pytest.mark.parametrize("bad_id", [-1, "1", True, 2**64])
def test_invalid_ids_are_rejected(bad_id):
    data = _test_game().to_dict()
    data["id"] = bad_id
    with pytest.raises(ValueError):
        Game.from_dict(data)


@pytest.mark.parametrize("bad_date", ["2016-03-11", "2016-03-11 00:00:00", "2016-13-11T00:00:00", 5])
def test_invalid_release_dates_are_rejected(bad_date):
    data = _test_game().to_dict()
    data["releaseDate"] = bad_date
    with pytest.raises(ValueError):
        Game.from_dict(data)


def test_fractional_release_date_round_trip():
    data = _test_game().to_dict()
    data["releaseDate"] = "2016-03-11T00:00:00.5"
    game = Game.from_dict(data)
    assert game.release_date == datetime(2016, 3, 11, 0, 0, 0, 500000)
    assert Game.from_dict(game.to_dict()) == game


def test_non_object_is_rejected():
    with pytest.raises(ValueError):
        Game.from_dict([1, 2, 3])


def test_list_options_from_query():
    assert ListOptions.from_query({"offset": "1", "limit": "5"}) == ListOptions(1, 5)


def test_list_options_defaults_to_none():
    assert ListOptions.from_query({}) == ListOptions(None, None)


@pytest.mark.parametrize("query", [{"offset": "a"}, {"limit": "b"}, {"offset": "-1"}, {"limit": ""}])
def test_list_options_rejects_invalid_numbers(query):
    with pytest.raises(ValueError):
        ListOptions.from_query(query)


def test_example_db_contents():
    with example_db().locked() as games:
        assert [game.title for game in games] == ["Dark Souls", "Dark Souls 2", "Dark Souls 3"]
        assert [game.id for game in games] == [1, 2, 3]
        assert games[1].description is None


def test_store_changes_persist_between_locks():
    store = GameStore([_test_game()])
    with store.locked() as games:
        games.clear()
    with store.locked() as games:
        assert games == []