"""Tests for the core Player entity and domain errors."""

import pytest

from roster.core.entities import Player
from roster.core.errors import BadRequestError, ErrorKind, NotFoundError
from tests.factories import PlayerFactory


class TestPlayer:
    """Test the Player entity."""

    def test_str_includes_all_fields(self):
        player = PlayerFactory.create(id=1)

        assert str(player) == (
            "[1] Blake Bortles (QB) -- #5, 6'5\", 236lb, 25yo, 4exp -- Central Florida"
        )

    @pytest.mark.parametrize("player_id, expected", [(-1, True), (0, True), (1, False)])
    def test_is_new(self, player_id, expected):
        assert Player(id=player_id).is_new() is expected

    def test_to_dict_has_every_column(self):
        data = PlayerFactory.create(id=3).to_dict()

        assert data == {
            "id": 3,
            "name": "Blake Bortles",
            "number": "5",
            "position": "QB",
            "height": "6'5\"",
            "weight": "236",
            "age": "25",
            "experience": 4,
            "college": "Central Florida",
        }

    def test_from_dict_ignores_unknown_and_defaults_missing(self):
        player = Player.from_dict({"name": "Jalen Ramsey", "number": "20", "team": "JAX"})

        assert player == Player(name="Jalen Ramsey", number="20")
        assert player.is_new()

    def test_from_dict_treats_null_as_missing(self):
        player = Player.from_dict({"id": None, "name": "X", "college": None, "experience": None})

        assert player == Player(name="X")
        assert player.college == ""
        assert player.experience == 0

    def test_from_dict_reads_what_to_dict_writes(self):
        player = PlayerFactory.create(id=7)

        assert Player.from_dict(player.to_dict()) == player

    @pytest.mark.parametrize(
        "data",
        [
            [],
            "player",
            {"id": "1"},
            {"id": 1.5},
            {"id": True},
            {"experience": "4"},
            {"number": 5},
        ],
    )
    def test_from_dict_rejects_wrong_types(self, data):
        with pytest.raises(BadRequestError):
            Player.from_dict(data)


class TestErrors:
    """Test domain errors and their classification."""

    def test_messages(self):
        assert str(NotFoundError()) == "not found"
        assert str(BadRequestError()) == "bad request"

    def test_kind_of_roster_errors(self):
        assert ErrorKind.of(NotFoundError()) == ErrorKind.NOT_FOUND
        assert ErrorKind.of(BadRequestError()) == ErrorKind.BAD_REQUEST

    @pytest.mark.parametrize(
        "message, expected",
        [
            ("not found", ErrorKind.NOT_FOUND),
            ("bad request", ErrorKind.BAD_REQUEST),
            ("database error", ErrorKind.INTERNAL),
            ("Not Found", ErrorKind.INTERNAL),
        ],
    )
    def test_kind_from_message_is_literal(self, message, expected):
        assert ErrorKind.from_message(message) == expected

    def test_opaque_error_with_colliding_text_is_classified_by_text(self):
        assert ErrorKind.of(RuntimeError("not found")) == ErrorKind.NOT_FOUND
        assert ErrorKind.of(RuntimeError("connection refused")) == ErrorKind.INTERNAL
