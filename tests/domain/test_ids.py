"""Tests for identity value types."""

from __future__ import annotations

import pytest

from trophic.domain.errors import InvalidIdentity
from trophic.domain.ids import ID_TYPES, EntityID, FrogID, SlugID, SnakeID, parse_id
from trophic.domain.types import EntityKind


class TestEntityID:
    def test_zero_is_default(self) -> None:
        assert SnakeID().value == 0
        assert SlugID() == SlugID(0)

    def test_equality_requires_same_type(self) -> None:
        assert SnakeID(1) == SnakeID(1)
        assert SnakeID(1) != SlugID(1)
        assert FrogID(1) != SnakeID(1)

    def test_hashable(self) -> None:
        ids = {SnakeID(1), SnakeID(1), SlugID(1)}
        assert len(ids) == 2

    def test_frozen(self) -> None:
        sid = SnakeID(4)
        with pytest.raises(AttributeError):
            sid.value = 5  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(FrogID(3)) == "frog:3"

    def test_kind(self) -> None:
        assert SnakeID.kind is EntityKind.SNAKE
        assert SlugID.kind is EntityKind.SLUG
        assert FrogID.kind is EntityKind.FROG

    def test_base_class_has_no_kind(self) -> None:
        assert EntityID.kind is None
        assert EntityID(0) != SnakeID(0)

    @pytest.mark.parametrize("value", [-1, "3", 1.5, True, None])
    def test_rejects_malformed(self, value: object) -> None:
        with pytest.raises(InvalidIdentity) as exc_info:
            SnakeID(value)  # type: ignore[arg-type]
        assert exc_info.value.code == "INVALID"

    def test_id_types_cover_every_kind(self) -> None:
        assert set(ID_TYPES) == set(EntityKind)
        for kind, id_type in ID_TYPES.items():
            assert id_type.kind is kind


class TestParseId:
    def test_plain_integer(self) -> None:
        assert parse_id("snake", "7") == SnakeID(7)

    def test_int_input(self) -> None:
        assert parse_id(EntityKind.SLUG, 2) == SlugID(2)

    def test_prefixed_form(self) -> None:
        assert parse_id("frog", "frog:9") == FrogID(9)

    def test_wrong_prefix_is_malformed(self) -> None:
        with pytest.raises(InvalidIdentity):
            parse_id("frog", "snake:9")

    def test_unknown_kind(self) -> None:
        with pytest.raises(InvalidIdentity, match="Unknown entity kind"):
            parse_id("newt", "1")

    def test_negative(self) -> None:
        with pytest.raises(InvalidIdentity, match="non-negative"):
            parse_id("slug", "-4")

    def test_not_a_number(self) -> None:
        with pytest.raises(InvalidIdentity, match="Malformed"):
            parse_id("slug", "abc")
