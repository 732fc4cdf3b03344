"""Testes dos helpers de navegação em documentos."""

from __future__ import annotations

import copy

import pytest

from chargebacks.document import (
    ABSENT,
    _Absent,
    detach,
    is_absent,
    json_type_name,
    parse_path,
    resolve_path,
)


class TestAbsentMarker:
    def test_absent_is_singleton_and_falsy(self) -> None:
        assert _Absent() is ABSENT
        assert not ABSENT
        assert repr(ABSENT) == "ABSENT"
        assert is_absent(ABSENT)
        assert not is_absent(None)

    def test_copy_preserves_identity(self) -> None:
        assert copy.copy(ABSENT) is ABSENT
        assert copy.deepcopy({"value": ABSENT})["value"] is ABSENT


class TestParsePath:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("data.object.charge", ("data", "object", "charge")),
            ("items[0].id", ("items", 0, "id")),
            ("matrix[0][1]", ("matrix", 0, 1)),
            ("notificationItems[0].NotificationRequestItem", ("notificationItems", 0, "NotificationRequestItem")),
            ("event-type", ("event-type",)),
        ],
    )
    def test_valid_paths(self, path: str, expected: tuple) -> None:
        assert parse_path(path) == expected

    @pytest.mark.parametrize("path", ["", "   ", "a.", ".a", "a..b", "a[-1]", "a[0]x", "a[x]", "0abc"])
    def test_invalid_paths_raise(self, path: str) -> None:
        with pytest.raises(ValueError):
            parse_path(path)


class TestResolvePath:
    def test_resolves_nested_keys_and_indexes(self) -> None:
        document = {"data": {"items": [{"id": "a"}, {"id": "b"}]}}
        assert resolve_path(document, ("data", "items", 1, "id")) == "b"

    def test_missing_key_returns_absent(self) -> None:
        assert resolve_path({"data": {}}, ("data", "object", "charge")) is ABSENT

    def test_wrong_typed_intermediate_returns_absent(self) -> None:
        assert resolve_path({"data": "texto"}, ("data", "object")) is ABSENT
        assert resolve_path({"data": {"a": 1}}, ("data", 0)) is ABSENT
        assert resolve_path({"data": [1, 2]}, ("data", "a")) is ABSENT
        assert resolve_path({"data": None}, ("data", "a")) is ABSENT

    def test_out_of_range_index_returns_absent(self) -> None:
        assert resolve_path({"items": []}, ("items", 0)) is ABSENT

    def test_null_leaf_is_present(self) -> None:
        assert resolve_path({"currency": None}, ("currency",)) is None

    def test_non_container_root(self) -> None:
        assert resolve_path("texto", ("a",)) is ABSENT
        assert resolve_path(None, ("a",)) is ABSENT


def test_detach_copies_containers_only() -> None:
    nested = {"a": [1, 2]}
    copied = detach(nested)
    copied["a"].append(3)
    assert nested == {"a": [1, 2]}
    assert detach("texto") == "texto"
    assert detach(ABSENT) is ABSENT


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "null"),
        (True, "boolean"),
        (1, "number"),
        (1.5, "number"),
        ("x", "string"),
        ([], "array"),
        ({}, "object"),
    ],
)
def test_json_type_name(value: object, expected: str) -> None:
    assert json_type_name(value) == expected
