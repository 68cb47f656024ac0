"""Tests for the DocumentNode variants, NodeKind StrEnum and describe_kind.

Verifies:
- NodeKind values are lowercased member names (StrEnum property)
- SCALAR_KINDS excludes the container kinds
- Node variants are immutable and report their kind
- ObjectNode rejects duplicate property names
- describe_kind covers every kind and rejects unknown values
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_first_diff.tree.nodes import (
    SCALAR_KINDS,
    ArrayNode,
    NodeKind,
    ObjectNode,
    PropertyNode,
    ScalarNode,
    describe_kind,
)


class TestNodeKind:
    """Tests for the NodeKind StrEnum."""

    def test_has_eighteen_members(self) -> None:
        assert len(NodeKind) == 18

    def test_members_are_str_instances(self) -> None:
        for member in NodeKind:
            assert isinstance(member, str), f"{member!r} is not a str instance"

    def test_values_are_lowercased(self) -> None:
        assert NodeKind.OBJECT == "object"
        assert NodeKind.TIMESPAN == "timespan"
        assert NodeKind.GUID == "guid"

    def test_scalar_kinds_exclude_containers(self) -> None:
        assert NodeKind.OBJECT not in SCALAR_KINDS
        assert NodeKind.ARRAY not in SCALAR_KINDS
        assert NodeKind.PROPERTY not in SCALAR_KINDS
        assert NodeKind.CONSTRUCTOR not in SCALAR_KINDS
        assert len(SCALAR_KINDS) == 14


class TestDescribeKind:
    @pytest.mark.parametrize(
        ("kind", "phrase"),
        [
            (NodeKind.NONE, "type none"),
            (NodeKind.OBJECT, "an object"),
            (NodeKind.ARRAY, "an array"),
            (NodeKind.CONSTRUCTOR, "a constructor"),
            (NodeKind.PROPERTY, "a property"),
            (NodeKind.COMMENT, "a comment"),
            (NodeKind.INTEGER, "an integer"),
            (NodeKind.FLOAT, "a float"),
            (NodeKind.STRING, "a string"),
            (NodeKind.BOOLEAN, "a boolean"),
            (NodeKind.NULL, "type null"),
            (NodeKind.UNDEFINED, "type undefined"),
            (NodeKind.DATE, "a date"),
            (NodeKind.RAW, "type raw"),
            (NodeKind.BYTES, "type bytes"),
            (NodeKind.GUID, "a GUID"),
            (NodeKind.URI, "a URI"),
            (NodeKind.TIMESPAN, "a timespan"),
        ],
    )
    def test_phrase(self, kind: NodeKind, phrase: str) -> None:
        assert describe_kind(kind) == phrase

    def test_every_kind_is_described(self) -> None:
        for kind in NodeKind:
            assert describe_kind(kind)

    def test_unknown_kind_raises(self) -> None:
        with pytest.raises(ValueError, match="unknown node kind"):
            describe_kind("tuple")  # type: ignore[arg-type]


class TestScalarNode:
    def test_stores_kind_and_value(self) -> None:
        node = ScalarNode(NodeKind.INTEGER, 42)
        assert node.kind == NodeKind.INTEGER
        assert node.value == 42

    def test_kind_given_as_string_is_coerced(self) -> None:
        node = ScalarNode("string", "x")  # type: ignore[arg-type]
        assert node.kind is NodeKind.STRING

    def test_default_value_is_none(self) -> None:
        assert ScalarNode(NodeKind.NULL).value is None

    @pytest.mark.parametrize(
        "kind",
        [NodeKind.OBJECT, NodeKind.ARRAY, NodeKind.PROPERTY, NodeKind.CONSTRUCTOR],
    )
    def test_container_kind_rejected(self, kind: NodeKind) -> None:
        with pytest.raises(ValueError, match="not a scalar node kind"):
            ScalarNode(kind, None)

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValueError):
            ScalarNode("decimal", 1)  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        node = ScalarNode(NodeKind.STRING, "a")
        with pytest.raises(FrozenInstanceError):
            node.value = "b"  # type: ignore[misc]


class TestContainers:
    def test_array_kind_and_items(self) -> None:
        child = ScalarNode(NodeKind.INTEGER, 1)
        node = ArrayNode((child,))
        assert node.kind == NodeKind.ARRAY
        assert node.items[0] is child

    def test_array_items_list_is_stored_as_tuple(self) -> None:
        node = ArrayNode([ScalarNode(NodeKind.INTEGER, 1)])  # type: ignore[arg-type]
        assert isinstance(node.items, tuple)

    def test_empty_array_default(self) -> None:
        assert ArrayNode().items == ()

    def test_property_kind(self) -> None:
        prop = PropertyNode("a", ScalarNode(NodeKind.INTEGER, 1))
        assert prop.kind == NodeKind.PROPERTY
        assert prop.name == "a"

    def test_object_mapping_preserves_insertion_order(self) -> None:
        one = ScalarNode(NodeKind.INTEGER, 1)
        two = ScalarNode(NodeKind.INTEGER, 2)
        node = ObjectNode((PropertyNode("z", one), PropertyNode("a", two)))
        assert node.kind == NodeKind.OBJECT
        assert list(node.as_mapping()) == ["z", "a"]
        assert node.as_mapping()["a"] is two

    def test_object_duplicate_names_rejected(self) -> None:
        one = ScalarNode(NodeKind.INTEGER, 1)
        with pytest.raises(ValueError, match="Duplicate property name 'a'"):
            ObjectNode((PropertyNode("a", one), PropertyNode("a", one)))

    def test_object_is_frozen(self) -> None:
        node = ObjectNode()
        with pytest.raises(FrozenInstanceError):
            node.properties = ()  # type: ignore[misc]
