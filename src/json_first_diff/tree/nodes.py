"""DocumentNode variants and NodeKind StrEnum for JSON-like document trees.

A document tree is a closed tagged union of four immutable node variants:

- ``ArrayNode``    : ordered sequence of child nodes
- ``ObjectNode``   : named members (``PropertyNode`` children)
- ``PropertyNode`` : a single named member with one value child
- ``ScalarNode``   : a tagged leaf value (see ``SCALAR_KINDS``)

Trees are never mutated by the differentiator; it only borrows them for the
duration of one comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any, TypeAlias

__all__ = [
    "SCALAR_KINDS",
    "ArrayNode",
    "DocumentNode",
    "NodeKind",
    "ObjectNode",
    "PropertyNode",
    "ScalarNode",
    "describe_kind",
]


class NodeKind(StrEnum):
    """Every kind a document node can report.

    StrEnum values are the lowercased member names.  ``CONSTRUCTOR`` has no
    node variant of its own; it exists so that documents produced by
    JavaScript-flavoured parsers can still be described.
    """

    NONE = auto()
    OBJECT = auto()
    ARRAY = auto()
    CONSTRUCTOR = auto()
    PROPERTY = auto()
    COMMENT = auto()
    INTEGER = auto()
    FLOAT = auto()
    STRING = auto()
    BOOLEAN = auto()
    NULL = auto()
    UNDEFINED = auto()
    DATE = auto()
    RAW = auto()
    BYTES = auto()
    GUID = auto()
    URI = auto()
    TIMESPAN = auto()


SCALAR_KINDS: frozenset[NodeKind] = frozenset(NodeKind) - {
    NodeKind.OBJECT,
    NodeKind.ARRAY,
    NodeKind.CONSTRUCTOR,
    NodeKind.PROPERTY,
}

_DESCRIPTIONS: dict[NodeKind, str] = {
    NodeKind.NONE: "type none",
    NodeKind.OBJECT: "an object",
    NodeKind.ARRAY: "an array",
    NodeKind.CONSTRUCTOR: "a constructor",
    NodeKind.PROPERTY: "a property",
    NodeKind.COMMENT: "a comment",
    NodeKind.INTEGER: "an integer",
    NodeKind.FLOAT: "a float",
    NodeKind.STRING: "a string",
    NodeKind.BOOLEAN: "a boolean",
    NodeKind.NULL: "type null",
    NodeKind.UNDEFINED: "type undefined",
    NodeKind.DATE: "a date",
    NodeKind.RAW: "type raw",
    NodeKind.BYTES: "type bytes",
    NodeKind.GUID: "a GUID",
    NodeKind.URI: "a URI",
    NodeKind.TIMESPAN: "a timespan",
}


def describe_kind(kind: NodeKind) -> str:
    """Return the article-qualified phrase used in type-mismatch messages.

    Raises:
        ValueError: If ``kind`` is not a ``NodeKind`` member.
    """
    try:
        return _DESCRIPTIONS[NodeKind(kind)]
    except (KeyError, ValueError):
        msg = f"Cannot describe unknown node kind {kind!r}"
        raise ValueError(msg) from None


@dataclass(frozen=True, slots=True)
class ArrayNode:
    """An ordered sequence of child nodes."""

    items: tuple[DocumentNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ARRAY


@dataclass(frozen=True, slots=True)
class PropertyNode:
    """A single named member of an object.

    Attributes:
        name:  The member name, exactly as it appears in the document.
        value: The member's value node.
    """

    name: str
    value: DocumentNode

    @property
    def kind(self) -> NodeKind:
        return NodeKind.PROPERTY


@dataclass(frozen=True, slots=True)
class ObjectNode:
    """A set of named members.

    Members keep their insertion order for iteration and rendering, but the
    differentiator compares them by name.  Names must be unique.
    """

    properties: tuple[PropertyNode, ...] = ()

    def __post_init__(self) -> None:
        properties = tuple(self.properties)
        seen: set[str] = set()
        for prop in properties:
            if prop.name in seen:
                msg = f"Duplicate property name {prop.name!r} in object node"
                raise ValueError(msg)
            seen.add(prop.name)
        object.__setattr__(self, "properties", properties)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.OBJECT

    def as_mapping(self) -> dict[str, DocumentNode]:
        """Return a name -> value mapping in insertion order."""
        return {prop.name: prop.value for prop in self.properties}


@dataclass(frozen=True, slots=True)
class ScalarNode:
    """A tagged leaf value.

    Attributes:
        kind:  One of ``SCALAR_KINDS``.
        value: The raw Python value handed to the scalar comparer.
    """

    kind: NodeKind
    value: Any = None

    def __post_init__(self) -> None:
        kind = NodeKind(self.kind)
        if kind not in SCALAR_KINDS:
            msg = f"{kind!r} is not a scalar node kind"
            raise ValueError(msg)
        object.__setattr__(self, "kind", kind)


DocumentNode: TypeAlias = ArrayNode | ObjectNode | PropertyNode | ScalarNode
