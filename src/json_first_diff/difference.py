"""Difference result type and its human-readable rendering.

A ``Difference`` is the normal output of a comparison that found a mismatch.
Exactly one is produced per comparison: the first mismatch encountered.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_first_diff.path import JsonPath

__all__ = ["Difference", "DifferenceKind", "render"]


class DifferenceKind(StrEnum):
    """Closed set of mismatch categories.

    - ACTUAL_IS_NULL           : actual document is absent
    - EXPECTED_IS_NULL         : expected document is absent
    - OTHER_TYPE               : nodes (or scalar kinds) differ in kind
    - OTHER_NAME               : two property nodes have different names
    - OTHER_VALUE              : same-kind scalars are not equivalent
    - DIFFERENT_LENGTH         : arrays differ in element count
    - ACTUAL_MISSES_PROPERTY   : expected key absent from actual
    - EXPECTED_MISSES_PROPERTY : actual key absent from expected
    - ACTUAL_MISSES_ELEMENT    : expected array element found nowhere in actual
    - WRONG_ORDER              : expected array element present, but out of order
    """

    ACTUAL_IS_NULL = auto()
    EXPECTED_IS_NULL = auto()
    OTHER_TYPE = auto()
    OTHER_NAME = auto()
    OTHER_VALUE = auto()
    DIFFERENT_LENGTH = auto()
    ACTUAL_MISSES_PROPERTY = auto()
    EXPECTED_MISSES_PROPERTY = auto()
    ACTUAL_MISSES_ELEMENT = auto()
    WRONG_ORDER = auto()


@dataclass(frozen=True, slots=True)
class Difference:
    """The first mismatch found between two document trees.

    Attributes:
        kind:     Mismatch category.
        path:     Where the mismatch was found.
        actual:   Descriptor of the actual side (kind phrase or element
                  count); only set for OTHER_TYPE and DIFFERENT_LENGTH.
        expected: Descriptor of the expected side, same rules as ``actual``.
    """

    kind: DifferenceKind
    path: JsonPath
    actual: Any = None
    expected: Any = None

    def __str__(self) -> str:
        return render(self)


def render(difference: Difference) -> str:
    """Render a difference as the tail of an assertion message.

    Raises:
        ValueError: If ``difference.kind`` is not a ``DifferenceKind``.
    """
    path = difference.path
    match difference.kind:
        case DifferenceKind.ACTUAL_IS_NULL:
            return "is null"
        case DifferenceKind.EXPECTED_IS_NULL:
            return "is not null"
        case DifferenceKind.OTHER_TYPE:
            return f"has {difference.actual} instead of {difference.expected} at {path}"
        case DifferenceKind.OTHER_NAME:
            return f"has a different name at {path}"
        case DifferenceKind.OTHER_VALUE:
            return f"has a different value at {path}"
        case DifferenceKind.DIFFERENT_LENGTH:
            return (
                f"has {difference.actual} elements instead of "
                f"{difference.expected} at {path}"
            )
        case DifferenceKind.ACTUAL_MISSES_PROPERTY:
            return f"misses property {path}"
        case DifferenceKind.EXPECTED_MISSES_PROPERTY:
            return f"has extra property {path}"
        case DifferenceKind.ACTUAL_MISSES_ELEMENT:
            return f"misses expected element {path}"
        case DifferenceKind.WRONG_ORDER:
            return f"has expected element {path} in the wrong order"
        case _:
            msg = f"Unknown difference kind {difference.kind!r}"
            raise ValueError(msg)
