"""ScalarComparer: default scalar equivalence with user override rules.

Overrides are consulted first, in registration order; the first one whose
predicate accepts the pair decides.  When none applies, the default rules
below decide:

- FLOAT: numerically equal, or both NaN.
- BYTES: byte-for-byte equal.
- everything else: ``==``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from json_first_diff.tree.nodes import NodeKind, ScalarNode

__all__ = ["ScalarComparer", "ScalarOverride"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScalarOverride:
    """A custom comparison applied to matching scalar pairs.

    Attributes:
        predicate: Either a type (the override applies when both raw values
            are instances of it) or a callable ``(actual, expected) -> bool``.
        compare:   Callable ``(actual, expected) -> bool`` returning whether
            the raw values are equivalent.
    """

    predicate: type | Callable[[Any, Any], bool]
    compare: Callable[[Any, Any], bool]

    def __post_init__(self) -> None:
        if not callable(self.predicate):
            msg = f"predicate must be a type or callable, got {self.predicate!r}"
            raise TypeError(msg)
        if not callable(self.compare):
            msg = f"compare must be callable, got {self.compare!r}"
            raise TypeError(msg)

    def applies_to(self, actual: Any, expected: Any) -> bool:
        if isinstance(self.predicate, type):
            return isinstance(actual, self.predicate) and isinstance(
                expected, self.predicate
            )
        return bool(self.predicate(actual, expected))


class ScalarComparer:
    """Decides equivalence of two same-kind scalar nodes.

    Satisfies the ``ScalarEquivalence`` Protocol structurally.  Instances are
    read-only after construction and safe to share across threads.

    Example::

        comparer = ScalarComparer(
            [ScalarOverride(float, lambda a, e: abs(a - e) < 0.01)]
        )
        comparer.are_equivalent(
            ScalarNode(NodeKind.FLOAT, 1.001), ScalarNode(NodeKind.FLOAT, 1.0)
        )  # True
    """

    def __init__(self, overrides: Sequence[ScalarOverride] = ()) -> None:
        self._overrides: tuple[ScalarOverride, ...] = tuple(overrides)

    @property
    def overrides(self) -> tuple[ScalarOverride, ...]:
        return self._overrides

    def are_equivalent(self, actual: ScalarNode, expected: ScalarNode) -> bool:
        """Return whether two same-kind scalar nodes are equivalent.

        Exceptions raised by an override propagate unchanged.
        """
        for index, override in enumerate(self._overrides):
            if override.applies_to(actual.value, expected.value):
                logger.debug(
                    "Scalar override #%d decides %r vs %r",
                    index,
                    actual.value,
                    expected.value,
                )
                return bool(override.compare(actual.value, expected.value))

        return self._default_equivalence(actual, expected)

    @staticmethod
    def _default_equivalence(actual: ScalarNode, expected: ScalarNode) -> bool:
        a, e = actual.value, expected.value
        if actual.kind == NodeKind.FLOAT:
            if a == e:
                return True
            try:
                return math.isnan(a) and math.isnan(e)
            except TypeError:
                return False
        if actual.kind == NodeKind.BYTES:
            return bytes(a) == bytes(e)
        return bool(a == e)
