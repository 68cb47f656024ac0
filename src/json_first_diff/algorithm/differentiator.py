"""Differentiator: finds the first difference between two document trees.

Walks both trees in lock-step and returns as soon as one mismatch is found;
differences are never aggregated.

Architecture:
- Dispatch is driven by the *actual* node's variant.  The expected node is
  then checked against it, yielding OTHER_TYPE when the variants differ, so
  type-mismatch descriptors are always ``(actual kind, expected kind)``.
- OBJECT nodes: key presence is checked for the whole object before any
  value is compared (missing keys in expected order, then extra keys in
  actual order), then values are compared in expected order.
- ARRAY nodes: one of three strategies, chosen from the options:

  ====================  =======================  ==========================
  strict_array_order    ignore_extra_properties  strategy
  ====================  =======================  ==========================
  True                  False                    positional, equal lengths
  True                  True                     greedy ordered subsequence
  False                 either                   order-independent matching
  ====================  =======================  ==========================

- SCALAR nodes: same kind required, then the ``ScalarEquivalence``
  collaborator decides.  Its exceptions are not caught.
"""

from __future__ import annotations

import logging
from typing import assert_never

import numpy as np

from json_first_diff.algorithm.config import ComparisonOptions
from json_first_diff.algorithm.matcher import match_elements
from json_first_diff.difference import Difference, DifferenceKind
from json_first_diff.path import JsonPath
from json_first_diff.protocols import ScalarEquivalence
from json_first_diff.tree.nodes import (
    ArrayNode,
    DocumentNode,
    ObjectNode,
    PropertyNode,
    ScalarNode,
    describe_kind,
)

__all__ = ["Differentiator"]

logger = logging.getLogger(__name__)


class Differentiator:
    """Locates the first structural or value difference between two trees.

    Holds no per-comparison state: a single instance may be shared between
    threads and reused for any number of comparisons.

    Example::

        from json_first_diff import ComparisonOptions, Differentiator, TreeBuilder

        builder = TreeBuilder()
        diff = Differentiator(ComparisonOptions()).find_first_difference(
            builder.build({"a": 1}), builder.build({"a": 1, "b": 2})
        )
        str(diff)  # "misses property $.b"
    """

    def __init__(
        self,
        options: ComparisonOptions | None = None,
        scalar_comparer: ScalarEquivalence | None = None,
    ) -> None:
        """Initialise the differentiator.

        Args:
            options: Comparison switches and scalar overrides.  Defaults to
                ``ComparisonOptions()`` (strict everything).
            scalar_comparer: Replaces the comparer built by ``options``.
                Any object satisfying ``ScalarEquivalence`` is accepted.
        """
        self._options = options if options is not None else ComparisonOptions()
        self._scalars: ScalarEquivalence = (
            scalar_comparer
            if scalar_comparer is not None
            else self._options.scalar_comparer
        )

    @property
    def options(self) -> ComparisonOptions:
        return self._options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def find_first_difference(
        self,
        actual: DocumentNode | None,
        expected: DocumentNode | None,
    ) -> Difference | None:
        """Return the first difference between two trees, or None.

        ``None`` as an argument means the document is absent; a JSON null is
        a ``ScalarNode`` of kind NULL and is compared like any other scalar.

        Raises:
            TypeError: If a node in either tree is not a DocumentNode variant.
        """
        path = JsonPath.root()

        if actual is expected:
            return None

        if actual is None:
            return Difference(DifferenceKind.ACTUAL_IS_NULL, path)

        if expected is None:
            return Difference(DifferenceKind.EXPECTED_IS_NULL, path)

        difference = self._find(actual, expected, path)
        if difference is not None:
            logger.debug("First difference: %s (%s)", difference, difference.kind)
        return difference

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _find(
        self, actual: DocumentNode, expected: DocumentNode, path: JsonPath
    ) -> Difference | None:
        match actual:
            case ArrayNode():
                return self._find_array_difference(actual, expected, path)
            case ObjectNode():
                return self._find_object_difference(actual, expected, path)
            case PropertyNode():
                return self._find_property_difference(actual, expected, path)
            case ScalarNode():
                return self._find_scalar_difference(actual, expected, path)
            case _:
                _check_node(actual)
                assert_never(actual)

    def _matches(self, actual: DocumentNode, expected: DocumentNode) -> bool:
        return self._find(actual, expected, JsonPath.root()) is None

    @staticmethod
    def _other_type(
        actual: DocumentNode, expected: DocumentNode, path: JsonPath
    ) -> Difference:
        _check_node(expected)
        return Difference(
            DifferenceKind.OTHER_TYPE,
            path,
            describe_kind(actual.kind),
            describe_kind(expected.kind),
        )

    # ------------------------------------------------------------------
    # Arrays
    # ------------------------------------------------------------------

    def _find_array_difference(
        self, actual: ArrayNode, expected: DocumentNode, path: JsonPath
    ) -> Difference | None:
        if not isinstance(expected, ArrayNode):
            return self._other_type(actual, expected, path)

        if not self._options.strict_array_order:
            logger.debug("Array at %s compared %s", path, "unordered")
            return self._compare_unordered_items(actual, expected, path)
        if self._options.ignore_extra_properties:
            logger.debug("Array at %s compared %s", path, "subsequence")
            return self._compare_expected_items(actual, expected, path)
        logger.debug("Array at %s compared %s", path, "positional")
        return self._compare_items(actual, expected, path)

    def _compare_items(
        self, actual: ArrayNode, expected: ArrayNode, path: JsonPath
    ) -> Difference | None:
        """Positional comparison; lengths must match."""
        if len(actual.items) != len(expected.items):
            return Difference(
                DifferenceKind.DIFFERENT_LENGTH,
                path,
                len(actual.items),
                len(expected.items),
            )

        for index, (actual_item, expected_item) in enumerate(
            zip(actual.items, expected.items, strict=True)
        ):
            difference = self._find(actual_item, expected_item, path.with_index(index))
            if difference is not None:
                return difference
        return None

    def _compare_expected_items(
        self, actual: ArrayNode, expected: ArrayNode, path: JsonPath
    ) -> Difference | None:
        """Greedy ordered-subsequence comparison.

        Expected elements must appear in actual in the same relative order;
        actual elements in between are skipped.  The cursor only moves
        forward and a consumed actual element is never reused.
        """
        actual_items = actual.items
        cursor = 0

        for expected_index, expected_item in enumerate(expected.items):
            for actual_index in range(cursor, len(actual_items)):
                if self._matches(actual_items[actual_index], expected_item):
                    cursor = actual_index + 1
                    break
            else:
                item_path = path.with_index(expected_index)
                if cursor < len(actual_items):
                    return self._find(actual_items[cursor], expected_item, item_path)
                if any(self._matches(item, expected_item) for item in actual_items):
                    return Difference(DifferenceKind.WRONG_ORDER, item_path)
                return Difference(DifferenceKind.ACTUAL_MISSES_ELEMENT, item_path)

        return None

    def _compare_unordered_items(
        self, actual: ArrayNode, expected: ArrayNode, path: JsonPath
    ) -> Difference | None:
        """Order-independent comparison via maximum bipartite matching."""
        actual_items = actual.items
        expected_items = expected.items

        if not self._options.ignore_extra_properties and len(actual_items) != len(
            expected_items
        ):
            return Difference(
                DifferenceKind.DIFFERENT_LENGTH,
                path,
                len(actual_items),
                len(expected_items),
            )

        equivalent = np.zeros((len(expected_items), len(actual_items)), dtype=bool)
        for i, expected_item in enumerate(expected_items):
            for j, actual_item in enumerate(actual_items):
                equivalent[i, j] = self._matches(actual_item, expected_item)

        pairs = match_elements(equivalent)
        for expected_index, expected_item in enumerate(expected_items):
            pair = pairs.get(expected_index)
            if pair is not None and pair[1]:
                continue
            item_path = path.with_index(expected_index)
            if pair is not None:
                return self._find(actual_items[pair[0]], expected_item, item_path)
            return Difference(DifferenceKind.ACTUAL_MISSES_ELEMENT, item_path)

        return None

    # ------------------------------------------------------------------
    # Objects and properties
    # ------------------------------------------------------------------

    def _find_object_difference(
        self, actual: ObjectNode, expected: DocumentNode, path: JsonPath
    ) -> Difference | None:
        if not isinstance(expected, ObjectNode):
            return self._other_type(actual, expected, path)

        actual_members = actual.as_mapping()
        expected_members = expected.as_mapping()

        for name in expected_members:
            if name not in actual_members:
                return Difference(
                    DifferenceKind.ACTUAL_MISSES_PROPERTY, path.with_property(name)
                )

        if not self._options.ignore_extra_properties:
            for name in actual_members:
                if name not in expected_members:
                    return Difference(
                        DifferenceKind.EXPECTED_MISSES_PROPERTY,
                        path.with_property(name),
                    )

        for name, expected_value in expected_members.items():
            difference = self._find(
                actual_members[name], expected_value, path.with_property(name)
            )
            if difference is not None:
                return difference
        return None

    def _find_property_difference(
        self, actual: PropertyNode, expected: DocumentNode, path: JsonPath
    ) -> Difference | None:
        if not isinstance(expected, PropertyNode):
            return self._other_type(actual, expected, path)

        if actual.name != expected.name:
            return Difference(DifferenceKind.OTHER_NAME, path)

        return self._find(actual.value, expected.value, path)

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def _find_scalar_difference(
        self, actual: ScalarNode, expected: DocumentNode, path: JsonPath
    ) -> Difference | None:
        if not isinstance(expected, ScalarNode) or actual.kind != expected.kind:
            return self._other_type(actual, expected, path)

        if not self._scalars.are_equivalent(actual, expected):
            return Difference(DifferenceKind.OTHER_VALUE, path)
        return None


def _check_node(node: object) -> None:
    if not isinstance(node, (ArrayNode, ObjectNode, PropertyNode, ScalarNode)):
        msg = f"Unsupported document node {type(node)!r}"
        raise TypeError(msg)
