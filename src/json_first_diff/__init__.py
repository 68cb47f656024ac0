"""json-first-diff - first-difference reporting for JSON-like documents."""

from __future__ import annotations

from json_first_diff.algorithm.config import ComparisonOptions
from json_first_diff.algorithm.differentiator import Differentiator
from json_first_diff.algorithm.scalars import ScalarComparer, ScalarOverride
from json_first_diff.api import (
    JsonNotEquivalentError,
    assert_equivalent,
    find_first_difference,
    is_equivalent,
)
from json_first_diff.difference import Difference, DifferenceKind, render
from json_first_diff.path import JsonPath
from json_first_diff.protocols import ScalarEquivalence
from json_first_diff.tree.builder import TreeBuilder
from json_first_diff.tree.nodes import (
    ArrayNode,
    DocumentNode,
    NodeKind,
    ObjectNode,
    PropertyNode,
    ScalarNode,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayNode",
    "ComparisonOptions",
    "Difference",
    "DifferenceKind",
    "Differentiator",
    "DocumentNode",
    "JsonNotEquivalentError",
    "JsonPath",
    "NodeKind",
    "ObjectNode",
    "PropertyNode",
    "ScalarComparer",
    "ScalarEquivalence",
    "ScalarNode",
    "ScalarOverride",
    "TreeBuilder",
    "assert_equivalent",
    "find_first_difference",
    "is_equivalent",
    "render",
]
