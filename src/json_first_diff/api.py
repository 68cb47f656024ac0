"""Public API functions for json-first-diff.

This module provides the user-facing functions: find_first_difference,
is_equivalent, and assert_equivalent.  Each accepts native Python values
(dicts, lists, scalars) or prebuilt DocumentNode trees; native values are
converted with ``TreeBuilder``.  Note that at this level ``None`` is a JSON
null.  To compare against an absent document use ``Differentiator`` directly.
"""

from __future__ import annotations

from typing import Any

from json_first_diff.algorithm.config import ComparisonOptions
from json_first_diff.algorithm.differentiator import Differentiator
from json_first_diff.difference import Difference
from json_first_diff.tree.builder import TreeBuilder

__all__ = [
    "JsonNotEquivalentError",
    "assert_equivalent",
    "find_first_difference",
    "is_equivalent",
]

_builder = TreeBuilder()


class JsonNotEquivalentError(AssertionError):
    """Raised by ``assert_equivalent`` when the documents differ.

    Attributes:
        difference: The first difference found.
    """

    def __init__(self, difference: Difference, because: str = "") -> None:
        self.difference = difference
        message = f"JSON document {difference}"
        if because:
            message = f"{message} because {because}"
        super().__init__(f"{message}.")


def find_first_difference(
    actual: Any,
    expected: Any,
    options: ComparisonOptions | None = None,
) -> Difference | None:
    """Return the first difference between two documents, or None.

    Args:
        actual:   The document produced by the code under test.
        expected: The reference document.
        options:  Comparison options.  Defaults to ``ComparisonOptions()``.

    Returns:
        A ``Difference`` describing the first mismatch, or None when the
        documents are equivalent.
    """
    if actual is expected:
        return None
    differentiator = Differentiator(options)
    return differentiator.find_first_difference(
        _builder.build(actual), _builder.build(expected)
    )


def is_equivalent(
    actual: Any,
    expected: Any,
    options: ComparisonOptions | None = None,
) -> bool:
    """Return True if the two documents have no difference under ``options``."""
    return find_first_difference(actual, expected, options) is None


def assert_equivalent(
    actual: Any,
    expected: Any,
    options: ComparisonOptions | None = None,
    because: str = "",
) -> None:
    """Raise ``JsonNotEquivalentError`` if the two documents differ.

    Args:
        actual:   The document produced by the code under test.
        expected: The reference document.
        options:  Comparison options.  Defaults to ``ComparisonOptions()``.
        because:  Optional reason appended to the failure message.

    Raises:
        JsonNotEquivalentError: With a message such as
            ``JSON document misses property $.b.``
    """
    difference = find_first_difference(actual, expected, options)
    if difference is not None:
        raise JsonNotEquivalentError(difference, because)
