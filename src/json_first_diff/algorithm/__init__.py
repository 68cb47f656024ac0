"""algorithm subpackage — public API for the differencing engine.

Provides the differentiator, its configuration, and the scalar comparison
pipeline.  Import from this module (not from sub-modules directly) to stay
on the stable public interface.

Example::

    from json_first_diff.algorithm import ComparisonOptions, Differentiator
    from json_first_diff.tree import TreeBuilder

    builder = TreeBuilder()
    differentiator = Differentiator(ComparisonOptions().without_strict_ordering())
    differentiator.find_first_difference(builder.build([1, 2]), builder.build([2, 1]))
    # None
"""

from __future__ import annotations

from json_first_diff.algorithm.config import ComparisonOptions, OverrideRestriction
from json_first_diff.algorithm.differentiator import Differentiator
from json_first_diff.algorithm.scalars import ScalarComparer, ScalarOverride

__all__ = [
    "ComparisonOptions",
    "Differentiator",
    "OverrideRestriction",
    "ScalarComparer",
    "ScalarOverride",
]
