"""ComparisonOptions: immutable configuration for the differentiator.

ComparisonOptions is a frozen (immutable) dataclass holding the comparison
switches and the scalar override rules.  The scalar comparison pipeline is
built once in ``__post_init__`` and reused by every comparison that receives
the same options instance, so construct options once per configuration and
share them.

The fluent helpers never mutate; each returns a new options instance::

    options = (
        ComparisonOptions()
        .without_strict_ordering()
        .using(lambda a, e: abs(a - e) < 1e-6)
        .when_type_is(float)
    )
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

from json_first_diff.algorithm.scalars import ScalarComparer, ScalarOverride

__all__ = ["ComparisonOptions", "OverrideRestriction"]


@dataclass(frozen=True, slots=True)
class ComparisonOptions:
    """Immutable configuration for ``Differentiator``.

    Attributes:
        ignore_extra_properties: When True, properties present only in the
            actual document are accepted, and arrays only need to contain the
            expected elements (extra actual elements are skipped).
            Default False.
        strict_array_order: When False, array elements are matched
            regardless of position.  Default True.
        scalar_overrides: Ordered custom comparisons for scalar leaves; the
            first one that applies decides.
        scalar_comparer: The comparison pipeline built from
            ``scalar_overrides``.  Derived, not an init argument.
    """

    ignore_extra_properties: bool = False
    strict_array_order: bool = True
    scalar_overrides: tuple[ScalarOverride, ...] = ()
    scalar_comparer: ScalarComparer = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        overrides = tuple(self.scalar_overrides)
        for override in overrides:
            if not isinstance(override, ScalarOverride):
                msg = f"scalar_overrides entries must be ScalarOverride, got {override!r}"
                raise TypeError(msg)
        object.__setattr__(self, "scalar_overrides", overrides)
        object.__setattr__(self, "scalar_comparer", ScalarComparer(overrides))

    # ------------------------------------------------------------------
    # Fluent helpers
    # ------------------------------------------------------------------

    def without_strict_ordering(self) -> ComparisonOptions:
        """Return options that match array elements regardless of order."""
        return replace(self, strict_array_order=False)

    def including_extra_properties(self) -> ComparisonOptions:
        """Return options that accept extra actual properties and elements."""
        return replace(self, ignore_extra_properties=True)

    def using(self, compare: Callable[[Any, Any], bool]) -> OverrideRestriction:
        """Start registering a custom scalar comparison.

        Finish with ``when_type_is`` or ``when`` to obtain the new options.
        """
        return OverrideRestriction(self, compare)

    def with_override(self, override: ScalarOverride) -> ComparisonOptions:
        return replace(self, scalar_overrides=(*self.scalar_overrides, override))


@dataclass(frozen=True, slots=True)
class OverrideRestriction:
    """Pending override returned by ``ComparisonOptions.using``."""

    options: ComparisonOptions
    compare: Callable[[Any, Any], bool]

    def when_type_is(self, value_type: type) -> ComparisonOptions:
        return self.options.with_override(ScalarOverride(value_type, self.compare))

    def when(self, predicate: Callable[[Any, Any], bool]) -> ComparisonOptions:
        return self.options.with_override(ScalarOverride(predicate, self.compare))
