"""ScalarEquivalence Protocol for the scalar-comparison extension point.

Defines the structural interface the differentiator uses to decide whether
two same-kind scalar leaves are equivalent.  Users can plug in their own
comparer without inheriting from any base class: any class with a
conformant ``are_equivalent`` method passes ``isinstance`` checks.

Example::

    from json_first_diff.protocols import ScalarEquivalence

    class CaseInsensitive:
        def are_equivalent(self, actual, expected) -> bool:
            return str(actual.value).lower() == str(expected.value).lower()

    assert isinstance(CaseInsensitive(), ScalarEquivalence)  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_first_diff.tree.nodes import ScalarNode


@runtime_checkable
class ScalarEquivalence(Protocol):
    """Structural protocol for scalar comparers.

    The ``are_equivalent`` method is only ever called with two scalar nodes
    of the same ``NodeKind``.  It must:

    - Return ``True`` when the values are equivalent, ``False`` otherwise.
    - Never raise to signal inequivalence.  Exceptions it does raise are
      treated as configuration bugs and propagate to the caller.
    """

    def are_equivalent(self, actual: ScalarNode, expected: ScalarNode) -> bool: ...
