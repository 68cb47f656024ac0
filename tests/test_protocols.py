"""ScalarEquivalence: structural conformance and use as the scalar collaborator.

Any object with an ``are_equivalent(actual, expected) -> bool`` method can
replace the comparer the options build, without inheriting from anything.
"""

from __future__ import annotations

import pytest

from json_first_diff import ComparisonOptions, DifferenceKind, Differentiator
from json_first_diff.algorithm.scalars import ScalarComparer
from json_first_diff.protocols import ScalarEquivalence
from json_first_diff.tree.builder import TreeBuilder
from json_first_diff.tree.nodes import NodeKind, ScalarNode

_builder = TreeBuilder()


class _CaseInsensitiveStrings:
    """Strings compare case-insensitively; everything else by equality."""

    def __init__(self) -> None:
        self.calls: list[tuple[object, object]] = []

    def are_equivalent(self, actual: ScalarNode, expected: ScalarNode) -> bool:
        self.calls.append((actual.value, expected.value))
        if actual.kind is NodeKind.STRING:
            return str(actual.value).lower() == str(expected.value).lower()
        return actual.value == expected.value


class _Exploding:
    def are_equivalent(self, actual: ScalarNode, expected: ScalarNode) -> bool:
        msg = "comparer failed"
        raise RuntimeError(msg)


class _CompareOnly:
    def compare(self, actual: ScalarNode, expected: ScalarNode) -> bool:
        return True


class TestConformance:
    def test_custom_comparer_is_scalar_equivalence(self) -> None:
        assert isinstance(_CaseInsensitiveStrings(), ScalarEquivalence)

    def test_scalar_comparer_conforms_without_inheritance(self) -> None:
        assert isinstance(ScalarComparer(), ScalarEquivalence)
        assert ScalarEquivalence not in type(ScalarComparer()).__mro__

    def test_other_method_name_does_not_conform(self) -> None:
        assert not isinstance(_CompareOnly(), ScalarEquivalence)


class TestCustomComparerInDifferentiator:
    def test_custom_comparer_decides_scalar_equality(self) -> None:
        differentiator = Differentiator(scalar_comparer=_CaseInsensitiveStrings())
        assert (
            differentiator.find_first_difference(
                _builder.build({"name": "ALICE"}), _builder.build({"name": "alice"})
            )
            is None
        )

    def test_custom_comparer_rejection_is_other_value(self) -> None:
        differentiator = Differentiator(scalar_comparer=_CaseInsensitiveStrings())
        difference = differentiator.find_first_difference(
            _builder.build({"name": "alice"}), _builder.build({"name": "bob"})
        )
        assert difference is not None
        assert difference.kind == DifferenceKind.OTHER_VALUE
        assert str(difference) == "has a different value at $.name"

    def test_custom_comparer_replaces_option_overrides(self) -> None:
        # The options would accept any string; the explicit comparer wins.
        options = ComparisonOptions().using(lambda a, e: True).when_type_is(str)
        comparer = _CaseInsensitiveStrings()
        differentiator = Differentiator(options, scalar_comparer=comparer)

        difference = differentiator.find_first_difference(
            _builder.build(["x"]), _builder.build(["y"])
        )
        assert difference is not None
        assert comparer.calls == [("x", "y")]

    def test_kind_mismatch_never_reaches_comparer(self) -> None:
        comparer = _CaseInsensitiveStrings()
        differentiator = Differentiator(scalar_comparer=comparer)

        difference = differentiator.find_first_difference(
            _builder.build("1"), _builder.build(1)
        )
        assert difference is not None
        assert difference.kind == DifferenceKind.OTHER_TYPE
        assert comparer.calls == []

    def test_comparer_exceptions_propagate(self) -> None:
        differentiator = Differentiator(scalar_comparer=_Exploding())
        with pytest.raises(RuntimeError, match="comparer failed"):
            differentiator.find_first_difference(_builder.build(1), _builder.build(2))
