"""pytest plugin for json-first-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_first_diff import ComparisonOptions, find_first_difference

# Keyed by (ignore_extra_properties, strict_array_order).
_SWITCH_OPTIONS: dict[tuple[bool, bool], ComparisonOptions] = {
    (ignore_extra, strict_order): ComparisonOptions(
        ignore_extra_properties=ignore_extra,
        strict_array_order=strict_order,
    )
    for ignore_extra in (False, True)
    for strict_order in (False, True)
}


@pytest.fixture(scope="session")
def assert_json_equivalent() -> Any:
    """Fixture that returns a callable JSON equivalence asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to find_first_difference() which holds no state between calls).

    Usage in tests::

        def test_payload(assert_json_equivalent):
            assert_json_equivalent({"ids": [1, 2]}, {"ids": [2, 1]},
                                   strict_array_order=False)

        def test_missing_key(assert_json_equivalent):
            with pytest.raises(AssertionError, match=r"misses property \\$\\.b"):
                assert_json_equivalent({"a": 1}, {"a": 1, "b": 2})

    Returns:
        A callable ``_assert(actual, expected, options=None, *,
        ignore_extra_properties=False, strict_array_order=True) -> None``
        that raises ``AssertionError`` when the documents differ.
    """

    def _assert(
        actual: Any,
        expected: Any,
        options: ComparisonOptions | None = None,
        *,
        ignore_extra_properties: bool = False,
        strict_array_order: bool = True,
    ) -> None:
        """Assert that two JSON documents are equivalent.

        Args:
            actual:   The actual JSON value produced by the code under test.
            expected: The expected/reference JSON value.
            options:  Full ComparisonOptions.  When given, the keyword
                      switches are ignored.
            ignore_extra_properties: Accept properties (and array elements)
                      present only in ``actual``.
            strict_array_order: Require array elements in the same order.

        Raises:
            AssertionError: When a difference is found, with a message
                including the rendered difference and both documents.
        """
        if options is None:
            options = _SWITCH_OPTIONS[
                bool(ignore_extra_properties), bool(strict_array_order)
            ]
        difference = find_first_difference(actual, expected, options)
        if difference is not None:
            raise AssertionError(
                f"JSON document {difference}\n"
                f"  kind:     {difference.kind}\n"
                f"  actual:   {actual}\n"
                f"  expected: {expected}"
            )

    return _assert
