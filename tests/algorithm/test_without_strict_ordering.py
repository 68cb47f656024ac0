"""Ordering-insensitive comparison of whole documents.

Documents that only differ in array element order (or object key order)
must be equivalent once strict ordering is switched off, and must still
differ under the default strict ordering.
"""

from __future__ import annotations

import json

import pytest

from json_first_diff import ComparisonOptions, DifferenceKind, find_first_difference

RELAXED = ComparisonOptions().without_strict_ordering()


@pytest.mark.parametrize(
    ("subject", "expectation"),
    [
        ('{"ids":[1,2,3]}', '{"ids":[3,2,1]}'),
        ('{"ids":[1,2,3]}', '{"ids":[1,2,3]}'),
        ('{"type":2,"name":"b"}', '{"name":"b","type":2}'),
        ('{"names":["a","b"]}', '{"names":["b","a"]}'),
        (
            '{"vals":[{"type":1,"name":"a"},{"name":"b","type":2}]}',
            '{"vals":[{"type":2,"name":"b"},{"name":"a","type":1}]}',
        ),
        (
            '{"vals":[{"type":1,"name":"a"},{"name":"b","type":2}]}',
            '{"vals":[{"name":"a","type":1},{"type":2,"name":"b"}]}',
        ),
    ],
)
def test_without_strict_ordering_is_equivalent(subject: str, expectation: str) -> None:
    assert find_first_difference(json.loads(subject), json.loads(expectation), RELAXED) is None


@pytest.mark.parametrize(
    ("subject", "expectation"),
    [
        ('{"ids":[1,2,3]}', '{"ids":[3,2,1]}'),
        ('{"names":["a","b"]}', '{"names":["b","a"]}'),
        (
            '{"vals":[{"type":1,"name":"a"},{"name":"b","type":2}]}',
            '{"vals":[{"type":2,"name":"b"},{"name":"a","type":1}]}',
        ),
    ],
)
def test_strict_ordering_reports_difference(subject: str, expectation: str) -> None:
    assert find_first_difference(json.loads(subject), json.loads(expectation)) is not None


def test_reordered_array_only_equivalent_without_strict_ordering() -> None:
    subject, expectation = {"ids": [1, 2, 3]}, {"ids": [3, 2, 1]}
    subsequence = ComparisonOptions(ignore_extra_properties=True)

    assert find_first_difference(subject, expectation, RELAXED) is None
    difference = find_first_difference(subject, expectation, subsequence)
    assert difference is not None
    assert difference.kind == DifferenceKind.WRONG_ORDER
    assert str(difference.path) == "$.ids[1]"
