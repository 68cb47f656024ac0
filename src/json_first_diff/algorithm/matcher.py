"""Maximum bipartite matching between expected and actual array elements.

Order-independent array comparison needs to pair every expected element with
a distinct actual element it is equivalent to.  A greedy first-fit pass can
fail where a valid pairing exists (``[A|B, A]`` vs ``[A, B]``), so the
pairing is solved as an assignment problem with scipy's
``linear_sum_assignment`` on a 0/1 cost matrix: 0 where the elements are
equivalent, 1 otherwise.  Minimising total cost maximises the number of
equivalent pairs.
"""

from __future__ import annotations

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

__all__ = ["hungarian_match", "match_elements"]


def hungarian_match(
    cost_matrix: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """Compute the optimal assignment, tolerating empty matrices.

    Args:
        cost_matrix: 2-D cost matrix of shape ``(m, n)``.

    Returns:
        Tuple ``(row_ind, col_ind)`` of 1-D integer arrays.  Each row is
        assigned at most one column; ``min(m, n)`` pairs are returned.
    """
    if cost_matrix.size == 0:
        return np.array([], dtype=int), np.array([], dtype=int)

    row_ind, col_ind = linear_sum_assignment(np.asarray(cost_matrix, dtype=float))
    return row_ind, col_ind


def match_elements(equivalent: np.ndarray) -> dict[int, tuple[int, bool]]:
    """Pair rows (expected elements) with columns (actual elements).

    Args:
        equivalent: Boolean matrix of shape ``(n_expected, n_actual)``;
            ``equivalent[i, j]`` is True when expected element ``i`` has no
            difference with actual element ``j``.

    Returns:
        Mapping ``expected_index -> (actual_index, is_equivalent)`` for every
        expected element the assignment paired.  Rows left unpaired (more
        expected than actual elements) are absent from the mapping.
    """
    n_rows, n_cols = equivalent.shape
    # Leaving row i unmatched costs 1 + priority[i].  Priorities decrease with
    # the row index and sum to less than 1, so the matching size is maximised
    # first and earlier rows win ties.
    priority = (n_rows - np.arange(n_rows, dtype=float)) / (n_rows + 1) ** 2
    miss = 1.0 + priority[:, np.newaxis]
    cost = np.where(equivalent, 0.0, miss)
    if n_rows > n_cols:
        # Dummy columns: a row assigned to one stays unpaired.
        cost = np.hstack([cost, np.repeat(miss, n_rows - n_cols, axis=1)])

    row_ind, col_ind = hungarian_match(cost)
    return {
        int(r): (int(c), bool(equivalent[r, c]))
        for r, c in zip(row_ind.tolist(), col_ind.tolist(), strict=True)
        if c < n_cols
    }
