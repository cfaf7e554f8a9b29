"""Decision criteria under uncertainty — Minimax, Savage and Hurwicz.

Every function takes a profit matrix whose rows are strategies and whose
columns are states of nature. The matrix is validated and copied into a
fresh float64 array before any arithmetic, so the caller's data is never
modified.

Criteria:
    1. Minimax  — best worst-case payoff:       max_i(min_j M[i][j])
    2. Savage   — smallest worst-case regret:   min_i(max_j R[i][j])
    3. Hurwicz  — best blend of worst and best: max_i(a*min_j + (1-a)*max_j)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import TYPE_CHECKING, Union

import numpy as np

from payoffcriteria.exceptions import InvalidInputError

if TYPE_CHECKING:
    from payoffcriteria.evaluator.models import ProfitMatrix

logger = logging.getLogger(__name__)

MatrixLike = Union[Sequence[Sequence[float]], np.ndarray, "ProfitMatrix"]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def as_profit_array(matrix: MatrixLike) -> np.ndarray:
    """Validate a profit matrix and return it as a new float64 array.

    Args:
        matrix: Nested rows of numbers, a 2-D ndarray, or a ProfitMatrix.

    Returns:
        A (rows, columns) float64 array that shares no memory with the input.

    Raises:
        InvalidInputError: If the matrix has no rows, an empty row, rows of
            differing length, or entries that are non-numeric or not finite.
    """
    from payoffcriteria.evaluator.models import ProfitMatrix

    if isinstance(matrix, ProfitMatrix):
        matrix = matrix.rows

    if isinstance(matrix, np.ndarray):
        try:
            profits = matrix.astype(np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Profit matrix has non-numeric entries: {e}") from e
    else:
        profits = _rows_to_array(matrix)

    if profits.ndim != 2:
        raise InvalidInputError(
            f"Profit matrix must be two-dimensional, got {profits.ndim} dimension(s)",
            context={"shape": profits.shape},
        )

    rows, columns = profits.shape
    if rows == 0:
        raise InvalidInputError("Profit matrix has no rows")
    if columns == 0:
        raise InvalidInputError("Profit matrix rows have no columns", context={"rows": rows})
    if not np.isfinite(profits).all():
        raise InvalidInputError("Profit matrix entries must be finite numbers")

    return profits


def _rows_to_array(matrix: Sequence[Sequence[float]]) -> np.ndarray:
    """Convert nested rows to an array, rejecting empty and ragged input."""
    try:
        rows = [list(row) for row in matrix]
    except TypeError as e:
        raise InvalidInputError(f"Profit matrix must be a sequence of rows: {e}") from e

    if not rows:
        raise InvalidInputError("Profit matrix has no rows")

    widths = [len(row) for row in rows]
    if 0 in widths:
        empty = widths.index(0)
        raise InvalidInputError(f"Profit matrix row {empty} is empty", context={"row": empty})
    if len(set(widths)) > 1:
        raise InvalidInputError(
            f"Profit matrix is ragged: row lengths {widths}",
            context={"row_lengths": widths},
        )

    try:
        return np.array(rows, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Profit matrix has non-numeric entries: {e}") from e


def check_coefficient(coefficient: float, strict: bool = False) -> float:
    """Check a Hurwicz pessimism coefficient.

    Values outside [0, 1] still give a well-defined (extrapolated) blend, so
    they are accepted with a warning unless ``strict`` is set.
    """
    if math.isnan(coefficient):
        raise InvalidInputError("Hurwicz coefficient must be a number, got NaN")
    if not 0.0 <= coefficient <= 1.0:
        if strict:
            raise InvalidInputError(
                f"Hurwicz coefficient {coefficient} is outside [0, 1]",
                context={"coefficient": coefficient},
            )
        logger.warning(
            f"Hurwicz coefficient {coefficient} is outside [0, 1]; "
            "the result extrapolates beyond each strategy's payoff range"
        )
    return coefficient


# ---------------------------------------------------------------------------
# Per-row figures
# ---------------------------------------------------------------------------


def row_minimums(matrix: MatrixLike) -> np.ndarray:
    """Worst payoff of each strategy."""
    return as_profit_array(matrix).min(axis=1)


def row_maximums(matrix: MatrixLike) -> np.ndarray:
    """Best payoff of each strategy."""
    return as_profit_array(matrix).max(axis=1)


def regret_matrix(matrix: MatrixLike) -> np.ndarray:
    """Regret of each strategy in each state.

    Every entry becomes its column maximum minus the entry, so the best
    strategy for a state has zero regret there.
    """
    profits = as_profit_array(matrix)
    return profits.max(axis=0) - profits


def hurwicz_scores(
    matrix: MatrixLike,
    coefficient: float,
    strict: bool = False,
) -> np.ndarray:
    """Hurwicz blend of each strategy: coefficient * worst + (1 - coefficient) * best."""
    profits = as_profit_array(matrix)
    coefficient = check_coefficient(coefficient, strict=strict)
    return coefficient * profits.min(axis=1) + (1 - coefficient) * profits.max(axis=1)


def best_strategy(scores: Sequence[float] | np.ndarray, maximize: bool = True) -> int:
    """Index of the optimal row score; ties go to the lowest row index."""
    values = np.asarray(scores, dtype=np.float64)
    if values.size == 0:
        raise InvalidInputError("No strategy scores to choose from")
    return int(np.argmax(values) if maximize else np.argmin(values))


# ---------------------------------------------------------------------------
# Criteria
# ---------------------------------------------------------------------------


def minimax(matrix: MatrixLike) -> float:
    """Minimax criterion — the maximum over strategies of the worst payoff.

    Args:
        matrix: Rectangular profit matrix with at least one row and column.

    Returns:
        max_i(min_j(M[i][j])).
    """
    return float(row_minimums(matrix).max())


def savage(matrix: MatrixLike) -> float:
    """Savage criterion — the minimum over strategies of the worst regret.

    The regret matrix is computed on a private copy; the caller's matrix
    is left untouched.

    Returns:
        min_i(max_j(colmax_j - M[i][j])).
    """
    return float(regret_matrix(matrix).max(axis=1).min())


def hurwicz(matrix: MatrixLike, coefficient: float, strict: bool = False) -> float:
    """Hurwicz criterion — the best pessimism-weighted blend over strategies.

    Args:
        matrix: Rectangular profit matrix with at least one row and column.
        coefficient: Weight on each strategy's worst outcome, normally in
            [0, 1]. 1.0 gives Minimax, 0.0 gives Maximax.
        strict: Reject coefficients outside [0, 1] instead of warning.

    Returns:
        max_i(coefficient * min_j(M[i][j]) + (1 - coefficient) * max_j(M[i][j])).
    """
    return float(hurwicz_scores(matrix, coefficient, strict=strict).max())


def maximax(matrix: MatrixLike) -> float:
    """Maximax criterion — the best payoff anywhere in the matrix."""
    return float(row_maximums(matrix).max())
