"""Unit tests for the Minimax, Savage and Hurwicz criteria."""

import logging

import numpy as np
import pytest

from payoffcriteria.evaluator.criteria import (
    as_profit_array,
    best_strategy,
    hurwicz,
    hurwicz_scores,
    maximax,
    minimax,
    regret_matrix,
    savage,
)
from payoffcriteria.evaluator.models import ProfitMatrix
from payoffcriteria.exceptions import InvalidInputError


@pytest.fixture
def profits():
    """Four strategies against five states of nature."""
    return [
        [15, 10, 0, -6, 17],
        [3, 14, 8, 9, 2],
        [1, 5, 14, 20, -3],
        [7, 19, 10, 2, 0],
    ]


def test_reference_minimax(profits):
    """Row minimums are -6, 2, -3, 0 so the best worst case is 2."""
    assert minimax(profits) == 2


def test_reference_savage(profits):
    """Row maximum regrets are 26, 15, 20, 18 so the least is 15."""
    assert savage(profits) == 15


def test_reference_hurwicz(profits):
    """Blends at 0.8 are -1.4, 4.4, 1.6, 3.8 so the best is 4.4."""
    assert hurwicz(profits, 0.8) == pytest.approx(4.4)


def test_regret_matrix(profits):
    """Each entry is its column maximum minus the payoff."""
    regrets = regret_matrix(profits)

    assert regrets.tolist() == [
        [0, 9, 14, 26, 0],
        [12, 5, 6, 11, 15],
        [14, 14, 0, 0, 20],
        [8, 0, 4, 18, 17],
    ]


def test_savage_does_not_mutate_list(profits):
    """Savage works on a private copy of nested lists."""
    before = [row[:] for row in profits]
    savage(profits)
    assert profits == before


def test_savage_does_not_mutate_array(profits):
    """Savage works on a private copy of an ndarray."""
    array = np.array(profits, dtype=float)
    before = array.copy()
    savage(array)
    assert np.array_equal(array, before)


EXTREME_COEFFICIENT_MATRICES = [
    [[15, 10, 0, -6, 17], [3, 14, 8, 9, 2], [1, 5, 14, 20, -3], [7, 19, 10, 2, 0]],
    [[-4, -9, -1], [-7, -2, -8]],
    [[2.5, -3.25, 0.0, 11.75]],
    [[6], [-6], [0.5]],
    [[-1e6, 1e6], [0.1, -0.3], [3, 3]],
    [[-12.5]],
]


@pytest.mark.parametrize("matrix", EXTREME_COEFFICIENT_MATRICES)
def test_hurwicz_one_is_minimax(matrix):
    """Full pessimism degenerates to Minimax."""
    assert hurwicz(matrix, 1.0) == minimax(matrix)
    assert hurwicz(matrix, 1.0) == max(min(row) for row in matrix)


@pytest.mark.parametrize("matrix", EXTREME_COEFFICIENT_MATRICES)
def test_hurwicz_zero_is_maximax(matrix):
    """Full optimism picks the best payoff of the best row."""
    assert hurwicz(matrix, 0.0) == max(max(row) for row in matrix)
    assert hurwicz(matrix, 0.0) == maximax(matrix)


def test_hurwicz_scores(profits):
    """Per-row blends follow coefficient * worst + (1 - coefficient) * best."""
    scores = hurwicz_scores(profits, 0.8)
    assert scores.tolist() == pytest.approx([-1.4, 4.4, 1.6, 3.8])


def test_single_cell_matrix():
    """A 1x1 matrix returns its value, with zero regret for Savage."""
    assert minimax([[7.5]]) == 7.5
    assert hurwicz([[7.5]], 0.3) == 7.5
    assert savage([[7.5]]) == 0.0


def test_single_row_and_column():
    """One row gives its minimum; one column gives its maximum."""
    assert minimax([[4, -1, 9]]) == -1
    assert minimax([[4], [-1], [9]]) == 9
    assert hurwicz([[4], [-1], [9]], 0.25) == 9
    assert hurwicz([[4], [-1], [9]], 0.9) == 9


def test_equal_column_has_zero_regret():
    """A state where every strategy pays the same contributes no regret."""
    regrets = regret_matrix([[5, 1], [5, 3]])
    assert regrets[:, 0].tolist() == [0, 0]
    assert savage([[5, 1], [5, 3]]) == 0


def test_accepts_profit_matrix_model(profits):
    """A ProfitMatrix model evaluates the same as its rows."""
    matrix = ProfitMatrix(rows=profits)
    assert minimax(matrix) == 2
    assert savage(matrix) == 15


def test_best_strategy_prefers_first_row():
    """Ties resolve to the lowest row index."""
    assert best_strategy([1.0, 3.0, 3.0]) == 1
    assert best_strategy([2.0, 1.0, 1.0], maximize=False) == 1


@pytest.mark.parametrize(
    "matrix",
    [
        [],
        [[]],
        [[1, 2], []],
        [[1, 2], [3]],
        [[1, "abc"]],
        [[1, float("nan")]],
        [[1, float("inf")]],
        np.zeros((0, 3)),
        np.zeros((3, 0)),
        np.zeros(4),
    ],
)
def test_invalid_matrices_raise(matrix):
    """Every criterion rejects malformed matrices before computing."""
    for criterion in (minimax, savage, lambda m: hurwicz(m, 0.5)):
        with pytest.raises(InvalidInputError):
            criterion(matrix)


def test_ragged_error_reports_row_lengths():
    """Ragged matrices carry the row lengths in the error context."""
    with pytest.raises(InvalidInputError) as exc_info:
        as_profit_array([[1, 2, 3], [4, 5]])
    assert exc_info.value.context["row_lengths"] == [3, 2]


def test_out_of_range_coefficient_warns(profits, caplog):
    """Coefficients outside [0, 1] are accepted with a warning."""
    with caplog.at_level(logging.WARNING, logger="payoffcriteria.evaluator.criteria"):
        value = hurwicz(profits, 1.5)

    # 1.5 * min - 0.5 * max per row: -17.5, -4.0, -14.5, -9.5
    assert value == pytest.approx(-4.0)
    assert "outside [0, 1]" in caplog.text


def test_out_of_range_coefficient_strict(profits):
    """Strict mode rejects coefficients outside [0, 1]."""
    with pytest.raises(InvalidInputError):
        hurwicz(profits, -0.1, strict=True)


def test_nan_coefficient_rejected(profits):
    """A NaN coefficient is never a usable weight."""
    with pytest.raises(InvalidInputError):
        hurwicz(profits, float("nan"))
