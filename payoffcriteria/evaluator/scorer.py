"""Criteria Scorer — runs every criterion over a matrix and builds a report.

Each criterion optimizes a per-row figure:
    1. Minimax — row minimums, maximized
    2. Savage  — row maximum regrets, minimized
    3. Hurwicz — row blends of worst and best payoff, maximized
"""

from __future__ import annotations

import logging

import numpy as np

from payoffcriteria.config import EvaluationConfig
from payoffcriteria.evaluator.criteria import (
    MatrixLike,
    as_profit_array,
    best_strategy,
    hurwicz_scores,
    regret_matrix,
    row_minimums,
)
from payoffcriteria.evaluator.models import CriteriaReport, CriterionResult, ProfitMatrix

logger = logging.getLogger(__name__)


class CriteriaScorer:
    """Scores one profit matrix against all three criteria.

    Usage:
        scorer = CriteriaScorer(EvaluationConfig(coefficient=0.8))
        report = scorer.evaluate([[15, 10, 0], [3, 14, 8]])
    """

    def __init__(self, config: EvaluationConfig | None = None) -> None:
        self.config = config or EvaluationConfig()

    def evaluate(self, matrix: MatrixLike) -> CriteriaReport:
        """Evaluate Minimax, Savage and Hurwicz for a matrix."""
        profits = as_profit_array(matrix)
        labelled = matrix if isinstance(matrix, ProfitMatrix) else None
        coefficient = self.config.coefficient

        # Validates the coefficient before any result is built
        blends = hurwicz_scores(
            profits, coefficient, strict=self.config.strict_coefficient,
        )

        rows, columns = profits.shape
        return CriteriaReport(
            rows=rows,
            columns=columns,
            coefficient=coefficient,
            minimax=self.score_criterion("minimax", row_minimums(profits), labelled),
            savage=self.score_criterion(
                "savage", regret_matrix(profits).max(axis=1), labelled, maximize=False,
            ),
            hurwicz=self.score_criterion("hurwicz", blends, labelled),
            strategies=labelled.strategies if labelled is not None else [],
            states=labelled.states if labelled is not None else [],
        )

    def score_criterion(
        self,
        name: str,
        scores: np.ndarray,
        matrix: ProfitMatrix | None = None,
        maximize: bool = True,
    ) -> CriterionResult:
        """Pick the optimal row for one criterion's per-row scores."""
        strategy = best_strategy(scores, maximize=maximize)
        label = matrix.strategy_label(strategy) if matrix is not None else f"S{strategy + 1}"
        value = float(scores[strategy])
        logger.debug(f"{name}: {value:g} (strategy {label})")

        return CriterionResult(
            name=name,
            value=value,
            strategy=strategy,
            strategy_label=label,
            row_scores=[float(s) for s in scores],
        )
