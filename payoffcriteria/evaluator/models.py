"""Evaluation data models — Pydantic models for matrices and criterion results."""

from __future__ import annotations

import numpy as np
from pydantic import BaseModel, Field, model_validator

from payoffcriteria.evaluator.criteria import as_profit_array


class ProfitMatrix(BaseModel):
    """A validated profit matrix with optional strategy and state labels."""

    model_config = {"frozen": True}

    rows: list[list[float]] = Field(description="One row per strategy, one column per state")
    strategies: list[str] = Field(default_factory=list, description="Optional row labels")
    states: list[str] = Field(default_factory=list, description="Optional column labels")

    @model_validator(mode="after")
    def _check_shape(self) -> ProfitMatrix:
        num_rows, num_columns = as_profit_array(self.rows).shape
        if self.strategies and len(self.strategies) != num_rows:
            raise ValueError(
                f"Got {len(self.strategies)} strategy label(s) for {num_rows} row(s)"
            )
        if self.states and len(self.states) != num_columns:
            raise ValueError(
                f"Got {len(self.states)} state label(s) for {num_columns} column(s)"
            )
        return self

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns) of the matrix."""
        return len(self.rows), len(self.rows[0])

    def to_array(self) -> np.ndarray:
        """Return a fresh float64 copy of the payoffs."""
        return as_profit_array(self.rows)

    def strategy_label(self, index: int) -> str:
        """Label of a row, falling back to S1, S2, ..."""
        return self.strategies[index] if self.strategies else f"S{index + 1}"


class CriterionResult(BaseModel):
    """Outcome of one criterion over one matrix."""

    name: str = Field(description="'minimax', 'savage' or 'hurwicz'")
    value: float = Field(description="The criterion's scalar result")
    strategy: int = Field(description="0-based index of the first row attaining the value")
    strategy_label: str = Field(default="", description="Label of the chosen row")
    row_scores: list[float] = Field(
        default_factory=list,
        description="Per-row figure the criterion optimizes",
    )


class CriteriaReport(BaseModel):
    """All three criteria for one matrix."""

    rows: int
    columns: int
    coefficient: float = Field(description="Hurwicz pessimism coefficient used")

    minimax: CriterionResult
    savage: CriterionResult
    hurwicz: CriterionResult

    strategies: list[str] = Field(default_factory=list)
    states: list[str] = Field(default_factory=list)

    def results(self) -> list[CriterionResult]:
        """The three results in display order."""
        return [self.minimax, self.savage, self.hurwicz]
