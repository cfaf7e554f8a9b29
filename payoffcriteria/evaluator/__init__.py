"""Criteria evaluation — Minimax, Savage and Hurwicz over a profit matrix.

Public API:
    minimax, savage, hurwicz  — scalar criteria
    CriteriaScorer            — runs all three and builds a CriteriaReport
    ProfitMatrix              — validated, optionally labelled matrix
"""

from payoffcriteria.evaluator.criteria import hurwicz, maximax, minimax, savage
from payoffcriteria.evaluator.models import CriteriaReport, CriterionResult, ProfitMatrix
from payoffcriteria.evaluator.scorer import CriteriaScorer

__all__ = [
    "CriteriaReport",
    "CriteriaScorer",
    "CriterionResult",
    "ProfitMatrix",
    "hurwicz",
    "maximax",
    "minimax",
    "savage",
]
