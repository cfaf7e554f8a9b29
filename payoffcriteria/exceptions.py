"""Exception hierarchy for matrix validation, loading and configuration."""

from __future__ import annotations


class CriteriaError(Exception):
    """Base exception for all payoffcriteria errors.

    Args:
        message: Human-readable error description.
        context: Optional dict of extra context for logging/debugging.
    """

    def __init__(self, message: str = "", context: dict | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class InvalidInputError(CriteriaError, ValueError):
    """Raised when a profit matrix or coefficient breaks the input contract."""


class MatrixLoadError(CriteriaError):
    """Raised when a matrix file cannot be read or parsed."""


class ConfigurationError(CriteriaError):
    """Raised when configuration loading or validation fails."""
