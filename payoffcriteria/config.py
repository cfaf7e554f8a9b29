"""Evaluation configuration — criterion settings in one place."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from payoffcriteria.exceptions import ConfigurationError


class EvaluationConfig(BaseModel):
    """Configuration for a criteria evaluation run.

    Usage:
        config = EvaluationConfig(coefficient=0.6, strict_coefficient=True)
        config = EvaluationConfig.from_file(Path("criteria.yaml"))
    """

    coefficient: float = Field(
        default=0.8,
        description="Hurwicz pessimism coefficient (weight on the worst outcome, 0.0–1.0)",
    )
    strict_coefficient: bool = Field(
        default=False,
        description="Reject coefficients outside [0, 1] instead of logging a warning",
    )
    precision: int = Field(
        default=6,
        ge=1,
        le=17,
        description="Significant digits when rendering results as a table",
    )

    @classmethod
    def from_file(cls, path: Path) -> EvaluationConfig:
        """Load a config from a YAML or JSON file."""
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Could not parse config {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"Config {path} is not valid UTF-8 text: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Could not read config {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config {path} must be a mapping, got {type(data).__name__}"
            )

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid config {path}: {e}") from e

    def with_overrides(self, **overrides: object) -> EvaluationConfig:
        """Return a validated copy with the non-None overrides applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        try:
            return type(self).model_validate({**self.model_dump(), **updates})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid config override: {e}") from e
