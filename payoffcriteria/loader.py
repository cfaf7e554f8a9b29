"""Matrix loader — reads profit matrices from YAML or JSON files.

Two layouts are accepted:

    # bare list of rows
    - [15, 10, 0]
    - [3, 14, 8]

    # mapping with optional labels and coefficient
    matrix: [[15, 10, 0], [3, 14, 8]]
    strategies: [expand, hold]
    states: [boom, flat, bust]
    coefficient: 0.7
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from payoffcriteria.evaluator.models import ProfitMatrix
from payoffcriteria.exceptions import InvalidInputError, MatrixLoadError

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")

# Four strategies against five states of nature.
REFERENCE_MATRIX: list[list[float]] = [
    [15, 10, 0, -6, 17],
    [3, 14, 8, 9, 2],
    [1, 5, 14, 20, -3],
    [7, 19, 10, 2, 0],
]


def read_document(path: Path) -> Any:
    """Parse a YAML/JSON matrix file into plain Python data."""
    if not path.exists():
        raise MatrixLoadError(f"Matrix file not found: {path}")
    if path.suffix not in SUPPORTED_SUFFIXES:
        raise MatrixLoadError(
            f"Unsupported matrix file type '{path.suffix}'. "
            f"Use one of: {', '.join(SUPPORTED_SUFFIXES)}"
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix == ".json":
                return json.load(f)
            return yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise MatrixLoadError(f"Could not parse {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise MatrixLoadError(f"{path} is not valid UTF-8 text: {e}") from e
    except OSError as e:
        raise MatrixLoadError(f"Could not read {path}: {e}") from e


def parse_matrix(data: Any) -> ProfitMatrix:
    """Build a ProfitMatrix from a parsed document."""
    strategies: list[str] = []
    states: list[str] = []

    if isinstance(data, dict):
        rows = data.get("matrix", data.get("profits"))
        if rows is None:
            raise MatrixLoadError("Matrix document has no 'matrix' (or 'profits') key")
        strategies = _labels(data.get("strategies"))
        states = _labels(data.get("states"))
    elif isinstance(data, list):
        rows = data
    else:
        raise MatrixLoadError(
            f"Matrix document must be a list of rows or a mapping, got {type(data).__name__}"
        )

    try:
        return ProfitMatrix(rows=rows, strategies=strategies, states=states)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid profit matrix: {e}") from e


def _labels(values: Any) -> Any:
    """YAML reads labels like 1 or yes as int/bool; keep them as text."""
    if not values:
        return []
    if isinstance(values, list):
        return [str(v) for v in values]
    return values


def document_coefficient(data: Any) -> float | None:
    """Hurwicz coefficient embedded in a matrix document, if any."""
    if isinstance(data, dict):
        return data.get("coefficient")
    return None


def load_matrix(path: Path) -> ProfitMatrix:
    """Read and validate a profit matrix file."""
    return parse_matrix(read_document(path))


def reference_matrix() -> ProfitMatrix:
    """The built-in four-strategy example matrix."""
    return ProfitMatrix(rows=REFERENCE_MATRIX)
