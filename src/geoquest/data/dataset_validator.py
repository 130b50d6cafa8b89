"""Boundary check for decoded quiz dataset documents."""
from __future__ import annotations

from .errors import InvalidDatasetError


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def find_dataset_problem(value: object) -> str | None:
    """Return a description of the first shape problem, or None when the shape is valid."""
    if not isinstance(value, dict):
        return "dataset must be a JSON object"
    if not _is_number(value.get("version")):
        return "dataset 'version' must be a number"
    if not isinstance(value.get("monsters"), dict):
        return "dataset 'monsters' must be an object"
    return None


def validate_dataset(value: object) -> bool:
    """Return True when ``value`` has a numeric version and a monsters mapping.

    Individual monsters and quizzes are not inspected here; the repository
    defaults malformed entries when it builds typed records.
    """
    return find_dataset_problem(value) is None


def ensure_valid_dataset(value: object) -> dict[str, object]:
    """Return ``value`` unchanged or raise InvalidDatasetError."""
    problem = find_dataset_problem(value)
    if problem is not None:
        raise InvalidDatasetError(f"Invalid dataset: {problem}.")
    assert isinstance(value, dict)
    return value
