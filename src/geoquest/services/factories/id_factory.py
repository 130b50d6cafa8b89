"""Utilities for creating encounter identifiers."""
from __future__ import annotations

from typing import Iterator


def make_instance_id(prefix: str, sequence: Iterator[int]) -> str:
    """Generate an identifier from the next value of a monotonic sequence."""
    return f"{prefix}_{next(sequence)}"
