"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, Sequence

_BAR_WIDTH = 20


def debug_enabled() -> bool:
    """Return True only when GEOQUEST_DEBUG is explicitly set to '1'."""
    return os.getenv("GEOQUEST_DEBUG") == "1"


def format_hp_bar(label: str, hp: int, max_hp: int, *, width: int = _BAR_WIDTH) -> str:
    """Return a one-line HP gauge such as ``Hero  [#####-----] HP 3/5``."""
    shown = max(0, min(hp, max_hp))
    filled = 0 if max_hp <= 0 else round(shown / max_hp * width)
    return f"{label:<16} [{'#' * filled}{'-' * (width - filled)}] HP {shown}/{max_hp}"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")
