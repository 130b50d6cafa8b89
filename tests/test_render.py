"""Tests for CLI rendering utilities."""
from geoquest.presentation.cli.render import debug_enabled, format_hp_bar, render_menu


def test_hp_bar_full_and_empty() -> None:
    full = format_hp_bar("Ash", 5, 5, width=10)
    empty = format_hp_bar("Ash", 0, 5, width=10)
    assert full.endswith("[##########] HP 5/5")
    assert empty.endswith("[----------] HP 0/5")


def test_hp_bar_clamps_out_of_range_values() -> None:
    assert format_hp_bar("Ash", 9, 5, width=10).endswith("HP 5/5")
    assert format_hp_bar("Ash", -2, 5, width=10).endswith("HP 0/5")


def test_render_menu_numbers_options(capsys) -> None:
    render_menu("Title", ["Start", "Quit"])
    out = capsys.readouterr().out
    assert "=== Title ===" in out
    assert "1. Start" in out
    assert "2. Quit" in out


def test_debug_flag_requires_exact_value(monkeypatch) -> None:
    monkeypatch.setenv("GEOQUEST_DEBUG", "1")
    assert debug_enabled()
    monkeypatch.setenv("GEOQUEST_DEBUG", "true")
    assert not debug_enabled()
    monkeypatch.delenv("GEOQUEST_DEBUG")
    assert not debug_enabled()
