"""Smoke tests for unified entry points.

These tests assert that `python -m maniaconv` and the console script
both resolve to the CLI's `main` function exposed under `maniaconv.ui.cli`.
"""

from importlib import import_module


def test_module_entry_point_exposes_main() -> None:
    """`python -m maniaconv` path exposes a `main` callable."""
    m = import_module("maniaconv.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `maniaconv.ui.cli:main` and is importable."""
    m = import_module("maniaconv.ui.cli")
    assert callable(m.main)
