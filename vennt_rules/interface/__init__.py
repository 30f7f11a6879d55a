"""Command-line ability report."""

from .report import AbilityRow, build_report, render_report

__all__ = [
    "AbilityRow",
    "build_report",
    "render_report",
]
