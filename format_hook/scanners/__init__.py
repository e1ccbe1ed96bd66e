"""Scanners for formatting deviations in staged content."""

from .format_diff import (
    FormatDiffScanner,
    count_patch_lines,
    pending_patch,
)

__all__ = [
    "FormatDiffScanner",
    "count_patch_lines",
    "pending_patch",
]
