"""Formatting entrypoints."""

from gopretty.format.results import FormatRunResult
from gopretty.format.runner import print_program, run_format

__all__ = [
    "FormatRunResult",
    "print_program",
    "run_format",
]
