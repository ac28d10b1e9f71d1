"""Canonical source printer for a brace-delimited, statically typed language."""

from gopretty.format import FormatRunResult, print_program, run_format
from gopretty.printer import PrintError, PrinterOptions

__all__ = [
    "FormatRunResult",
    "PrintError",
    "PrinterOptions",
    "print_program",
    "run_format",
]
