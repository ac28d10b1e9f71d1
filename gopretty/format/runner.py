"""Print a program to a text stream or into a string."""

from __future__ import annotations

import io
import logging
from typing import TextIO

from gopretty.ast import Program
from gopretty.diagnostics import Diagnostic
from gopretty.format.results import FormatRunResult
from gopretty.printer import Printer, PrinterOptions, TabWriter
from gopretty.printer import print_program as _print_program

logger = logging.getLogger(__name__)


def print_program(
    program: Program,
    output: TextIO,
    options: PrinterOptions | None = None,
) -> list[Diagnostic]:
    """Print `program` to `output`, column-aligned.

    Raises PrintError if the output cannot be written or flushed; nothing
    is retried and no partial result is reported.
    """
    options = options or PrinterOptions()
    writer = TabWriter(output, tabwidth=options.tabwidth, padding=1, padchar=options.padchar)
    printer = Printer(writer, program.comments, options)

    logger.debug(
        "printing program with %d declarations and %d comments",
        len(program.decls),
        len(program.comments),
    )
    _print_program(printer, program)
    printer.finish()
    writer.flush()
    logger.debug("printed program, %d diagnostics", len(printer.diagnostics))

    return printer.diagnostics


def run_format(program: Program, options: PrinterOptions | None = None) -> FormatRunResult:
    """Format `program` into a string."""
    buffer = io.StringIO()
    diagnostics = print_program(program, buffer, options)
    return FormatRunResult(formatted_text=buffer.getvalue(), diagnostics=diagnostics)
