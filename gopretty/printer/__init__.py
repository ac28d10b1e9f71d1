"""Printer: emission engine, node printers and the column-aligning sink."""

from gopretty.printer.errors import PrintError
from gopretty.printer.nodes import (
    print_block,
    print_control_clause,
    print_declaration,
    print_expr,
    print_expr1,
    print_fields,
    print_parameters,
    print_program,
    print_stat,
    print_statement_list,
    print_type,
)
from gopretty.printer.options import PrinterOptions, add_printer_arguments
from gopretty.printer.printer import Printer, TextSink
from gopretty.printer.state import (
    INFINITE_POS,
    CommentCursor,
    PendingFormat,
    ScopeCounters,
    SemanticState,
    Separator,
    after_token,
    before_token,
)
from gopretty.printer.tabwriter import TabWriter

__all__ = [
    "INFINITE_POS",
    "CommentCursor",
    "PendingFormat",
    "PrintError",
    "Printer",
    "PrinterOptions",
    "ScopeCounters",
    "SemanticState",
    "Separator",
    "TabWriter",
    "TextSink",
    "add_printer_arguments",
    "after_token",
    "before_token",
    "print_block",
    "print_control_clause",
    "print_declaration",
    "print_expr",
    "print_expr1",
    "print_fields",
    "print_parameters",
    "print_program",
    "print_stat",
    "print_statement_list",
    "print_type",
]
