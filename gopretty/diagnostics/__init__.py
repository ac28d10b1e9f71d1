"""Diagnostics."""

from gopretty.diagnostics.codes import (
    PRINTER_UNSUPPORTED_EXPRESSION,
    PRINTER_UNSUPPORTED_STATEMENT,
    PRINTER_UNSUPPORTED_TYPE,
    DiagnosticSpec,
)
from gopretty.diagnostics.diagnostic import Diagnostic, Severity
from gopretty.diagnostics.report import has_errors

__all__ = [
    "PRINTER_UNSUPPORTED_EXPRESSION",
    "PRINTER_UNSUPPORTED_STATEMENT",
    "PRINTER_UNSUPPORTED_TYPE",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
]
