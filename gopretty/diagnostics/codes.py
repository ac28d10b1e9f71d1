"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PRINTER_UNSUPPORTED_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PRINTER_UNSUPPORTED_TYPE",
    message="Unsupported type node; printed an inline error marker.",
    hint="The tree contains a type the printer has no layout for.",
    severity="warning",
    category="printer",
)

PRINTER_UNSUPPORTED_STATEMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PRINTER_UNSUPPORTED_STATEMENT",
    message="Unsupported statement node; printed an inline error marker.",
    hint="The tree contains a statement the printer has no layout for.",
    severity="warning",
    category="printer",
)

PRINTER_UNSUPPORTED_EXPRESSION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PRINTER_UNSUPPORTED_EXPRESSION",
    message="Unsupported expression node; printed an inline error marker.",
    hint="The tree contains an expression the printer has no layout for.",
    severity="warning",
    category="printer",
)
