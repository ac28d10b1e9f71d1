"""Format run result carriers."""

from __future__ import annotations

from dataclasses import dataclass

from gopretty.diagnostics import Diagnostic, has_errors


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Formatted source text of one program plus printer diagnostics."""

    formatted_text: str
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)
