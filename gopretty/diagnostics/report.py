"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from gopretty.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)
