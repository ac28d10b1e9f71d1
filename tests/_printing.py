"""Shared tree builders and rendering helpers for printer tests."""

from __future__ import annotations

import io
from collections.abc import Callable, Sequence
from typing import Any

from gopretty.ast import BasicLit, Comment, Ident, TypeExpr, type_expr, type_name
from gopretty.printer import Printer, PrinterOptions
from gopretty.syntax import Token


def render(
    print_fn: Callable[..., None],
    node: Any,
    *,
    options: PrinterOptions | None = None,
    comments: Sequence[Comment] | None = None,
    **kwargs: Any,
) -> str:
    """Run one node printer on a fresh printer and return the raw output."""
    sink = io.StringIO()
    printer = Printer(sink, comments, options)
    print_fn(printer, node, **kwargs)
    printer.finish()
    return sink.getvalue()


def name(text: str, pos: int = 0) -> Ident:
    return Ident(pos=pos, name=text)


def num(value: int, pos: int = 0) -> BasicLit:
    return BasicLit(pos=pos, kind=Token.INT, value=str(value))


def string(text: str, pos: int = 0) -> BasicLit:
    return BasicLit(pos=pos, kind=Token.STRING, value=f'"{text}"')


def typ(text: str, pos: int = 0) -> TypeExpr:
    return type_expr(type_name(pos, text))


class BrokenStream:
    """Text stream whose writes always fail."""

    def write(self, text: str) -> int:
        raise OSError("disk full")

    def flush(self) -> None:
        raise OSError("disk full")
