"""Printer layout and formatting options."""

from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PrinterOptions:
    """Settings fixed for the lifetime of one print operation."""

    debug: bool = False
    """Annotate every token and comment with its source position."""

    # layout control
    tabwidth: int = 8
    usetabs: bool = True
    newlines: bool = True
    """Respect blank lines in the source beyond the required minimum."""
    maxnewlines: int = 3

    # formatting control
    comments: bool = True
    optsemicolons: bool = False

    def __post_init__(self):
        if self.tabwidth < 0:
            raise ValueError("tabwidth cannot be negative")
        if self.maxnewlines < 1:
            raise ValueError("maxnewlines must be at least 1")

    @property
    def padchar(self) -> str:
        return "\t" if self.usetabs else " "

    @staticmethod
    def from_namespace(namespace: argparse.Namespace) -> "PrinterOptions":
        """Build options from arguments registered by `add_printer_arguments`."""
        return PrinterOptions(
            debug=namespace.debug,
            tabwidth=namespace.tabwidth,
            usetabs=namespace.usetabs,
            newlines=namespace.newlines,
            maxnewlines=namespace.maxnewlines,
            comments=namespace.comments,
            optsemicolons=namespace.optsemicolons,
        )


def add_printer_arguments(parser: argparse.ArgumentParser) -> None:
    defaults = PrinterOptions()
    group = parser.add_argument_group("printer")
    group.add_argument(
        "--debug",
        action=argparse.BooleanOptionalAction,
        default=defaults.debug,
        help="print debugging information",
    )
    group.add_argument("--tabwidth", type=int, default=defaults.tabwidth, help="tab width")
    group.add_argument(
        "--usetabs",
        action=argparse.BooleanOptionalAction,
        default=defaults.usetabs,
        help="align with tabs instead of blanks",
    )
    group.add_argument(
        "--newlines",
        action=argparse.BooleanOptionalAction,
        default=defaults.newlines,
        help="respect newlines in source",
    )
    group.add_argument(
        "--maxnewlines",
        type=int,
        default=defaults.maxnewlines,
        help="max. number of consecutive newlines",
    )
    group.add_argument(
        "--comments",
        action=argparse.BooleanOptionalAction,
        default=defaults.comments,
        help="print comments",
    )
    group.add_argument(
        "--optsemicolons",
        action=argparse.BooleanOptionalAction,
        default=defaults.optsemicolons,
        help="print optional semicolons",
    )
