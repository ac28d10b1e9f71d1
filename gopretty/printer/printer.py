"""Token emission engine.

Every piece of output passes through `Printer.emit`, which applies the
pending separator, interleaves source comments that precede the token,
applies the pending newlines and finally writes the token. Node printers
(`gopretty.printer.nodes`) only set pending state and call `emit`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from gopretty.ast import Comment
from gopretty.diagnostics import Diagnostic, DiagnosticSpec
from gopretty.printer.errors import PrintError
from gopretty.printer.options import PrinterOptions
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
from gopretty.syntax import Token, token_string

logger = logging.getLogger(__name__)


class TextSink(Protocol):
    def write(self, text: str) -> int: ...


class Printer:
    """Formatting state of a single print operation."""

    def __init__(
        self,
        sink: TextSink,
        comments: Sequence[Comment] | None = None,
        options: PrinterOptions | None = None,
    ) -> None:
        self._sink = sink
        self._options = options or PrinterOptions()
        self._comments = CommentCursor(comments)
        self._pending = PendingFormat()
        self._counters = ScopeCounters()
        self._state = SemanticState.NORMAL
        self._last_state = SemanticState.NORMAL
        self._lastpos = 0  # pos after last string
        self._diagnostics: list[Diagnostic] = []

    @property
    def options(self) -> PrinterOptions:
        return self._options

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def comments(self) -> CommentCursor:
        return self._comments

    @property
    def separator(self) -> Separator:
        return self._pending.separator

    @separator.setter
    def separator(self, separator: Separator) -> None:
        self._pending.set_separator(separator)

    @property
    def newlines(self) -> int:
        return self._pending.newlines

    @newlines.setter
    def newlines(self, count: int) -> None:
        self._pending.set_newlines(count)

    @property
    def state(self) -> SemanticState:
        return self._state

    @state.setter
    def state(self, state: SemanticState) -> None:
        self._state = state

    @property
    def last_state(self) -> SemanticState:
        return self._last_state

    @property
    def level(self) -> int:
        return self._counters.level

    @property
    def indentation(self) -> int:
        return self._counters.indentation

    @property
    def lastpos(self) -> int:
        return self._lastpos

    def indent(self) -> None:
        self._counters.indentation += 1

    def dedent(self) -> None:
        self._counters.indentation -= 1

    # ----------------------------------------------------------------------
    # Emission

    def emit(self, pos: int, text: str) -> None:
        """Print `text` at source position `pos` (0: use the estimate)."""
        if pos == 0:
            pos = self._lastpos

        trailing = self._flush_separator()
        nlcount = self._interleave_comments(pos, trailing)

        # any pending separator or comment is printed in the previous state
        before_token(self._state, self._counters)
        self._flush_newlines(nlcount)

        if self._options.debug:
            self._write(f"[{pos}]")
        self._write(text)

        after_token(self._state, self._counters)
        self._last_state = self._state
        self._state = SemanticState.NORMAL

        self._lastpos = pos + len(text)  # rough estimate

    def token(self, pos: int, tok: Token) -> None:
        self.emit(pos, token_string(tok))

    def separate(self, separator: Separator) -> None:
        """Print `separator` now instead of at the next token."""
        self._pending.set_separator(separator)
        self.emit(0, "")

    def write_raw(self, text: str) -> None:
        """Write text bypassing pending state and comment interleaving."""
        self._write(text)

    def error(self, pos: int, tok: Token, msg: str, code: DiagnosticSpec) -> None:
        """Print an inline `<tok msg>` marker in place of a malformed node."""
        logger.warning("unsupported %s node %s at position %d", msg, tok.name, pos)
        self._diagnostics.append(
            Diagnostic(
                code=code.code,
                message=code.message,
                pos=pos,
                severity=code.severity,
                hint=code.hint,
                category=code.category,
            )
        )
        self.emit(0, "<")
        self.token(pos, tok)
        self.emit(0, " " + msg + ">")

    def finish(self) -> None:
        """Flush pending separators, the remaining comments and newlines."""
        self.emit(INFINITE_POS, "")

    # ----------------------------------------------------------------------
    # Emission steps

    def _flush_separator(self) -> str:
        # Returns the white space printed last, for comment placement.
        match self._pending.take_separator():
            case Separator.NONE:
                return ""
            case Separator.BLANK:
                self._write(" ")
                return " "
            case Separator.TAB:
                self._write("\t")
                return "\t"
            case Separator.COMMA:
                self._write(",")
                if self._pending.newlines == 0:
                    self._write(" ")
                    return " "
                return ""
            case Separator.SEMICOLON:
                # no semicolons at level 0
                if self._counters.level > 0:
                    self._write(";")
                    if self._pending.newlines == 0:
                        self._write(" ")
                        return " "
                return ""
            case separator:
                raise ValueError(f"Unknown separator: {separator!r}")

    def _interleave_comments(self, pos: int, trailing: str) -> int:
        # Returns the number of source line breaks seen without a comment
        # following them.
        nlcount = 0
        while self._options.comments and self._comments.has_comment_before(pos):
            comment = self._comments.current
            if comment.is_newline:
                nlcount += 1
            else:
                self._print_comment(comment, nlcount, trailing)
                nlcount = 0
            self._comments.advance()
        return nlcount

    def _print_comment(self, comment: Comment, nlcount: int, trailing: str) -> None:
        text = comment.text
        cpos = self._comments.position

        if nlcount > 0 or cpos == 0:
            # only white space before the comment on its line,
            # or the file starts with a comment
            if not self._options.newlines and cpos != 0:
                nlcount = 1
            self._newline(nlcount)
        elif comment.is_line_comment:
            # Trailing //-style comment goes into the next cell, unless a
            # scope was just opened: then 2 blanks, or the whole scope would
            # be aligned with the comment cell.
            if self._last_state == SemanticState.OPENING_SCOPE:
                if trailing == " ":
                    self._write(" ")
                elif trailing == "":
                    self._write("  ")
            elif trailing != "\t":
                self._write("\t")
        else:
            # trailing /*-style comment, surrounded by blanks
            if trailing == "":
                self._write(" ")
            text += " "

        if self._options.debug:
            self._write(f"[{cpos}]")
        self._write(text)

        # //-style comments must end in a newline
        if comment.is_line_comment and self._pending.newlines == 0:
            self._pending.set_newlines(1)

    def _flush_newlines(self, nlcount: int) -> None:
        # Extra source newlines are only honored where newlines are expected
        # anyway; without complete token positions anything else reflows.
        expecting = self._pending.newlines > 0 or self._state == SemanticState.INSIDE_LIST
        if self._options.newlines and expecting and nlcount > self._pending.newlines:
            self._pending.set_newlines(nlcount)
        self._newline(self._pending.newlines)
        self._pending.set_newlines(0)

    def _newline(self, count: int) -> None:
        if count > 0:
            count = min(count, self._options.maxnewlines)
            self._write("\n" * count)
            self._write("\t" * self._counters.indentation)

    def _write(self, text: str) -> None:
        try:
            self._sink.write(text)
        except (OSError, ValueError) as exc:
            raise PrintError(f"print error - cannot write output: {exc}") from exc
