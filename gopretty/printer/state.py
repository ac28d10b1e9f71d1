"""Deferred formatting state, semantic states and the comment cursor."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Final, Mapping

from gopretty.ast import Comment

INFINITE_POS: Final[int] = 1 << 30
"""Comment position used once the comment list is exhausted."""


class Separator(IntEnum):
    """Separators are printed in a delayed fashion, depending on context."""

    NONE = 0
    BLANK = 1
    TAB = 2
    COMMA = 3
    SEMICOLON = 4


class SemanticState(IntEnum):
    NORMAL = 0
    OPENING_SCOPE = 1  # controls indentation, scope level
    CLOSING_SCOPE = 2  # controls indentation, scope level
    INSIDE_LIST = 3  # controls extra line breaks


@dataclass(slots=True)
class PendingFormat:
    """One separator and one newline count, applied at the next token."""

    separator: Separator = Separator.NONE
    newlines: int = 0

    def set_separator(self, separator: Separator) -> None:
        self.separator = separator

    def set_newlines(self, count: int) -> None:
        self.newlines = count

    def take_separator(self) -> Separator:
        separator = self.separator
        self.separator = Separator.NONE
        return separator


@dataclass(slots=True)
class ScopeCounters:
    """Brace nesting depth and the indentation actually printed."""

    level: int = 0
    indentation: int = 0


StateHandler = Callable[[ScopeCounters], None]


def _noop(counters: ScopeCounters) -> None:
    pass


def _dedent(counters: ScopeCounters) -> None:
    counters.indentation -= 1


def _open_scope(counters: ScopeCounters) -> None:
    counters.level += 1
    counters.indentation += 1


def _close_scope(counters: ScopeCounters) -> None:
    counters.level -= 1


# Applied after pending separators and comments are printed but before the
# pending newlines, so a closing token lands on the outer indentation.
BEFORE_TOKEN: Final[Mapping[SemanticState, StateHandler]] = MappingProxyType(
    {
        SemanticState.NORMAL: _noop,
        SemanticState.OPENING_SCOPE: _noop,
        SemanticState.CLOSING_SCOPE: _dedent,
        SemanticState.INSIDE_LIST: _noop,
    }
)

AFTER_TOKEN: Final[Mapping[SemanticState, StateHandler]] = MappingProxyType(
    {
        SemanticState.NORMAL: _noop,
        SemanticState.OPENING_SCOPE: _open_scope,
        SemanticState.CLOSING_SCOPE: _close_scope,
        SemanticState.INSIDE_LIST: _noop,
    }
)


def before_token(state: SemanticState, counters: ScopeCounters) -> None:
    BEFORE_TOKEN[state](counters)


def after_token(state: SemanticState, counters: ScopeCounters) -> None:
    AFTER_TOKEN[state](counters)


class CommentCursor:
    """Forward-only cursor over the position-ordered comment list."""

    def __init__(self, comments: Sequence[Comment] | None) -> None:
        self._comments: Sequence[Comment] = comments if comments is not None else ()
        self._index = -1
        self._position = INFINITE_POS
        self.advance()

    @property
    def index(self) -> int:
        return self._index

    @property
    def position(self) -> int:
        """Position of the current comment, or INFINITE_POS when exhausted."""
        return self._position

    @property
    def current(self) -> Comment:
        return self._comments[self._index]

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._comments)

    def has_comment_before(self, pos: int) -> bool:
        return self._position < pos

    def advance(self) -> None:
        self._index += 1
        if self._index < len(self._comments):
            self._position = self._comments[self._index].pos
        else:
            self._position = INFINITE_POS
