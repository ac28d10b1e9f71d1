"""Syntax tree data model consumed by the printer.

Every node carries the source position of its first token (0 when unknown).
Nodes that end in a closing brace or parenthesis also carry ``end``, the
position of that closer. Lists that may be absent (forward declarations,
empty interface bodies, ...) are ``None`` rather than empty tuples: the
printer distinguishes the two.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from gopretty.syntax import Token


@dataclass(frozen=True, slots=True)
class Comment:
    """Comment token or blank-line marker (``text == "\\n"``)."""

    pos: int
    text: str

    @property
    def is_newline(self) -> bool:
        return self.text == "\n"

    @property
    def is_line_comment(self) -> bool:
        return self.text[1:2] == "/"


# -------------------------
# Types
# -------------------------


class ChanDir(IntEnum):
    FULL = 0
    SEND = 1
    RECV = 2


@dataclass(frozen=True, slots=True)
class NamedType:
    """Type name, possibly qualified (``os.Error``)."""

    pos: int
    name: AstExpr


@dataclass(frozen=True, slots=True)
class ArrayType:
    pos: int
    elt: AstType
    len: AstExpr | None = None


@dataclass(frozen=True, slots=True)
class StructType:
    pos: int
    fields: tuple[AstExpr, ...] | None = None
    end: int = 0


@dataclass(frozen=True, slots=True)
class InterfaceType:
    pos: int
    methods: tuple[AstExpr, ...] | None = None
    end: int = 0


@dataclass(frozen=True, slots=True)
class MapType:
    pos: int
    key: AstType
    value: AstType


@dataclass(frozen=True, slots=True)
class ChanType:
    pos: int
    elt: AstType
    dir: ChanDir = ChanDir.FULL


@dataclass(frozen=True, slots=True)
class PointerType:
    pos: int
    elt: AstType


@dataclass(frozen=True, slots=True)
class FuncType:
    """Function signature: parameter entries and optional result entries."""

    pos: int
    params: tuple[AstExpr, ...] | None = None
    results: tuple[AstExpr, ...] | None = None


@dataclass(frozen=True, slots=True)
class EllipsisType:
    pos: int


@dataclass(frozen=True, slots=True)
class BadType:
    """Type the parser could not classify."""

    pos: int
    tok: Token


# -------------------------
# Expressions
# -------------------------


@dataclass(frozen=True, slots=True)
class Ident:
    pos: int
    name: str

    @property
    def tok(self) -> Token:
        return Token.IDENT


@dataclass(frozen=True, slots=True)
class BasicLit:
    """INT, FLOAT, CHAR or STRING literal, kept as raw source text."""

    pos: int
    kind: Token
    value: str

    @property
    def tok(self) -> Token:
        return self.kind


@dataclass(frozen=True, slots=True)
class TypeExpr:
    """A type in expression position (parameter and field types)."""

    pos: int
    type: AstType

    @property
    def tok(self) -> Token:
        return Token.TYPE


@dataclass(frozen=True, slots=True)
class FuncLit:
    pos: int
    type: FuncType
    body: tuple[AstStat, ...] | None = None
    end: int = 0

    @property
    def tok(self) -> Token:
        return Token.FUNC


@dataclass(frozen=True, slots=True)
class ExprList:
    """Two-element comma list; longer lists nest on the right."""

    pos: int
    x: AstExpr
    y: AstExpr

    @property
    def tok(self) -> Token:
        return Token.COMMA


@dataclass(frozen=True, slots=True)
class Selector:
    """``x.sel``, or the type guard ``x.(type)`` when ``sel`` is None."""

    pos: int
    x: AstExpr
    sel: AstExpr | None = None
    type: AstType | None = None

    @property
    def tok(self) -> Token:
        return Token.PERIOD


@dataclass(frozen=True, slots=True)
class Index:
    pos: int
    x: AstExpr
    index: AstExpr | None

    @property
    def tok(self) -> Token:
        return Token.LBRACK


@dataclass(frozen=True, slots=True)
class Call:
    pos: int
    fun: AstExpr
    args: AstExpr | None = None

    @property
    def tok(self) -> Token:
        return Token.LPAREN


@dataclass(frozen=True, slots=True)
class CompositeLit:
    pos: int
    type: AstType
    elts: AstExpr | None = None

    @property
    def tok(self) -> Token:
        return Token.LBRACE


@dataclass(frozen=True, slots=True)
class UnaryExpr:
    pos: int
    op: Token
    x: AstExpr

    @property
    def tok(self) -> Token:
        return self.op


@dataclass(frozen=True, slots=True)
class BinaryExpr:
    """Binary operation, assignment, or ``key : value`` pair."""

    pos: int
    op: Token
    x: AstExpr
    y: AstExpr

    @property
    def tok(self) -> Token:
        return self.op


# -------------------------
# Statements
# -------------------------


@dataclass(frozen=True, slots=True)
class ExprStat:
    pos: int
    x: AstExpr


@dataclass(frozen=True, slots=True)
class LabeledStat:
    pos: int
    label: AstExpr


@dataclass(frozen=True, slots=True)
class DeclStat:
    pos: int
    decl: AstDecl


@dataclass(frozen=True, slots=True)
class IncDecStat:
    pos: int
    x: AstExpr
    tok: Token = Token.INC


@dataclass(frozen=True, slots=True)
class BlockStat:
    pos: int
    body: tuple[AstStat, ...] | None = None
    end: int = 0


@dataclass(frozen=True, slots=True)
class IfStat:
    pos: int
    cond: AstExpr | None = None
    body: tuple[AstStat, ...] | None = None
    init: AstStat | None = None
    else_: AstStat | None = None
    end: int = 0


@dataclass(frozen=True, slots=True)
class ForStat:
    pos: int
    cond: AstExpr | None = None
    body: tuple[AstStat, ...] | None = None
    init: AstStat | None = None
    post: AstStat | None = None
    end: int = 0


@dataclass(frozen=True, slots=True)
class SwitchStat:
    """``switch`` or ``select``; the body holds case clauses."""

    pos: int
    tag: AstExpr | None = None
    body: tuple[AstStat, ...] | None = None
    init: AstStat | None = None
    tok: Token = Token.SWITCH
    end: int = 0


@dataclass(frozen=True, slots=True)
class CaseClause:
    pos: int
    x: AstExpr | None = None
    body: tuple[AstStat, ...] | None = None
    tok: Token = Token.CASE


@dataclass(frozen=True, slots=True)
class BranchStat:
    """go, return, fallthrough, break, continue and goto."""

    pos: int
    tok: Token
    x: AstExpr | None = None


@dataclass(frozen=True, slots=True)
class BadStat:
    pos: int
    tok: Token


# -------------------------
# Declarations
# -------------------------


@dataclass(frozen=True, slots=True)
class ValueDecl:
    """Single const, type, var or import entry."""

    pos: int
    tok: Token
    ident: AstExpr | None = None
    type: AstType | None = None
    value: AstExpr | None = None
    exported: bool = False


@dataclass(frozen=True, slots=True)
class DeclGroup:
    """Parenthesized const, type, var or import group."""

    pos: int
    tok: Token
    members: tuple[AstDecl, ...] = ()
    exported: bool = False
    end: int = 0


@dataclass(frozen=True, slots=True)
class FuncDecl:
    """Function or method; ``body is None`` marks a forward declaration."""

    pos: int
    ident: AstExpr
    type: FuncType
    recv: tuple[AstExpr, ...] | None = None
    body: tuple[AstStat, ...] | None = None
    exported: bool = False
    end: int = 0

    @property
    def tok(self) -> Token:
        return Token.FUNC


@dataclass(frozen=True, slots=True)
class Program:
    pos: int
    ident: AstExpr
    decls: tuple[AstDecl, ...] = ()
    comments: tuple[Comment, ...] = ()


AstType = (
    NamedType
    | ArrayType
    | StructType
    | InterfaceType
    | MapType
    | ChanType
    | PointerType
    | FuncType
    | EllipsisType
    | BadType
)

AstExpr = (
    Ident
    | BasicLit
    | TypeExpr
    | FuncLit
    | ExprList
    | Selector
    | Index
    | Call
    | CompositeLit
    | UnaryExpr
    | BinaryExpr
)

AstStat = (
    ExprStat
    | LabeledStat
    | DeclStat
    | IncDecStat
    | BlockStat
    | IfStat
    | ForStat
    | SwitchStat
    | CaseClause
    | BranchStat
    | BadStat
)

AstDecl = ValueDecl | DeclGroup | FuncDecl
