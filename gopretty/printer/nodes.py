"""Printing routines that turn syntax tree nodes into printer events."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

from gopretty.ast import (
    ArrayType,
    AstDecl,
    AstExpr,
    AstStat,
    AstType,
    BadStat,
    BadType,
    BasicLit,
    BinaryExpr,
    BlockStat,
    BranchStat,
    Call,
    CaseClause,
    ChanDir,
    ChanType,
    CompositeLit,
    DeclGroup,
    DeclStat,
    EllipsisType,
    ExprList,
    ExprStat,
    ForStat,
    FuncDecl,
    FuncLit,
    FuncType,
    Ident,
    IfStat,
    IncDecStat,
    Index,
    InterfaceType,
    LabeledStat,
    MapType,
    NamedType,
    PointerType,
    Program,
    Selector,
    StructType,
    SwitchStat,
    TypeExpr,
    UnaryExpr,
    ValueDecl,
)
from gopretty.diagnostics import (
    PRINTER_UNSUPPORTED_EXPRESSION,
    PRINTER_UNSUPPORTED_STATEMENT,
    PRINTER_UNSUPPORTED_TYPE,
)
from gopretty.printer.printer import Printer
from gopretty.printer.state import SemanticState, Separator
from gopretty.syntax import HIGHEST_PREC, LOWEST_PREC, UNARY_PREC, Token, precedence

CHAN_PREFIXES: Final[Mapping[ChanDir, str]] = MappingProxyType(
    {
        ChanDir.FULL: "chan ",
        ChanDir.RECV: "<-chan ",
        ChanDir.SEND: "chan <- ",
    }
)


# ----------------------------------------------------------------------------
# Types


def print_parameters(p: Printer, pos: int, entries: tuple[AstExpr, ...] | None) -> None:
    p.emit(pos, "(")
    if entries is not None:
        prev: Token | None = None
        for i, x in enumerate(entries):
            if i > 0:
                if prev == x.tok or prev == Token.TYPE:
                    p.separate(Separator.COMMA)
                else:
                    p.separate(Separator.BLANK)
            print_expr(p, x)
            prev = x.tok
    p.emit(0, ")")


def print_fields(p: Printer, entries: tuple[AstExpr, ...] | None, end: int) -> None:
    """Brace-delimited struct fields or interface methods, one group per line.

    Names sharing a type are comma-separated, a type follows its names after
    a tab, and a type or a field tag ends the group.
    """
    p.state = SemanticState.OPENING_SCOPE
    p.emit(0, "{")

    if entries is not None:
        p.newlines = 1
        prev: Token | None = None
        for i, x in enumerate(entries):
            if i > 0:
                if prev == Token.TYPE and x.tok != Token.STRING or prev == Token.STRING:
                    p.separator = Separator.SEMICOLON
                    p.newlines = 1
                elif prev == x.tok:
                    p.separator = Separator.COMMA
                else:
                    p.separator = Separator.TAB
            print_expr(p, x)
            prev = x.tok
        p.newlines = 1

    p.state = SemanticState.CLOSING_SCOPE
    p.emit(end, "}")


def print_type(p: Printer, t: AstType | None) -> None:
    match t:
        case NamedType():
            print_expr(p, t.name)

        case ArrayType():
            p.emit(t.pos, "[")
            if t.len is not None:
                print_expr(p, t.len)
            p.emit(0, "]")
            print_type(p, t.elt)

        case StructType():
            p.token(t.pos, Token.STRUCT)
            if t.fields is not None:
                p.separator = Separator.BLANK
                print_fields(p, t.fields, t.end)

        case InterfaceType():
            p.token(t.pos, Token.INTERFACE)
            if t.methods is not None:
                p.separator = Separator.BLANK
                print_fields(p, t.methods, t.end)

        case MapType():
            p.emit(t.pos, "map [")
            print_type(p, t.key)
            p.emit(0, "]")
            print_type(p, t.value)

        case ChanType():
            p.emit(t.pos, CHAN_PREFIXES[t.dir])
            print_type(p, t.elt)

        case PointerType():
            p.emit(t.pos, "*")
            print_type(p, t.elt)

        case FuncType():
            print_parameters(p, t.pos, t.params)
            if t.results:
                p.separator = Separator.BLANK
                if len(t.results) > 1:
                    print_parameters(p, 0, t.results)
                else:
                    # single, anonymous result type
                    print_expr(p, t.results[0])

        case EllipsisType():
            p.emit(t.pos, "...")

        case BadType():
            p.error(t.pos, t.tok, "type", PRINTER_UNSUPPORTED_TYPE)

        case _:
            p.error(getattr(t, "pos", 0), Token.ILLEGAL, "type", PRINTER_UNSUPPORTED_TYPE)


# ----------------------------------------------------------------------------
# Expressions


def print_expr1(p: Printer, x: AstExpr | None, prec1: int) -> None:
    """Print `x` in a context that binds at least as tight as `prec1`."""
    if x is None:
        return  # empty expression list

    match x:
        case TypeExpr():
            print_type(p, x.type)

        case Ident():
            p.emit(x.pos, x.name)

        case BasicLit():
            p.emit(x.pos, x.value)

        case FuncLit():
            p.emit(x.pos, "func")
            print_type(p, x.type)
            print_block(p, 0, x.body, x.end, indent=True)
            p.newlines = 0

        case ExprList():
            # not a binary expression: no blank before the comma
            print_expr(p, x.x)
            p.emit(x.pos, ",")
            p.separator = Separator.BLANK
            p.state = SemanticState.INSIDE_LIST
            print_expr(p, x.y)

        case Selector():
            print_expr1(p, x.x, HIGHEST_PREC)
            p.emit(x.pos, ".")
            if x.sel is not None:
                print_expr1(p, x.sel, HIGHEST_PREC)
            else:
                p.emit(0, "(")
                print_type(p, x.type)
                p.emit(0, ")")

        case Index():
            print_expr1(p, x.x, HIGHEST_PREC)
            p.emit(x.pos, "[")
            print_expr1(p, x.index, 0)
            p.emit(0, "]")

        case Call():
            print_expr1(p, x.fun, HIGHEST_PREC)
            p.emit(x.pos, "(")
            print_expr(p, x.args)
            p.emit(0, ")")

        case CompositeLit():
            print_type(p, x.type)
            p.emit(x.pos, "{")
            print_expr(p, x.elts)
            p.emit(0, "}")

        case UnaryExpr():
            _print_operation(p, x.pos, x.op, None, x.x, prec1)

        case BinaryExpr():
            _print_operation(p, x.pos, x.op, x.x, x.y, prec1)

        case _:
            p.error(getattr(x, "pos", 0), Token.ILLEGAL, "expr", PRINTER_UNSUPPORTED_EXPRESSION)


def _print_operation(
    p: Printer,
    pos: int,
    op: Token,
    x: AstExpr | None,
    y: AstExpr,
    prec1: int,
) -> None:
    # unary and binary expressions including ":" for pairs
    prec = UNARY_PREC if x is None else precedence(op)
    if prec < prec1:
        p.emit(0, "(")
    if x is None:
        p.token(pos, op)
    else:
        print_expr1(p, x, prec)
        p.separator = Separator.BLANK
        p.token(pos, op)
        p.separator = Separator.BLANK
    print_expr1(p, y, prec)
    if prec < prec1:
        p.emit(0, ")")


def print_expr(p: Printer, x: AstExpr | None) -> None:
    print_expr1(p, x, LOWEST_PREC)


# ----------------------------------------------------------------------------
# Statements


def print_statement_list(p: Printer, stats: tuple[AstStat, ...] | None) -> None:
    if stats is not None:
        p.newlines = 1
        for s in stats:
            print_stat(p, s)
            p.newlines = 1


def print_block(
    p: Printer,
    pos: int,
    stats: tuple[AstStat, ...] | None,
    end: int,
    *,
    indent: bool,
) -> None:
    p.state = SemanticState.OPENING_SCOPE
    p.emit(pos, "{")
    if not indent:
        p.dedent()
    print_statement_list(p, stats)
    if not indent:
        p.indent()
    if not p.options.optsemicolons:
        p.separator = Separator.NONE
    p.state = SemanticState.CLOSING_SCOPE
    p.emit(end, "}")


def print_control_clause(
    p: Printer,
    tok: Token,
    init: AstStat | None,
    cond: AstExpr | None,
    post: AstStat | None,
) -> None:
    has_post = tok == Token.FOR and post is not None

    p.separator = Separator.BLANK
    if init is None and not has_post:
        # no semicolons required
        if cond is not None:
            print_expr(p, cond)
    else:
        # all semicolons required; they are not separators, print them raw
        if init is not None:
            print_stat(p, init)
            p.separator = Separator.NONE
        p.write_raw(";")
        p.separator = Separator.BLANK
        if cond is not None:
            print_expr(p, cond)
            p.separator = Separator.NONE
        if tok == Token.FOR:
            p.write_raw(";")
            p.separator = Separator.BLANK
            if has_post:
                print_stat(p, post)
    p.separator = Separator.BLANK


def print_stat(p: Printer, s: AstStat) -> None:
    match s:
        case ExprStat():
            print_expr(p, s.x)
            p.separator = Separator.SEMICOLON

        case LabeledStat():
            p.dedent()
            print_expr(p, s.label)
            p.token(s.pos, Token.COLON)
            p.indent()
            p.separator = Separator.NONE

        case DeclStat():
            print_declaration(p, s.decl, parenthesized=False)

        case IncDecStat():
            print_expr(p, s.x)
            p.token(s.pos, s.tok)
            p.separator = Separator.SEMICOLON

        case BlockStat():
            print_block(p, s.pos, s.body, s.end, indent=True)

        case IfStat():
            p.emit(s.pos, "if")
            print_control_clause(p, Token.IF, s.init, s.cond, None)
            print_block(p, 0, s.body, s.end, indent=True)
            if s.else_ is not None:
                p.separator = Separator.BLANK
                p.emit(0, "else")
                p.separator = Separator.BLANK
                print_stat(p, s.else_)

        case ForStat():
            p.emit(s.pos, "for")
            print_control_clause(p, Token.FOR, s.init, s.cond, s.post)
            print_block(p, 0, s.body, s.end, indent=True)

        case SwitchStat():
            p.token(s.pos, s.tok)
            print_control_clause(p, s.tok, s.init, s.tag, None)
            print_block(p, 0, s.body, s.end, indent=False)

        case CaseClause():
            p.token(s.pos, s.tok)
            if s.x is not None:
                p.separator = Separator.BLANK
                print_expr(p, s.x)
            p.emit(0, ":")
            p.indent()
            print_statement_list(p, s.body)
            p.dedent()
            p.newlines = 1

        case BranchStat():
            p.token(s.pos, s.tok)
            if s.x is not None:
                p.separator = Separator.BLANK
                print_expr(p, s.x)
            p.separator = Separator.SEMICOLON

        case BadStat():
            p.error(s.pos, s.tok, "stat", PRINTER_UNSUPPORTED_STATEMENT)

        case _:
            p.error(getattr(s, "pos", 0), Token.ILLEGAL, "stat", PRINTER_UNSUPPORTED_STATEMENT)


# ----------------------------------------------------------------------------
# Declarations


def print_declaration(p: Printer, d: AstDecl, *, parenthesized: bool) -> None:
    """Print a declaration; group members omit the keyword."""
    if not parenthesized:
        if d.exported:
            p.emit(d.pos, "export")
            p.separator = Separator.BLANK
        p.token(d.pos, d.tok)
        p.separator = Separator.BLANK

    match d:
        case DeclGroup():
            p.state = SemanticState.OPENING_SCOPE
            p.emit(0, "(")
            if d.members:
                p.newlines = 1
                for member in d.members:
                    print_declaration(p, member, parenthesized=True)
                    p.separator = Separator.SEMICOLON
                    p.newlines = 1
            p.state = SemanticState.CLOSING_SCOPE
            p.emit(d.end, ")")

        case FuncDecl():
            if d.recv is not None:
                print_parameters(p, 0, d.recv)
                p.separator = Separator.BLANK
            print_expr(p, d.ident)
            print_type(p, d.type)
            if d.body is not None:
                p.separator = Separator.BLANK
                print_block(p, 0, d.body, d.end, indent=True)
            p.separator = Separator.SEMICOLON

        case ValueDecl():
            print_expr(p, d.ident)
            if d.type is not None:
                p.separator = Separator.BLANK
                print_type(p, d.type)
                p.separator = Separator.TAB
            if d.value is not None:
                if d.tok != Token.IMPORT:
                    p.separator = Separator.TAB
                    p.emit(0, "=")
                    p.separator = Separator.BLANK
                elif d.ident is not None:
                    p.separator = Separator.BLANK
                print_expr(p, d.value)
            if d.tok != Token.TYPE:
                p.separator = Separator.SEMICOLON

    p.newlines = 2


# ----------------------------------------------------------------------------
# Program


def print_program(p: Printer, prog: Program) -> None:
    p.emit(prog.pos, "package")
    p.separator = Separator.BLANK
    print_expr(p, prog.ident)
    p.newlines = 1
    for d in prog.decls:
        print_declaration(p, d, parenthesized=False)
    p.newlines = 1
