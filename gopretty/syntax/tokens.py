"""Token kinds, canonical token text and operator precedence."""

from enum import IntEnum
from types import MappingProxyType
from typing import Final, Mapping


class Token(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    ILLEGAL = 0
    EOF = 1
    COMMENT = 2

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENT = 10
    INT = 11
    FLOAT = 12
    CHAR = 13
    STRING = 14

    # -------------------------
    # Operators
    # -------------------------
    ADD = 20  # +
    SUB = 21  # -
    MUL = 22  # *
    QUO = 23  # /
    REM = 24  # %
    AND = 25  # &
    OR = 26  # |
    XOR = 27  # ^
    SHL = 28  # <<
    SHR = 29  # >>
    AND_NOT = 30  # &^

    ADD_ASSIGN = 40  # +=
    SUB_ASSIGN = 41  # -=
    MUL_ASSIGN = 42  # *=
    QUO_ASSIGN = 43  # /=
    REM_ASSIGN = 44  # %=
    AND_ASSIGN = 45  # &=
    OR_ASSIGN = 46  # |=
    XOR_ASSIGN = 47  # ^=
    SHL_ASSIGN = 48  # <<=
    SHR_ASSIGN = 49  # >>=
    AND_NOT_ASSIGN = 50  # &^=

    LAND = 60  # &&
    LOR = 61  # ||
    ARROW = 62  # <-
    INC = 63  # ++
    DEC = 64  # --

    EQL = 70  # ==
    LSS = 71  # <
    GTR = 72  # >
    ASSIGN = 73  # =
    NOT = 74  # !
    NEQ = 75  # !=
    LEQ = 76  # <=
    GEQ = 77  # >=
    DEFINE = 78  # :=
    ELLIPSIS = 79  # ...

    # -------------------------
    # Delimiters
    # -------------------------
    LPAREN = 80  # (
    LBRACK = 81  # [
    LBRACE = 82  # {
    COMMA = 83  # ,
    PERIOD = 84  # .
    RPAREN = 85  # )
    RBRACK = 86  # ]
    RBRACE = 87  # }
    SEMICOLON = 88  # ;
    COLON = 89  # :

    # -------------------------
    # Keywords
    # -------------------------
    BREAK = 100
    CASE = 101
    CHAN = 102
    CONST = 103
    CONTINUE = 104
    DEFAULT = 105
    ELSE = 106
    EXPORT = 107
    FALLTHROUGH = 108
    FOR = 109
    FUNC = 110
    GO = 111
    GOTO = 112
    IF = 113
    IMPORT = 114
    INTERFACE = 115
    MAP = 116
    PACKAGE = 117
    RANGE = 118
    RETURN = 119
    SELECT = 120
    STRUCT = 121
    SWITCH = 122
    TYPE = 123
    VAR = 124

    # -------------------------
    # Pseudo tokens (tree tags only, never scanned)
    # -------------------------
    EXPRSTAT = 200

    @property
    def is_literal(self) -> bool:
        return Token.IDENT <= self <= Token.STRING

    @property
    def is_operator(self) -> bool:
        return Token.ADD <= self <= Token.COLON

    @property
    def is_keyword(self) -> bool:
        return Token.BREAK <= self <= Token.VAR


_TOKEN_TEXT: Final[Mapping[Token, str]] = MappingProxyType(
    {
        Token.ILLEGAL: "ILLEGAL",
        Token.EOF: "EOF",
        Token.COMMENT: "COMMENT",
        Token.IDENT: "IDENT",
        Token.INT: "INT",
        Token.FLOAT: "FLOAT",
        Token.CHAR: "CHAR",
        Token.STRING: "STRING",
        Token.ADD: "+",
        Token.SUB: "-",
        Token.MUL: "*",
        Token.QUO: "/",
        Token.REM: "%",
        Token.AND: "&",
        Token.OR: "|",
        Token.XOR: "^",
        Token.SHL: "<<",
        Token.SHR: ">>",
        Token.AND_NOT: "&^",
        Token.ADD_ASSIGN: "+=",
        Token.SUB_ASSIGN: "-=",
        Token.MUL_ASSIGN: "*=",
        Token.QUO_ASSIGN: "/=",
        Token.REM_ASSIGN: "%=",
        Token.AND_ASSIGN: "&=",
        Token.OR_ASSIGN: "|=",
        Token.XOR_ASSIGN: "^=",
        Token.SHL_ASSIGN: "<<=",
        Token.SHR_ASSIGN: ">>=",
        Token.AND_NOT_ASSIGN: "&^=",
        Token.LAND: "&&",
        Token.LOR: "||",
        Token.ARROW: "<-",
        Token.INC: "++",
        Token.DEC: "--",
        Token.EQL: "==",
        Token.LSS: "<",
        Token.GTR: ">",
        Token.ASSIGN: "=",
        Token.NOT: "!",
        Token.NEQ: "!=",
        Token.LEQ: "<=",
        Token.GEQ: ">=",
        Token.DEFINE: ":=",
        Token.ELLIPSIS: "...",
        Token.LPAREN: "(",
        Token.LBRACK: "[",
        Token.LBRACE: "{",
        Token.COMMA: ",",
        Token.PERIOD: ".",
        Token.RPAREN: ")",
        Token.RBRACK: "]",
        Token.RBRACE: "}",
        Token.SEMICOLON: ";",
        Token.COLON: ":",
    }
)

_KEYWORDS: Final[Mapping[str, Token]] = MappingProxyType(
    {tok.name.lower(): tok for tok in Token if tok.is_keyword}
)

# Precedence-based expression printing relies on these ordering guarantees:
# LOWEST_PREC < every binary precedence < UNARY_PREC < HIGHEST_PREC.
LOWEST_PREC: Final[int] = -1
UNARY_PREC: Final[int] = 8
HIGHEST_PREC: Final[int] = 9

_PRECEDENCE: Final[Mapping[Token, int]] = MappingProxyType(
    {
        Token.COLON: 0,
        Token.ASSIGN: 1,
        Token.DEFINE: 1,
        Token.ADD_ASSIGN: 1,
        Token.SUB_ASSIGN: 1,
        Token.MUL_ASSIGN: 1,
        Token.QUO_ASSIGN: 1,
        Token.REM_ASSIGN: 1,
        Token.AND_ASSIGN: 1,
        Token.OR_ASSIGN: 1,
        Token.XOR_ASSIGN: 1,
        Token.SHL_ASSIGN: 1,
        Token.SHR_ASSIGN: 1,
        Token.AND_NOT_ASSIGN: 1,
        Token.LOR: 2,
        Token.LAND: 3,
        Token.ARROW: 4,
        Token.EQL: 5,
        Token.NEQ: 5,
        Token.LSS: 5,
        Token.LEQ: 5,
        Token.GTR: 5,
        Token.GEQ: 5,
        Token.ADD: 6,
        Token.SUB: 6,
        Token.OR: 6,
        Token.XOR: 6,
        Token.MUL: 7,
        Token.QUO: 7,
        Token.REM: 7,
        Token.SHL: 7,
        Token.SHR: 7,
        Token.AND: 7,
        Token.AND_NOT: 7,
    }
)


def token_string(tok: Token) -> str:
    """Canonical source text of a token.

    Keywords render as their spelling; pseudo tokens fall back to the
    lower-case enum name so that error markers stay readable.
    """
    text = _TOKEN_TEXT.get(tok)
    if text is not None:
        return text
    return tok.name.lower()


def precedence(tok: Token) -> int:
    """Binary operator precedence, or LOWEST_PREC for non-operators."""
    return _PRECEDENCE.get(tok, LOWEST_PREC)


def lookup_keyword(text: str) -> Token | None:
    return _KEYWORDS.get(text)
