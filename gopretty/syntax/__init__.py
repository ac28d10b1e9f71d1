"""Token vocabulary shared by the tree and the printer."""

from gopretty.syntax.tokens import (
    HIGHEST_PREC,
    LOWEST_PREC,
    UNARY_PREC,
    Token,
    lookup_keyword,
    precedence,
    token_string,
)

__all__ = [
    "HIGHEST_PREC",
    "LOWEST_PREC",
    "UNARY_PREC",
    "Token",
    "lookup_keyword",
    "precedence",
    "token_string",
]
