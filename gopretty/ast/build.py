"""Small constructors for trees assembled by hand or by a parser front end."""

from __future__ import annotations

from gopretty.ast.model import AstExpr, AstType, ExprList, Ident, NamedType, TypeExpr


def ident(pos: int, name: str) -> Ident:
    return Ident(pos=pos, name=name)


def type_name(pos: int, name: str) -> NamedType:
    """Named type such as ``int``."""
    return NamedType(pos=pos, name=Ident(pos=pos, name=name))


def type_expr(typ: AstType) -> TypeExpr:
    """Wrap a type for use in parameter and field lists."""
    return TypeExpr(pos=typ.pos, type=typ)


def expr_list(*exprs: AstExpr) -> AstExpr | None:
    """Fold expressions into a right-nested comma list.

    Returns None for no expressions and the expression itself for one.
    Separator positions are unknown and recorded as 0.
    """
    if not exprs:
        return None
    result = exprs[-1]
    for expr in reversed(exprs[:-1]):
        result = ExprList(pos=0, x=expr, y=result)
    return result
