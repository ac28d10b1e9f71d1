"""Syntax tree consumed by the printer."""

from gopretty.ast.build import expr_list, ident, type_expr, type_name
from gopretty.ast.model import (
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
    Comment,
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

__all__ = [
    "ArrayType",
    "AstDecl",
    "AstExpr",
    "AstStat",
    "AstType",
    "BadStat",
    "BadType",
    "BasicLit",
    "BinaryExpr",
    "BlockStat",
    "BranchStat",
    "Call",
    "CaseClause",
    "ChanDir",
    "ChanType",
    "Comment",
    "CompositeLit",
    "DeclGroup",
    "DeclStat",
    "EllipsisType",
    "ExprList",
    "ExprStat",
    "ForStat",
    "FuncDecl",
    "FuncLit",
    "FuncType",
    "Ident",
    "IfStat",
    "IncDecStat",
    "Index",
    "InterfaceType",
    "LabeledStat",
    "MapType",
    "NamedType",
    "PointerType",
    "Program",
    "Selector",
    "StructType",
    "SwitchStat",
    "TypeExpr",
    "UnaryExpr",
    "ValueDecl",
    "expr_list",
    "ident",
    "type_expr",
    "type_name",
]
