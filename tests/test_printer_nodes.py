import io

import pytest

from gopretty.ast import (
    ArrayType,
    BadStat,
    BadType,
    BinaryExpr,
    BlockStat,
    BranchStat,
    Call,
    CaseClause,
    ChanDir,
    ChanType,
    CompositeLit,
    DeclStat,
    ExprStat,
    ForStat,
    FuncLit,
    FuncType,
    IfStat,
    IncDecStat,
    Index,
    InterfaceType,
    LabeledStat,
    MapType,
    NamedType,
    PointerType,
    Selector,
    StructType,
    SwitchStat,
    UnaryExpr,
    ValueDecl,
    expr_list,
    type_name,
)
from gopretty.printer import Printer, PrinterOptions, print_expr, print_stat, print_type
from gopretty.syntax import Token
from tests._printing import name, num, render, string, typ


def _binary(op: Token, x, y) -> BinaryExpr:
    return BinaryExpr(pos=0, op=op, x=x, y=y)


def _assign(target: str, value: int) -> ExprStat:
    return ExprStat(pos=0, x=_binary(Token.ASSIGN, name(target), num(value)))


def _call(fun: str, *args) -> Call:
    return Call(pos=0, fun=name(fun), args=expr_list(*args))


def _return(x=None) -> BranchStat:
    return BranchStat(pos=0, tok=Token.RETURN, x=x)


# ----------------------------------------------------------------------------
# Expressions


@pytest.mark.parametrize(
    ("expr", "expected"),
    [
        (_binary(Token.ADD, name("a"), _binary(Token.MUL, name("b"), name("c"))), "a + b * c"),
        (_binary(Token.MUL, _binary(Token.ADD, name("a"), name("b")), name("c")), "(a + b) * c"),
        (UnaryExpr(pos=0, op=Token.SUB, x=_binary(Token.ADD, name("a"), name("b"))), "-(a + b)"),
        (_binary(Token.MUL, UnaryExpr(pos=0, op=Token.SUB, x=name("x")), name("y")), "-x * y"),
        (_binary(Token.LAND, _binary(Token.EQL, name("a"), name("b")), name("ok")), "a == b && ok"),
        (_binary(Token.LOR, name("a"), _binary(Token.LAND, name("b"), name("c"))), "a || b && c"),
    ],
)
def test_binary_operators_are_parenthesized_by_precedence(expr, expected: str) -> None:
    assert render(print_expr, expr) == expected


def test_equal_precedence_right_operand_is_not_parenthesized() -> None:
    expr = _binary(Token.SUB, name("a"), _binary(Token.SUB, name("b"), name("c")))

    assert render(print_expr, expr) == "a - b - c"


def test_call_with_selector_and_argument_list() -> None:
    fun = Selector(pos=0, x=name("fmt"), sel=name("Println"))
    expr = Call(pos=0, fun=fun, args=expr_list(name("a"), name("b"), num(3)))

    assert render(print_expr, expr) == "fmt.Println(a, b, 3)"


def test_call_without_arguments() -> None:
    assert render(print_expr, _call("f")) == "f()"


def test_slice_index_prints_colon_pair() -> None:
    expr = Index(pos=0, x=name("a"), index=_binary(Token.COLON, name("i"), name("j")))

    assert render(print_expr, expr) == "a[i : j]"


def test_composite_literal() -> None:
    expr = CompositeLit(pos=0, type=type_name(0, "Point"), elts=expr_list(num(1), num(2)))

    assert render(print_expr, expr) == "Point{1, 2}"


def test_type_guard() -> None:
    expr = Selector(pos=0, x=name("x"), type=type_name(0, "T"))

    assert render(print_expr, expr) == "x.(T)"


def test_function_literal_prints_indented_body() -> None:
    expr = FuncLit(pos=0, type=FuncType(pos=0, params=()), body=(_return(name("x")),))

    assert render(print_expr, expr) == "func(){\n\treturn x\n}"


def test_string_literal_is_printed_verbatim() -> None:
    assert render(print_expr, string("a\\tb")) == '"a\\tb"'


def test_unknown_expression_prints_error_marker() -> None:
    sink = io.StringIO()
    printer = Printer(sink)

    print_expr(printer, ExprStat(pos=3, x=name("x")))

    assert sink.getvalue() == "<ILLEGAL expr>"
    assert [d.code for d in printer.diagnostics] == ["PRINTER_UNSUPPORTED_EXPRESSION"]


# ----------------------------------------------------------------------------
# Types


def test_array_and_slice_types() -> None:
    assert render(print_type, ArrayType(pos=0, elt=type_name(0, "int"), len=num(10))) == "[10]int"
    assert render(print_type, ArrayType(pos=0, elt=type_name(0, "byte"))) == "[]byte"


def test_map_type() -> None:
    t = MapType(pos=0, key=type_name(0, "string"), value=type_name(0, "int"))

    assert render(print_type, t) == "map [string]int"


@pytest.mark.parametrize(
    ("direction", "expected"),
    [
        (ChanDir.FULL, "chan int"),
        (ChanDir.RECV, "<-chan int"),
        (ChanDir.SEND, "chan <- int"),
    ],
)
def test_channel_types(direction: ChanDir, expected: str) -> None:
    t = ChanType(pos=0, elt=type_name(0, "int"), dir=direction)

    assert render(print_type, t) == expected


def test_pointer_to_qualified_type() -> None:
    qualified = Selector(pos=0, x=name("os"), sel=name("Error"))
    t = PointerType(pos=0, elt=NamedType(pos=0, name=qualified))

    assert render(print_type, t) == "*os.Error"


def test_function_signature_groups_names_sharing_a_type() -> None:
    t = FuncType(
        pos=0,
        params=(name("a"), name("b"), typ("int")),
        results=(typ("int"),),
    )

    assert render(print_type, t) == "(a, b int) int"


def test_function_signature_with_multiple_results() -> None:
    t = FuncType(
        pos=0,
        params=(name("x"), typ("int")),
        results=(typ("int"), typ("error")),
    )

    assert render(print_type, t) == "(x int) (int, error)"


def test_struct_fields_are_grouped_per_line() -> None:
    t = StructType(
        pos=0,
        fields=(name("a"), name("b"), typ("int"), name("c"), typ("string")),
    )

    assert render(print_type, t) == "struct {\n\ta, b\tint;\n\tc\tstring\n}"


def test_struct_field_tag_shares_the_line() -> None:
    t = StructType(pos=0, fields=(name("a"), typ("int"), string("json")))

    assert render(print_type, t) == 'struct {\n\ta\tint\t"json"\n}'


def test_empty_and_forward_struct_types() -> None:
    assert render(print_type, StructType(pos=0, fields=())) == "struct {\n}"
    assert render(print_type, StructType(pos=0)) == "struct"
    assert render(print_type, InterfaceType(pos=0)) == "interface"


def test_bad_type_prints_error_marker() -> None:
    sink = io.StringIO()
    printer = Printer(sink)

    print_type(printer, BadType(pos=7, tok=Token.IF))

    assert sink.getvalue() == "<if type>"
    assert printer.diagnostics[0].code == "PRINTER_UNSUPPORTED_TYPE"
    assert printer.diagnostics[0].pos == 7


# ----------------------------------------------------------------------------
# Statements


def test_block_separates_statements_with_semicolons() -> None:
    block = BlockStat(pos=0, body=(_assign("x", 1), IncDecStat(pos=0, x=name("x"))))

    assert render(print_stat, block) == "{\n\tx = 1;\n\tx++\n}"


def test_optional_semicolon_before_closing_brace() -> None:
    block = BlockStat(pos=0, body=(_assign("x", 1), IncDecStat(pos=0, x=name("x"))))
    options = PrinterOptions(optsemicolons=True)

    assert render(print_stat, block, options=options) == "{\n\tx = 1;\n\tx++;\n}"


def test_empty_block() -> None:
    assert render(print_stat, BlockStat(pos=0, body=())) == "{\n}"


def test_if_else() -> None:
    stat = IfStat(
        pos=0,
        cond=_binary(Token.GTR, name("x"), num(0)),
        body=(_return(name("x")),),
        else_=BlockStat(pos=0, body=(_return(UnaryExpr(pos=0, op=Token.SUB, x=name("x"))),)),
    )

    assert render(print_stat, stat) == "if x > 0 {\n\treturn x\n} else {\n\treturn -x\n}"


def test_if_with_init_statement() -> None:
    stat = IfStat(
        pos=0,
        init=ExprStat(pos=0, x=_binary(Token.DEFINE, name("err"), _call("f"))),
        cond=_binary(Token.NEQ, name("err"), name("nil")),
        body=(_return(name("err")),),
    )

    assert render(print_stat, stat) == "if err := f(); err != nil {\n\treturn err\n}"


def test_three_clause_for_loop() -> None:
    stat = ForStat(
        pos=0,
        init=ExprStat(pos=0, x=_binary(Token.DEFINE, name("i"), num(0))),
        cond=_binary(Token.LSS, name("i"), name("n")),
        post=IncDecStat(pos=0, x=name("i")),
        body=(ExprStat(pos=0, x=_call("f", name("i"))),),
    )

    assert render(print_stat, stat) == "for i := 0; i < n; i++ {\n\tf(i)\n}"


def test_for_loop_without_post_statement_keeps_both_semicolons() -> None:
    stat = ForStat(
        pos=0,
        init=ExprStat(pos=0, x=_binary(Token.DEFINE, name("i"), num(0))),
        cond=_binary(Token.LSS, name("i"), name("n")),
        body=(ExprStat(pos=0, x=_call("f", name("i"))),),
    )

    assert render(print_stat, stat) == "for i := 0; i < n; {\n\tf(i)\n}"


def test_condition_only_and_infinite_for_loops() -> None:
    loop = ForStat(pos=0, cond=name("ok"), body=(_assign("x", 1),))
    forever = ForStat(pos=0, body=(BranchStat(pos=0, tok=Token.BREAK),))

    assert render(print_stat, loop) == "for ok {\n\tx = 1\n}"
    assert render(print_stat, forever) == "for {\n\tbreak\n}"


def test_switch_cases_are_not_indented() -> None:
    stat = SwitchStat(
        pos=0,
        tag=name("x"),
        body=(
            CaseClause(pos=0, x=num(1), body=(ExprStat(pos=0, x=_call("f")),)),
            CaseClause(pos=0, tok=Token.DEFAULT, body=(ExprStat(pos=0, x=_call("g")),)),
        ),
    )

    assert render(print_stat, stat) == "switch x {\ncase 1:\n\tf();\ndefault:\n\tg()\n}"


def test_label_is_outdented() -> None:
    loop = ForStat(pos=0, body=(BranchStat(pos=0, tok=Token.BREAK, x=name("L")),))
    block = BlockStat(pos=0, body=(LabeledStat(pos=0, label=name("L")), loop))

    assert render(print_stat, block) == "{\nL:\n\tfor {\n\t\tbreak L\n\t}\n}"


def test_go_statement() -> None:
    stat = BranchStat(pos=0, tok=Token.GO, x=_call("worker", name("ch")))

    assert render(print_stat, stat) == "go worker(ch)"


def test_local_declaration_statement() -> None:
    decl = ValueDecl(pos=0, tok=Token.VAR, ident=name("x"), type=type_name(0, "int"))
    block = BlockStat(pos=0, body=(DeclStat(pos=0, decl=decl), _assign("x", 1)))

    assert render(print_stat, block) == "{\n\tvar x int;\n\tx = 1\n}"


def test_bad_statement_prints_error_marker() -> None:
    assert render(print_stat, BadStat(pos=0, tok=Token.PACKAGE)) == "<package stat>"


def test_scopes_are_balanced_after_a_statement() -> None:
    stat = IfStat(
        pos=0,
        cond=name("ok"),
        body=(ForStat(pos=0, body=(BlockStat(pos=0, body=(_assign("x", 1),)),)),),
    )
    printer = Printer(io.StringIO())

    print_stat(printer, stat)

    assert (printer.level, printer.indentation) == (0, 0)
