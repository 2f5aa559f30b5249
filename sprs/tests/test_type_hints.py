"""
Tests for the advisory type-hint builder
"""
from sprs import check_source
from sprs.nodes import BinaryOp, Call, Number, Str, Var
from sprs.operations import Op
from sprs.sema import annotate, build_var_table, collect_signatures, infer_type_hint
from sprs.tests.utils import parse_source
from sprs.types import Type, join


def test_expression_rules():
    """
    Test the combination table for expressions.
    """
    assert infer_type_hint(Number(1), {}, []) == Type.INT
    assert infer_type_hint(BinaryOp(Op.EQ, Str("a"), Number(1)), {}, []) == Type.BOOL
    assert infer_type_hint(BinaryOp(Op.ADD, Number(1), Number(2)), {}, []) == Type.INT
    assert infer_type_hint(BinaryOp(Op.MUL, Number(1), Var("x")), {}, []) == Type.ANY
    assert infer_type_hint(BinaryOp(Op.MUL, Number(1), Var("x")), {"x": Type.INT}, []) == Type.INT
    assert infer_type_hint(BinaryOp(Op.ADD, Str("a"), Number(1)), {}, []) == Type.ANY
    assert infer_type_hint(Call("unknown", []), {}, []) == Type.ANY


def test_join():
    """
    Test the lattice join.
    """
    assert join([Type.INT, Type.INT]) == Type.INT
    assert join([Type.INT, Type.BOOL]) == Type.ANY
    assert join([Type.BOOL, Type.ANY]) == Type.ANY
    assert join([]) == Type.ANY


def test_example_program_hints():
    """
    Test hints for the example program, including a resolved call.
    """
    source = (
        "fn test() {\n"
        "    a = 5;\n"
        "    b = 10;\n"
        "    if a == 5 then { return a; }\n"
        "    return b;\n"
        "}\n"
        "fn main() { x = test(); print(x); }\n"
    )
    hints = annotate(parse_source(source))
    assert [(s.name, s.index, s.return_type) for s in hints.signatures] == [
        ("test", 0, Type.INT),
        ("main", 1, Type.ANY),
    ]
    assert [(v.name, v.type_hint) for v in hints.variables_for("test")] == [
        ("a", Type.INT),
        ("b", Type.INT),
    ]
    assert [(v.name, v.type_hint, v.line) for v in hints.variables_for("main")] == [
        ("x", Type.INT, 7),
    ]


def test_return_type_joins_all_branches():
    """
    Test that returns inside if/else arms all contribute to the join.
    """
    source = (
        "fn same(n) { if n then { return 1; } else { return 2 * 3; } }\n"
        "fn mixed(n) { if n then { return 1; } return n == 1; }\n"
        "fn flag() { return 1 == 2; }\n"
        "fn bare() { return; }\n"
        "fn none() { x = 1; }\n"
        "fn param(n) { return n; }\n"
    )
    sigs = collect_signatures(parse_source(source))
    assert {s.name: s.return_type for s in sigs} == {
        "same": Type.INT,
        "mixed": Type.ANY,
        "flag": Type.BOOL,
        "bare": Type.ANY,
        "none": Type.ANY,
        "param": Type.ANY,
    }


def test_forward_and_recursive_calls_are_any():
    """
    Test that calls resolve only against functions defined earlier.
    """
    source = (
        "fn early() { return later(); }\n"
        "fn later() { return 1; }\n"
        "fn self_ref() { return self_ref(); }\n"
        "fn uses() { return later() + 1; }\n"
    )
    sigs = collect_signatures(parse_source(source))
    assert [s.return_type for s in sigs] == [Type.ANY, Type.INT, Type.ANY, Type.INT]


def test_var_table_covers_nested_arms_and_reassignment():
    """
    Test that every assignment is recorded, including inside arms.
    """
    source = (
        "fn main() {\n"
        "    x = 1;\n"
        "    if x then { y = x == 1; } else { x = true; }\n"
        "    z = x + 1;\n"
        "}\n"
    )
    program = parse_source(source)
    table = build_var_table(program, collect_signatures(program))
    assert [(v.name, v.type_hint) for v in table[0]] == [
        ("x", Type.INT),
        ("y", Type.BOOL),
        ("x", Type.BOOL),
        ("z", Type.ANY),
    ]


def test_hints_do_not_touch_the_ast():
    """
    Test that annotating leaves the program unchanged.
    """
    source = "fn main() { a = 1 + 2; return a; }"
    program = parse_source(source)
    annotate(program)
    assert program == parse_source(source)


def test_describe():
    """
    Test the human-readable listing.
    """
    hints = annotate(parse_source("fn add(a, b) { s = 1; return s + 1; }"))
    assert hints.describe() == "fn add(a, b) -> Int\n  s: Int"
    assert hints.signature("add").return_type == Type.INT
    assert hints.signature("missing") is None


def test_duplicate_definitions_keep_separate_variables():
    """
    Test that two definitions with the same name each list their own variables.
    """
    source = (
        "fn f() { a = 1; return a; }\n"
        "fn f() { b = true; return b; }\n"
    )
    hints = annotate(parse_source(source))
    assert hints.describe() == "fn f() -> Int\n  a: Int\nfn f() -> Bool\n  b: Bool"
    assert [v.name for v in hints.variables_for("f")] == ["b"]


def test_long_operator_chain():
    """
    Test that a very long '+' chain is typed without exhausting the call stack.
    """
    chain = " + ".join(["1"] * 1500)
    hints = check_source(f"fn main() {{ x = {chain}; return x * {chain}; }}")
    assert hints.signature("main").return_type == Type.INT
    assert [(v.name, v.type_hint) for v in hints.variables_for("main")] == [("x", Type.INT)]
