"""Type-hint builder.

Walks a parsed :class:`~sprs.nodes.Program` and attaches advisory types to
function signatures and variable assignments. The hints are diagnostic
metadata only: the interpreter never reads them, nothing here raises, and
the AST is left untouched.

Inference rules:
- integer literal -> Int, boolean literal -> Bool, ``==`` -> Bool
- ``+`` / ``*`` -> Int when both operands are Int, otherwise Any
- variable -> the join of the hints of earlier assignments to it in the
  same function, Any when there are none (parameters included)
- call -> the return type of a function whose signature is already known,
  Any otherwise (forward references and recursion included)
- anything else -> Any

A function's return type is the join of the types of every ``return``
reachable in its body, including inside ``if``/``else`` arms. A bare
``return;`` counts as Any.


File: sema.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass, field

from sprs.nodes import (
    BinaryOp,
    Block,
    Bool,
    Call,
    FunctionDef,
    IfStmt,
    Number,
    Program,
    ReturnStmt,
    Var,
    VarStmt,
)
from sprs.operations import Op
from sprs.types import Type, join


@dataclass
class FunctionSignature:
    """Inferred signature of one function definition."""

    name: str
    index: int
    params: list[str]
    return_type: Type = Type.ANY


@dataclass
class VarInfo:
    """Inferred type of one assignment statement."""

    name: str
    type_hint: Type
    line: int = 0


# Item index of a function definition -> its assignments in source order.
VarTable = dict[int, list[VarInfo]]


@dataclass
class TypeHints:
    """Signatures and variable table for a whole program."""

    signatures: list[FunctionSignature] = field(default_factory=list)
    variables: VarTable = field(default_factory=dict)

    def signature(self, name: str) -> FunctionSignature | None:
        """Return the signature for `name`, or None."""
        for sig in reversed(self.signatures):
            if sig.name == name:
                return sig
        return None

    def variables_for(self, name: str) -> list[VarInfo]:
        """Assignments of the definition of `name` that calls resolve to."""
        sig = self.signature(name)
        if sig is None:
            return []
        return self.variables.get(sig.index, [])

    def describe(self) -> str:
        """Render the hints as ``fn name(params) -> Type`` lines with indented variables."""
        lines = []
        for sig in self.signatures:
            lines.append(f"fn {sig.name}({', '.join(sig.params)}) -> {sig.return_type}")
            for var in self.variables.get(sig.index, []):
                lines.append(f"  {var.name}: {var.type_hint}")
        return "\n".join(lines)


def _leaf_type_hint(expr, scope: dict[str, Type], sigs: list[FunctionSignature]) -> Type:
    if isinstance(expr, Number):
        return Type.INT
    if isinstance(expr, Bool):
        return Type.BOOL
    if isinstance(expr, Var):
        return scope.get(expr.name, Type.ANY)
    if isinstance(expr, Call):
        # Later definitions shadow earlier ones, as in the interpreter.
        for sig in reversed(sigs):
            if sig.name == expr.name:
                return sig.return_type
    return Type.ANY


def infer_type_hint(expr, scope: dict[str, Type], sigs: list[FunctionSignature]) -> Type:
    """
    Infer the advisory type of an expression.

    Operator nodes are visited with an explicit stack, so arbitrarily long
    ``a + b + c + ...`` chains do not exhaust the Python call stack.

    Args:
        expr: The expression node.
        scope: Hints of variables assigned so far in the enclosing function.
        sigs: Signatures computed so far.

    Returns:
        Type: Int, Bool or Any.
    """
    results: list[Type] = []
    stack = [(expr, False)]
    while stack:
        node, visited = stack.pop()
        if not isinstance(node, BinaryOp):
            results.append(_leaf_type_hint(node, scope, sigs))
        elif node.op == Op.EQ:
            results.append(Type.BOOL)
        elif visited:
            rhs = results.pop()
            lhs = results.pop()
            results.append(Type.INT if lhs == Type.INT and rhs == Type.INT else Type.ANY)
        else:
            stack.append((node, True))
            stack.append((node.rhs, False))
            stack.append((node.lhs, False))
    return results[0]


class _FunctionWalker:
    """Collects variable and return hints for one function body."""

    def __init__(self, sigs: list[FunctionSignature]):
        self.sigs = sigs
        self.scope: dict[str, Type] = {}
        self.variables: list[VarInfo] = []
        self.returns: list[Type] = []

    def walk(self, block: Block):
        for stmt in block.statements:
            if isinstance(stmt, VarStmt):
                hint = infer_type_hint(stmt.expr, self.scope, self.sigs)
                self.variables.append(VarInfo(stmt.name, hint, stmt.line))
                if stmt.name in self.scope:
                    hint = join([self.scope[stmt.name], hint])
                self.scope[stmt.name] = hint
            elif isinstance(stmt, ReturnStmt):
                if stmt.expr is None:
                    self.returns.append(Type.ANY)
                else:
                    self.returns.append(infer_type_hint(stmt.expr, self.scope, self.sigs))
            elif isinstance(stmt, IfStmt):
                self.walk(stmt.then_block)
                if stmt.else_block is not None:
                    self.walk(stmt.else_block)


def _walk_function(func: FunctionDef, sigs: list[FunctionSignature]) -> _FunctionWalker:
    walker = _FunctionWalker(sigs)
    walker.walk(func.body)
    return walker


def collect_signatures(program: Program) -> list[FunctionSignature]:
    """
    Collect the signature of every function definition, in program order.

    Args:
        program: The parsed program.

    Returns:
        list[FunctionSignature]: One entry per function definition.
    """
    sigs: list[FunctionSignature] = []
    for index, item in enumerate(program.items):
        if not isinstance(item, FunctionDef):
            continue
        walker = _walk_function(item, sigs)
        sigs.append(FunctionSignature(item.name, index, list(item.params), join(walker.returns)))
    return sigs


def build_var_table(program: Program, sigs: list[FunctionSignature]) -> VarTable:
    """
    Record a hint for every assignment in every function body.

    Args:
        program: The parsed program.
        sigs: Signatures from :func:`collect_signatures`.

    Returns:
        VarTable: Item index of each function mapped to its assignments in source order.
    """
    var_table: VarTable = {}
    for sig in sigs:
        func = program.items[sig.index]
        # Only signatures defined before this function resolve, as in
        # collect_signatures.
        known = [s for s in sigs if s.index < sig.index]
        var_table[sig.index] = _walk_function(func, known).variables
    return var_table


def annotate(program: Program) -> TypeHints:
    """
    Build signatures and the variable table for `program`.
    """
    sigs = collect_signatures(program)
    return TypeHints(sigs, build_var_table(program, sigs))
