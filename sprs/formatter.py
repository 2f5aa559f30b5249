"""Formatter.

Converts an AST back into sprs source text. Parentheses are emitted only
where precedence or left-associativity requires them, so parsing the
output yields a tree equal to the input. The interpreter also uses
:func:`format_expr` to quote expressions in error messages and traces.


File: formatter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from sprs.nodes import (
    BinaryOp,
    Block,
    Bool,
    Call,
    ExprStmt,
    FunctionDef,
    IfStmt,
    Number,
    Program,
    ReturnStmt,
    Str,
    Var,
    VarItem,
    VarStmt,
)

INDENT = "    "


def _operand(node, parent_prec: int, right: bool) -> str:
    text = format_expr(node)
    if isinstance(node, BinaryOp):
        prec = node.op.precedence
        if prec < parent_prec or (right and prec == parent_prec):
            return f"({text})"
    return text


def format_expr(node) -> str:
    """
    Convert an expression node to source text.

    Args:
        node: An expression node.

    Returns:
        str: The expression as it would be written in source.
    """
    match node:
        case Number(value=value):
            return str(value)
        case Bool(value=value):
            return "true" if value else "false"
        case Str(value=value):
            return f'"{value}"'
        case Var(name=name):
            return name
        case Call(name=name, args=args):
            return f"{name}({', '.join(format_expr(arg) for arg in args)})"
        case BinaryOp(op=op, lhs=lhs, rhs=rhs):
            left = _operand(lhs, op.precedence, right=False)
            right = _operand(rhs, op.precedence, right=True)
            return f"{left} {op.symbol} {right}"
    raise TypeError(f"Not an expression node: {node!r}")


def format_block(block: Block, depth: int = 0) -> str:
    """
    Convert a block to brace-delimited source text, indented to `depth`.
    """
    if not block.statements:
        return "{}"
    lines = ["{"]
    for stmt in block.statements:
        lines.append(format_stmt(stmt, depth + 1))
    lines.append(INDENT * depth + "}")
    return "\n".join(lines)


def format_stmt(stmt, depth: int = 0) -> str:
    """
    Convert a statement to source text, indented to `depth`.
    """
    pad = INDENT * depth
    match stmt:
        case VarStmt(name=name, expr=expr):
            return f"{pad}{name} = {format_expr(expr)};"
        case ExprStmt(expr=expr):
            return f"{pad}{format_expr(expr)};"
        case ReturnStmt(expr=None):
            return f"{pad}return;"
        case ReturnStmt(expr=expr):
            return f"{pad}return {format_expr(expr)};"
        case IfStmt(cond=cond, then_block=then_block, else_block=else_block):
            text = f"{pad}if {format_expr(cond)} then {format_block(then_block, depth)}"
            if else_block is not None:
                text += f" else {format_block(else_block, depth)}"
            return text
    raise TypeError(f"Not a statement node: {stmt!r}")


def format_item(item) -> str:
    """
    Convert a top-level item to source text.
    """
    match item:
        case FunctionDef(name=name, params=params, body=body):
            return f"fn {name}({', '.join(params)}) {format_block(body)}"
        case VarItem(name=name, expr=expr):
            return f"{name} = {format_expr(expr)};"
    raise TypeError(f"Not an item node: {item!r}")


def format_program(program: Program) -> str:
    """
    Convert a whole program to source text, one blank line between items.
    """
    return "\n\n".join(format_item(item) for item in program.items) + "\n"
