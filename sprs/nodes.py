"""AST node definitions for sprs.

The parser produces a :class:`Program` built from the dataclasses below.
Nodes are plain data. Each records the source line it started on, but the
line is excluded from equality so two trees compare equal when they have
the same structure, regardless of layout.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Union

from sprs.operations import Op

if TYPE_CHECKING:
    from sprs.types import Type


def _line():
    return field(default=0, compare=False)


# ---- Expressions ----

@dataclass(frozen=True)
class Number:
    """Integer literal."""
    value: int
    line: int = _line()


@dataclass(frozen=True)
class Bool:
    """``true`` or ``false``."""
    value: bool
    line: int = _line()


@dataclass(frozen=True)
class Str:
    """String literal, stored without its quotes."""
    value: str
    line: int = _line()


@dataclass(frozen=True)
class Var:
    """Reference to a variable or parameter."""
    name: str
    line: int = _line()


@dataclass(frozen=True)
class Call:
    """
    Call of a builtin or user-defined function.

    ``ret_ty`` is a reserved slot for a declared return type. The parser
    never fills it.
    """
    name: str
    args: list[Expr]
    ret_ty: Optional[Type] = None
    line: int = _line()


@dataclass(frozen=True)
class BinaryOp:
    """``lhs + rhs``, ``lhs * rhs`` or ``lhs == rhs``."""
    op: Op
    lhs: Expr
    rhs: Expr
    line: int = _line()


Expr = Union[Number, Bool, Str, Var, Call, BinaryOp]


# ---- Statements ----

@dataclass(frozen=True)
class Block:
    """Brace-delimited statement sequence."""
    statements: list[Stmt]
    line: int = _line()


@dataclass(frozen=True)
class VarStmt:
    """``name = expr;``"""
    name: str
    expr: Expr
    line: int = _line()


@dataclass(frozen=True)
class ExprStmt:
    """``expr;``"""
    expr: Expr
    line: int = _line()


@dataclass(frozen=True)
class IfStmt:
    """``if cond then { ... } else { ... }``"""
    cond: Expr
    then_block: Block
    else_block: Optional[Block] = None
    line: int = _line()


@dataclass(frozen=True)
class ReturnStmt:
    """``return expr;`` or a bare ``return;``."""
    expr: Optional[Expr] = None
    line: int = _line()


Stmt = Union[VarStmt, ExprStmt, IfStmt, ReturnStmt]


# ---- Items ----

@dataclass(frozen=True)
class FunctionDef:
    """``fn name(params) { ... }``"""
    name: str
    params: list[str]
    body: Block
    line: int = _line()


@dataclass(frozen=True)
class VarItem:
    """Top-level ``name = expr;``. Parsed but never executed."""
    name: str
    expr: Expr
    line: int = _line()


Item = Union[FunctionDef, VarItem]


@dataclass(frozen=True)
class Program:
    """Ordered sequence of top-level items."""
    items: list[Item]

    @property
    def functions(self) -> list[FunctionDef]:
        """Function definitions in program order."""
        return [item for item in self.items if isinstance(item, FunctionDef)]
