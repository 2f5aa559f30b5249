"""Shared definitions for binary operator identifiers.

The parser, formatter, type-hint builder and interpreter all label binary
expressions with these constants so they cannot drift apart.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported binary operators.
    """

    # Arithmetic
    ADD = "add"
    MUL = "mul"

    # Comparison
    EQ = "eq"

    @property
    def symbol(self) -> str:
        """
        Source spelling of the operator.
        """
        return _SYMBOLS[self]

    @property
    def precedence(self) -> int:
        """
        Binding strength; higher binds tighter.
        """
        return _PRECEDENCE[self]

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


_SYMBOLS = {Op.ADD: "+", Op.MUL: "*", Op.EQ: "=="}
_PRECEDENCE = {Op.EQ: 1, Op.ADD: 2, Op.MUL: 3}


__all__ = ["Op"]
