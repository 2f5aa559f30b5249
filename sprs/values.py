"""Runtime values.

Values are small frozen dataclasses so that equality is structural and
never crosses variants (``IntValue(1) != BoolValue(True)``, unlike the
Python ``int``/``bool`` pair). ``str()`` of a value is its canonical text
form, the one the ``print`` builtin writes.

Block execution reports how it finished with :class:`Completed` or
:class:`Returning`; a ``return`` travels outward as a ``Returning`` record
until the enclosing function call unwraps it.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from typing import Union

_INT_BITS = 64


def wrap_i64(n: int) -> int:
    """
    Wrap an arbitrary Python int to the signed 64-bit range.
    """
    n &= (1 << _INT_BITS) - 1
    if n >= 1 << (_INT_BITS - 1):
        n -= 1 << _INT_BITS
    return n


@dataclass(frozen=True)
class IntValue:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BoolValue:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class StrValue:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UnitValue:
    def __str__(self) -> str:
        return "()"


UNIT = UnitValue()

Value = Union[IntValue, BoolValue, StrValue, UnitValue]


def is_truthy(value: Value) -> bool:
    """
    Coerce a value for an ``if`` condition: booleans by value, integers when
    non-zero, everything else false.
    """
    if isinstance(value, BoolValue):
        return value.value
    if isinstance(value, IntValue):
        return value.value != 0
    return False


@dataclass(frozen=True)
class Completed:
    """The block ran to its end; `value` is its last statement's value."""
    value: Value = UNIT


@dataclass(frozen=True)
class Returning:
    """A ``return`` is in flight carrying `value`."""
    value: Value = UNIT


Completion = Union[Completed, Returning]
