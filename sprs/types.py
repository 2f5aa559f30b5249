"""Advisory type lattice.

``Int`` and ``Bool`` are the confident types; ``Any`` sits above both and
absorbs every disagreement.


File: types.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum
from typing import Iterable


class Type(str, Enum):
    """
    Enumeration of advisory types.
    """

    INT = "Int"
    BOOL = "Bool"
    ANY = "Any"

    def __str__(self) -> str:
        return self.value


def join(types: Iterable[Type]) -> Type:
    """
    Least upper bound of `types`. An empty iterable joins to ``Any``.
    """
    result = None
    for ty in types:
        if result is None:
            result = ty
        elif result != ty:
            return Type.ANY
    return result if result is not None else Type.ANY


__all__ = ["Type", "join"]
