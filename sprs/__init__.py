"""sprs: a small function-based scripting language.

The package provides the lexer, parser, advisory type-hint builder and
tree-walk interpreter. :func:`sprs.runner.run_source` strings them together.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from sprs.exceptions import EvalError, LexError, ParseError, SprsError
from sprs.runner import check_source, parse_source, run_source

__version__ = "0.1.0"

__all__ = [
    "EvalError",
    "LexError",
    "ParseError",
    "SprsError",
    "check_source",
    "parse_source",
    "run_source",
]
