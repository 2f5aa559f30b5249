"""Errors.

Every stage of the pipeline fails fast: the lexer raises :class:`LexError`,
the parser raises :class:`ParseError` and the interpreter raises
:class:`EvalError` (or one of its subclasses). Messages carry the line, and
where known the column and file, of the offending source.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


def _location(line=None, column=None, file=None) -> str:
    """
    Build the ' on line N, column M in FILE' suffix used by error messages.
    """
    suffix = ""
    if line is not None:
        suffix += f" on line {line}"
        if column is not None:
            suffix += f", column {column}"
    if file is not None:
        suffix += f" in {file}"
    return suffix


class SprsError(Exception):
    """
    Base class for all sprs errors.
    """


class LexError(SprsError):
    """
    Error for characters or literals the lexer cannot tokenize.
    """
    def __init__(self, message, line=None, column=None):
        self.line = line
        self.column = column
        super().__init__(f"{message}{_location(line, column)}")


class ParseError(SprsError):
    """
    Error for token sequences that match no grammar production.
    """
    def __init__(self, message, token=None, file=None):
        self.token = token
        self.line = token.line if token is not None else None
        self.column = token.column if token is not None else None
        super().__init__(f"{message}{_location(self.line, self.column, file)}")


class EvalError(SprsError):
    """
    Error raised while evaluating a program.
    """
    def __init__(self, message, line=None, file=None):
        self.line = line
        super().__init__(f"{message}{_location(line, None, file)}")


class UndefinedVariableException(EvalError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", line, file)


class UndefinedFunctionException(EvalError):
    """
    Error for calls to functions that were never defined.
    """
    def __init__(self, name, line=None, file=None):
        self.name = name
        super().__init__(f"Undefined function '{name}'", line, file)


class ArityException(EvalError):
    """
    Error for calls whose argument count differs from the parameter count.
    """
    def __init__(self, name, expected, got, line=None, file=None):
        self.name = name
        self.expected = expected
        self.got = got
        super().__init__(
            f"Function '{name}' expects {expected} arguments but got {got}",
            line,
            file,
        )
