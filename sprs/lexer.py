"""Lexer for sprs.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type, value and source position.

Alternatives are ordered so that the longest spelling wins: ``==`` is tried
before ``=`` and keywords (``if``, ``then``, ``else``, ``fn``, ``return``,
``true``, ``false``) are tried, word-bounded, before identifiers. Whitespace
is the only text skipped; the language has no comments.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re

from sprs.exceptions import LexError

# Largest value an integer literal may hold (signed 64-bit).
INT_MAX = 2**63 - 1


class Token:
    """
    Represents a lexical token with a type and value.
    """
    def __init__(self, type_, value, line, column=None):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (Any): The token value.
            line (int): The 1-based source line.
            column (int): The 1-based source column.
        """
        self.type = type_
        self.value = value
        self.line = line
        self.column = column

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, line={self.line}, column={self.column})"


token_specification: list[tuple[str, str]] = [
    # Literals
    ('NUMBER',    r'[0-9]+'),
    ('STRING',    r'"[^"]*"'),
    ('TRUE',      r'\btrue\b'),
    ('FALSE',     r'\bfalse\b'),

    # Keywords
    ('IF',        r'\bif\b'),
    ('THEN',      r'\bthen\b'),
    ('ELSE',      r'\belse\b'),
    ('FN',        r'\bfn\b'),
    ('RETURN',    r'\breturn\b'),

    # Identifiers
    ('ID',        r'[A-Za-z_][A-Za-z0-9_]*'),

    # Delimiters
    ('LBRACE',    r'\{'),
    ('RBRACE',    r'\}'),
    ('LPAREN',    r'\('),
    ('RPAREN',    r'\)'),
    ('COMMA',     r','),
    ('SEMI',      r';'),

    # Operators
    ('EQ',        r'=='),
    ('ASSIGN',    r'='),
    ('PLUS',      r'\+'),
    ('MUL',       r'\*'),

    # Miscellaneous
    ('NEWLINE',   r'\n'),
    ('SKIP',      r'[ \t\r\f]+'),
    ('MISMATCH',  r'.'),
]

_tok_regex = re.compile('|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification))


def _literal_map() -> dict[str, str]:
    """
    Map the fixed spellings of keywords, delimiters and operators to their
    token types, e.g. ``'=='`` to ``'EQ'``.
    """
    token_map_literals = {}
    for name, pattern in token_specification:
        if name in ('NUMBER', 'STRING', 'ID', 'NEWLINE', 'SKIP', 'MISMATCH'):
            continue
        literal = pattern.replace(r'\b', '')
        token_map_literals[re.sub(r'\\', '', literal)] = name
    return token_map_literals


def tokenize(code: str) -> tuple[list[Token], dict[str, str]]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances, terminated by an EOF token.
        dict[str, str]: A dict containing mapped token-values.

    Raises:
        LexError: If an unexpected character or an out of range integer
            literal is encountered.
    """
    tokens = []
    line_num = 1
    line_start = 0

    for match_obj in _tok_regex.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()
        column = match_obj.start() - line_start + 1

        if kind == 'NEWLINE':
            line_num += 1
            line_start = match_obj.end()
            continue
        if kind == 'SKIP':
            continue
        if kind == 'MISMATCH':
            raise LexError(f"Unexpected character {value!r}", line_num, column)

        if kind == 'NUMBER':
            number = int(value)
            if number > INT_MAX:
                raise LexError(
                    f"Integer literal {value} does not fit in 64 bits", line_num, column
                )
            tokens.append(Token('NUMBER', number, line_num, column))
        elif kind == 'STRING':
            tokens.append(Token('STRING', value[1:-1], line_num, column))
            newlines = value.count('\n')
            if newlines:
                line_num += newlines
                line_start = match_obj.start() + value.rfind('\n') + 1
        else:
            tokens.append(Token(kind, value, line_num, column))

    tokens.append(Token('EOF', None, line_num, len(code) - line_start + 1))
    return tokens, _literal_map()
