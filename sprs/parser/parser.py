"""
Main parser entry point for sprs.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`sprs.parser.expressions` and `sprs.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from sprs.exceptions import ParseError
from sprs.lexer import Token
from sprs.nodes import Program

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """sprs parser."""

    def __init__(self, tokens: list[Token], token_map_literals: dict[str, str], file: str):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with an EOF token.
            token_map_literals (dict): A dict of tokens mapped to their literals.
            file (str): The name of the script.
        """
        self.tokens = tokens
        self.token_map = token_map_literals
        self.reverse_token_map = {v: k for k, v in self.token_map.items()}
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file

    def peek(self, offset: int = 1) -> Token:
        """
        Return the token `offset` positions ahead without consuming anything.
        """
        index = min(self.position + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def eat(self, token_type: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.

        Returns:
            Token: The consumed token.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        tok = self.curr_token
        if tok.type != token_type:
            expd_value = self.reverse_token_map.get(token_type, token_type)
            self.error(f"Expected token '{expd_value}' of type {token_type}")
        if tok.type != 'EOF':
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return tok

    def error(self, expected: str):
        """
        Raise a ParseError describing the current token.

        Parameters:
            expected (str): What the grammar expected at this point.
        """
        act_value = self.curr_token.value
        act_type = self.curr_token.type
        mapped_type = self.token_map.get(act_value, None) if isinstance(act_value, str) else None
        mapped_hint = f" (which maps to {mapped_type})" if mapped_type and mapped_type != act_type else ""
        raise ParseError(
            f"{expected}, but got value '{act_value}' of type {act_type}{mapped_hint}",
            self.curr_token,
            self.source_file,
        )

    # Expression wrappers
    def factor(self):
        """
        Parse a factor expression such as a literal, variable, call, or parenthesized group.
        """
        return _expr.parse_factor(self)

    def term(self):
        """
        Parse a multiplication expression.
        """
        return _expr.parse_term(self)

    def add(self):
        """
        Parse an addition expression.
        """
        return _expr.parse_add(self)

    def expr(self):
        """
        Parse a full expression, starting from the weakest tier (equality).
        """
        return _expr.parse_expr(self)

    def call_args(self) -> list:
        """
        Parse a parenthesized, comma-separated argument list.
        """
        return _expr.parse_call_args(self)

    # Statement wrappers
    def block(self):
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_if(self):
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_return(self):
        """
        Parse a 'return' statement from within a function.
        """
        return _stmt.parse_return(self)

    def parse_assignment(self):
        """
        Parse a variable assignment statement.
        """
        return _stmt.parse_assignment(self)

    def parse_func_def(self):
        """
        Parse a function definition item.
        """
        return _stmt.parse_func_def(self)

    def item(self):
        """
        Parse a top-level item.
        """
        return _stmt.parse_item(self)

    def parse(self) -> Program:
        """
        Parse the full input into a Program of one or more items.

        Raises:
            ParseError: If the input is empty, does not match the grammar, or
                nests parentheses and blocks deeper than the Python stack allows.
        """
        if self.curr_token.type == 'EOF':
            self.error("Expected a function definition or variable item")
        items = []
        try:
            while self.curr_token.type != 'EOF':
                items.append(self.item())
        except RecursionError as e:
            raise ParseError("Expression nested too deeply", self.curr_token, self.source_file) from e
        return Program(items)
