"""
Expression parsing utilities for sprs.

These functions operate on a `sprs.parser.parser.Parser` instance and
implement the recursive descent logic for expressions. Precedence runs from
equality (weakest) through addition and multiplication to factors
(strongest); every binary tier is left-associative.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from sprs.nodes import BinaryOp, Bool, Call, Number, Str, Var
from sprs.operations import Op

if TYPE_CHECKING:
    from sprs.parser import Parser


# ---- Highest precedence ----

def parse_factor(parser: 'Parser'):
    """Parse a literal, variable, call, or parenthesized expression."""
    tok = parser.curr_token

    if tok.type == 'NUMBER':
        parser.eat('NUMBER')
        return Number(tok.value, tok.line)

    if tok.type == 'STRING':
        parser.eat('STRING')
        return Str(tok.value, tok.line)

    if tok.type in ('TRUE', 'FALSE'):
        parser.eat(tok.type)
        return Bool(tok.type == 'TRUE', tok.line)

    if tok.type == 'ID':
        parser.eat('ID')
        if parser.curr_token.type == 'LPAREN':
            return Call(tok.value, parser.call_args(), line=tok.line)
        return Var(tok.value, tok.line)

    if tok.type == 'LPAREN':
        parser.eat('LPAREN')
        node = parser.expr()
        parser.eat('RPAREN')
        return node

    parser.error("Expected a number, string, boolean, identifier, call or '('")


def parse_call_args(parser: 'Parser') -> list:
    """Parse ``( [expr (, expr)*] )``."""
    parser.eat('LPAREN')
    args = []
    if parser.curr_token.type != 'RPAREN':
        args.append(parser.expr())
        while parser.curr_token.type == 'COMMA':
            parser.eat('COMMA')
            args.append(parser.expr())
    parser.eat('RPAREN')
    return args


def parse_term(parser: 'Parser'):
    """Parse multiplication expressions."""
    result = parser.factor()
    while parser.curr_token.type == 'MUL':
        op_tok = parser.eat('MUL')
        result = BinaryOp(Op.MUL, result, parser.factor(), op_tok.line)
    return result


def parse_add(parser: 'Parser'):
    """Parse addition expressions."""
    result = parser.term()
    while parser.curr_token.type == 'PLUS':
        op_tok = parser.eat('PLUS')
        result = BinaryOp(Op.ADD, result, parser.term(), op_tok.line)
    return result


# ---- Lowest precedence ----

def parse_expr(parser: 'Parser'):
    """Parse equality expressions (``==``)."""
    result = parser.add()
    while parser.curr_token.type == 'EQ':
        op_tok = parser.eat('EQ')
        result = BinaryOp(Op.EQ, result, parser.add(), op_tok.line)
    return result
