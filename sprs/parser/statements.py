"""Statement parsing utilities for sprs.

These functions operate on a `sprs.parser.parser.Parser` instance and
handle blocks, the four statement forms (assignment, expression statement,
conditional and return) and the two top-level item forms.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from sprs.nodes import (
    Block,
    ExprStmt,
    FunctionDef,
    IfStmt,
    ReturnStmt,
    VarItem,
    VarStmt,
)

if TYPE_CHECKING:
    from sprs.parser import Parser


def parse_block(parser: 'Parser') -> Block:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        Block: the parsed statements in source order.
    """
    tok = parser.eat('LBRACE')
    statements = []
    while parser.curr_token.type != 'RBRACE':
        if parser.curr_token.type == 'EOF':
            parser.error("Expected token '}' of type RBRACE")
        statements.append(parser.statement())
    parser.eat('RBRACE')
    return Block(statements, tok.line)


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement.

    Syntax:
        <identifier> = <expression> ;
        if <expression> then <block> [else <block>]
        return [<expression>] ;
        <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        The statement node.
    """
    tok = parser.curr_token
    if tok.type == 'IF':
        return parser.parse_if()
    if tok.type == 'RETURN':
        return parser.parse_return()
    if tok.type == 'ID' and parser.peek().type == 'ASSIGN':
        return parser.parse_assignment()

    expr_node = parser.expr()
    parser.eat('SEMI')
    return ExprStmt(expr_node, tok.line)


def parse_if(parser: 'Parser') -> IfStmt:
    """
    Parse a conditional 'if' statement with an optional else block.

    Syntax:
        if <condition> then { <block> } [else { <block> }]

    Args:
        parser: The parser instance.

    Returns:
        IfStmt: the conditional node.
    """
    tok = parser.eat('IF')
    condition = parser.expr()
    parser.eat('THEN')
    then_block = parser.block()

    else_block = None
    if parser.curr_token.type == 'ELSE':
        parser.eat('ELSE')
        else_block = parser.block()

    return IfStmt(condition, then_block, else_block, tok.line)


def parse_return(parser: 'Parser') -> ReturnStmt:
    """
    Parse a 'return' statement.

    Syntax:
        return [<expression>] ;
    """
    tok = parser.eat('RETURN')
    expr_node = None
    if parser.curr_token.type != 'SEMI':
        expr_node = parser.expr()
    parser.eat('SEMI')
    return ReturnStmt(expr_node, tok.line)


def parse_assignment(parser: 'Parser') -> VarStmt:
    """
    Parse an assignment.

    Syntax:
        <identifier> = <expression> ;
    """
    id_tok = parser.eat('ID')
    parser.eat('ASSIGN')
    expr_node = parser.expr()
    parser.eat('SEMI')
    return VarStmt(id_tok.value, expr_node, id_tok.line)


def parse_func_def(parser: 'Parser') -> FunctionDef:
    """
    Parse a function definition.

    Syntax:
        fn <name>(<params>) { <block> }

    Args:
        parser: The parser instance.

    Returns:
        FunctionDef: the function node.
    """
    start_tok = parser.eat('FN')
    func_name = parser.eat('ID').value
    parser.eat('LPAREN')
    params = []
    if parser.curr_token.type != 'RPAREN':
        params.append(parser.eat('ID').value)
        while parser.curr_token.type == 'COMMA':
            parser.eat('COMMA')
            params.append(parser.eat('ID').value)
    parser.eat('RPAREN')
    body = parser.block()
    return FunctionDef(func_name, params, body, start_tok.line)


def parse_item(parser: 'Parser'):
    """
    Parse a top-level item: a function definition or a variable item.

    Syntax:
        fn <name>(<params>) { <block> }
        <identifier> = <expression> ;
    """
    tok = parser.curr_token
    if tok.type == 'FN':
        return parser.parse_func_def()
    if tok.type == 'ID' and parser.peek().type == 'ASSIGN':
        stmt = parser.parse_assignment()
        return VarItem(stmt.name, stmt.expr, stmt.line)
    parser.error("Expected 'fn' or a top-level assignment")
