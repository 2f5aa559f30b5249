"""
sprs pipeline helpers.

Workflow:
1. The Lexer tokenizes the source code into tokens.
2. The Parser processes tokens into an AST following the language grammar.
3. The type-hint builder annotates function signatures and assignments.
4. The Interpreter walks the AST from the entry point, printing as it goes.

Setting the ``SPRSDEBUG`` environment variable dumps the tokens, the AST and
the type hints to stdout before evaluation.


File: runner.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import os

from sprs.interpreter import Interpreter
from sprs.lexer import tokenize
from sprs.nodes import Program
from sprs.parser import Parser
from sprs.sema import TypeHints, annotate
from sprs.values import Value

DEBUG_ENV_VAR = "SPRSDEBUG"


def debug_enabled() -> bool:
    """
    Return True when the debug environment variable is set to a non-empty value.
    """
    return bool(os.environ.get(DEBUG_ENV_VAR))


def debug_print_tokens_ast(tokens, ast, hints=None):
    """
    Print tokenized source, AST and type hints
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    if hints is not None:
        print("\nType hints:\n")
        print(hints.describe())
    print(" ")


def parse_source(code: str, file: str = "<input>") -> Program:
    """
    Tokenize and parse source code.

    Raises:
        LexError: If the source contains an untokenizable character.
        ParseError: If the tokens do not form a program.
    """
    tokens, token_map = tokenize(code)
    return Parser(tokens, token_map, file).parse()


def check_source(code: str, file: str = "<input>") -> TypeHints:
    """
    Parse source code and return its advisory type hints without running it.
    """
    return annotate(parse_source(code, file))


def run_source(code: str, file: str = "<input>") -> Value:
    """
    Run source code from its entry point and return the entry point's result.

    Errors from any stage propagate unchanged.
    """
    tokens, token_map = tokenize(code)
    program = Parser(tokens, token_map, file).parse()
    hints = annotate(program)

    if debug_enabled():
        debug_print_tokens_ast(tokens, program, hints)

    return Interpreter(program, file).run()
