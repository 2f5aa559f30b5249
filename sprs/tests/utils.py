"""
Utility functions shared across sprs tests.
"""
from sprs.interpreter import Interpreter
from sprs.lexer import tokenize
from sprs.parser import Parser


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    tokens, token_map = tokenize(source)
    parser = Parser(tokens, token_map, "<test>")
    return parser.parse()


def run_source(source: str):
    """
    Parse and run source code, returning the entry point's result.
    """
    return Interpreter(parse_source(source), "<test>").run()


def eval_main_expr(expr: str):
    """
    Evaluate a single expression by returning it from ``main``.
    """
    return run_source(f"fn main() {{ return {expr}; }}")
