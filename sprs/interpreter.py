"""Interpreter.

This is a tree-walk interpreter for programs produced by the parser.

1. Execution Model
The interpreter selects an entry point, ``main`` if it is defined and the
first function in program order otherwise, and calls it with no arguments.
Statements are executed via `execute_block()` and `execute()`, expressions
are evaluated with `eval_expr()`.

2. Environment
Every function call gets one fresh, flat ``dict`` mapping names to values.
Parameters are bound positionally before the body runs. ``if``/``else``
arms share their function's environment, so an assignment inside an arm
stays visible after it. Environments are never shared between calls and
there are no global variables; top-level variable items are not executed.

3. Returns
Executing a block yields :class:`~sprs.values.Completed` or
:class:`~sprs.values.Returning`. A block stops at the first statement that
yields ``Returning`` and hands it to its caller unchanged; the function
call unwraps it. A body that completes without returning yields Unit.

4. Operators
``+`` and ``*`` operate on two integers (wrapping to signed 64-bit) and
yield Unit for every other operand pair. ``==`` compares structurally and
always yields a boolean.

5. Error Handling
Undefined variables, unknown functions and argument count mismatches
raise :class:`~sprs.exceptions.EvalError` subclasses carrying line and
file context. Nothing is recovered locally.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

from sprs.exceptions import (
    ArityException,
    EvalError,
    UndefinedFunctionException,
    UndefinedVariableException,
)
from sprs.formatter import format_expr
from sprs.nodes import (
    BinaryOp,
    Block,
    Bool,
    Call,
    ExprStmt,
    FunctionDef,
    IfStmt,
    Number,
    Program,
    ReturnStmt,
    Str,
    Var,
    VarStmt,
)
from sprs.operations import Op
from sprs.values import (
    UNIT,
    BoolValue,
    Completed,
    Completion,
    IntValue,
    Returning,
    StrValue,
    Value,
    is_truthy,
    wrap_i64,
)

logger = logging.getLogger(__name__)


class FunctionTable(dict):
    """Name to FunctionDef mapping that disallows modification once built."""

    def __init__(self, program: Program):
        super().__init__()
        for func in program.functions:
            # Later definitions replace earlier ones.
            dict.__setitem__(self, func.name, func)

    def __readonly(self, *_args, **_kwargs):  # type: ignore[no-untyped-def]
        raise TypeError("The function table is read-only")

    __setitem__ = __readonly  # type: ignore[assignment]
    __delitem__ = __readonly  # type: ignore[assignment]
    pop = __readonly  # type: ignore[assignment]
    popitem = __readonly  # type: ignore[assignment]
    clear = __readonly  # type: ignore[assignment]
    update = __readonly  # type: ignore[assignment]
    setdefault = __readonly  # type: ignore[assignment]
    __ior__ = __readonly  # type: ignore[assignment]


class Interpreter:
    """Tree-walk interpreter for sprs."""

    def __init__(self, program: Program, file: str = "<input>"):
        """
        Initialize the interpreter and build the function table.

        Parameters:
            program (Program): The parsed program.
            file (str): Name of the source, used in error messages.
        """
        self.program = program
        self.file = file
        self.functions = FunctionTable(program)

    def find_entry(self) -> FunctionDef:
        """
        Return ``main`` if it is defined, otherwise the first function.

        Raises:
            EvalError: If the program defines no functions.
        """
        if "main" in self.functions:
            return self.functions["main"]
        funcs = self.program.functions
        if not funcs:
            raise EvalError("No functions found", file=self.file)
        return funcs[0]

    def run(self) -> Value:
        """
        Call the entry point with no arguments and return its result.

        Raises:
            EvalError: On any runtime fault, including call depth exhaustion.
        """
        entry = self.find_entry()
        logger.debug("Entry function: %s", entry.name)
        try:
            result = self.call_function(entry, [], entry.line)
        except RecursionError as e:
            raise EvalError("Maximum call depth exceeded", file=self.file) from e
        logger.info("Program finished with return value: %s", result)
        return result

    def call_function(self, func: FunctionDef, args: list[Value], line: int) -> Value:
        """
        Run a user-defined function in a fresh environment.

        Parameters:
            func (FunctionDef): The callee.
            args (list[Value]): Already evaluated arguments, in order.
            line (int): Line of the call, for error messages.

        Returns:
            Value: The returned value, or Unit if the body never returns.

        Raises:
            ArityException: If the argument count differs from the parameter count.
        """
        if len(args) != len(func.params):
            raise ArityException(func.name, len(func.params), len(args), line, self.file)

        logger.debug("Calling function: %s", func.name)
        env: dict[str, Value] = {}
        for idx, (param, arg) in enumerate(zip(func.params, args)):
            env[param] = arg
            logger.debug("  Param %d: %s = %s", idx, param, arg)

        result = self.execute_block(func.body, env)
        if isinstance(result, Returning):
            return result.value
        return UNIT

    def execute_block(self, block: Block, env: dict) -> Completion:
        """
        Execute the statements of a block in order.

        Parameters:
            block (Block): The block to run.
            env (dict): The calling function's environment.

        Returns:
            Completion: ``Returning`` as soon as a statement returns,
            otherwise ``Completed`` with the last statement's value.
        """
        result: Completion = Completed(UNIT)
        for stmt in block.statements:
            result = self.execute(stmt, env)
            if isinstance(result, Returning):
                return result
        return result

    def execute(self, stmt, env: dict) -> Completion:
        """
        Execute a single statement.

        Raises:
            TypeError: For unknown statement types.
        """
        if isinstance(stmt, VarStmt):
            value = self.eval_expr(stmt.expr, env)
            env[stmt.name] = value
            logger.debug("  Assigned variable %s = %s", stmt.name, value)
            return Completed(UNIT)

        if isinstance(stmt, ExprStmt):
            return Completed(self.eval_expr(stmt.expr, env))

        if isinstance(stmt, IfStmt):
            cond = self.eval_expr(stmt.cond, env)
            tracing = logger.isEnabledFor(logging.DEBUG)
            if is_truthy(cond):
                if tracing:
                    logger.debug("  Condition %s is true", format_expr(stmt.cond))
                return self.execute_block(stmt.then_block, env)
            if stmt.else_block is not None:
                if tracing:
                    logger.debug("  Condition %s is false, executing else block", format_expr(stmt.cond))
                return self.execute_block(stmt.else_block, env)
            return Completed(UNIT)

        if isinstance(stmt, ReturnStmt):
            value = UNIT if stmt.expr is None else self.eval_expr(stmt.expr, env)
            logger.debug("  Return value: %s", value)
            return Returning(value)

        raise TypeError(f"Unknown statement type: {type(stmt).__name__} in {self.file}")

    def eval_expr(self, node, env: dict) -> Value:
        """
        Recursively evaluate an expression node and return its value.

        Raises:
            UndefinedVariableException: If a variable is not bound in `env`.
            UndefinedFunctionException: If a call names no builtin or function.
            ArityException: If a call passes the wrong number of arguments.
        """
        if isinstance(node, Number):
            return IntValue(node.value)
        if isinstance(node, Bool):
            return BoolValue(node.value)
        if isinstance(node, Str):
            return StrValue(node.value)

        if isinstance(node, Var):
            if node.name in env:
                return env[node.name]
            raise UndefinedVariableException(node.name, node.line, self.file)

        if isinstance(node, BinaryOp):
            return self.eval_binary(node, env)

        if isinstance(node, Call):
            args = [self.eval_expr(arg, env) for arg in node.args]
            if node.name == "print":
                for arg in args:
                    print(arg)
                return UNIT
            func = self.functions.get(node.name)
            if func is None:
                raise UndefinedFunctionException(node.name, node.line, self.file)
            return self.call_function(func, args, node.line)

        raise TypeError(f"Invalid expression node: {node!r}")

    def eval_binary(self, node: BinaryOp, env: dict) -> Value:
        """
        Evaluate a tree of operator nodes with an explicit stack.

        Operands are evaluated left to right, and long ``a + b + c + ...``
        chains do not consume a Python frame per operator.
        """
        values: list[Value] = []
        stack = [(node, False)]
        while stack:
            current, visited = stack.pop()
            if not isinstance(current, BinaryOp):
                values.append(self.eval_expr(current, env))
            elif visited:
                rhs = values.pop()
                lhs = values.pop()
                values.append(self.binary_op(current.op, lhs, rhs))
            else:
                stack.append((current, True))
                stack.append((current.rhs, False))
                stack.append((current.lhs, False))
        return values[0]

    @staticmethod
    def binary_op(op: Op, lhs: Value, rhs: Value) -> Value:
        """
        Apply a binary operator to two evaluated operands.

        Arithmetic on anything but two integers yields Unit rather than an error.
        """
        match op:
            case Op.EQ:
                return BoolValue(lhs == rhs)
            case Op.ADD:
                if isinstance(lhs, IntValue) and isinstance(rhs, IntValue):
                    return IntValue(wrap_i64(lhs.value + rhs.value))
                return UNIT
            case Op.MUL:
                if isinstance(lhs, IntValue) and isinstance(rhs, IntValue):
                    return IntValue(wrap_i64(lhs.value * rhs.value))
                return UNIT
        raise TypeError(f"Unknown binary operator '{op}'")
