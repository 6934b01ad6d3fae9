"""Built-in functions for the Lispy runtime environment.

This module defines the list operations, arithmetic and `def`, plus the
registration table that binds them into an Environment.

Every builtin takes `(env, args)` where `args` is an already-evaluated SExpr
owned by the builtin, and returns exactly one Value. Failures are returned as
Error values.
"""
from __future__ import annotations

import operator
from typing import Callable

from lispy import BuiltinFn
from lispy.types import Environment, Error, Number, QExpr, SExpr, Symbol, Value, type_name
from lispy.types.error import ERR_BAD_OP, ERR_DIV_ZERO, ERR_OVERFLOW
from lispy.types.number import in_range
from lispy.evaluation.evaluator import evaluate


# -------------------------------
# Argument checks
# -------------------------------
def _expect_count(name: str, args: SExpr, expected: int) -> Error | None:
    if len(args) == expected:
        return None
    if len(args) > expected:
        return Error(f"function '{name}' passed too many arguments")
    return Error(
        f"function '{name}' passed incorrect number of arguments: "
        f"got {len(args)}, expected {expected}"
    )


def _expect_type(name: str, args: SExpr, i: int, cls: type[Value]) -> Error | None:
    if isinstance(args[i], cls):
        return None
    return Error(
        f"function '{name}' passed incorrect type for argument {i}: "
        f"got {type_name(args[i])}, expected {cls.type_name}"
    )


def _expect_nonempty(name: str, args: SExpr, i: int) -> Error | None:
    if len(args[i]) == 0:
        return Error(f"function '{name}' passed {{}}")
    return None


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: SExpr) -> Value:
    """Reinterpret the argument list as a Q-expression."""
    return QExpr.adopt(args.cells)


def head(env: Environment, args: SExpr) -> Value:
    """Return a Q-expression holding only the first element of a list."""
    err = (
        _expect_count("head", args, 1)
        or _expect_type("head", args, 0, QExpr)
        or _expect_nonempty("head", args, 0)
    )
    if err:
        return err
    q = args.take(0)
    del q.cells[1:]
    return q


def tail(env: Environment, args: SExpr) -> Value:
    """Return a list with its first element removed."""
    err = (
        _expect_count("tail", args, 1)
        or _expect_type("tail", args, 0, QExpr)
        or _expect_nonempty("tail", args, 0)
    )
    if err:
        return err
    q = args.take(0)
    q.pop(0)
    return q


def eval_builtin(env: Environment, args: SExpr) -> Value:
    """Evaluate a Q-expression as if it were an S-expression."""
    err = _expect_count("eval", args, 1) or _expect_type("eval", args, 0, QExpr)
    if err:
        return err
    q = args.take(0)
    return evaluate(SExpr.adopt(q.cells), env)


def join(env: Environment, args: SExpr) -> Value:
    """Concatenate Q-expressions in argument order."""
    for i in range(len(args)):
        err = _expect_type("join", args, i, QExpr)
        if err:
            return err
    if len(args) == 0:
        return QExpr()
    x = args.pop(0)
    while len(args):
        x.cells.extend(args.pop(0).cells)
    return x


# -------------------------------
# Arithmetic
# -------------------------------
def _trunc_div(a: int, b: int) -> int:
    # Integer division rounds toward zero
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _trunc_div,
}


def builtin_op(args: SExpr, op: str) -> Value:
    """Fold the numeric arguments left to right with operator `op`."""
    if len(args) == 0:
        return Error(f"function '{op}' passed no arguments")
    for cell in args:
        if not isinstance(cell, Number):
            return Error(ERR_BAD_OP)

    x = args.pop(0).value

    # Unary minus
    if op == "-" and len(args) == 0:
        x = -x

    fn = OPERATORS[op]
    while len(args):
        y = args.pop(0).value
        if op == "/" and y == 0:
            return Error(ERR_DIV_ZERO)
        x = fn(x, y)
        if not in_range(x):
            return Error(ERR_OVERFLOW)

    if not in_range(x):
        return Error(ERR_OVERFLOW)
    return Number(x)


def add(env: Environment, args: SExpr) -> Value:
    return builtin_op(args, "+")


def sub(env: Environment, args: SExpr) -> Value:
    return builtin_op(args, "-")


def mul(env: Environment, args: SExpr) -> Value:
    return builtin_op(args, "*")


def div(env: Environment, args: SExpr) -> Value:
    return builtin_op(args, "/")


# -------------------------------
# Binding
# -------------------------------
def define(env: Environment, args: SExpr) -> Value:
    """Bind each symbol of the first argument to the matching later argument.

    (def {a b} 1 2) binds a to 1 and b to 2 and returns ().
    """
    if len(args) == 0:
        return Error(
            "function 'def' passed incorrect number of arguments: got 0, expected 1 or more"
        )
    err = _expect_type("def", args, 0, QExpr)
    if err:
        return err

    syms = args[0]
    for sym in syms:
        if not isinstance(sym, Symbol):
            return Error("function 'def' cannot define non-symbol")

    if len(syms) != len(args) - 1:
        return Error("function 'def' cannot define incorrect number of values to symbols")

    for sym, value in zip(syms, args.cells[1:]):
        env.put(sym.name, value)

    return SExpr()


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, BuiltinFn] = {
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "eval": eval_builtin,
    "join": join,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "def": define,
}


def register(env: Environment) -> None:
    for name, fn in BUILTINS.items():
        env.add_builtin(name, fn)
