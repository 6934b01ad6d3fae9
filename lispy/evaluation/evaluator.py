"""Core evaluator for the Lispy interpreter.

Reduction is a plain recursive walk: symbols are looked up, S-expressions are
reduced child by child and then applied, everything else is already in
normal form. Failures are Error values returned up the call chain; nothing
here raises for a language-level error.
"""

from __future__ import annotations

from lispy.types import Environment, Error, Function, SExpr, Symbol, Value
from lispy.types.error import ERR_NOT_FUNCTION
from lispy.evaluation.apply import apply


def evaluate(value: Value, env: Environment) -> Value:
    """Reduce `value` to normal form against `env`."""
    match value:
        case Symbol():
            return env.get(value.name)
        case SExpr():
            return evaluate_sexpr(value, env)
    # Number, Error, Function and QExpr are already in normal form
    return value


def evaluate_sexpr(v: SExpr, env: Environment) -> Value:
    # Children are reduced strictly left to right; a `def` in one child is
    # visible to the children after it.
    for i in range(len(v.cells)):
        v.cells[i] = evaluate(v.cells[i], env)

    # The first error wins, scanned only after every child has been reduced
    for i, cell in enumerate(v.cells):
        if isinstance(cell, Error):
            return v.take(i)

    if len(v) == 0:
        return v

    if len(v) == 1:
        return v.take(0)

    f = v.pop(0)
    if not isinstance(f, Function):
        return Error(ERR_NOT_FUNCTION)

    return apply(f, v, env)
