"""Application of Function values to evaluated argument lists."""

from lispy.types import Environment, Function, SExpr, Value


def apply(fn: Function, args: SExpr, env: Environment) -> Value:
    """Apply `fn` to the owned argument list `args`.

    The evaluator has already checked that head position holds a Function.
    """
    return fn.builtin(env, args)
