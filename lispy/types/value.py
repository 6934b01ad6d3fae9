from __future__ import annotations


class Value:
    """Base class for every Lispy runtime value.

    The set of subclasses is closed: Number, Error, Symbol, Function, SExpr
    and QExpr. Each one owns its payload outright, so `copy()` always returns
    a structurally independent value.
    """

    __slots__ = ()

    # Human-readable variant name, used in error messages
    type_name = "Value"

    def copy(self) -> Value:
        raise NotImplementedError


def type_name(value: Value) -> str:
    return value.type_name
