"""Runtime environment for Lispy.

The Environment is a single flat table mapping symbol names to values. There
is no outer chain: every binding, builtin or user-defined, lives in the same
table, which is what lets `def` rebind operators.

Bindings are stored and handed out as deep copies, so a value held by the
environment is never shared with an expression that is being evaluated.
"""

from __future__ import annotations

import logging
from io import StringIO

from lispy import BuiltinFn
from lispy.types.value import Value
from lispy.types.error import Error
from lispy.types.function import Function

logger = logging.getLogger(__name__)


class Environment:
    """Insert-or-redefine mapping from names to owned values."""

    __slots__ = ("vars",)

    def __init__(self):
        # dict keeps insertion order and replacing a key keeps its slot
        self.vars: dict[str, Value] = {}

    def get(self, name: str) -> Value:
        """Return a copy of the value bound to `name`, or an Error if unbound."""
        value = self.vars.get(name)
        if value is None:
            return Error(f"unbound symbol '{name}'")
        return value.copy()

    def put(self, name: str, value: Value) -> None:
        """Bind `name` to a copy of `value`, replacing any prior binding in place."""
        if name in self.vars:
            logger.debug("redefining %s", name)
        self.vars[name] = value.copy()

    def add_builtin(self, name: str, fn: BuiltinFn) -> None:
        self.put(name, Function(fn, name))

    def names(self) -> list[str]:
        return list(self.vars)

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment {")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            buffer.write("}>")
            return buffer.getvalue()
