from __future__ import annotations

from lispy import BuiltinFn
from lispy.types.value import Value


class Function(Value):
    """A native operation bound in the environment.

    Functions are not closures; copying one yields a new handle to the same
    native callable.
    """

    __slots__ = ("builtin", "name")

    type_name = "Function"

    def __init__(self, builtin: BuiltinFn, name: str | None = None):
        self.builtin = builtin
        self.name = name or getattr(builtin, "__name__", "<anonymous>")

    def copy(self) -> Function:
        return Function(self.builtin, self.name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Function) and self.builtin is other.builtin

    def __hash__(self) -> int:
        return id(self.builtin)

    def __repr__(self):
        return f"Function({self.name!r})"
