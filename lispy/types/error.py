from __future__ import annotations

from lispy.types.value import Value

# Messages shared between the importer, the evaluator and the builtins
ERR_DIV_ZERO = "division by zero"
ERR_BAD_OP = "cannot operate on non-number"
ERR_BAD_NUM = "invalid number"
ERR_OVERFLOW = "integer overflow"
ERR_NOT_FUNCTION = "first element is not a function"


class Error(Value):
    """A terminal failure value.

    Errors are ordinary values: they are returned, never raised, and an
    enclosing S-expression that contains one reduces to it.
    """

    __slots__ = ("message",)

    type_name = "Error"

    def __init__(self, message: str):
        self.message = message

    def copy(self) -> Error:
        return Error(self.message)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Error) and self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)

    def __repr__(self):
        return f"Error({self.message!r})"
