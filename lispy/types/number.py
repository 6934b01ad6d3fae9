from __future__ import annotations

from lispy.types.value import Value

# Numbers are signed 64-bit integers
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def in_range(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


class Number(Value):
    __slots__ = ("value",)

    type_name = "Number"

    def __init__(self, value: int):
        self.value = value

    def copy(self) -> Number:
        return Number(self.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self):
        return f"Number({self.value!r})"
