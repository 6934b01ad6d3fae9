"""Compound values: S-expressions and Q-expressions.

Both variants hold an ordered list of child values which they own
exclusively. An SExpr is reduced by the evaluator; a QExpr is inert data and
is the language's list type. Retagging one into the other (as `list` and
`eval` do) hands the same child list over to a new wrapper without copying.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from lispy.types.value import Value


class Expr(Value):
    __slots__ = ("cells",)

    # Delimiters used by the printer
    open = ""
    close = ""

    def __init__(self, cells: Iterable[Value] = ()):
        self.cells: list[Value] = list(cells)

    @classmethod
    def adopt(cls, cells: list[Value]) -> Expr:
        """Wrap `cells` without copying; the caller gives up the list."""
        x = cls()
        x.cells = cells
        return x

    def add(self, value: Value) -> Expr:
        """Append `value` as the last child and return self."""
        self.cells.append(value)
        return self

    def pop(self, i: int = 0) -> Value:
        """Remove child `i` and hand it to the caller."""
        return self.cells.pop(i)

    def take(self, i: int) -> Value:
        """Return child `i` and release all the others."""
        x = self.cells[i]
        self.cells.clear()
        return x

    def copy(self) -> Expr:
        return type(self)(c.copy() for c in self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __getitem__(self, i: int) -> Value:
        return self.cells[i]

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.cells == other.cells

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self.cells!r})"


class SExpr(Expr):
    __slots__ = ()

    type_name = "S-Expression"
    open = "("
    close = ")"


class QExpr(Expr):
    __slots__ = ()

    type_name = "Q-Expression"
    open = "{"
    close = "}"
