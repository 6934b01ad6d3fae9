"""Conversion from the generic parse tree into Lispy values.

This is the only place that knows the shape of ParseNode. Tags are matched by
substring so any tree whose tags mention number/symbol/sexpr/qexpr can be
imported, not only the ones our own reader builds.
"""

from __future__ import annotations

from lispy.types import Error, Expr, Number, QExpr, SExpr, Symbol, Value
from lispy.types.error import ERR_BAD_NUM
from lispy.types.number import in_range
from lispy.reader.parser import ParseNode, ROOT_TAG, REGEX_TAG

DELIMITERS = frozenset("(){}")


def read_number(node: ParseNode) -> Value:
    try:
        n = int(node.contents, 10)
    except ValueError:
        return Error(ERR_BAD_NUM)
    return Number(n) if in_range(n) else Error(ERR_BAD_NUM)


def read(node: ParseNode) -> Value:
    """Import a parse tree node (and its children) as a Value."""
    if "number" in node.tag:
        return read_number(node)
    if "symbol" in node.tag:
        return Symbol(node.contents)

    x: Expr
    if node.tag == ROOT_TAG or "sexpr" in node.tag:
        x = SExpr()
    elif "qexpr" in node.tag:
        x = QExpr()
    else:
        return Error(f"cannot read node tagged {node.tag!r}")

    for child in node.children:
        if child.contents in DELIMITERS:
            continue
        if child.tag == REGEX_TAG:
            continue
        x.add(read(child))
    return x
