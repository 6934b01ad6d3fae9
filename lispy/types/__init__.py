from lispy.types.value import Value, type_name
from lispy.types.number import Number
from lispy.types.error import Error
from lispy.types.symbol import Symbol
from lispy.types.function import Function
from lispy.types.expr import Expr, SExpr, QExpr
from lispy.types.environment import Environment

__all__ = [
    "Value",
    "type_name",
    "Number",
    "Error",
    "Symbol",
    "Function",
    "Expr",
    "SExpr",
    "QExpr",
    "Environment",
]
