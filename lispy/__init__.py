# Core type aliases for Lispy's data model.
# Every runtime entity is one of the Value variants in lispy.types; parsed code
# and evaluated results share the same representation.
#
# BuiltinFn is the signature shared by every native operation: it receives the
# environment and an owned argument list and returns a single Value.

from typing import Callable

__version__ = "0.0.1"

BuiltinFn = Callable[["Environment", "SExpr"], "Value"]
