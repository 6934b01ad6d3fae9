from lispy.reader.parser import ParseNode, parse, tokenize
from lispy.reader.importer import read

__all__ = ["ParseNode", "parse", "tokenize", "read"]
