class LispyError(Exception):
    """ Base class for all host-level Lispy errors"""
    pass


class LispySyntaxError(LispyError):
    """ Raised when source text cannot be read into a parse tree"""

    def __init__(self, message: str, line: int = 1, column: int = 1):
        super().__init__(f"{message} at line {line}, column {column}")
        self.message = message
        self.line = line
        self.column = column
