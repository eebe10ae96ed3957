
class LispletError(Exception):
    """ Base class for all lisplet errors"""
    pass

class LispletSyntaxError(LispletError):
    """ Raised when source text cannot be read into an expression"""

class LispletUnexpectedEOF(LispletSyntaxError):
    """ Raised when the input ends before an expression is complete"""

class LispletMismatchedParens(LispletSyntaxError):
    """ Raised when parentheses do not balance"""

class LispletInvalidSymbol(LispletError):
    """ Raised when something other than a symbol is used as a binding name"""

class LispletUnboundSymbol(LispletError):
    """ Raised when a symbol has no binding anywhere in the scope chain"""

class LispletArityError(LispletError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, name, expected, actual, at_least: bool = False):
        self.name = str(name)
        self.expected = expected
        self.actual = actual
        qualifier = "at least " if at_least else ""
        super().__init__(
            f"{self.name} expects {qualifier}{expected} argument(s), got {actual}"
        )

class LispletTypeError(LispletError):
    """ Raised when a value is used in a way its type does not allow"""

class LispletArithmeticError(LispletError):
    """ Raised when a host numeric operation fails (division by zero, domain errors)"""

class LispletRecursionError(LispletError):
    """ Raised when evaluation exhausts the host call stack"""
