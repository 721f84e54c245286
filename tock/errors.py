

class TockError(Exception):
    """ Base class for all Tock errors"""
    pass


class LexError(TockError):
    """ Raised when source text cannot be tokenized"""

    def __init__(self, message: str, pos: int):
        super().__init__(f"{message} at position {pos}")
        self.pos = pos


class ParseError(TockError):
    """ Raised when tokens do not form balanced expressions"""

    def __init__(self, message: str, pos: int | None = None):
        super().__init__(message if pos is None else f"{message} at position {pos}")
        self.pos = pos


class EvalError(TockError):
    """ Raised when evaluation fails; `reason` names the failure class"""
    reason = "evaluation error"


class UndefinedVariableError(EvalError):
    """ Raised when a symbol is read or `set` before it is bound"""
    reason = "undefined variable"


class UndefinedFunctionError(EvalError):
    """ Raised when a list head names neither a form nor a function"""
    reason = "undefined function"


class ArgumentTypeError(EvalError):
    """ Raised when the types of arguments passed to a primitive are incorrect"""
    reason = "wrong argument type"


class ArityError(EvalError):
    """ Raised when a special form is missing required parts"""
    reason = "wrong number of arguments"


class DivisionByZeroError(EvalError):
    """ Raised on division or modulo by zero"""
    reason = "division by zero"


class CapabilityError(EvalError):
    """ Raised when an output sink or drawing surface fails"""
    reason = "capability failure"


class RecursionDepthError(EvalError):
    """ Raised when nested evaluation exceeds the host recursion limit"""
    reason = "recursion depth exceeded"


class Cancelled(TockError):
    """ Raised inside a run that was cancelled by its host"""
