
class SevenError(Exception):
    """ Base class for all SevenLang errors"""
    pass

class LexError(SevenError):
    """ Raised when the source text cannot be split into tokens"""
    pass

class ParseError(SevenError):
    """ Raised when the token stream does not form valid expressions"""
    pass

class EvalError(SevenError):
    """ Raised when an expression cannot be evaluated"""
    pass

class UnboundSymbolError(EvalError):
    """ Raised when a symbol is used before it is bound"""

class ArityError(EvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class TypeMismatchError(EvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""
