

class PonError(Exception):
    """ Base class for all Pon errors"""
    pass

class PonInvalidSymbol(PonError):
    """ Raised when a non-symbol is used where a symbol is required"""
    pass

class PonUnboundSymbol(PonError):
    """ Raised when a symbol is used before it is bound"""
    pass

class PonSyntaxError(PonError):
    """ Raised when source text cannot be read"""

class PonArityError(PonError):
    """ Raised when a form or primitive gets the wrong number of arguments"""

class PonTypeError(PonError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class PonArithmeticError(PonError):
    """ Raised on division by zero"""
