"""Rendering of Pon values.

`to_string` is the REPL notation: lists as ``[a, b]``, symbols with a leading
``:``, numbers as-is, procedures as opaque markers. `to_source` writes an
expression back as s-expression text that `read` accepts.
"""

from __future__ import annotations

from decimal import Decimal

from pon import LispValue, SExpression
from pon.errors import PonArithmeticError
from pon.types.environment import Environment
from pon.types.nil import NilType
from pon.types.procedure import Procedure
from pon.types.symbol import Symbol, TRUE, FALSE


def _number(value: int | float) -> str:
    try:
        return repr(value)
    except ValueError:
        # int has more digits than str conversion allows
        raise PonArithmeticError(f"Integer too large to print ({value.bit_length()} bits)") from None


def to_string(value: LispValue) -> str:
    """Render `value` for the REPL.

    The boolean symbols print bare as ``#t`` / ``#f``; every other Symbol
    gets the ``:`` sigil.
    """
    if isinstance(value, list):
        return "[" + ", ".join(to_string(item) for item in value) + "]"
    if value == TRUE or value == FALSE:
        return str(value)
    if isinstance(value, Symbol):
        return f":{value}"
    if isinstance(value, NilType):
        return "nil"
    if isinstance(value, Procedure):
        return "#<procedure>"
    if isinstance(value, Environment):
        return str(value)
    if isinstance(value, (int, float)):
        return _number(value)
    if callable(value):
        return f"#<primitive {getattr(value, '__name__', '?')}>"
    return repr(value)


def _float_source(value: float) -> str:
    # Positional notation only: the reader has no exponent syntax
    text = format(Decimal(repr(value)), "f")
    if "." not in text and text.lstrip("-").isdigit():
        text += ".0"
    return text


def to_source(expr: SExpression) -> str:
    if isinstance(expr, list):
        return "(" + " ".join(to_source(item) for item in expr) + ")"
    if isinstance(expr, float):
        return _float_source(expr)
    if isinstance(expr, int):
        return _number(expr)
    return str(expr)
