"""Built-in procedures for the Pon root environment.

Arithmetic and comparison take exactly two arguments and defer to the
operation of the left operand. List helpers treat Python lists as Lisp lists.
Every primitive is called as fn(env, args) with already-evaluated arguments.
"""
from __future__ import annotations

import logging
import operator
from typing import Callable

from pon import LispValue
from pon.printer import to_string
from pon.errors import PonArityError, PonArithmeticError, PonTypeError
from pon.types.environment import Environment
from pon.types.nil import Nil
from pon.types.symbol import Symbol, TRUE, FALSE, to_boolean

logger = logging.getLogger(__name__)

Primitive = Callable[[Environment, list[LispValue]], LispValue]


def _check_arity(name: str, expr: list[LispValue], n: int) -> None:
    if len(expr) != n:
        plural = "argument" if n == 1 else "arguments"
        raise PonArityError(f"{name} requires exactly {n} {plural}, got {len(expr)}")


def _check_list(name: str, value: LispValue) -> list[LispValue]:
    if not isinstance(value, list):
        raise PonTypeError(f"{name} expects a list, got {type(value).__name__}")
    return value


# -------------------------------
# Arithmetic and comparison
# -------------------------------
def _binary(name: str, op: Callable[[LispValue, LispValue], LispValue]) -> Primitive:
    def primitive(env: Environment, expr: list[LispValue]) -> LispValue:
        _check_arity(name, expr, 2)
        left, right = expr
        try:
            return op(left, right)
        except TypeError:
            raise PonTypeError(
                f"Unsupported operands for {name}: {type(left).__name__} and {type(right).__name__}"
            ) from None
        except (OverflowError, ValueError, MemoryError) as ex:
            raise PonArithmeticError(f"{name} failed: {ex}") from None

    primitive.__name__ = name
    return primitive


def _divide(left: LispValue, right: LispValue) -> LispValue:
    try:
        if isinstance(left, int) and isinstance(right, int):
            return left // right
        return left / right
    except ZeroDivisionError:
        raise PonArithmeticError("Division by zero") from None


def _compare(op: Callable[[LispValue, LispValue], bool]) -> Callable[[LispValue, LispValue], Symbol]:
    return lambda a, b: to_boolean(op(a, b))


add = _binary("+", operator.add)
sub = _binary("-", operator.sub)
mul = _binary("*", operator.mul)
div = _binary("/", _divide)
gt = _binary(">", _compare(operator.gt))
lt = _binary("<", _compare(operator.lt))
gte = _binary(">=", _compare(operator.ge))
lte = _binary("<=", _compare(operator.le))
equals = _binary("==", _compare(operator.eq))


# -------------------------------
# List operations
# -------------------------------
def length(env: Environment, expr: list[LispValue]) -> int:
    _check_arity("length", expr, 1)
    return len(_check_list("length", expr[0]))


def cons(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    _check_arity("cons", expr, 2)
    head, tail = expr
    return [head] + _check_list("cons", tail)


def car(env: Environment, expr: list[LispValue]) -> LispValue:
    _check_arity("car", expr, 1)
    lst = _check_list("car", expr[0])
    if not lst:
        return Nil
    return lst[0]


def cdr(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    _check_arity("cdr", expr, 1)
    return _check_list("cdr", expr[0])[1:]


def append(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    _check_arity("append", expr, 2)
    return _check_list("append", expr[0]) + _check_list("append", expr[1])


def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    return list(expr)


# -------------------------------
# Predicates
# -------------------------------
def is_list(env: Environment, expr: list[LispValue]) -> Symbol:
    """Predicate: #t if the single argument is a list, else #f."""
    _check_arity("list?", expr, 1)
    return to_boolean(isinstance(expr[0], list))


def is_symbol(env: Environment, expr: list[LispValue]) -> Symbol:
    """Predicate: #t if the single argument is a Symbol, else #f."""
    _check_arity("symbol?", expr, 1)
    return to_boolean(isinstance(expr[0], Symbol))


def is_null(env: Environment, expr: list[LispValue]) -> Symbol:
    """Predicate: #t if the single argument is Nil, else #f."""
    _check_arity("null?", expr, 1)
    return to_boolean(expr[0] is Nil)


def logical_not(env: Environment, expr: list[LispValue]) -> Symbol:
    _check_arity("not", expr, 1)
    return to_boolean(expr[0] == FALSE)


# -------------------------------
# Output
# -------------------------------
def display(env: Environment, expr: list[LispValue]) -> LispValue:
    """Print the argument in REPL notation and return it unchanged."""
    _check_arity("display", expr, 1)
    print(to_string(expr[0]))
    return expr[0]


PRIMITIVES: dict[str, Primitive] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    ">": gt,
    "<": lt,
    ">=": gte,
    "<=": lte,
    "==": equals,
    "length": length,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "append": append,
    "list": list_builtin,
    "list?": is_list,
    "symbol?": is_symbol,
    "null?": is_null,
    "not": logical_not,
    "display": display,
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    """Install the primitives and the boolean/nil constants into `env`."""
    env.update({Symbol(name): fn for name, fn in PRIMITIVES.items()})
    env.update({
        TRUE: TRUE,
        FALSE: FALSE,
        Symbol("nil"): Nil,
    })
    logger.debug("registered %d primitives", len(PRIMITIVES))
