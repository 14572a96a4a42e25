from pon import EvaluatorFn
from pon import SExpression, LispValue
from pon.errors import PonArityError, PonInvalidSymbol
from pon.types.environment import Environment
from pon.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only and returns the bound value.
    """
    if len(tail) != 2:
        raise PonArityError("define requires exactly 2 arguments: (define name value)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise PonInvalidSymbol(f"define first argument must be a Symbol, got {name}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
