from pon import EvaluatorFn
from pon import SExpression, LispValue
from pon.errors import PonInvalidSymbol, PonArityError
from pon.types.symbol import Symbol
from pon.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise PonArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise PonInvalidSymbol(f"set! first argument must be a Symbol, got {var_sym}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)

    return value
