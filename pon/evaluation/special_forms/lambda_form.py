from pon import EvaluatorFn
from pon import SExpression, LispValue
from pon.errors import PonArityError, PonInvalidSymbol
from pon.types.environment import Environment
from pon.types.procedure import Procedure
from pon.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (params...) body)
    A single body expression; use begin to sequence several.
    """
    if len(tail) != 2:
        raise PonArityError("lambda requires a parameter list and a body")

    params, body = tail
    if not isinstance(params, list):
        raise PonInvalidSymbol(f"lambda parameters must be a list, got {params}")
    for p in params:
        if not isinstance(p, Symbol):
            raise PonInvalidSymbol(f"lambda parameter must be a Symbol, got {p}")

    return Procedure(list(params), body, env)
