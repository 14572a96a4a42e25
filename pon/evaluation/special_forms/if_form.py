from pon import EvaluatorFn
from pon import SExpression, LispValue
from pon.errors import PonArityError
from pon.types.nil import Nil
from pon.types.symbol import FALSE
from pon.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise PonArityError("if requires a test, a consequent and an optional alternative")

    cond = evaluate_fn(tail[0], env)
    # Only #f is false
    if cond != FALSE:
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
