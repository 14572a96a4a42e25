from pon import EvaluatorFn
from pon import SExpression, LispValue
from pon.types.environment import Environment
from pon.types.nil import Nil


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result
