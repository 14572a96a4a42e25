from pon import SExpression, LispValue, EvaluatorFn
from pon.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (quote x ...)
    Returns everything after the operator as a list, unevaluated, so
    (quote (1 2 3)) yields [[1, 2, 3]] rather than [1, 2, 3].
    """
    return list(tail)
