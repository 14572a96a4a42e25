"""Application engine for Pon.

Applies an already-evaluated operator to already-evaluated arguments:
- Procedure (closure): bind formals in a child of the captured environment
  and evaluate the body there.
- Python callables registered in the environment (primitives), invoked as
  fn(env, args).
"""

from typing import Callable

from pon import LispValue, EvaluatorFn
from pon.errors import PonTypeError
from pon.types.environment import Environment
from pon.printer import to_string
from pon.types.procedure import Procedure


def apply_procedure(
    fn: Procedure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: Procedure | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Procedure or a Python callable.

    Raises PonTypeError for anything else.
    """
    if isinstance(head, Procedure):
        return apply_procedure(head, args, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        raise PonTypeError(f"Cannot apply non-function {to_string(head)}")
