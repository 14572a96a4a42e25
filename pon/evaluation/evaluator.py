"""Core evaluator for the Pon interpreter.

A plain recursive walk: symbols are looked up, atoms evaluate to themselves,
lists dispatch on special forms and otherwise apply their evaluated head to
their evaluated operands. There is no tail-call elimination.
"""

from __future__ import annotations

from pon import SExpression, LispValue
from pon.evaluation.apply import apply
from pon.evaluation.special_forms import SPECIAL_FORMS
from pon.types.environment import Environment
from pon.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.lookup(expr)

        case [head, *tail_args]:
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)

            # Operator and operands are all evaluated, left to right
            values = [evaluate(e, env) for e in expr]
            return apply(values[0], values[1:], env, evaluate)

    # --- Atoms (and the empty list) return as-is ---
    return expr
