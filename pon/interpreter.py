from __future__ import annotations

import logging

from pon import LispValue
from pon.builtin.env_builtin import register
from pon.evaluation.evaluator import evaluate
from pon.reader.parser import read
from pon.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates one line of Pon code at a time.
    Maintains a root Environment (with primitives installed) across calls.
    """

    def __init__(self):
        self.env: Environment = Environment()
        register(self.env)

    def eval(self, code: str) -> LispValue:
        expr = read(code)
        logger.debug("read %r", expr)
        result = evaluate(expr, self.env)
        logger.debug("result %r", result)
        return result
