"""Closure representation for Pon."""

from __future__ import annotations

from io import StringIO

from pon import SExpression, LispValue
from pon.types.environment import Environment
from pon.types.symbol import Symbol


class Procedure:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        # Captured by reference: later defines in `env` are visible to the body
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind argument values positionally in a fresh child of the closure env.

        Surplus arguments or formals are dropped rather than reported.
        """
        return Environment(self.formals, args, outer=self.env)
