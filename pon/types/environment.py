"""Runtime environment for Pon.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Frames only ever point at their parent, so a
closure keeps its defining frame (and that frame's ancestors) alive for as long
as the closure itself is reachable.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from pon import LispValue
from pon.errors import PonInvalidSymbol, PonUnboundSymbol
from pon.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        names: Iterable[Symbol] = (),
        values: Iterable[LispValue] = (),
        outer: Optional[Environment] = None,
    ):
        # zip truncates to the shorter sequence; callers rely on that
        self.vars: dict[Symbol, LispValue] = dict(zip(names, values))
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any local binding.

        Raises PonInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise PonInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises PonUnboundSymbol if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise PonUnboundSymbol(f"Cannot set unbound symbol {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, searching outwards.

        Raises PonUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise PonUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    __getitem__ = lookup

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        from pon.printer import to_string

        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            # a frame may hold itself, e.g. after (define e (env))
            shown = "#<environment>" if isinstance(v, Environment) else to_string(v)
            buffer.write(f"{k}: {shown}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
