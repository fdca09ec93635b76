"""Runtime environment for TALE.

An Environment stores bindings of symbol names to evaluated values and links
to at most one enclosing (outer) environment. Lookups walk the chain outward;
definitions only ever touch the frame they are made in.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from tale import LispValue
from tale.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from symbol names to values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        vars: Optional[dict[str, LispValue]] = None,
        outer: Optional[Environment] = None,
    ):
        self.vars: dict[str, LispValue] = dict(vars) if vars else {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol | str, value: LispValue) -> Symbol:
        """Bind `name` to `value` in this frame, overwriting any previous binding.

        Outer frames are never modified. Returns the bound name.
        """
        key = str(name)
        self.vars[key] = value
        return name if isinstance(name, Symbol) else Symbol(key)

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = str(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol | str) -> Optional[LispValue]:
        """Value bound to `name` in this frame or the nearest outer one, else None."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[str(name)]

    def __contains__(self, name: Symbol | str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                env._write_vars(buffer)
                first = False
                env = env.outer
            buffer.write(">")
            return buffer.getvalue()
