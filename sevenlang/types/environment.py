"""Runtime environment for SevenLang.

The Environment maps identifier names to *unevaluated* expressions. A
variable lookup evaluates whatever is bound at the time of use, so a name
can be rebound between definition and use.

How call-time parameters are bound depends on the scoping mode:

- SHARED: parameters are written straight into the closure's captured
  environment. Every closure created in the same environment aliases the
  same mapping and bindings outlive the call.
- LEXICAL: each call gets a fresh frame whose `outer` link points at the
  captured environment. Nothing leaks after the call returns.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional, Sequence

from sevenlang.config import Scoping, get_scoping, parse_scoping
from sevenlang.errors import UnboundSymbolError
from sevenlang.types.expression import Expression


class Environment:
    """Mapping from names to expressions, optionally chained to an outer frame."""

    __slots__ = ("vars", "outer", "scoping")

    def __init__(
        self,
        bindings: Mapping[str, Expression] | None = None,
        outer: Optional[Environment] = None,
        scoping: Scoping | str | None = None,
    ):
        self.vars: dict[str, Expression] = dict(bindings) if bindings else {}
        self.outer: Environment | None = outer
        # Child frames inherit the mode of their parent unless told otherwise
        if scoping is not None:
            self.scoping: Scoping = parse_scoping(scoping)
        elif outer is not None:
            self.scoping = outer.scoping
        else:
            self.scoping = get_scoping()

    def define(self, name: str, expr: Expression) -> None:
        """Bind `name` to `expr` in this frame. Last write wins."""
        self.vars[name] = expr

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> Expression:
        """Return the expression bound to `name`.

        Raises UnboundSymbolError if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbolError(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def bind(self, names: Sequence[str], values: Sequence[Expression]) -> Environment:
        """Bind parameter `names` to `values` for a call and return the frame to evaluate the body in."""
        frame = self if self.scoping is Scoping.SHARED else Environment(outer=self)
        for name, value in zip(names, values):
            frame.vars[name] = value
        return frame

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def __getitem__(self, name: str) -> Expression:
        return self.lookup(name)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"<Environment {self.scoping.value}: ")
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
