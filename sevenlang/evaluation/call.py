from __future__ import annotations

from sevenlang.errors import EvalError
from sevenlang.evaluation.apply import apply_closure
from sevenlang.evaluation.evaluator import evaluate_value
from sevenlang.types.environment import Environment
from sevenlang.types.expression import Expression
from sevenlang.types.values import Closure, Value


class Variable(Expression):
    """A reference to a name, resolved when evaluated (late binding)."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def evaluate(self, env: Environment) -> Value | None:
        frame = env.find(self.name)
        if frame is None:
            # lookup raises the unbound symbol error
            env.lookup(self.name)
        # The binding is evaluated in the frame that holds it
        return frame.vars[self.name].evaluate(frame)

    def __eq__(self, other) -> bool:
        return isinstance(other, Variable) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Variable({self.name!r})"

    def __str__(self) -> str:
        return self.name


class Call(Expression):
    """(callee arg ...) where the callee must evaluate to a closure."""

    __slots__ = ("callee", "arguments")

    def __init__(self, callee: Expression, arguments: list[Expression]):
        self.callee = callee
        self.arguments = list(arguments)

    def evaluate(self, env: Environment) -> Value | None:
        fn = evaluate_value(self.callee, env, "call target")
        if not isinstance(fn, Closure):
            raise EvalError(f"Cannot apply non-closure {fn.kind} {fn}")
        args = [evaluate_value(arg, env, f"argument of {self.callee}") for arg in self.arguments]
        return apply_closure(fn, args)

    def __repr__(self) -> str:
        return f"Call({self.callee!r}, {self.arguments!r})"

    def __str__(self) -> str:
        return "(" + " ".join(str(e) for e in [self.callee, *self.arguments]) + ")"
