from __future__ import annotations

from sevenlang.reader.syntax import LowerFn, SyntaxNode, expect_arity, identifier_name
from sevenlang.types.environment import Environment
from sevenlang.types.expression import Expression


class Define(Expression):
    """
    (define name expr)
    Binds `name` to `expr` unevaluated; the expression is evaluated on each lookup.
    """

    __slots__ = ("name", "expression")

    def __init__(self, name: str, expression: Expression):
        self.name = name
        self.expression = expression

    @classmethod
    def from_syntax(cls, tail: list[SyntaxNode], lower: LowerFn) -> Define:
        expect_arity("define", tail, 2, "(define name expr)")
        name = identifier_name(tail[0], "define name")
        return cls(name, lower(tail[1]))

    def evaluate(self, env: Environment) -> None:
        env.define(self.name, self.expression)
        return None

    def __repr__(self) -> str:
        return f"Define({self.name!r}, {self.expression!r})"

    def __str__(self) -> str:
        return f"(define {self.name} {self.expression})"
