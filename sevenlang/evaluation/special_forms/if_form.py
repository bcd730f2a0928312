from __future__ import annotations

from sevenlang.evaluation.evaluator import evaluate_value, expect
from sevenlang.reader.syntax import LowerFn, SyntaxNode, expect_arity
from sevenlang.types.environment import Environment
from sevenlang.types.expression import Expression
from sevenlang.types.values import BoolValue, Value


class If(Expression):
    __slots__ = ("test", "then_branch", "else_branch")

    def __init__(self, test: Expression, then_branch: Expression, else_branch: Expression):
        self.test = test
        self.then_branch = then_branch
        self.else_branch = else_branch

    @classmethod
    def from_syntax(cls, tail: list[SyntaxNode], lower: LowerFn) -> If:
        expect_arity("if", tail, 3, "(if test then else)")
        return cls(*(lower(node) for node in tail))

    def evaluate(self, env: Environment) -> Value | None:
        # Only the chosen branch is evaluated
        cond = expect(evaluate_value(self.test, env, "if test"), BoolValue, "if test")
        if cond.value:
            return self.then_branch.evaluate(env)
        return self.else_branch.evaluate(env)

    def __repr__(self) -> str:
        return f"If({self.test!r}, {self.then_branch!r}, {self.else_branch!r})"

    def __str__(self) -> str:
        return f"(if {self.test} {self.then_branch} {self.else_branch})"
