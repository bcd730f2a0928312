from __future__ import annotations

from io import StringIO

from sevenlang.errors import ParseError
from sevenlang.reader.syntax import LowerFn, SyntaxList, SyntaxNode, expect_arity, identifier_name
from sevenlang.types.environment import Environment
from sevenlang.types.expression import Expression
from sevenlang.types.values import Closure


class Lambda(Expression):
    """(lambda (p ...) body). Evaluates to a Closure over the current environment."""

    __slots__ = ("parameters", "body")

    def __init__(self, parameters: list[str] | tuple[str, ...], body: Expression):
        self.parameters: tuple[str, ...] = tuple(parameters)
        self.body = body

    @classmethod
    def from_syntax(cls, tail: list[SyntaxNode], lower: LowerFn) -> Lambda:
        expect_arity("lambda", tail, 2, "(lambda (params ...) body)")
        params, body = tail
        if not isinstance(params, SyntaxList):
            raise ParseError(f"lambda parameters must be a list, got {params}")
        names = [identifier_name(p, "lambda parameter") for p in params.children]
        return cls(names, lower(body))

    def evaluate(self, env: Environment) -> Closure:
        return Closure(self, env)

    def __repr__(self) -> str:
        return f"Lambda({list(self.parameters)!r}, {self.body!r})"

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(self.parameters))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()
