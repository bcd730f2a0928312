from __future__ import annotations

from sevenlang.errors import ArityError, EvalError, ParseError
from sevenlang.evaluation.apply import apply_closure
from sevenlang.evaluation.builtins import BUILTIN_OPERATORS, apply_builtin
from sevenlang.evaluation.evaluator import evaluate_value, expect
from sevenlang.reader.syntax import LowerFn, SyntaxNode, is_identifier
from sevenlang.types.environment import Environment
from sevenlang.types.expression import Expression
from sevenlang.types.values import Closure, ListValue, Value


class ListForm(Expression):
    """(list e ...) evaluates every element into a fixed-length ListValue."""

    __slots__ = ("elements",)

    def __init__(self, elements: list[Expression]):
        self.elements = list(elements)

    @classmethod
    def from_syntax(cls, tail: list[SyntaxNode], lower: LowerFn) -> ListForm:
        return cls([lower(node) for node in tail])

    def evaluate(self, env: Environment) -> ListValue:
        return ListValue(tuple(evaluate_value(e, env, "list element") for e in self.elements))

    def __repr__(self) -> str:
        return f"ListForm({self.elements!r})"

    def __str__(self) -> str:
        return "(" + " ".join(["list", *(str(e) for e in self.elements)]) + ")"


class MapForm(Expression):
    """
    (map proc list ...)

    `proc` is either a built-in operator symbol, applied to each column of
    the lists (so (map + xs ys) adds element-wise), or an expression that
    evaluates to a closure taking one parameter per list. All lists must
    have the same length. The closure's environment is reused for every
    index.
    """

    __slots__ = ("operator", "procedure", "lists")

    def __init__(
        self,
        procedure: Expression | None,
        lists: list[Expression],
        operator: str | None = None,
    ):
        if (procedure is None) == (operator is None):
            raise ValueError("map needs exactly one of a procedure or an operator")
        self.procedure = procedure
        self.operator = operator
        self.lists = list(lists)

    @classmethod
    def from_syntax(cls, tail: list[SyntaxNode], lower: LowerFn) -> MapForm:
        if len(tail) < 2:
            raise ParseError("map requires a procedure and at least one list: (map proc list ...)")
        proc, *lists = tail
        lowered = [lower(node) for node in lists]
        if is_identifier(proc) and proc.text in BUILTIN_OPERATORS:
            return cls(None, lowered, operator=proc.text)
        return cls(lower(proc), lowered)

    def evaluate(self, env: Environment) -> ListValue:
        fn = None
        if self.procedure is not None:
            fn = evaluate_value(self.procedure, env, "map procedure")
            if not isinstance(fn, Closure):
                raise EvalError(f"Cannot map non-closure {fn.kind} {fn}")
            if len(fn.parameters) != len(self.lists):
                raise ArityError(
                    f"{fn} expects {len(fn.parameters)} argument(s), map was given {len(self.lists)} list(s)"
                )

        lists = [expect(evaluate_value(e, env, "map list"), ListValue, "map") for e in self.lists]
        lengths = {len(items) for items in lists}
        if len(lengths) > 1:
            raise EvalError(f"map requires lists of equal length, got lengths {sorted(lengths)}")

        results: list[Value] = []
        for column in zip(*lists):
            if fn is None:
                results.append(apply_builtin(self.operator, column))
                continue
            result = apply_closure(fn, column)
            if result is None:
                raise EvalError(f"map procedure produced no value: {fn}")
            results.append(result)
        return ListValue(tuple(results))

    def __repr__(self) -> str:
        return f"MapForm({self.operator or self.procedure!r}, {self.lists!r})"

    def __str__(self) -> str:
        proc = self.operator or str(self.procedure)
        return "(" + " ".join(["map", proc, *(str(e) for e in self.lists)]) + ")"
