"""Built-in operators.

Operators are resolved structurally by the parser, not through the
environment, so they can neither be rebound nor passed around as values
(except as the procedure of `map`).

- Arithmetic (+ - * /) folds left over one or more numbers.
- max / min reduce over one or more numbers.
- Comparisons and and / or take exactly the first two operands, not takes
  one. Extra operands are ignored and never evaluated.
"""
from __future__ import annotations

import math
import operator
from functools import reduce
from typing import Callable, Sequence

from sevenlang.errors import ArityError
from sevenlang.evaluation.evaluator import evaluate_value, expect
from sevenlang.types.environment import Environment
from sevenlang.types.expression import Expression
from sevenlang.types.values import BoolValue, NumberValue, Value


def divide(a: float, b: float) -> float:
    """IEEE division: x/0 is +-inf and 0/0 is nan instead of an exception."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


# -------------------------------
# Operator tables
# -------------------------------
ARITHMETIC: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": divide,
}

REDUCERS: dict[str, Callable[[list[float]], float]] = {
    "max": max,
    "min": min,
}

COMPARISONS: dict[str, Callable[[float, float], bool]] = {
    "<": operator.lt,
    ">": operator.gt,
    "=": operator.eq,
    ">=": operator.ge,
    "<=": operator.le,
    "!=": operator.ne,
}

LOGICAL: dict[str, Callable[..., bool]] = {
    "and": lambda a, b: a and b,
    "or": lambda a, b: a or b,
    "not": operator.not_,
}

BUILTIN_OPERATORS = frozenset(ARITHMETIC) | frozenset(REDUCERS) | frozenset(COMPARISONS) | frozenset(LOGICAL)


def operator_arity(op: str) -> int | None:
    """Fixed operand count of `op`, or None for the variadic operators."""
    if op in ARITHMETIC or op in REDUCERS:
        return None
    if op == "not":
        return 1
    return 2


def apply_builtin(op: str, values: Sequence[Value]) -> Value:
    """Apply operator `op` to already evaluated operands."""
    arity = operator_arity(op)
    if arity is None:
        if not values:
            raise ArityError(f"{op} requires at least 1 argument")
        numbers = [expect(v, NumberValue, op).value for v in values]
        if op in REDUCERS:
            return NumberValue(REDUCERS[op](numbers))
        return NumberValue(reduce(ARITHMETIC[op], numbers))

    if len(values) < arity:
        raise ArityError(f"{op} requires {arity} argument(s), got {len(values)}")
    operands = values[:arity]
    if op in COMPARISONS:
        a, b = (expect(v, NumberValue, op).value for v in operands)
        return BoolValue(COMPARISONS[op](a, b))
    flags = [expect(v, BoolValue, op).value for v in operands]
    return BoolValue(LOGICAL[op](*flags))


class BuiltinOp(Expression):
    """(op arg ...) for one of the fixed operators."""

    __slots__ = ("op", "arguments")

    def __init__(self, op: str, arguments: list[Expression]):
        if op not in BUILTIN_OPERATORS:
            raise ValueError(f"Unknown operator {op}")
        self.op = op
        self.arguments = list(arguments)

    def evaluate(self, env: Environment) -> Value:
        arity = operator_arity(self.op)
        if arity is not None and len(self.arguments) < arity:
            raise ArityError(f"{self.op} requires {arity} argument(s), got {len(self.arguments)}")
        operands = self.arguments if arity is None else self.arguments[:arity]
        values = [evaluate_value(arg, env, f"operand of {self.op}") for arg in operands]
        return apply_builtin(self.op, values)

    def __repr__(self) -> str:
        return f"BuiltinOp({self.op!r}, {self.arguments!r})"

    def __str__(self) -> str:
        return "(" + " ".join([self.op, *(str(a) for a in self.arguments)]) + ")"
