"""Runtime values. A value is also an expression that evaluates to itself,
which is how number, boolean and string literals are represented in the tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from sevenlang.types.expression import Expression
from sevenlang.types.numbers import format_number

if TYPE_CHECKING:
    from sevenlang.evaluation.special_forms.lambda_form import Lambda
    from sevenlang.types.environment import Environment


class Value(Expression):
    __slots__ = ()

    kind = "value"

    def evaluate(self, env: Environment) -> Value:
        return self


@dataclass(frozen=True)
class NumberValue(Value):
    value: float

    kind = "number"

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class BoolValue(Value):
    value: bool

    kind = "boolean"

    def __str__(self) -> str:
        return "#t" if self.value else "#f"


@dataclass(frozen=True)
class StringValue(Value):
    value: str

    kind = "string"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class Closure(Value):
    """A lambda paired with the environment that was active when it was evaluated."""

    lambda_: Lambda
    env: Environment

    kind = "closure"

    @property
    def parameters(self) -> tuple[str, ...]:
        return self.lambda_.parameters

    def __str__(self) -> str:
        return str(self.lambda_)


@dataclass(frozen=True)
class ListValue(Value):
    items: tuple[Value, ...] = ()

    kind = "list"

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]

    def __str__(self) -> str:
        return "(" + " ".join(str(item) for item in self.items) + ")"


# Literal nodes produced by the parser are the values themselves
NumberLiteral = NumberValue
BoolLiteral = BoolValue
StringLiteral = StringValue
