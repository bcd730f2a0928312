from sevenlang.types.environment import Environment
from sevenlang.types.expression import Expression
from sevenlang.types.values import (
    BoolLiteral,
    BoolValue,
    Closure,
    ListValue,
    NumberLiteral,
    NumberValue,
    StringLiteral,
    StringValue,
    Value,
)
