"""Evaluator entry point and the small helpers shared by every expression node.

Evaluation is structural recursion: each node evaluates its children in the
environment it was given. There is no trampoline, so deep recursion in user
lambdas is bounded by the Python stack.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from sevenlang.errors import EvalError, TypeMismatchError
from sevenlang.types.environment import Environment
from sevenlang.types.expression import Expression
from sevenlang.types.values import Value

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Value)


def evaluate(expr: Expression, env: Environment | None = None) -> Value | None:
    """Evaluate one root expression. A fresh environment is used when none is given."""
    if env is None:
        env = Environment()
    logger.debug(f"Evaluating {expr}")
    return expr.evaluate(env)


def evaluate_value(expr: Expression, env: Environment, context: str) -> Value:
    """Evaluate `expr` where a value is required (an operand, a test, an argument)."""
    value = expr.evaluate(env)
    if value is None:
        raise EvalError(f"{context} produced no value: {expr}")
    return value


def expect(value: Value, cls: type[V], context: str) -> V:
    """Check the kind of an evaluated value."""
    if not isinstance(value, cls):
        raise TypeMismatchError(f"{context} expects a {cls.kind}, got {value.kind} {value}")
    return value
