from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sevenlang.types.environment import Environment
    from sevenlang.types.values import Value


class Expression(ABC):
    """A node of the executable tree. Each variant knows how to evaluate itself."""

    __slots__ = ()

    @abstractmethod
    def evaluate(self, env: Environment) -> Value | None:
        """Evaluate against `env`. Only `define` returns None."""
