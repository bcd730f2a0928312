from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from sevenlang.config import Scoping
from sevenlang.reader.lexer import Lexer
from sevenlang.reader.parser import Parser
from sevenlang.types.environment import Environment
from sevenlang.types.values import Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Evaluates SevenLang source against one session environment.
    Definitions made by one call to `eval` are visible to the next.
    """

    def __init__(self, env: Environment | None = None, *, scoping: Scoping | str | None = None):
        self.env: Environment = env if env is not None else Environment(scoping=scoping)
        self.parser = Parser()

    def eval(self, code: str | TextIO) -> Value | None:
        """Evaluate every top-level form in order and return the last result.

        Forms are read lazily, so a later syntax error surfaces only after
        the forms before it have run.
        """
        result: Value | None = None
        with Lexer(code) as lexer:
            for expr in self.parser.parse(lexer.tokens()):
                result = expr.evaluate(self.env)
                logger.debug(f"{expr} => {result}")
        return result

    def eval_file(self, path: str | Path) -> Value | None:
        with open(path, encoding="utf-8") as fh:
            return self.eval(fh)


def run(code: str, env: Environment | None = None) -> Value | None:
    """Evaluate `code` in `env` (or a fresh environment) and return the last result."""
    return Interpreter(env).eval(code)
