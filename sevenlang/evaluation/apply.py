"""Closure application, shared by ordinary calls and `map`.

Arguments arrive already evaluated in the caller's environment. They are
bound through `Environment.bind`, which either writes into the captured
environment (shared scoping) or into a fresh child frame (lexical scoping).
"""

from __future__ import annotations

import logging
from typing import Sequence

from sevenlang.errors import ArityError
from sevenlang.types.values import Closure, Value

logger = logging.getLogger(__name__)


def apply_closure(closure: Closure, args: Sequence[Value]) -> Value | None:
    """Bind `args` to the closure's parameters and evaluate its body."""
    params = closure.parameters
    if len(args) != len(params):
        raise ArityError(
            f"{closure} expects {len(params)} argument(s), got {len(args)}"
        )
    frame = closure.env.bind(params, args)
    logger.debug(f"Applying {closure} to ({' '.join(str(a) for a in args)})")
    return closure.lambda_.body.evaluate(frame)
