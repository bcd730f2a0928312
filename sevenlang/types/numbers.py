from __future__ import annotations


def format_number(value: float) -> str:
    """Shortest round-trip text for a float, without a trailing '.0' on integral values."""
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text
