"""Intermediate syntax tree built from tokens and discarded after lowering."""

from __future__ import annotations

from typing import Callable, Union

from sevenlang.errors import ParseError
from sevenlang.reader.lexer import Token, TokenType
from sevenlang.types.expression import Expression


class SyntaxAtom:
    __slots__ = ("token",)

    def __init__(self, token: Token):
        self.token = token

    @property
    def text(self) -> str:
        return self.token.text

    def __eq__(self, other) -> bool:
        return isinstance(other, SyntaxAtom) and other.token == self.token

    def __repr__(self) -> str:
        return f"SyntaxAtom({self.token.text!r})"

    def __str__(self) -> str:
        return self.token.text


class SyntaxList:
    __slots__ = ("children",)

    def __init__(self, children: list[SyntaxNode] | None = None):
        self.children: list[SyntaxNode] = children if children is not None else []

    def __eq__(self, other) -> bool:
        return isinstance(other, SyntaxList) and other.children == self.children

    def __repr__(self) -> str:
        return f"SyntaxList({self.children!r})"

    def __str__(self) -> str:
        return "(" + " ".join(str(c) for c in self.children) + ")"


SyntaxNode = Union[SyntaxAtom, SyntaxList]

# Lowering callback handed to the special-form builders
LowerFn = Callable[[SyntaxNode], Expression]


def is_identifier(node: SyntaxNode) -> bool:
    return isinstance(node, SyntaxAtom) and node.token.type is TokenType.IDENTIFIER


def identifier_name(node: SyntaxNode, context: str) -> str:
    if not is_identifier(node):
        raise ParseError(f"{context} must be an identifier, got {node}")
    return node.token.value


def expect_arity(keyword: str, tail: list[SyntaxNode], count: int, shape: str) -> None:
    if len(tail) != count:
        raise ParseError(f"{keyword} requires exactly {count} argument(s): {shape}")
