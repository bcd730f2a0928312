"""
  Expression builder: tokens -> syntax tree -> executable expressions

- Streaming, lazy: one top-level form is read and lowered per step
- Comments are dropped, END_OF_STREAM ends the input
- Top-level forms may follow each other with no separator

Lowering inspects the head of each list:

    (f a b)              head is a list or other name  -> Call
    (+ a b)              built-in operator             -> BuiltinOp
    (lambda (p ...) b)                                 -> Lambda
    (define name e)                                    -> Define
    (if t a b)                                         -> If
    (list e ...)                                       -> ListForm
    (map proc xs ...)                                  -> MapForm
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from sevenlang.errors import ParseError
from sevenlang.evaluation.builtins import BUILTIN_OPERATORS, BuiltinOp
from sevenlang.evaluation.call import Call, Variable
from sevenlang.evaluation.special_forms.define_form import Define
from sevenlang.evaluation.special_forms.if_form import If
from sevenlang.evaluation.special_forms.lambda_form import Lambda
from sevenlang.evaluation.special_forms.list_forms import ListForm, MapForm
from sevenlang.reader.lexer import Token, TokenType
from sevenlang.reader.syntax import SyntaxAtom, SyntaxList, SyntaxNode, is_identifier
from sevenlang.types.expression import Expression
from sevenlang.types.values import BoolValue, NumberValue, StringValue

logger = logging.getLogger(__name__)


class TokenStream:
    """Forward-only cursor over a token iterator with one token of lookahead.

    COMMENT tokens are skipped; END_OF_STREAM and exhaustion both read as None.
    """

    def __init__(self, tokens: Iterable[Token]):
        self.tokens = iter(tokens)
        self.buffer: Optional[Token] = None
        self.done = False

    def _pull(self) -> Optional[Token]:
        if self.done:
            return None
        for token in self.tokens:
            if token.type is TokenType.COMMENT:
                continue
            if token.type is TokenType.END_OF_STREAM:
                break
            return token
        self.done = True
        return None

    def peek(self) -> Optional[Token]:
        if self.buffer is None:
            self.buffer = self._pull()
        return self.buffer

    def advance(self) -> Optional[Token]:
        token = self.peek()
        self.buffer = None
        return token

    def read_syntax(self) -> SyntaxNode:
        token = self.advance()
        if token is None:
            raise ParseError("Unexpected end of input")
        if token.type is TokenType.RIGHT_BRACKET:
            raise ParseError("Unexpected ')'")
        if token.type is TokenType.LEFT_BRACKET:
            children: list[SyntaxNode] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise ParseError("Unmatched '('")
                if nxt.type is TokenType.RIGHT_BRACKET:
                    self.advance()
                    return SyntaxList(children)
                children.append(self.read_syntax())
        return SyntaxAtom(token)

    def read_all(self) -> Iterator[SyntaxNode]:
        if self.peek() is None:
            raise ParseError("No tokens")
        while self.peek() is not None:
            yield self.read_syntax()


def lower(node: SyntaxNode) -> Expression:
    """Turn one syntax node into an executable expression."""
    if isinstance(node, SyntaxAtom):
        return lower_atom(node.token)
    return lower_list(node)


def lower_atom(token: Token) -> Expression:
    match token.type:
        case TokenType.NUMBER:
            return NumberValue(token.value)
        case TokenType.BOOLEAN:
            return BoolValue(token.value)
        case TokenType.STRING:
            return StringValue(token.value)
        case TokenType.IDENTIFIER:
            return Variable(token.value)
        case _:
            raise ParseError(f"Unexpected token {token.text!r}")


def lower_list(node: SyntaxList) -> Expression:
    if not node.children:
        raise ParseError("Cannot evaluate an empty form ()")
    head, *tail = node.children

    # A list head or a literal head is an ordinary call; (1 2) fails at evaluation time
    if not is_identifier(head):
        return Call(lower(head), [lower(child) for child in tail])

    match head.text:
        case op if op in BUILTIN_OPERATORS:
            return BuiltinOp(op, [lower(child) for child in tail])
        case "lambda":
            return Lambda.from_syntax(tail, lower)
        case "define":
            return Define.from_syntax(tail, lower)
        case "if":
            return If.from_syntax(tail, lower)
        case "list":
            return ListForm.from_syntax(tail, lower)
        case "map":
            return MapForm.from_syntax(tail, lower)
        case _:
            return Call(lower(head), [lower(child) for child in tail])


class Parser:
    def parse(self, tokens: Iterable[Token]) -> Iterator[Expression]:
        """Lazily yield one lowered expression per top-level form."""
        for node in TokenStream(tokens).read_all():
            expr = lower(node)
            logger.debug(f"Parsed {expr!r}")
            yield expr


def parse(tokens: Iterable[Token]) -> Iterator[Expression]:
    return Parser().parse(tokens)
