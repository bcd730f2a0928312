# SevenLang: a small Scheme-like expression language.
#
# Pipeline: text -> tokenize -> parse -> evaluate
#
#   from sevenlang import Interpreter
#   Interpreter().eval("(define inc (lambda (n) (+ n 1))) (inc 1)")   # NumberValue(2.0)

import logging

from sevenlang.config import Scoping
from sevenlang.errors import (
    ArityError,
    EvalError,
    LexError,
    ParseError,
    SevenError,
    TypeMismatchError,
    UnboundSymbolError,
)
from sevenlang.reader.lexer import Lexer, Token, TokenType, tokenize
from sevenlang.reader.parser import Parser, parse
from sevenlang.evaluation.evaluator import evaluate
from sevenlang.types.environment import Environment
from sevenlang.types.values import BoolValue, Closure, ListValue, NumberValue, StringValue, Value
from sevenlang.interpreter import Interpreter, run

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
