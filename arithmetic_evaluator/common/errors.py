"""Errors raised by the evaluation pipeline."""
from typing import List, Optional

from arithmetic_evaluator.common.models import Token


class EvaluationError(ValueError):
    """Base class for every error that aborts the evaluation of one expression."""


class LexError(EvaluationError):
    """
    Raised when the text cannot be split into tokens.

    The tokens produced before the failure are kept in ``tokens``.
    """

    def __init__(self, message: str, tokens: Optional[List[Token]] = None):
        super().__init__(message)
        self.tokens: List[Token] = list(tokens or [])


class UnexpectedCharacterError(LexError):
    def __init__(self, char: str, position: int, tokens: Optional[List[Token]] = None):
        super().__init__(f"Unexpected character {char!r} at position {position}", tokens)
        self.char = char
        self.position = position


class InvalidNumberError(LexError):
    def __init__(self, literal: str, position: int, tokens: Optional[List[Token]] = None):
        super().__init__(f"Invalid number {literal!r} at position {position}", tokens)
        self.literal = literal
        self.position = position


class InputTooLongError(LexError):
    def __init__(self, length: int, limit: int, unit: str = "characters", tokens: Optional[List[Token]] = None):
        super().__init__(f"Input too long: more than {limit} {unit} (got {length})", tokens)
        self.length = length
        self.limit = limit
        self.unit = unit


class ExpressionSyntaxError(EvaluationError):
    """Raised when the brackets of an expression do not pair up."""


class MismatchedParenthesisError(ExpressionSyntaxError):
    def __init__(self, position: Optional[int] = None):
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Mismatched parenthesis: ')'{where} has no matching '('")
        self.position = position


class UnclosedParenthesisError(ExpressionSyntaxError):
    def __init__(self, position: Optional[int] = None):
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Unclosed parenthesis: '('{where} is never closed")
        self.position = position


class EvalError(EvaluationError):
    """Raised when a postfix sequence cannot be reduced to a single value."""


class InsufficientOperandsError(EvalError):
    def __init__(self, operator: str):
        super().__init__(f"Not enough values provided for operator {operator!r}")
        self.operator = operator


class MalformedExpressionError(EvalError):
    def __init__(self, remaining: int):
        super().__init__(f"Malformed expression: expected 1 value left after evaluation, got {remaining}")
        self.remaining = remaining
