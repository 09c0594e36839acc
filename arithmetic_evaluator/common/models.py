"""Pydantic models for tokens and evaluation results."""
from enum import Enum
from typing import Literal, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator


OperatorSymbol = Literal["+", "-", "*", "/", "^"]


def format_number(value: float) -> str:
    """
    Render a number using the shortest representation that round-trips in single precision.

    :param float value: Number to render, converted to float32 first

    :return: Formatted number (e.g. "3.14", "14.0", "inf", "nan")
    :rtype: str
    """
    return str(np.float32(value))


class TokenKind(str, Enum):
    """Closed set of lexical token kinds."""

    VALUE = "VALUE"
    OPERATOR = "OPERATOR"
    LEFT_BRACKET = "LEFT_BRACKET"
    RIGHT_BRACKET = "RIGHT_BRACKET"


class Token(BaseModel):
    """
    A classified lexical unit produced from raw text.

    Only VALUE tokens carry a number and only OPERATOR tokens carry a symbol.
    The position is kept for error messages and debug output.
    """

    # Tokens are shared between the tokenizer, converter and evaluator, keep them read-only
    model_config = ConfigDict(frozen=True)

    kind: TokenKind = Field(..., description="Kind of the token")
    number: Optional[float] = Field(default=None, description="Single-precision value of a VALUE token")
    symbol: Optional[OperatorSymbol] = Field(default=None, description="Symbol of an OPERATOR token")
    position: Optional[int] = Field(default=None, ge=0, description="Offset of the token in the source text")

    @model_validator(mode="after")
    def payload_matches_kind(self) -> "Token":
        """Ensure the payload fields agree with the token kind."""
        if self.kind is TokenKind.VALUE:
            if self.number is None or self.symbol is not None:
                raise ValueError("A VALUE token must carry a number and no symbol")
        elif self.kind is TokenKind.OPERATOR:
            if self.symbol is None or self.number is not None:
                raise ValueError("An OPERATOR token must carry a symbol and no number")
        elif self.number is not None or self.symbol is not None:
            raise ValueError(f"A {self.kind.value} token carries no payload")
        return self

    @classmethod
    def value(cls, number: float, position: Optional[int] = None) -> "Token":
        return cls(kind=TokenKind.VALUE, number=number, position=position)

    @classmethod
    def operator(cls, symbol: OperatorSymbol, position: Optional[int] = None) -> "Token":
        return cls(kind=TokenKind.OPERATOR, symbol=symbol, position=position)

    @classmethod
    def left_bracket(cls, position: Optional[int] = None) -> "Token":
        return cls(kind=TokenKind.LEFT_BRACKET, position=position)

    @classmethod
    def right_bracket(cls, position: Optional[int] = None) -> "Token":
        return cls(kind=TokenKind.RIGHT_BRACKET, position=position)

    def __str__(self) -> str:
        if self.kind is TokenKind.VALUE:
            return f"VALUE({format_number(self.number)})"
        if self.kind is TokenKind.OPERATOR:
            return f"OPERATOR({self.symbol})"
        return self.kind.value


class EvaluationResult(BaseModel):
    """Represents the outcome of evaluating a single arithmetic expression."""

    expression: str = Field(..., description="Original arithmetic expression")
    result: Optional[float] = Field(default=None, description="Evaluated numeric result of the expression")
    error: Optional[str] = Field(default=None, description="Error message when evaluation failed")
    error_type: Optional[str] = Field(default=None, description="Name of the error class when evaluation failed")

    @model_validator(mode="after")
    def result_or_error(self) -> "EvaluationResult":
        """Ensure exactly one of result and error is set."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of result and error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def formatted(self) -> str:
        """Result rendered for display, or the error message."""
        if self.error is not None:
            return f"ERROR: {self.error}"
        return format_number(self.result)
