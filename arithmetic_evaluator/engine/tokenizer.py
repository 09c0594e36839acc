"""Split arithmetic expression text into typed tokens."""
import re
from typing import List

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from arithmetic_evaluator.common.errors import (
    InputTooLongError,
    InvalidNumberError,
    UnexpectedCharacterError,
)
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.models import Token
from arithmetic_evaluator.common.settings import EvaluatorSettings


OPERATOR_SYMBOLS: str = "+-*/^"
WHITESPACE: str = " \t\n\r"
NUMBER_START: str = "0123456789."

# Every character that may belong to a numeric literal, so "1.2.3" or "1e" is
# read as one malformed literal instead of several tokens
NUMBER_RUN = re.compile(r"[0-9.]+(?:[eE][+-]?[0-9.]*)?")
# Decimal floating-point literal: integer part, optional fraction, optional exponent
FLOAT_LITERAL = re.compile(r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_float32(literal: str) -> float:
    """
    Parse a decimal literal to single precision.

    Literals too large for float32 become infinity.

    :param str literal: Literal matching FLOAT_LITERAL

    :return: The float32 value as a Python float
    :rtype: float
    """
    with np.errstate(over="ignore"):
        return float(np.float32(float(literal)))


class Tokenizer(BaseModel):
    """
    Scan expression text left to right into a fully materialized list of tokens.

    Token rules:
        - A digit or "." starts a numeric literal, read as far as it goes
        - "+", "-", "*", "/" and "^" are single-character operators
        - "(" and ")" are brackets
        - Spaces, tabs, newlines and carriage returns are skipped

    A minus sign is always an operator: "-1" tokenizes fine and only fails
    later for lack of a left operand.
    """

    model_config = ConfigDict(frozen=True)

    settings: EvaluatorSettings = Field(default_factory=EvaluatorSettings, description="Input ceilings")

    def tokenize(self, text: str) -> List[Token]:
        """
        Split an arithmetic expression into tokens.

        :param str text: Arithmetic expression

        :return: List of tokens in source order
        :rtype: List[Token]
        :raises LexError: On an unexpected character, a malformed number or an input
            over the ceilings; the tokens read so far are attached to the error
        """
        if len(text) > self.settings.max_input_length:
            raise InputTooLongError(len(text), self.settings.max_input_length)

        tokens: List[Token] = []
        cursor: int = 0

        while cursor < len(text):
            char: str = text[cursor]

            if char in WHITESPACE:
                cursor += 1
                continue

            if char in NUMBER_START:
                literal: str = NUMBER_RUN.match(text, cursor).group()
                if not FLOAT_LITERAL.fullmatch(literal):
                    raise InvalidNumberError(literal, cursor, tokens)
                token = Token.value(parse_float32(literal), position=cursor)
                cursor += len(literal)
            elif char in OPERATOR_SYMBOLS:
                token = Token.operator(char, position=cursor)
                cursor += 1
            elif char == "(":
                token = Token.left_bracket(position=cursor)
                cursor += 1
            elif char == ")":
                token = Token.right_bracket(position=cursor)
                cursor += 1
            else:
                raise UnexpectedCharacterError(char, cursor, tokens)

            if len(tokens) >= self.settings.max_tokens:
                raise InputTooLongError(len(tokens) + 1, self.settings.max_tokens, "tokens", tokens)
            tokens.append(token)

        logger.debug(f"🔤 Tokens for {text!r}: {format_tokens(tokens)}")
        return tokens


def format_tokens(tokens: List[Token]) -> str:
    """Render a token list on one line for debug output."""
    return " ".join(str(token) for token in tokens)
