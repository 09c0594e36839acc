"""Parse and evaluate arithmetic expressions safely."""
from typing import List

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from arithmetic_evaluator.common.errors import EvaluationError
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.models import EvaluationResult, Token, format_number
from arithmetic_evaluator.common.settings import EvaluatorSettings
from arithmetic_evaluator.engine.converter import PostfixConverter
from arithmetic_evaluator.engine.evaluator import PostfixEvaluator
from arithmetic_evaluator.engine.tokenizer import Tokenizer

__all__ = ["ExpressionParser", "evaluate", "format_number"]


class ExpressionParser(BaseModel):
    """
    Parse and evaluate arithmetic expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - Single-precision arithmetic; division by zero gives inf or nan
        - No state kept between calls, the same text always gives the same bits

    Algorithm:
        1. Tokenize the text into values, operators and brackets
        2. Convert to Reverse Polish Notation (RPN) using Shunting-yard
        3. Evaluate RPN using a stack

    Examples:
        - Infix expression (standard notation): 3 + 4 * 2
        - Corresponding Reverse Polish Notation (RPN): 3 4 2 * +
    """

    model_config = ConfigDict(frozen=True)

    settings: EvaluatorSettings = Field(default_factory=EvaluatorSettings, description="Input ceilings")

    def tokenize(self, expr: str) -> List[Token]:
        return Tokenizer(settings=self.settings).tokenize(expr)

    @staticmethod
    def to_postfix(tokens: List[Token]) -> List[Token]:
        return PostfixConverter.to_postfix(tokens)

    def evaluate(self, expr: str) -> np.float32:
        """
        Evaluate an arithmetic expression.

        :param str expr: Arithmetic expression string

        :return: Computed result
        :rtype: np.float32
        :raises EvaluationError: If the expression cannot be tokenized, converted or reduced
        """
        tokens: List[Token] = self.tokenize(expr)
        postfix: List[Token] = self.to_postfix(tokens)
        return PostfixEvaluator.evaluate(postfix)

    def try_evaluate(self, expr: str) -> EvaluationResult:
        """
        Evaluate an arithmetic expression and capture any evaluation error in the result.

        :param str expr: Arithmetic expression string

        :return: Result holding either the value or the error message
        :rtype: EvaluationResult
        """
        try:
            result = self.evaluate(expr)
        except EvaluationError as exc:
            logger.debug(f"🧮❌ Could not evaluate {expr!r}: {exc}")
            return EvaluationResult(expression=expr, error=str(exc), error_type=type(exc).__name__)
        return EvaluationResult(expression=expr, result=float(result))


def evaluate(expression_text: str) -> np.float32:
    """
    Evaluate an arithmetic expression with the default settings.

    :param str expression_text: Arithmetic expression string

    :return: Computed result
    :rtype: np.float32
    :raises EvaluationError: If the expression is invalid
    """
    return ExpressionParser().evaluate(expression_text)
