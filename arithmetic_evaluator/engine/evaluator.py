"""Reduce postfix token sequences to a single value."""
from typing import List

import numpy as np

from arithmetic_evaluator.common.errors import (
    EvalError,
    InsufficientOperandsError,
    MalformedExpressionError,
)
from arithmetic_evaluator.common.models import Token, TokenKind
from arithmetic_evaluator.engine.operators import apply


class PostfixEvaluator:
    """Evaluate a postfix (RPN) token sequence on a value stack, in single precision."""

    @staticmethod
    def evaluate(tokens: List[Token]) -> np.float32:
        """
        Evaluate a list of tokens in postfix order.

        An empty sequence evaluates to 0.

        :param List[Token] tokens: Tokens in postfix order

        :return: Computed result
        :rtype: np.float32
        :raises InsufficientOperandsError: If an operator finds fewer than two values
        :raises MalformedExpressionError: If more than one value is left at the end
        """
        stack: List[np.float32] = []

        for token in tokens:
            if token.kind is TokenKind.VALUE:
                stack.append(np.float32(token.number))
                continue

            if token.kind is not TokenKind.OPERATOR:
                raise EvalError(f"Unexpected {token.kind.value} in postfix sequence")

            # Operator requires two operands
            if len(stack) < 2:
                raise InsufficientOperandsError(token.symbol)
            # The right operand was pushed last
            right: np.float32 = stack.pop()
            left: np.float32 = stack.pop()
            stack.append(apply(token.symbol, left, right))

        if len(stack) > 1:
            raise MalformedExpressionError(len(stack))

        return stack[0] if stack else np.float32(0.0)
