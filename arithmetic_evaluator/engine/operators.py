"""Binary operators: precedence and single-precision arithmetic."""
from collections.abc import Callable as ABCCallable
import operator
from typing import Callable, Dict, Tuple

import numpy as np


# Type alias for operator functions (taking two float32 values, returning a float32)
OperatorFn: ABCCallable[[np.float32, np.float32], np.float32] = Callable[[np.float32, np.float32], np.float32]

# Mapping of operator symbols to (precedence, function)
OPERATORS: Dict[str, Tuple[int, OperatorFn]] = {
    "+": (1, operator.add),
    "-": (1, operator.sub),
    "*": (2, operator.mul),
    "/": (2, operator.truediv),
    "^": (3, operator.pow),
}


def precedence(symbol: str) -> int:
    """Return the precedence tier of an operator symbol."""
    return OPERATORS[symbol][0]


def apply(symbol: str, left: np.float32, right: np.float32) -> np.float32:
    """
    Apply a binary operator in single precision.

    Division by zero and other domain problems give inf, -inf or nan
    instead of raising.

    :param str symbol: Operator symbol
    :param np.float32 left: Left operand
    :param np.float32 right: Right operand

    :return: Result of ``left <symbol> right``
    :rtype: np.float32
    """
    with np.errstate(all="ignore"):
        return np.float32(OPERATORS[symbol][1](np.float32(left), np.float32(right)))
