"""Test class PostfixConverter."""
from typing import List

import pytest

from arithmetic_evaluator.common.errors import (
    ExpressionSyntaxError,
    MismatchedParenthesisError,
    UnclosedParenthesisError,
)
from arithmetic_evaluator.common.models import Token, TokenKind
from arithmetic_evaluator.engine.converter import PostfixConverter
from arithmetic_evaluator.engine.tokenizer import Tokenizer


def render(tokens: List[Token]) -> str:
    """Render tokens the way postfix is usually written, e.g. "3 4 2 * +"."""
    return " ".join(f"{t.number:g}" if t.kind is TokenKind.VALUE else t.symbol for t in tokens)


def to_postfix(expr: str) -> str:
    return render(PostfixConverter.to_postfix(Tokenizer().tokenize(expr)))


@pytest.mark.parametrize("expr,expected", [
    ("3 + 4", "3 4 +"),
    ("3 + 4 * 2", "3 4 2 * +"),
    ("10 / 2 - 1", "10 2 / 1 -"),
    ("2 * 3 + 4", "2 3 * 4 +"),
    ("(2 + 3) * 4", "2 3 + 4 *"),
    ("2 * (3 + 4) ^ 2", "2 3 4 + 2 ^ *"),
    ("((1))", "1"),
])
def test_to_postfix_various(expr, expected):
    """to_postfix orders operators by precedence and brackets."""
    assert to_postfix(expr) == expected


@pytest.mark.parametrize("expr,expected", [
    ("10 - 2 - 3", "10 2 - 3 -"),
    ("20 / 2 / 2", "20 2 / 2 /"),
    ("2 ^ 3 ^ 2", "2 3 ^ 2 ^"),
])
def test_to_postfix_is_left_associative(expr, expected):
    """Equal precedence operators leave the stack left to right, "^" included."""
    assert to_postfix(expr) == expected


def test_to_postfix_drops_brackets():
    """Brackets never reach the postfix output."""
    postfix = PostfixConverter.to_postfix(Tokenizer().tokenize("(1 + (2 * 3))"))
    assert all(t.kind in (TokenKind.VALUE, TokenKind.OPERATOR) for t in postfix)
    assert render(postfix) == "1 2 3 * +"


def test_to_postfix_empty():
    """An empty token list converts to an empty postfix list."""
    assert PostfixConverter.to_postfix([]) == []


def test_to_postfix_does_not_modify_input():
    """The infix token list is left untouched."""
    tokens = Tokenizer().tokenize("(1 + 2) * 3")
    snapshot = list(tokens)
    PostfixConverter.to_postfix(tokens)
    assert tokens == snapshot


def test_to_postfix_keeps_operator_errors_for_evaluation():
    """Operators without operands are passed through; the evaluator reports them."""
    assert to_postfix("+ 1") == "1 +"
    assert to_postfix("1 +") == "1 +"


@pytest.mark.parametrize("expr,position", [
    ("1 + 2)", 5),
    (")", 0),
    (")(", 0),
    ("(1) + 2)", 7),
])
def test_to_postfix_mismatched_parenthesis(expr, position):
    """A closing bracket without an opening one raises MismatchedParenthesisError."""
    with pytest.raises(MismatchedParenthesisError) as exc_info:
        PostfixConverter.to_postfix(Tokenizer().tokenize(expr))
    assert exc_info.value.position == position


@pytest.mark.parametrize("expr,position", [
    ("(1 + 2", 0),
    ("(1 + (2 * 3)", 0),
    ("1 + (2", 4),
])
def test_to_postfix_unclosed_parenthesis(expr, position):
    """An opening bracket still open at the end raises UnclosedParenthesisError."""
    with pytest.raises(UnclosedParenthesisError) as exc_info:
        PostfixConverter.to_postfix(Tokenizer().tokenize(expr))
    assert exc_info.value.position == position
    assert isinstance(exc_info.value, ExpressionSyntaxError)
