"""Convert infix token sequences to postfix order."""
from typing import List

from arithmetic_evaluator.common.errors import MismatchedParenthesisError, UnclosedParenthesisError
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.models import Token, TokenKind
from arithmetic_evaluator.engine.operators import precedence
from arithmetic_evaluator.engine.tokenizer import format_tokens


class PostfixConverter:
    """
    Convert an infix token sequence into Reverse Polish Notation (RPN) using the Shunting-yard algorithm.

    Operators wait on a stack until an operator of lower or equal precedence
    arrives, a closing bracket is met, or the input ends. Left brackets sit on
    the same stack and block popping past them.

    Every operator, "^" included, is left-associative: "2 ^ 3 ^ 2" becomes
    "2 3 ^ 2 ^", i.e. (2 ^ 3) ^ 2.

    Examples:
        - Infix: (2 + 3) * 4
        - Postfix: 2 3 + 4 *
    """

    @staticmethod
    def to_postfix(tokens: List[Token]) -> List[Token]:
        """
        Convert a list of tokens into postfix order.

        :param List[Token] tokens: Tokens in infix order

        :return: New list of tokens in postfix order, without brackets
        :rtype: List[Token]
        :raises MismatchedParenthesisError: If a ")" has no matching "("
        :raises UnclosedParenthesisError: If a "(" is still open at the end of input
        """
        output: List[Token] = []
        stack: List[Token] = []

        for token in tokens:
            if token.kind is TokenKind.VALUE:
                output.append(token)

            elif token.kind is TokenKind.OPERATOR:
                # Pop operators with higher or equal precedence, stopping at a bracket
                prec = precedence(token.symbol)
                while stack and stack[-1].kind is TokenKind.OPERATOR and precedence(stack[-1].symbol) >= prec:
                    output.append(stack.pop())
                stack.append(token)

            elif token.kind is TokenKind.LEFT_BRACKET:
                stack.append(token)

            else:
                # Right bracket: unwind to the matching left bracket and drop it
                while stack and stack[-1].kind is not TokenKind.LEFT_BRACKET:
                    output.append(stack.pop())
                if not stack:
                    raise MismatchedParenthesisError(token.position)
                stack.pop()

        # Remaining entries leave in pop order (stack top first)
        while stack:
            entry = stack.pop()
            if entry.kind is TokenKind.LEFT_BRACKET:
                raise UnclosedParenthesisError(entry.position)
            output.append(entry)

        logger.debug(f"🔁 Postfix: {format_tokens(output)}")
        return output
