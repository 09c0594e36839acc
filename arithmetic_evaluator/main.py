"""
Command-line entrypoint.

This script either:
- Evaluates a single expression given with -e/--expression, or
- Starts an interactive session reading one expression per line from stdin

Exit status is 0 on success and 1 when a single expression fails to evaluate.
"""

import argparse
import sys
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from arithmetic_evaluator.common.logger import configure_logging
from arithmetic_evaluator.common.settings import EvaluatorSettings, LogLevel
from arithmetic_evaluator.engine.parser import ExpressionParser
from arithmetic_evaluator.repl.session import ReplSession


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expression : Optional[str]
        Expression to evaluate once; None starts the interactive session.
    max_input_length : int
        Maximum number of characters per expression.
    max_tokens : int
        Maximum number of tokens per expression.
    log_level : LogLevel
        Logging level name.
    """

    expression: Optional[str] = None
    max_input_length: int = Field(default=1024, ge=1)
    max_tokens: int = Field(default=1024, ge=1)
    log_level: LogLevel = "WARNING"

    def to_settings(self) -> EvaluatorSettings:
        return EvaluatorSettings(
            max_input_length=self.max_input_length,
            max_tokens=self.max_tokens,
            log_level=self.log_level,
        )


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to sys.argv[1:]
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Evaluate arithmetic expressions with + - * / ^ and brackets"
    )

    parser.add_argument(
        "-e",
        "--expression",
        help="Evaluate this expression and exit instead of starting the interactive session",
    )
    parser.add_argument(
        "--max-input-length",
        type=int,
        default=1024,
        help="Maximum number of characters per expression",
    )
    parser.add_argument(
        "--max-tokens",
        type=int,
        default=1024,
        help="Maximum number of tokens per expression",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(**vars(args))
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function executed by the console script.

    :param argv: Arguments to parse, defaults to sys.argv[1:]
    :return: Process exit status
    :rtype: int
    """
    cli_args = parse_args(argv)
    settings: EvaluatorSettings = cli_args.to_settings()
    configure_logging(settings.log_level)

    expression_parser = ExpressionParser(settings=settings)

    if cli_args.expression is None:
        ReplSession(parser=expression_parser).run()
        return 0

    result = expression_parser.try_evaluate(cli_args.expression)
    if not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    print(result.formatted)
    return 0


if __name__ == "__main__":
    sys.exit(main())
