"""Interactive read-evaluate-print loop around the expression parser."""
import io
import sys

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.models import EvaluationResult
from arithmetic_evaluator.engine.parser import ExpressionParser


class ReplSession(BaseModel):
    """
    Line-oriented calculator session.

    Lifecycle:
        - Writes the prompt and reads one line
        - Skips blank lines
        - Prints the result, or the error message when evaluation fails
        - Stops at end of input or on Ctrl-C
    """

    # Allow arbitrary types like text streams
    model_config = ConfigDict(arbitrary_types_allowed=True)

    parser: ExpressionParser = Field(default_factory=ExpressionParser, description="Parser evaluating each line")
    input_stream: io.TextIOBase = Field(default_factory=lambda: sys.stdin, description="Stream expressions are read from")
    output_stream: io.TextIOBase = Field(default_factory=lambda: sys.stdout, description="Stream results are written to")
    prompt: str = Field(default="> ", description="Prompt written before each line is read")

    def _write(self, text: str) -> None:
        self.output_stream.write(text)
        self.output_stream.flush()

    def evaluate_line(self, line: str) -> EvaluationResult:
        """
        Evaluate one input line and write its result or error.

        :param str line: Raw input line, trailing newline included

        :return: Evaluation outcome
        :rtype: EvaluationResult
        """
        result: EvaluationResult = self.parser.try_evaluate(line.strip())
        if result.ok:
            self._write(f"{result.formatted}\n")
        else:
            logger.info(f"🧮❌ {result.error_type}: {result.error}")
            self._write(f"Error: {result.error}\n")
        return result

    def run(self) -> int:
        """
        Run the loop until the input is exhausted or interrupted.

        :return: Number of expressions evaluated
        :rtype: int
        """
        evaluated: int = 0
        logger.info("🧮 Session started")

        while True:
            self._write(self.prompt)
            try:
                line: str = self.input_stream.readline()
            except KeyboardInterrupt:
                self._write("\n")
                break

            # An empty read means end of input, a blank line is just skipped
            if not line:
                break
            if not line.strip():
                continue

            self.evaluate_line(line)
            evaluated += 1

        logger.info(f"🧮 Session finished after {evaluated} expression(s)")
        return evaluated
