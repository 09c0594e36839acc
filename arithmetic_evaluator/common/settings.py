"""Pydantic settings shared by the evaluation pipeline."""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EvaluatorSettings(BaseModel):
    """
    Limits and diagnostics applied to every evaluation.

    The ceilings bound the work done for a single input: the text is rejected
    before scanning when it is too long, and tokenization stops as soon as the
    token count goes past the limit.
    """

    # Settings are shared between calls, they must never change under a running evaluation
    model_config = ConfigDict(frozen=True)

    max_input_length: int = Field(default=1024, ge=1, description="Maximum number of characters per expression")
    max_tokens: int = Field(default=1024, ge=1, description="Maximum number of tokens per expression")
    log_level: LogLevel = Field(default="WARNING", description="Logging level name")
