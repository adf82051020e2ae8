"""
dataModel.py

Data models used throughout tokscan. The models leverage Pydantic for
validation and type safety.

Features:
- Delimiter pair configuration with non-empty validation
- Parsing results for the input-processing layer
- Input mode detection results
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Delimiters(BaseModel):
    """Literal open/close delimiter pair bounding a substitutable span.

    Attributes:
        open: Marker opening a span (e.g. "${")
        close: Marker closing a span (e.g. "}")

    Note:
        Both markers are matched as plain substrings, never as patterns.
    """

    model_config = ConfigDict(frozen=True)

    open: str = Field(..., description="Literal marker opening a span.")
    close: str = Field(..., description="Literal marker closing a span.")

    @field_validator("open", "close")
    @classmethod
    def token_nonEmpty(cls, value: str) -> str:
        if not value:
            raise ValueError("Delimiter tokens cannot be empty")
        return value


class ParseResult(BaseModel):
    """Result of an input-processing run.

    Attributes:
        text: The processed text after substitutions
        error: Optional error message if processing failed
        success: Whether processing succeeded
    """

    text: str
    error: str | None
    success: bool


class InputMode(BaseModel):
    """Input mode determination.

    Attributes:
        has_stdin: Whether stdin has content
        text: Direct input text if provided
    """

    has_stdin: bool = False
    text: str | None = None
