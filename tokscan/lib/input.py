"""
Input handling and processing for tokscan.

Collects input text and runs it through the substitution pipeline.

Processing order:
1. Variable substitution (`${name}` / `${name:default}`)
2. File inclusion (`%{path}`), when requested

This is the only layer that catches errors: handler failures raised through
the scanner are logged here and reported in the returned ParseResult.
"""

import sys
from typing import Mapping
from tokscan.config.settings import App, appsettings, delimiters_get
from tokscan.lib.parser import (
    GenericTokenParser,
    VariableTokenHandler,
    FileTokenHandler,
)
from tokscan.models.dataModel import Delimiters, InputMode, ParseResult
from tokscan.lib.log import LOG


def mode_detect(text: str | None = None) -> InputMode:
    """Detect where the input text comes from.

    Args:
        text: Optional direct input text

    Returns:
        InputMode indicating how to obtain input

    Note:
        Priority order:
        1. Direct text
        2. Stdin content (when stdin is not a terminal)
    """
    if text is not None:
        return InputMode(has_stdin=False, text=text)
    if not sys.stdin.isatty():
        return InputMode(has_stdin=True, text=None)
    return InputMode(has_stdin=False, text=None)


def input_readStdin() -> str:
    """Read all of stdin as input text."""
    return sys.stdin.read()


def parsers_build(
    variables: Mapping[str, object] | None,
    settings: App,
    include: bool = False,
) -> list[GenericTokenParser]:
    """Create the scanners for one processing run.

    Args:
        variables: Variable mapping; None re-wraps every variable span
        settings: Delimiter and handler configuration
        include: Append a file inclusion scanner after variable substitution

    Returns:
        Scanners in the order they are applied
    """
    delimiters: Delimiters = delimiters_get(settings)
    parsers: list[GenericTokenParser] = [
        GenericTokenParser(
            delimiters.open,
            delimiters.close,
            VariableTokenHandler(
                variables,
                enable_default_value=settings.enable_default_value,
                default_value_separator=settings.default_value_separator,
                open_token=delimiters.open,
                close_token=delimiters.close,
            ),
        )
    ]
    if include:
        file_delimiters: Delimiters = delimiters_get(settings, include=True)
        parsers.append(
            GenericTokenParser(
                file_delimiters.open,
                file_delimiters.close,
                FileTokenHandler(
                    max_size=settings.file_max_size,
                    base_path=settings.file_base_path,
                ),
            )
        )
    return parsers


def input_process(
    text: str | None,
    variables: Mapping[str, object] | None,
    settings: App | None = None,
    include: bool = False,
) -> ParseResult:
    """Run text through the substitution pipeline.

    Args:
        text: Input text
        variables: Variable mapping; None leaves variable spans untouched
        settings: Configuration, defaults to the application settings
        include: Also resolve file inclusion spans

    Returns:
        ParseResult with the processed text or the error that stopped it
    """
    try:
        result: str = text or ""
        for parser in parsers_build(variables, settings or appsettings, include):
            result = parser.parse(result)
        return ParseResult(text=result, error=None, success=True)
    except Exception as e:
        LOG(f"Error processing input: {e}")
        return ParseResult(text="", error=str(e), success=False)
