r"""
Generic token parser for delimited span substitution.

Scans a text for spans bounded by a literal open/close delimiter pair, hands
the inner text of each span to a handler, and substitutes the handler's
return value into the output.

The parser handles:
- Literal (non-pattern) open and close markers of any length
- Backslash escapes for both markers (`\${` and `\}`)
- Unterminated spans, which are passed through verbatim
- Error propagation from handlers, unchanged

Escaping looks at exactly one preceding character: a backslash right before a
marker always escapes it, so `\\${x}` yields `\${x}`.

Example:
    parser = GenericTokenParser("${", "}", VariableTokenHandler({"a": "1"}))
    parser.parse("a=${a}")  # -> "a=1"
"""

from typing import Protocol, runtime_checkable, Self
from tokscan.models.dataModel import Delimiters

ESCAPE_CHAR = "\\"


@runtime_checkable
class TokenHandler(Protocol):
    """Protocol defining the handler interface for span substitution.

    Handlers receive the inner text of a span (markers removed, escaped close
    markers unescaped) and return its replacement. Any exception a handler
    raises is propagated to the caller of `GenericTokenParser.parse`.
    """

    def handle_token(self: Self, content: str) -> str:
        """Return the replacement text for a span.

        Args:
            content: Inner text of the span, possibly empty
        """
        ...


class GenericTokenParser:
    """Escape-aware scanner for one open/close delimiter pair.

    The configuration is fixed at construction; `parse` keeps all scan state
    local, so one instance may serve many calls (and threads, if the handler
    allows it).

    Attributes:
        delimiters: The frozen open/close marker pair
        handler: Strategy producing the replacement for each span
    """

    def __init__(
        self: Self, open_token: str, close_token: str, handler: TokenHandler
    ) -> None:
        """Initialize parser with delimiter configuration.

        Args:
            open_token: Literal marker opening a span (e.g. "${")
            close_token: Literal marker closing a span (e.g. "}")
            handler: Strategy for producing span replacements

        Raises:
            ValueError: If either token is empty or handler lacks handle_token
        """
        if not open_token or not close_token:
            raise ValueError("Open and close tokens cannot be empty")
        if not isinstance(handler, TokenHandler):
            raise ValueError(
                f"Handler must implement handle_token, got {type(handler).__name__}"
            )

        self.delimiters: Delimiters = Delimiters(open=open_token, close=close_token)
        self.handler: TokenHandler = handler

    @property
    def open_token(self: Self) -> str:
        return self.delimiters.open

    @property
    def close_token(self: Self) -> str:
        return self.delimiters.close

    def parse(self: Self, text: str | None) -> str:
        """Substitute every delimited span in text.

        Args:
            text: Input text; None is treated as empty

        Returns:
            The text with each terminated span replaced by the handler's
            result and escaped markers reduced to their literal form
        """
        if not text:
            return ""

        open_token: str = self.delimiters.open
        close_token: str = self.delimiters.close

        start: int = text.find(open_token)
        if start == -1:
            return text

        offset: int = 0
        builder: list[str] = []

        while start > -1:
            if start > 0 and text[start - 1] == ESCAPE_CHAR:
                # Escaped open marker: drop the backslash, keep the marker
                builder.append(text[offset : start - 1])
                builder.append(open_token)
                offset = start + len(open_token)
            else:
                expression: list[str] = []
                builder.append(text[offset:start])
                offset = start + len(open_token)
                end: int = text.find(close_token, offset)
                while end > -1:
                    if end > offset and text[end - 1] == ESCAPE_CHAR:
                        expression.append(text[offset : end - 1])
                        expression.append(close_token)
                        offset = end + len(close_token)
                        end = text.find(close_token, offset)
                    else:
                        expression.append(text[offset:end])
                        break

                if end == -1:
                    # Unterminated span: the rest of the text is literal
                    builder.append(text[start:])
                    offset = len(text)
                else:
                    builder.append(self.handler.handle_token("".join(expression)))
                    offset = end + len(close_token)

            start = text.find(open_token, offset)

        if offset < len(text):
            builder.append(text[offset:])

        return "".join(builder)
