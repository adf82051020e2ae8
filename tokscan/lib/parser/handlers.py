"""
Token handlers for tokscan.

Implements specific substitution strategies for span content:
- Variables: mapping lookup with optional `key:default` syntax
- Files: file system reads with size limits and base path checks
"""

from typing import Mapping, Self
import os
from tokscan.lib.log import LOG


class VariableTokenHandler:
    """Handler resolving `${name}` and `${name:default}` spans from a mapping.

    Unresolvable spans are never an error: they are re-wrapped in the open and
    close markers and left in the text as written.
    """

    def __init__(
        self: Self,
        variables: Mapping[str, object] | None,
        enable_default_value: bool = False,
        default_value_separator: str = ":",
        open_token: str = "${",
        close_token: str = "}",
    ) -> None:
        """Initialize handler with its variable mapping and options.

        Args:
            variables: Names mapped to values; None disables substitution
            enable_default_value: Allow the `key<separator>default` form
            default_value_separator: Separator between key and default
            open_token: Marker used when re-wrapping unresolved spans
            close_token: Marker used when re-wrapping unresolved spans

        Note:
            An empty separator matches at position 0, so the key is empty
            and the whole span is the default value.
        """
        self.variables: Mapping[str, object] | None = variables
        self.enable_default_value: bool = enable_default_value
        self.default_value_separator: str = default_value_separator
        self.open_token: str = open_token
        self.close_token: str = close_token

    def handle_token(self: Self, content: str) -> str:
        """Resolve a span to its variable value.

        Args:
            content: Span text, either `key` or `key<separator>default`

        Returns:
            The mapped value, the inline default, or the span re-wrapped in
            its markers when neither applies
        """
        if self.variables is not None:
            key: str = content
            if self.enable_default_value:
                index: int = content.find(self.default_value_separator)
                if index >= 0:
                    key = content[:index]
                    default_value: str = content[index + len(self.default_value_separator) :]
                    if key in self.variables:
                        return str(self.variables[key])
                    return default_value
            if key in self.variables:
                return str(self.variables[key])
            LOG(f"Variable not found: {key}")

        return f"{self.open_token}{content}{self.close_token}"


class FileTokenError(Exception):
    """Raised when a file inclusion span cannot be resolved."""


class FileTokenHandler:
    """Handler replacing a span with the contents of the file it names."""

    def __init__(
        self: Self, max_size: int = 1024 * 1024, base_path: str | None = None
    ) -> None:
        """Initialize handler with size limit and optional base path restriction."""
        self.max_size: int = max_size
        self.base_path: str | None = os.path.abspath(base_path) if base_path else None

    def handle_token(self: Self, content: str) -> str:
        """Read and return file contents.

        Raises:
            FileTokenError: If the file is outside the base path, missing,
                unreadable, too large, or not valid UTF-8
        """
        path: str = os.path.abspath(os.path.expanduser(content.strip()))

        if self.base_path and os.path.commonpath([self.base_path, path]) != self.base_path:
            msg: str = f"Access denied - path outside base directory: {path}"
            LOG(msg)
            raise FileTokenError(msg)

        if not os.path.isfile(path):
            msg = f"File not found: {path}"
            LOG(msg)
            raise FileTokenError(msg)

        if not os.access(path, os.R_OK):
            msg = f"File not readable: {path}"
            LOG(msg)
            raise FileTokenError(msg)

        size: int = os.path.getsize(path)
        if size > self.max_size:
            msg = f"File too large: {path} ({size} bytes)"
            LOG(msg)
            raise FileTokenError(msg)

        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except UnicodeDecodeError as e:
            msg = f"File is not valid UTF-8: {path}"
            LOG(msg)
            raise FileTokenError(msg) from e
