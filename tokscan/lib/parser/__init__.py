"""
Parser package for tokscan span substitution.

Provides an escape-aware scanner over literal delimiter pairs and the
handlers that produce span replacements.
"""

from .base import GenericTokenParser, TokenHandler
from .handlers import VariableTokenHandler, FileTokenHandler, FileTokenError
from .property import property_parse

__all__ = [
    "GenericTokenParser",
    "TokenHandler",
    "VariableTokenHandler",
    "FileTokenHandler",
    "FileTokenError",
    "property_parse",
]
