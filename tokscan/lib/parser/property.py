"""
Property placeholder substitution.

Resolves `${name}` and `${name:default}` placeholders in configuration text
from a variable mapping. Options left as None are looked up in the mapping
itself under the special keys below, so a properties source can carry its own
substitution settings.
"""

from typing import Final, Mapping
from tokscan.lib.parser.base import GenericTokenParser
from tokscan.lib.parser.handlers import VariableTokenHandler

KEY_PREFIX: Final[str] = "tokscan.parsing.PropertyParser."
KEY_ENABLE_DEFAULT_VALUE: Final[str] = KEY_PREFIX + "enable-default-value"
KEY_DEFAULT_VALUE_SEPARATOR: Final[str] = KEY_PREFIX + "default-value-separator"

ENABLE_DEFAULT_VALUE: Final[str] = "false"
DEFAULT_VALUE_SEPARATOR: Final[str] = ":"


def _property_get(
    variables: Mapping[str, object] | None, key: str, default: str
) -> str:
    if variables is None or key not in variables:
        return default
    return str(variables[key])


def property_parse(
    text: str | None,
    variables: Mapping[str, object] | None,
    *,
    enable_default_value: bool | None = None,
    default_value_separator: str | None = None,
) -> str:
    """Substitute `${...}` placeholders in text from variables.

    Args:
        text: Text containing placeholders; None is treated as empty
        variables: Names mapped to values; None leaves placeholders untouched
        enable_default_value: Allow `${key:default}`; None reads
            KEY_ENABLE_DEFAULT_VALUE from variables (default "false"); "true" in
            any letter case enables it, with no whitespace trimming
        default_value_separator: Separator for the default form; None reads
            KEY_DEFAULT_VALUE_SEPARATOR from variables (default ":")

    Returns:
        The substituted text
    """
    if enable_default_value is None:
        enable_default_value = (
            _property_get(variables, KEY_ENABLE_DEFAULT_VALUE, ENABLE_DEFAULT_VALUE).lower()
            == "true"
        )
    if default_value_separator is None:
        default_value_separator = _property_get(
            variables, KEY_DEFAULT_VALUE_SEPARATOR, DEFAULT_VALUE_SEPARATOR
        )

    handler = VariableTokenHandler(
        variables,
        enable_default_value=enable_default_value,
        default_value_separator=default_value_separator,
    )
    parser = GenericTokenParser("${", "}", handler)
    return parser.parse(text)
