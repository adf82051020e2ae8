"""Tests for property placeholder substitution."""

from tokscan.lib.parser.property import (
    property_parse,
    KEY_ENABLE_DEFAULT_VALUE,
    KEY_DEFAULT_VALUE_SEPARATOR,
)


def test_replace_known_variables():
    variables = {"driver": "org.postgresql.Driver", "url": "jdbc:postgresql:db"}
    assert (
        property_parse("${driver} @ ${url}", variables)
        == "org.postgresql.Driver @ jdbc:postgresql:db"
    )


def test_unknown_variable_left_as_placeholder():
    assert property_parse("user=${username}", {"password": "x"}) == "user=${username}"


def test_absent_mapping_is_noop():
    assert property_parse("${a:b} ${c}", None) == "${a:b} ${c}"


def test_absent_text():
    assert property_parse(None, {"a": "1"}) == ""


def test_default_value_disabled_by_default():
    assert property_parse("${host:localhost}", {}) == "${host:localhost}"


def test_default_value_enabled_by_argument():
    assert property_parse("${host:localhost}", {}, enable_default_value=True) == "localhost"


def test_default_value_enabled_by_mapping_key():
    variables = {KEY_ENABLE_DEFAULT_VALUE: "TRUE"}
    assert property_parse("${host:localhost}", variables) == "localhost"


def test_mapping_key_not_true_keeps_disabled():
    variables = {KEY_ENABLE_DEFAULT_VALUE: "yes"}
    assert property_parse("${host:localhost}", variables) == "${host:localhost}"


def test_separator_from_mapping_key():
    variables = {
        KEY_ENABLE_DEFAULT_VALUE: "true",
        KEY_DEFAULT_VALUE_SEPARATOR: "?:",
        "port": "5432",
    }
    assert (
        property_parse("${host?:localhost}:${port?:3306}", variables)
        == "localhost:5432"
    )


def test_argument_overrides_mapping_key():
    variables = {KEY_ENABLE_DEFAULT_VALUE: "true"}
    assert (
        property_parse("${host:localhost}", variables, enable_default_value=False)
        == "${host:localhost}"
    )


def test_escaped_placeholder():
    assert property_parse("\\${literal} ${a}", {"a": "1"}) == "${literal} 1"


def test_empty_separator_from_mapping_key():
    variables = {
        KEY_ENABLE_DEFAULT_VALUE: "true",
        KEY_DEFAULT_VALUE_SEPARATOR: "",
        "a": "1",
    }
    assert property_parse("${a}", variables) == "a"


def test_enable_flag_is_not_trimmed():
    variables = {KEY_ENABLE_DEFAULT_VALUE: " true "}
    assert property_parse("${host:localhost}", variables) == "${host:localhost}"
