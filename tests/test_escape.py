import pytest

from stripe_search.escape import escape_metadata_key, escape_string_value, format_value


def test_escape_plain_string() -> None:
    assert escape_string_value("test") == '"test"'


def test_escape_string_with_quotes() -> None:
    assert escape_string_value('test"value') == '"test\\"value"'


def test_escape_string_with_backslashes() -> None:
    assert escape_string_value("test\\value") == '"test\\\\value"'


def test_backslash_before_quote_is_not_double_escaped() -> None:
    # \" in the input becomes \\ followed by \"
    assert escape_string_value('a\\"b') == '"a\\\\\\"b"'


def test_escape_metadata_key() -> None:
    assert escape_metadata_key("test") == '"test"'
    assert escape_metadata_key('test"key') == '"test\\"key"'


def test_format_value() -> None:
    assert format_value("test") == '"test"'
    assert format_value(1000) == "1000"
    assert format_value(-42) == "-42"
    assert format_value(None) == "null"


def test_format_float_values() -> None:
    assert format_value(1000.0) == "1000"
    assert format_value(12.75) == "12.75"
    assert format_value(float("nan")) == "NaN"
    assert format_value(float("-inf")) == "-Infinity"


@pytest.mark.parametrize("value", [True, b"bytes", object()])
def test_format_value_rejects_unsupported_types(value: object) -> None:
    with pytest.raises(TypeError):
        format_value(value)  # type: ignore[arg-type]
