import math

import pytest

from chisel.parse import (
    ParseError,
    TextCursor,
    char_matches,
    is_cpp_comment,
    is_newline,
    is_potentially_number,
    is_string_token,
    is_whitespace,
    parse_or_default,
)


def test_parse_int_advances():
    cursor = TextCursor("123abc")
    assert cursor.parse_int() == 123
    assert cursor.pos == 3


def test_parse_negative_int():
    assert TextCursor("-42").parse_int() == -42


def test_parse_int_rejects_plus_and_keeps_position():
    cursor = TextCursor("+5")
    with pytest.raises(ParseError):
        cursor.parse_int()
    assert cursor.pos == 0


def test_parse_float_with_exponent():
    cursor = TextCursor("2.5e1x")
    assert cursor.parse_float() == 25.0
    assert cursor.remaining == "x"


def test_parse_float_incomplete_exponent():
    cursor = TextCursor("1e")
    assert cursor.parse_float() == 1.0
    assert cursor.pos == 1


def test_parse_float_special_values():
    assert TextCursor("inf").parse_float() == math.inf
    assert math.isnan(TextCursor("nan").parse_float())


def test_parse_float_rejects_dot():
    with pytest.raises(ParseError):
        TextCursor(".").parse_float()


def test_consume_space():
    cursor = TextCursor("  \tx")
    assert cursor.consume_space() == 3
    assert cursor.remaining == "x"


def test_consume_space_and_newline():
    cursor = TextCursor(" \r\n y")
    assert cursor.consume_space_and_newline() == 4
    assert cursor.consume_space() == 0


def test_read_until_stops_before_delimiter():
    cursor = TextCursor("key value")
    assert cursor.read_until(" ") == "key"
    assert cursor.pos == 3


def test_advance_past_skips_delimiter():
    cursor = TextCursor("key value")
    assert cursor.advance_past(" ") == 3
    assert cursor.remaining == "value"


def test_advance_past_at_end():
    cursor = TextCursor("abc")
    assert cursor.advance_past(" ") == 3
    assert cursor.at_end()


def test_at_end_on_nul():
    cursor = TextCursor("ab\0cd")
    assert cursor.read_until(" ") == "ab"
    assert cursor.at_end()


def test_parse_or_default():
    assert parse_or_default("12", int) == 12
    assert parse_or_default("zz", float) == 0.0
    assert parse_or_default("zz", int) == 0


def test_char_classes():
    assert char_matches("a", "xya") is True
    assert char_matches("b", "xya") is False
    assert is_whitespace("\t") and not is_whitespace("\n")
    assert is_newline("\r") and not is_newline(" ")
    assert all(is_potentially_number(c) for c in "+-.09")
    assert not is_potentially_number("e")


def test_is_string_token():
    assert is_string_token('"abc"', 0) is True
    assert is_string_token('a\\"', 2) is False
    assert is_string_token('ab\\\\"', 4) is True
    assert is_string_token("abc", 1) is False


def test_is_cpp_comment():
    assert is_cpp_comment("x // c", 2) is True
    assert is_cpp_comment("x /", 2) is False
    assert is_cpp_comment("x /*", 2) is False