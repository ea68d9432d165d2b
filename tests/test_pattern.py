# tests/test_pattern.py
"""Tests for search pattern synthesis."""

import pytest

from tagbridge.host.pattern import make_pattern

pytestmark = pytest.mark.tier1


def test_plain_name():
    assert make_pattern("main") == "/main/"


def test_backward_delimiter():
    assert make_pattern("a?b", backward=True) == "?a\\?b?"


def test_backslash_and_delimiter_are_escaped():
    assert make_pattern("a/b\\c") == "/a\\/b\\\\c/"


def test_leading_caret_and_trailing_dollar_are_escaped():
    assert make_pattern("^x$") == "/\\^x\\$/"


def test_inner_caret_and_dollar_are_kept():
    assert make_pattern("a^b$c") == "/a^b$c/"


def test_line_breaks_become_spaces():
    assert make_pattern("a\nb\r\nc") == "/a b  c/"


def test_trailing_line_break_ends_pattern():
    assert make_pattern("abc\n") == "/abc/"


def test_length_limit():
    pattern = make_pattern("x" * 20, length_limit=10)
    assert pattern == "/" + "x" * 10 + "/"


def test_zero_limit_means_unlimited():
    name = "y" * 300
    assert make_pattern(name, length_limit=0) == "/" + name + "/"


def test_limit_does_not_split_multibyte_character():
    # 9 ASCII bytes put the pattern at the limit; the 3-byte character that
    # follows is completed.
    pattern = make_pattern("a" * 9 + "€" + "b", length_limit=10)
    assert pattern == "/" + "a" * 9 + "€/"


def test_escape_landing_on_limit_stops_pattern():
    pattern = make_pattern("a" * 9 + "/b", length_limit=10)
    assert pattern == "/" + "a" * 9 + "/"
