import pytest

from hishtory.querytext import (
    build_initial_query_with_search_escaping,
    calculate_word_boundaries,
    command_escaper,
    sanitize_escape_codes,
    split_query_array,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("foo", [0, 3]),
        ("foo bar", [0, 3, 7]),
        ("foo-bar", [0, 3, 7]),
        ("foo-bar baz", [0, 3, 7, 11]),
        ("foo-- -bar - baz", [0, 3, 10, 16]),
        ("foo    ", [0, 3]),
    ],
)
def test_calculate_word_boundaries(text, expected):
    assert calculate_word_boundaries(text) == expected


def test_calculate_word_boundaries_empty():
    assert calculate_word_boundaries("") == [0, 0]


def test_calculate_word_boundaries_leading_space():
    assert calculate_word_boundaries(" a") == [0, 0, 2]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("foo", "foo"),
        ("foo\x1b[31mbar", "foo\x1b[31mbar"),
        ("11;rgb:1c1c/1c1c/1c1c", ""),
        ("foo 11;rgb:1c1c/1c1c/1c1c bar", "foo  bar"),
    ],
)
def test_sanitize_escape_codes(text, expected):
    assert sanitize_escape_codes(text) == expected


def test_sanitize_escape_codes_requires_lowercase_hex():
    assert sanitize_escape_codes("11;rgb:1C1C/1c1c/1c1c") == "11;rgb:1C1C/1c1c/1c1c"


def test_command_escaper_plain_command_unchanged():
    assert command_escaper('echo "hi" \\ there') == 'echo "hi" \\ there'


def test_command_escaper_newline():
    assert command_escaper("echo a\necho b") == '"echo a\\necho b"'


def test_command_escaper_tab_and_quotes():
    assert command_escaper('printf "a\tb"') == '"printf \\"a\\tb\\""'


def test_command_escaper_control_and_unicode():
    assert command_escaper("a\n\x01é") == '"a\\n\\x01é"'


def test_build_initial_query_plain_words():
    assert build_initial_query_with_search_escaping(["ls", "foo"]) == "ls foo"


def test_build_initial_query_quotes_dash_words():
    assert build_initial_query_with_search_escaping(["ls", "-la", "x"]) == 'ls "-la" x'


def test_build_initial_query_html_escaping():
    assert build_initial_query_with_search_escaping(["-a<b&c"]) == '"-a\\u003cb\\u0026c"'


def test_build_initial_query_empty():
    assert build_initial_query_with_search_escaping([]) == ""


def test_split_query_array():
    assert split_query_array(["ls -la", "foo", "a  b"]) == ["ls", "-la", "foo", "a", "", "b"]


def test_split_query_array_empty_chunk():
    assert split_query_array([""]) == [""]
    assert split_query_array([]) == []


def test_split_then_build_round_trip():
    words = split_query_array(["git commit -m", "msg"])
    assert build_initial_query_with_search_escaping(words) == 'git commit "-m" msg'