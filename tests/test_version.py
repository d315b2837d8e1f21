import pytest

from hishtory.version import ParsedVersion, VersionParseError, parse_version_string


@pytest.mark.parametrize(
    "text,expected",
    [
        ("v0.200", ParsedVersion(0, 200)),
        ("v1.200", ParsedVersion(1, 200)),
        ("v1.0", ParsedVersion(1, 0)),
        ("v0.216", ParsedVersion(0, 216)),
        ("v123.456", ParsedVersion(123, 456)),
    ],
)
def test_parse_version_string(text, expected):
    assert parse_version_string(text) == expected


@pytest.mark.parametrize("text", ["", "0.200", "v0.1 v0.2", "vX.Y"])
def test_parse_version_string_errors(text):
    with pytest.raises(VersionParseError):
        parse_version_string(text)


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ((0, 200), (0, 200), False),
        ((1, 200), (1, 200), False),
        ((0, 201), (0, 200), False),
        ((1, 0), (0, 200), False),
        ((0, 199), (0, 200), True),
        ((0, 200), (0, 205), True),
        ((1, 200), (1, 205), True),
        ((0, 200), (1, 1), True),
    ],
)
def test_less_than(a, b, expected):
    assert ParsedVersion(*a).less_than(ParsedVersion(*b)) is expected


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ((0, 200), (0, 200), False),
        ((1, 200), (1, 200), False),
        ((0, 201), (0, 200), True),
        ((1, 0), (0, 200), True),
        ((1, 1), (1, 0), True),
        ((0, 199), (0, 200), False),
        ((0, 200), (0, 205), False),
        ((1, 200), (1, 205), False),
        ((0, 200), (1, 1), False),
    ],
)
def test_greater_than(a, b, expected):
    assert ParsedVersion(*a).greater_than(ParsedVersion(*b)) is expected


def test_str_round_trips():
    version = ParsedVersion(0, 216)
    assert str(version) == "v0.216"
    assert parse_version_string(str(version)) == version


def test_decrement():
    assert ParsedVersion(0, 200).decrement() == ParsedVersion(0, 199)


@pytest.mark.parametrize("minor", [0, 1])
def test_decrement_too_low(minor):
    with pytest.raises(ValueError):
        ParsedVersion(0, minor).decrement()