"""
Unit tests for parsing the stored mode order.
"""

import pytest

from ringertile import constants
from ringertile.core.order import ParseError, parse_order


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_missing_or_blank_order_yields_identity(raw):
    assert parse_order(raw) == (0, 1, 2, 3)


@pytest.mark.parametrize("raw, expected", [
    ("2,3,0,1", (2, 3, 0, 1)),
    ("2, 3 ,0", (2, 3, 0)),
    ("1 3", (1, 3)),
    ("3", (3,)),
    ("7,0", (7, 0)),
])
def test_parses_separated_integers(raw, expected):
    assert parse_order(raw) == expected


def test_parses_legacy_separator():
    sep = constants.ringer.modes.LEGACY_ORDER_SEPARATOR
    assert parse_order(sep.join(["3", "0", "2"])) == (3, 0, 2)


def test_malformed_token_raises_parse_error():
    with pytest.raises(ParseError) as excinfo:
        parse_order("2,x,1")
    assert excinfo.value.token == "x"
    assert excinfo.value.raw == "2,x,1"


def test_empty_token_raises_parse_error():
    with pytest.raises(ParseError):
        parse_order("2,,1")


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_order("silent")


@pytest.mark.parametrize("raw", ["1_0", "2,1_0", " 0x1", "1.0", "+"])
def test_non_decimal_token_raises_parse_error(raw):
    with pytest.raises(ParseError):
        parse_order(raw)


def test_signed_tokens_are_accepted():
    assert parse_order("-1,+2") == (-1, 2)
