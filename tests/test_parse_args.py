# -*- coding: utf-8 -*-
import pytest

from multisack.business_objects import ParseError
from multisack.utils.parse_args import parse_item, parse_number, parse_sack, parse_value


def test_parse_number():
    assert parse_number("12") == 12
    assert parse_number("+7") == 7
    assert parse_number("0", allow_zero=True) == 0
    for bad in ("0", "", "-3", "1.5", "12a", "abc"):
        with pytest.raises(ParseError):
            parse_number(bad)


def test_parse_value():
    assert parse_value("5") == 5
    assert parse_value("2.5", float) == 2.5
    for bad in ("0", "-1", "nan", "inf", "1e400", "x"):
        with pytest.raises(ParseError):
            parse_value(bad, float)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10", [10]),
        ("3*5", [5, 5, 5]),
        ("2x7", [7, 7]),
        ("2X7", [7, 7]),
        ("2:7", [7, 7]),
    ],
)
def test_parse_sack(text, expected):
    assert parse_sack(text) == expected


@pytest.mark.parametrize("text", ["", "0", "2*0", "1*2*3", "a"])
def test_parse_sack_rejects(text):
    with pytest.raises(ParseError):
        parse_sack(text)


def test_parse_item_forms():
    it = parse_item("5", 0)
    assert (it.id, it.weight, it.value, it.count) == ("i0", 5, 5, 1)
    assert it.value_is_weight

    it = parse_item("3*5=8", 4)
    assert (it.id, it.weight, it.value, it.count) == ("i4", 5, 8, 3)

    it = parse_item("0 2~3", 1)
    assert it.count is None and it.weight == 2 and it.value == 3

    for text in ("2x4#6", "2X4@6", "2:4=6"):
        it = parse_item(text, 0)
        assert (it.count, it.weight, it.value) == (2, 4, 6)


def test_parse_item_float_values():
    it = parse_item("4=1.25", 0, float)
    assert it.value == 1.25

    it = parse_item("4", 0, float)
    assert isinstance(it.value, float) and it.value == 4.0
    assert it.value_is_weight


@pytest.mark.parametrize("text", ["", "0", "2*", "1*2*3", "4=5=6", "4=0", "4=1.5", "w=3"])
def test_parse_item_rejects(text):
    with pytest.raises(ParseError):
        parse_item(text, 0)
