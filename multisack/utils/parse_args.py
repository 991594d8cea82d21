# -*- coding: utf-8 -*-
"""
Parsers for the command-line literals of sacks and items.

Grammar:
  sack : [count*]capacity
  item : [N*]weight[=value]

`*` may also be written as x, X or a colon (and, for items only, as space, tab,
CR or newline so the shell needs no quoting); `=` may be written as ~, # or @.
N=0 means the item is available an unbounded number of times. If value is
omitted, the weight is used.
"""

from __future__ import annotations
import math
import re
from typing import List, Optional

from multisack.business_objects.errors import ParseError, StateValidationError
from multisack.business_objects.items import Item

_NUMBER_RE = re.compile(r"\+?[0-9]+")
_SACK_SEP = re.compile(r"[:*xX]")
_ITEM_COUNT_SEP = re.compile(r"[:*xX \t\r\n]")
_ITEM_VALUE_SEP = re.compile(r"[=~#@]")


def parse_number(text: str, allow_zero: bool = False) -> int:
    """Parse `[+]digits`; zero is rejected unless `allow_zero`."""
    if not _NUMBER_RE.fullmatch(text):
        raise ParseError(f"not a positive integer: {text}")
    number = int(text)
    if number == 0 and not allow_zero:
        raise ParseError(f"not a positive integer: {text}")
    return number


def parse_value(text: str, value_type: type = int):
    """Parse an item value as a positive int, or a positive finite float."""
    if value_type is int:
        return parse_number(text)
    try:
        value = value_type(text)
    except ValueError as e:
        raise ParseError(f"not a number: {text}") from e
    if not math.isfinite(value) or value <= 0:
        raise ParseError(f"value is not positive: {text}")
    return value


def parse_sack(text: str) -> List[int]:
    """`capacity` -> [capacity]; `count*capacity` -> [capacity] * count."""
    parts = _SACK_SEP.split(text.strip())
    if len(parts) == 1:
        return [parse_number(parts[0])]
    if len(parts) == 2:
        return [parse_number(parts[1])] * parse_number(parts[0])
    raise ParseError(f"malformed sack: {text}")


def parse_item(text: str, index: int, value_type: type = int) -> Item:
    """Parse `[N*]weight[=value]` into an Item with id `i<index>`."""
    parts = _ITEM_COUNT_SEP.split(text.strip())
    count: Optional[int]
    if len(parts) == 1:
        rest, count = parts[0], 1
    elif len(parts) == 2:
        rest, count = parts[1], parse_number(parts[0], allow_zero=True)
        if count == 0:
            count = None
    else:
        raise ParseError(f"malformed item: {text}")

    parts = _ITEM_VALUE_SEP.split(rest)
    if len(parts) > 2:
        raise ParseError(f"malformed item: {text}")
    weight = parse_number(parts[0])
    value = parse_value(parts[1], value_type) if len(parts) == 2 else None

    try:
        item = Item(id=f"i{index}", weight=weight, value=value, count=count)
    except StateValidationError as e:
        raise ParseError(f"{text}: {e}") from e
    if value is None and value_type is not int:
        item = item.with_value_type(value_type)
    return item
