# -*- coding: utf-8 -*-
"""
I/O helpers for loading multi-sack problem definitions.

This module includes lightweight JSON readers that match the
`problems/problem_*/{items.json, knapsacks.json}` structure.

JSON formats:
- items.json      : [{"id": "...", "weight": <int>, "value": <number>?, "count": <int|null>?}, ...]
                    value omitted  -> value is the weight
                    count omitted  -> 1; count 0 or null -> unbounded
- knapsacks.json  : [{"id": "...", "capacity": <int>}, ...]

These map directly to:
- business_objects.items.Item
- business_objects.knapsacks.KnapsackSpec
"""

from __future__ import annotations
import json
from typing import Any, List, Optional

from multisack.business_objects.errors import SchemaError, StateValidationError
from multisack.business_objects.items import Item
from multisack.business_objects.knapsacks import KnapsackSpec
from multisack.planning.state import ProblemInstance


def _require(obj: dict, key: str, path: str) -> object:
    if key not in obj:
        raise SchemaError(f"{path}: missing required key '{key}' in object {obj}")
    return obj[key]


def _as_int(x: Any, what: str) -> int:
    # JSON has no integer type of its own; reject 2.5 and true
    if isinstance(x, bool) or not isinstance(x, int):
        raise SchemaError(f"{what} must be an integer, got {x!r}")
    return x


def _as_value(x: Any, value_type: type):
    if value_type is int:
        return _as_int(x, "value")
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        raise SchemaError(f"value must be a number, got {x!r}")
    return value_type(x)


def _load_array(path: str) -> list:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e

    if not isinstance(data, list):
        raise SchemaError(f"{path}: expected a JSON array.")
    return data


def read_items_json(path: str, value_type: type = int) -> List[Item]:
    """
    Load items from a JSON array. Each element must have:
      - id (str)
      - weight (int)
    and may have:
      - value (an integer, or any finite number if `value_type` is float)
      - count (int; 0 or null means unbounded)
    """
    items: List[Item] = []
    for idx, obj in enumerate(_load_array(path), start=1):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        try:
            iid = str(_require(obj, "id", path))
            weight = _as_int(_require(obj, "weight", path), "weight")
            value = obj.get("value")
            if value is not None:
                value = _as_value(value, value_type)
            count: Optional[int] = _as_int(obj.get("count", 1) or 0, "count")
            if count == 0:
                count = None
            items.append(Item(id=iid, weight=weight, value=value, count=count))
        except (SchemaError, StateValidationError, TypeError, ValueError) as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
    return items


def read_knapsacks_json(path: str) -> List[KnapsackSpec]:
    """
    Load knapsacks from a JSON array. Each element must have:
      - id (str)
      - capacity (int)
    """
    knaps: List[KnapsackSpec] = []
    for idx, obj in enumerate(_load_array(path), start=1):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        try:
            kid = str(_require(obj, "id", path))
            capacity = _as_int(_require(obj, "capacity", path), "capacity")
            knaps.append(KnapsackSpec(id=kid, capacity=capacity))
        except (SchemaError, StateValidationError) as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
    return knaps


def read_problem(items_path: str, knaps_path: str, value_type: type = int) -> ProblemInstance:
    """Load both files and build a validated ProblemInstance."""
    items = read_items_json(items_path, value_type=value_type)
    knaps = read_knapsacks_json(knaps_path)
    try:
        return ProblemInstance(items=tuple(items), knapsacks=tuple(knaps))
    except StateValidationError as e:
        raise SchemaError(f"{items_path}, {knaps_path}: {e}") from e
