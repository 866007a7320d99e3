"""Recursive conversion between JSON values and Python objects."""

from __future__ import annotations

import math
from typing import Any

from .errors import UnsupportedDynamicType
from .json_types import DynamicValue, NumberPayload
from .options import DEFAULT_OPTIONS, ConversionOptions, NumberMode
from .value import JsonKind, JsonValue


def to_dynamic(value: JsonValue, *, options: ConversionOptions = DEFAULT_OPTIONS) -> DynamicValue:
    """Convert a JSON value into fresh Python objects.

    Args:
        value (JsonValue): JSON value to convert.
        options (ConversionOptions): Controls how numbers are classified.

    Returns:
        DynamicValue: ``None``, ``bool``, ``int``, ``float``, ``str``, or a new
            ``list``/``dict`` whose members were converted recursively.
    """
    kind = value.kind
    if kind is JsonKind.NULL:
        return None
    if kind is JsonKind.BOOLEAN:
        return value.as_bool()
    if kind is JsonKind.NUMBER:
        return _number_to_dynamic(value, options.number_mode)
    if kind is JsonKind.STRING:
        return value.as_string()
    if kind is JsonKind.ARRAY:
        return [to_dynamic(element, options=options) for element in value]

    members: dict[str, DynamicValue] = {}
    for key, member in value.items():
        members[key] = to_dynamic(member, options=options)
    return members


def to_json(value: Any) -> JsonValue:
    """Convert a Python object into a JSON value.

    Checks run in a fixed order: ``None``, ``bool``, ``int``, ``float``, ``str``,
    ``list``/``tuple``, ``dict``. ``bool`` is a subclass of ``int`` and ``str`` is
    iterable, so the order decides the result for those values.

    Args:
        value (Any): Object to convert. Only borrowed for the duration of the call.

    Returns:
        JsonValue: Equivalent JSON value.

    Raises:
        UnsupportedDynamicType: If ``value`` or any nested member is of another type,
            or is a number without a finite double representation.
    """
    if value is None:
        return JsonValue.null()
    if isinstance(value, bool):
        return JsonValue.boolean(value)
    if isinstance(value, int):
        return _number_to_json(int(value))
    if isinstance(value, float):
        return _number_to_json(float(value))
    if isinstance(value, str):
        return JsonValue.string(value)
    if isinstance(value, (list, tuple)):
        return JsonValue.array(to_json(element) for element in value)
    if isinstance(value, dict):
        members: dict[str, JsonValue] = {}
        for key, member in value.items():
            members[str(key)] = to_json(member)
        return JsonValue.object(members)
    raise UnsupportedDynamicType(value)


def _number_to_dynamic(value: JsonValue, mode: NumberMode) -> NumberPayload:
    if mode is NumberMode.NATIVE:
        return value.as_integer() if value.is_integer_number() else value.as_double()

    number = value.as_double()
    if number == math.floor(number):
        return int(number)
    return number


def _number_to_json(number: NumberPayload) -> JsonValue:
    try:
        return JsonValue.number(number)
    except ValueError as exc:
        raise UnsupportedDynamicType(number) from exc
