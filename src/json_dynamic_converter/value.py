"""Tagged JSON value tree."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from typing import Any, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .json_types import NumberPayload


class JsonKind(Enum):
    """Tag of a JSON value."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


type ObjectMembers = Union[Mapping[str, JsonValue], Iterable[tuple[str, JsonValue]]]


class JsonValue:
    """One node of a JSON document.

    Instances are built through the ``null``, ``boolean``, ``number``, ``string``,
    ``array`` and ``object`` constructors and are not modified afterwards. Numbers
    remember whether they were created from an ``int`` or a ``float``; objects keep
    their keys in insertion order.

    Equality is structural. Object equality is key-order sensitive and numbers
    compare by numeric value, so ``number(2) == number(2.0)``.
    """

    __slots__ = ("_kind", "_payload")

    def __init__(self, kind: JsonKind, payload: Any) -> None:
        self._kind = kind
        self._payload = payload

    @classmethod
    def null(cls) -> JsonValue:
        """Return a JSON null."""
        return cls(JsonKind.NULL, None)

    @classmethod
    def boolean(cls, value: bool) -> JsonValue:
        """Return a JSON boolean."""
        if not isinstance(value, bool):
            raise TypeError(f"JSON boolean requires bool, got {type(value)!r}")
        return cls(JsonKind.BOOLEAN, value)

    @classmethod
    def number(cls, value: NumberPayload) -> JsonValue:
        """Return a JSON number.

        Args:
            value (NumberPayload): An ``int`` or a finite ``float``.

        Returns:
            JsonValue: Number node tagged as integer or float.

        Raises:
            TypeError: If ``value`` is a ``bool`` or not a number.
            ValueError: If ``value`` is not representable as a finite double.
        """
        if isinstance(value, bool):
            raise TypeError("JSON number cannot be built from bool")
        if isinstance(value, int):
            payload: NumberPayload = int(value)
            try:
                float(payload)
            except OverflowError as exc:
                raise ValueError(f"Integer {payload} is out of double range") from exc
        elif isinstance(value, float):
            payload = float(value)
            if not math.isfinite(payload):
                raise ValueError(f"JSON number must be finite, got {payload!r}")
        else:
            raise TypeError(f"JSON number requires int or float, got {type(value)!r}")
        return cls(JsonKind.NUMBER, payload)

    @classmethod
    def string(cls, value: str) -> JsonValue:
        """Return a JSON string."""
        if not isinstance(value, str):
            raise TypeError(f"JSON string requires str, got {type(value)!r}")
        # plain str, also for str subclasses such as enum members
        return cls(JsonKind.STRING, str.__str__(value))

    @classmethod
    def array(cls, items: Iterable[JsonValue] = ()) -> JsonValue:
        """Return a JSON array holding ``items`` in order."""
        elements = tuple(items)
        for element in elements:
            _require_json_value(element)
        return cls(JsonKind.ARRAY, elements)

    @classmethod
    def object(cls, members: ObjectMembers = ()) -> JsonValue:
        """Return a JSON object.

        Args:
            members (ObjectMembers): Mapping or ``(key, value)`` pairs. A repeated key
                keeps its first position and takes the last value.

        Returns:
            JsonValue: Object node with keys in insertion order.
        """
        pairs = members.items() if isinstance(members, Mapping) else members
        payload: dict[str, JsonValue] = {}
        for key, member in pairs:
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be str, got {type(key)!r}")
            payload[str.__str__(key)] = _require_json_value(member)
        return cls(JsonKind.OBJECT, payload)

    @property
    def kind(self) -> JsonKind:
        """Tag of this value."""
        return self._kind

    def is_null(self) -> bool:
        return self._kind is JsonKind.NULL

    def is_boolean(self) -> bool:
        return self._kind is JsonKind.BOOLEAN

    def is_number(self) -> bool:
        return self._kind is JsonKind.NUMBER

    def is_integer_number(self) -> bool:
        """Whether this is a number created from an ``int``."""
        return self._kind is JsonKind.NUMBER and isinstance(self._payload, int)

    def is_string(self) -> bool:
        return self._kind is JsonKind.STRING

    def is_array(self) -> bool:
        return self._kind is JsonKind.ARRAY

    def is_object(self) -> bool:
        return self._kind is JsonKind.OBJECT

    def as_bool(self) -> bool:
        self._expect(JsonKind.BOOLEAN)
        return bool(self._payload)

    def as_double(self) -> float:
        """Return the number as a double."""
        self._expect(JsonKind.NUMBER)
        return float(self._payload)

    def as_integer(self) -> int:
        """Return the exact integer payload, or the double truncated toward zero."""
        self._expect(JsonKind.NUMBER)
        return int(self._payload)

    def as_string(self) -> str:
        self._expect(JsonKind.STRING)
        return str(self._payload)

    def items(self) -> Iterator[tuple[str, JsonValue]]:
        """Iterate object members in insertion order."""
        self._expect(JsonKind.OBJECT)
        return iter(self._payload.items())

    def __iter__(self) -> Iterator[Any]:
        """Iterate array elements, or object keys."""
        if self._kind is JsonKind.ARRAY or self._kind is JsonKind.OBJECT:
            return iter(self._payload)
        raise TypeError(f"JSON {self._kind.value} is not iterable")

    def __len__(self) -> int:
        if self._kind is JsonKind.ARRAY or self._kind is JsonKind.OBJECT:
            return len(self._payload)
        raise TypeError(f"JSON {self._kind.value} has no length")

    def __getitem__(self, key: Union[int, str]) -> JsonValue:
        if self._kind is JsonKind.ARRAY and isinstance(key, int):
            return self._payload[key]
        if self._kind is JsonKind.OBJECT and isinstance(key, str):
            return self._payload[key]
        raise TypeError(f"JSON {self._kind.value} cannot be indexed by {type(key).__name__}")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        if self._kind is not other.kind:
            return False
        if self._kind is JsonKind.OBJECT:
            return list(self._payload.items()) == list(other.items())
        return bool(self._payload == other._payload)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._kind is JsonKind.NULL:
            return "JsonValue.null()"
        if self._kind is JsonKind.ARRAY:
            return f"JsonValue.array({list(self._payload)!r})"
        return f"JsonValue.{self._kind.value}({self._payload!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # caster imports this module
        from .caster import json_value_core_schema  # pylint: disable=import-outside-toplevel

        return json_value_core_schema()

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return handler(core_schema.any_schema())

    def _expect(self, kind: JsonKind) -> None:
        if self._kind is not kind:
            raise TypeError(f"Expected JSON {kind.value}, got JSON {self._kind.value}")


def _require_json_value(value: Any) -> JsonValue:
    if not isinstance(value, JsonValue):
        raise TypeError(f"JSON containers hold JsonValue members, got {type(value)!r}")
    return value
