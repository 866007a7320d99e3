"""Conversion between JSON value trees and Python objects."""

from __future__ import annotations

from .caster import JsonCaster
from .codec import dumps, loads
from .convert import to_dynamic, to_json
from .errors import JsonDecodeError, JsonNarrowingError, UnsupportedDynamicType
from .options import DEFAULT_OPTIONS, NATIVE_OPTIONS, ConversionOptions, NumberMode
from .serializers import (
    DEFAULT_REGISTRY,
    Serializer,
    SerializerRegistry,
    dump,
    load,
    make_serializer,
)
from .value import JsonKind, JsonValue

__all__ = [
    "DEFAULT_OPTIONS",
    "DEFAULT_REGISTRY",
    "NATIVE_OPTIONS",
    "ConversionOptions",
    "JsonCaster",
    "JsonDecodeError",
    "JsonKind",
    "JsonNarrowingError",
    "JsonValue",
    "NumberMode",
    "Serializer",
    "SerializerRegistry",
    "UnsupportedDynamicType",
    "dump",
    "dumps",
    "load",
    "loads",
    "make_serializer",
    "to_dynamic",
    "to_json",
]
