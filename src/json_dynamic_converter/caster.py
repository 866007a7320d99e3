"""Boundary conversion of ``JsonValue`` parameters and return values."""

from __future__ import annotations

from logging import getLogger
from typing import Any, Optional

from pydantic_core import PydanticCustomError, core_schema

from .convert import to_dynamic, to_json
from .json_types import DynamicValue
from .options import DEFAULT_OPTIONS, ConversionOptions
from .value import JsonValue

logger = getLogger(__name__)


class JsonCaster:
    """Moves ``JsonValue`` across a Python call boundary.

    Loading reports failure as ``False`` instead of raising; casting back to Python
    objects cannot fail.
    """

    name = "json"

    def __init__(self) -> None:
        self.value: Optional[JsonValue] = None

    def load(self, src: Any) -> bool:
        """Convert ``src`` into ``self.value`` and report whether it was accepted."""
        if isinstance(src, JsonValue):
            self.value = src
            return True
        try:
            self.value = to_json(src)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.debug("Rejected %s as a JSON value: %s", type(src).__qualname__, exc)
            self.value = None
            return False
        return True

    @staticmethod
    def cast(value: JsonValue, options: ConversionOptions = DEFAULT_OPTIONS) -> DynamicValue:
        """Convert ``value`` into new Python objects owned by the caller."""
        return to_dynamic(value, options=options)


def json_value_core_schema() -> core_schema.CoreSchema:
    """Return the pydantic core schema used for ``JsonValue`` fields and arguments."""
    return core_schema.no_info_plain_validator_function(
        _validate_json_value,
        serialization=core_schema.plain_serializer_function_ser_schema(JsonCaster.cast),
    )


def _validate_json_value(value: Any) -> JsonValue:
    caster = JsonCaster()
    if caster.load(value) and caster.value is not None:
        return caster.value
    raise PydanticCustomError(
        "json_value_unsupported",
        "Value of type {type_name} cannot be represented as JSON",
        {"type_name": type(value).__qualname__},
    )
