"""Per-type JSON serializers and the registry that resolves them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from types import NoneType
from typing import Any, Optional, TypeVar

from .convert import to_dynamic, to_json
from .errors import JsonNarrowingError
from .value import JsonValue

logger = getLogger(__name__)

_T = TypeVar("_T")


@dataclass(frozen=True)
class Serializer:
    """Pair of JSON conversions registered for one Python type."""

    target: type
    to_json: Callable[[Any], JsonValue]
    from_json: Callable[[JsonValue], Any]


def make_serializer(target: type, *, narrow: Optional[Callable[[Any], Any]] = None) -> Serializer:
    """Build a serializer that delegates to ``to_json`` and ``to_dynamic``.

    Args:
        target (type): Python type the serializer is registered for.
        narrow (Optional[Callable[[Any], Any]]): Applied to the converted object on
            load, usually the target's constructor. ``None`` returns the converted
            object unchanged.

    Returns:
        Serializer: Serializer for ``target``.
    """

    def _from_json(value: JsonValue) -> Any:
        converted = to_dynamic(value)
        if narrow is None:
            return converted
        try:
            return narrow(converted)
        except (TypeError, ValueError, OverflowError) as exc:
            raise JsonNarrowingError(target, converted) from exc

    return Serializer(target=target, to_json=to_json, from_json=_from_json)


class SerializerRegistry:
    """Resolves serializers by type, walking the MRO to the nearest registered base."""

    def __init__(self) -> None:
        self._serializers: dict[type, Serializer] = {}

    def register(self, serializer: Serializer) -> None:
        """Register ``serializer`` for its target type, replacing any previous one."""
        self._serializers[serializer.target] = serializer
        logger.debug("Registered JSON serializer for %s", serializer.target.__qualname__)

    def serializer_for(self, target: type) -> Serializer:
        """Return the serializer for ``target`` or its nearest registered base."""
        for candidate in target.__mro__:
            serializer = self._serializers.get(candidate)
            if serializer is not None:
                return serializer
        raise LookupError(f"No JSON serializer registered for {target.__qualname__}")

    def __contains__(self, target: type) -> bool:
        return target in self._serializers

    def dump(self, value: Any, *, as_type: Optional[type] = None) -> JsonValue:
        """Serialize ``value`` with the serializer for ``as_type`` or its own type."""
        serializer = self.serializer_for(as_type if as_type is not None else type(value))
        return serializer.to_json(value)

    def load(self, value: JsonValue, into: type[_T]) -> _T:
        """Deserialize ``value`` into an instance of ``into``."""
        result: _T = self.serializer_for(into).from_json(value)
        return result


def _require_none(value: Any) -> None:
    if value is not None:
        raise TypeError(f"Expected null, got {type(value).__qualname__}")


def build_default_registry() -> SerializerRegistry:
    """Return a registry with serializers for every supported Python type."""
    registry = SerializerRegistry()
    registry.register(make_serializer(object))
    registry.register(make_serializer(NoneType, narrow=_require_none))
    registry.register(make_serializer(bool, narrow=bool))
    registry.register(make_serializer(int, narrow=int))
    registry.register(make_serializer(float, narrow=float))
    registry.register(make_serializer(str, narrow=str))
    registry.register(make_serializer(list, narrow=list))
    registry.register(make_serializer(tuple, narrow=tuple))
    registry.register(make_serializer(dict, narrow=dict))
    return registry


DEFAULT_REGISTRY = build_default_registry()


def dump(value: Any, *, as_type: Optional[type] = None) -> JsonValue:
    """Serialize ``value`` through the default registry."""
    return DEFAULT_REGISTRY.dump(value, as_type=as_type)


def load(value: JsonValue, into: type[_T]) -> _T:
    """Deserialize ``value`` into ``into`` through the default registry."""
    return DEFAULT_REGISTRY.load(value, into)
