"""Exceptions raised by JSON conversion."""

from __future__ import annotations

from typing import Any


class UnsupportedDynamicType(TypeError):
    """Raised when a Python object has no JSON representation."""

    def __init__(self, value: Any) -> None:
        self.type_name = type(value).__qualname__
        self.value_repr = short_repr(value)
        super().__init__(
            f"to_json not implemented for this type of object: {self.value_repr} "
            f"(type {self.type_name})"
        )


class JsonNarrowingError(TypeError):
    """Raised when a converted value cannot be narrowed to the requested type."""

    def __init__(self, target: type, value: Any) -> None:
        self.target = target
        super().__init__(f"Cannot narrow {short_repr(value)} to {target.__qualname__}")


class JsonDecodeError(ValueError):
    """Raised when JSON text cannot be parsed into a JSON value."""


def short_repr(value: Any, *, limit: int = 160) -> str:
    """A short representation for conversion diagnostics."""
    try:
        text = repr(value)
    except Exception:  # pylint: disable=broad-exception-caught
        text = f"<{type(value).__qualname__} object with failing repr>"
    return text if len(text) <= limit else f"{text[: limit - 3]}..."
