"""JSON text parsing and rendering for ``JsonValue`` trees."""

from __future__ import annotations

import json
from typing import Any, Optional, Union

from .convert import to_dynamic, to_json
from .errors import JsonDecodeError, UnsupportedDynamicType
from .options import NATIVE_OPTIONS
from .value import JsonValue


def loads(text: Union[str, bytes]) -> JsonValue:
    """Parse JSON text, keeping object key order and integer/float tags.

    Args:
        text (Union[str, bytes]): Complete JSON document.

    Returns:
        JsonValue: Parsed value.

    Raises:
        JsonDecodeError: If the text is malformed, uses ``NaN``/``Infinity``, or holds
            a number outside double range.
    """
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except JsonDecodeError:
        raise
    except ValueError as exc:
        raise JsonDecodeError(f"Invalid JSON text: {exc}") from exc
    try:
        return to_json(parsed)
    except UnsupportedDynamicType as exc:
        raise JsonDecodeError(f"JSON number out of range: {exc.value_repr}") from exc


def dumps(value: JsonValue, *, indent: Optional[int] = None) -> str:
    """Render ``value`` as JSON text."""
    return json.dumps(
        to_dynamic(value, options=NATIVE_OPTIONS),
        indent=indent,
        ensure_ascii=False,
        allow_nan=False,
    )


def _reject_constant(name: str) -> Any:
    raise JsonDecodeError(f"Non-standard JSON constant {name!r} is not supported")
