"""Tests for boundary conversion of ``JsonValue`` through the caster and pydantic."""

from __future__ import annotations

import logging
from typing import Any

import pytest
from pydantic import BaseModel, ValidationError, validate_call

from json_dynamic_converter.caster import JsonCaster
from json_dynamic_converter.codec import loads
from json_dynamic_converter.value import JsonValue


class _Envelope(BaseModel):
    payload: JsonValue


class _Unsupported:
    pass


def test_load_accepts_supported_values() -> None:
    """Supported Python objects load and are stored on the caster."""
    caster = JsonCaster()
    assert caster.load({"a": [1, None]}) is True
    assert caster.value == loads('{"a": [1, null]}')


def test_load_accepts_json_values_as_is() -> None:
    """A ``JsonValue`` is passed through without conversion."""
    value = loads("[1]")
    caster = JsonCaster()
    assert caster.load(value) is True
    assert caster.value is value


@pytest.mark.parametrize("src", [_Unsupported(), {"nested": {1, 2}}, float("nan")])
def test_load_rejects_without_raising(src: Any, caplog: pytest.LogCaptureFixture) -> None:
    """Unsupported values are rejected with ``False`` rather than an exception."""
    caster = JsonCaster()
    with caplog.at_level(logging.DEBUG, logger="json_dynamic_converter.caster"):
        assert caster.load(src) is False
    assert caster.value is None
    assert "Rejected" in caplog.text


def test_load_rejects_too_deep_nesting() -> None:
    """Recursion failures are rejected too."""
    deep: list = []
    for _ in range(10_000):
        deep = [deep]
    assert JsonCaster().load(deep) is False


def test_cast_builds_python_objects() -> None:
    """Casting out never fails and returns fresh Python objects."""
    assert JsonCaster.cast(loads('{"x": 2.0, "y": [3.5]}')) == {"x": 2, "y": [3.5]}


def test_model_field_accepts_python_values() -> None:
    """pydantic fields typed ``JsonValue`` convert Python input."""
    envelope = _Envelope(payload={"b": 1, "a": [True, "s"]})
    assert isinstance(envelope.payload, JsonValue)
    assert list(envelope.payload) == ["b", "a"]


def test_model_field_rejects_unsupported_values() -> None:
    """Rejection surfaces as pydantic's own validation error."""
    with pytest.raises(ValidationError) as exc_info:
        _Envelope(payload=_Unsupported())
    errors = exc_info.value.errors()
    assert errors[0]["type"] == "json_value_unsupported"
    assert "_Unsupported" in errors[0]["msg"]


def test_model_dump_converts_back_to_python() -> None:
    """Serialization uses the JSON to Python conversion."""
    envelope = _Envelope(payload=loads('{"n": 4.0, "items": []}'))
    assert envelope.model_dump() == {"payload": {"n": 4, "items": []}}
    assert envelope.model_dump_json() == '{"payload":{"n":4,"items":[]}}'


def test_model_validate_json_builds_json_value() -> None:
    """Validating from JSON text yields a ``JsonValue`` tree."""
    envelope = _Envelope.model_validate_json('{"payload": [1, "a", null]}')
    assert envelope.payload == loads('[1, "a", null]')


def test_model_json_schema_allows_any_value() -> None:
    """The generated schema places no constraint on the field."""
    schema = _Envelope.model_json_schema()
    payload_schema = schema["properties"]["payload"]
    assert "type" not in payload_schema


def test_validate_call_converts_arguments() -> None:
    """``JsonValue`` works as a function parameter type at the call boundary."""

    @validate_call
    def count_members(document: JsonValue) -> int:
        return len(document)

    assert count_members({"a": 1, "b": 2}) == 2
    with pytest.raises(ValidationError):
        count_members(_Unsupported())
