"""Typing aliases for the Python side of JSON conversion."""

from __future__ import annotations

from typing import Union

type DynamicScalar = Union[str, int, float, bool, None]
type DynamicValue = Union[DynamicScalar, list[DynamicValue], dict[str, DynamicValue]]
type NumberPayload = Union[int, float]
