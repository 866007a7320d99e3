"""Conversion options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NumberMode(Enum):
    """How JSON numbers are turned into Python numbers.

    ``FLOOR`` reads every number as a double and produces an ``int`` whenever the
    double has no fractional part. ``NATIVE`` keeps the integer/float tag the
    number was created with.
    """

    FLOOR = "floor"
    NATIVE = "native"


@dataclass(frozen=True)
class ConversionOptions:
    """Options for JSON to Python conversion."""

    number_mode: NumberMode = NumberMode.FLOOR


DEFAULT_OPTIONS = ConversionOptions()
NATIVE_OPTIONS = ConversionOptions(number_mode=NumberMode.NATIVE)
