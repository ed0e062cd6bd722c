"""Value coercion and unit conversion helpers shared by the codecs."""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Any, TypeVar

# Truncated 5/9; decoded readings must stay bit-for-bit with existing setups.
FAHRENHEIT_TO_CELSIUS_FACTOR = 0.5556
CELSIUS_TO_FAHRENHEIT_FACTOR = 1.8
FAHRENHEIT_OFFSET = 32

E = TypeVar("E", bound=Enum)

_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(?!0[xX])(\d+))")


def _as_text(value: Any) -> str | None:
    """Return ``value`` as text when it is a string or raw MQTT payload."""

    if isinstance(value, bytes | bytearray):
        return bytes(value).decode("utf-8", errors="ignore")
    if isinstance(value, str):
        return value
    return None


def parse_int(value: Any) -> int | None:
    """Leniently parse ``value`` as an integer.

    Leading whitespace and a sign are accepted, trailing characters are
    ignored and floats are truncated toward zero. ``0x`` prefixed text is read
    as hexadecimal. Anything else is not a number and yields ``None``.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    text = _as_text(value)
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    sign, hex_digits, digits = match.groups()
    number = int(hex_digits, 16) if hex_digits is not None else int(digits)
    return -number if sign == "-" else number


def number_from_value(value: Any) -> int | float | None:
    """Coerce ``value`` into a finite number, or ``None`` when it is not one."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    text = _as_text(value)
    if text is None:
        return None
    text = text.strip()
    if not text or "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def round_half_up(value: float) -> int:
    """Round ``value`` to the nearest integer, ties toward positive infinity."""

    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def celsius_to_fahrenheit(celsius: float) -> int:
    """Convert Celsius to a whole-degree Fahrenheit setpoint."""

    return round_half_up(celsius * CELSIUS_TO_FAHRENHEIT_FACTOR + FAHRENHEIT_OFFSET)


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert a Fahrenheit reading to Celsius."""

    return (fahrenheit - FAHRENHEIT_OFFSET) * FAHRENHEIT_TO_CELSIUS_FACTOR


def member_from_value(enum_type: type[E], value: Any) -> E | None:
    """Return the ``enum_type`` member whose value is ``value``."""

    try:
        return enum_type(value)
    except (TypeError, ValueError):
        return None
