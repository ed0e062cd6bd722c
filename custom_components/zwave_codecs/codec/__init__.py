"""Codec building blocks shared by the device types."""

from .base import BaseCodec, MessageInfo, Output, PropertyBinding
from .conversions import (
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
    member_from_value,
    number_from_value,
    parse_int,
    round_half_up,
)

__all__ = [
    "BaseCodec",
    "MessageInfo",
    "Output",
    "PropertyBinding",
    "celsius_to_fahrenheit",
    "fahrenheit_to_celsius",
    "member_from_value",
    "number_from_value",
    "parse_int",
    "round_half_up",
]
