"""Codec for the Zooz temperature/humidity XS sensor (ZSE44)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..codec import (
    BaseCodec,
    MessageInfo,
    Output,
    fahrenheit_to_celsius,
    number_from_value,
)
from ..config import CodecParams
from ..const import PROPERTY_CURRENT_TEMPERATURE

_LOGGER = logging.getLogger(__name__)


class SensorCodec(BaseCodec):
    """Convert the sensor's Fahrenheit readings to Celsius."""

    model = "zse44"

    def __init__(self, params: Mapping[str, Any] | CodecParams) -> None:
        """Register the read-only temperature binding."""

        super().__init__(params)
        self.add_binding(PROPERTY_CURRENT_TEMPERATURE, decode=self.decode_temperature)

    def decode_temperature(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> float | None:
        """Convert a reading to Celsius; the sensor always reports Fahrenheit."""

        fahrenheit = number_from_value(message)
        if fahrenheit is None:
            _LOGGER.debug("Ignoring non-numeric temperature %s", message)
            return None
        return fahrenheit_to_celsius(fahrenheit)


def init(params: Mapping[str, Any]) -> SensorCodec:
    """Build the sensor codec for one accessory."""

    return SensorCodec(params)
