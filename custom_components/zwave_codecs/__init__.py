"""MQTT codecs for Z-Wave thermostats, locks and sensors."""

from __future__ import annotations

from .codec import BaseCodec, MessageInfo, Output, PropertyBinding
from .config import AccessoryConfig, CodecConfigError, CodecParams
from .const import DOMAIN
from .device_types import (
    CODECS,
    LockCodec,
    SensorCodec,
    ThermostatCodec,
    create_codec,
)

__all__ = [
    "DOMAIN",
    "CODECS",
    "AccessoryConfig",
    "BaseCodec",
    "CodecConfigError",
    "CodecParams",
    "LockCodec",
    "MessageInfo",
    "Output",
    "PropertyBinding",
    "SensorCodec",
    "ThermostatCodec",
    "create_codec",
]
