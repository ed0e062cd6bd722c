"""Device codec implementations and the model registry."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..codec import BaseCodec
from ..config import CodecConfigError
from .lock import LockCodec
from .sensor import SensorCodec
from .thermostat import ThermostatCodec

CODECS: dict[str, type[BaseCodec]] = {
    codec.model: codec for codec in (ThermostatCodec, LockCodec, SensorCodec)
}


def create_codec(model: str, params: Mapping[str, Any]) -> BaseCodec:
    """Instantiate the codec registered for ``model``."""

    codec_class = CODECS.get(str(model).strip().lower())
    if codec_class is None:
        known = ", ".join(sorted(CODECS))
        raise CodecConfigError(f"Unknown codec model {model!r}; expected one of {known}")
    return codec_class(params)


__all__ = [
    "CODECS",
    "LockCodec",
    "SensorCodec",
    "ThermostatCodec",
    "create_codec",
]
