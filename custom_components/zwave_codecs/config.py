"""Codec construction parameters and accessory configuration models."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import voluptuous as vol
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .const import (
    TOPIC_SET_COOLING_THRESHOLD_TEMPERATURE,
    TOPIC_SET_HEATING_THRESHOLD_TEMPERATURE,
)

_LOGGER = logging.getLogger(__name__)

PublishCallback = Callable[[str, Any], Any]
NotifyCallback = Callable[[str, Any], Any]
LogCallback = Callable[..., Any]


class CodecConfigError(ValueError):
    """Raised when a codec is constructed with unusable parameters."""


def _callable(value: Any) -> Any:
    """Accept ``value`` unchanged when it can be called."""

    if not callable(value):
        raise vol.Invalid("expected a callable")
    return value


CODEC_PARAMS_SCHEMA = vol.Schema(
    {
        vol.Required("config"): vol.Any(Mapping, BaseModel),
        vol.Optional("publish"): vol.Any(None, _callable),
        vol.Optional("notify"): vol.Any(None, _callable),
        vol.Optional("log"): vol.Any(None, _callable),
    },
    extra=vol.ALLOW_EXTRA,
)


class AccessoryConfig(BaseModel):
    """Accessory block handed to a codec by the host framework."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    type: str | None = None
    codec: str | None = None
    topics: dict[str, Any] = Field(default_factory=dict)


class ThermostatTopics(BaseModel):
    """Topics the thermostat codec publishes setpoints to directly."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    set_heating_threshold_temperature: str = Field(
        alias=TOPIC_SET_HEATING_THRESHOLD_TEMPERATURE, min_length=1
    )
    set_cooling_threshold_temperature: str = Field(
        alias=TOPIC_SET_COOLING_THRESHOLD_TEMPERATURE, min_length=1
    )


def _missing_publish(topic: str, value: Any) -> None:
    _LOGGER.warning("No publish handle configured; dropping %s for %s", value, topic)


def _missing_notify(property_name: str, value: Any) -> None:
    _LOGGER.warning(
        "No notify handle configured; dropping %s for %s", value, property_name
    )


def _default_log(message: Any, *args: Any) -> None:
    _LOGGER.info(message, *args)


@dataclass(frozen=True, slots=True)
class CodecParams:
    """Validated construction parameters for a codec instance."""

    config: AccessoryConfig
    publish: PublishCallback
    notify: NotifyCallback
    log: LogCallback

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any] | CodecParams) -> CodecParams:
        """Validate the host's ``init`` parameters and fill in defaults."""

        if isinstance(params, CodecParams):
            return params
        try:
            validated = CODEC_PARAMS_SCHEMA(dict(params))
        except vol.Invalid as exc:
            raise CodecConfigError(f"Invalid codec parameters: {exc}") from exc
        except (TypeError, ValueError) as exc:
            raise CodecConfigError("Codec parameters must be a mapping") from exc
        return cls(
            config=load_accessory_config(validated["config"]),
            publish=validated.get("publish") or _missing_publish,
            notify=validated.get("notify") or _missing_notify,
            log=validated.get("log") or _default_log,
        )


def load_accessory_config(config: Mapping[str, Any] | BaseModel) -> AccessoryConfig:
    """Return ``config`` as an :class:`AccessoryConfig`."""

    if isinstance(config, AccessoryConfig):
        return config
    if isinstance(config, BaseModel):
        config = config.model_dump(by_alias=True)
    try:
        return AccessoryConfig.model_validate(dict(config))
    except ValidationError as exc:
        raise CodecConfigError(f"Invalid accessory configuration: {exc}") from exc


def load_thermostat_topics(config: AccessoryConfig) -> ThermostatTopics:
    """Validate the threshold topics required by the thermostat codec."""

    try:
        return ThermostatTopics.model_validate(config.topics)
    except ValidationError as exc:
        raise CodecConfigError(f"Invalid thermostat topics: {exc}") from exc
