"""Codec for the Honeywell T6 Pro Z-Wave thermostat (TH6320ZW)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..codec import (
    BaseCodec,
    MessageInfo,
    Output,
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
    member_from_value,
    number_from_value,
    parse_int,
)
from ..config import CodecParams, load_thermostat_topics
from ..const import (
    DISPLAY_UNIT_CODES,
    HEATING_COOLING_STATE_CODES,
    PROPERTY_COOLING_THRESHOLD_TEMPERATURE,
    PROPERTY_CURRENT_HEATING_COOLING_STATE,
    PROPERTY_CURRENT_TEMPERATURE,
    PROPERTY_HEATING_THRESHOLD_TEMPERATURE,
    PROPERTY_TARGET_HEATING_COOLING_STATE,
    PROPERTY_TARGET_TEMPERATURE,
    PROPERTY_TEMPERATURE_DISPLAY_UNITS,
    HeatingCoolingState,
    TemperatureDisplayUnits,
)

_LOGGER = logging.getLogger(__name__)

_STATES_BY_CODE = {code: state for state, code in HEATING_COOLING_STATE_CODES.items()}
_UNITS_BY_CODE = {code: unit for unit, code in DISPLAY_UNIT_CODES.items()}

# Readings at or below this are already Celsius even in Fahrenheit mode.
_CELSIUS_REPORT_CEILING = 32


class ThermostatCodec(BaseCodec):
    """Translate thermostat temperatures, modes and display units.

    The host always works in Celsius. The thermostat reports and accepts
    whatever unit it is currently displaying, so the last decoded
    ``temperatureDisplayUnits`` value selects the conversion. The device keeps
    separate heating and cooling setpoints which are folded into the host's
    single ``targetTemperature``.
    """

    model = "th6320zw"

    def __init__(self, params: Mapping[str, Any] | CodecParams) -> None:
        """Register thermostat bindings and start in Fahrenheit mode."""

        super().__init__(params)
        self._topics = load_thermostat_topics(self.config)
        self._display_units = TemperatureDisplayUnits.FAHRENHEIT

        self.add_binding(
            PROPERTY_CURRENT_HEATING_COOLING_STATE,
            decode=self.decode_heating_cooling_state,
        )
        self.add_binding(
            PROPERTY_TARGET_HEATING_COOLING_STATE,
            encode=self.encode_heating_cooling_state,
            decode=self.decode_heating_cooling_state,
        )
        self.add_binding(PROPERTY_CURRENT_TEMPERATURE, decode=self.decode_temperature)
        self.add_binding(
            PROPERTY_TARGET_TEMPERATURE, encode=self.encode_target_temperature
        )
        self.add_binding(
            PROPERTY_TEMPERATURE_DISPLAY_UNITS,
            encode=self.encode_temperature_display_units,
            decode=self.decode_temperature_display_units,
        )
        self.add_binding(
            PROPERTY_COOLING_THRESHOLD_TEMPERATURE,
            encode=self.encode_cooling_threshold_temperature,
            decode=self.decode_cooling_threshold_temperature,
        )
        self.add_binding(
            PROPERTY_HEATING_THRESHOLD_TEMPERATURE,
            encode=self.encode_heating_threshold_temperature,
            decode=self.decode_heating_threshold_temperature,
        )

    @property
    def display_units(self) -> TemperatureDisplayUnits:
        """Return the unit the thermostat is currently reporting in."""

        return self._display_units

    def encode_heating_cooling_state(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> int | None:
        """Encode an HVAC mode; AUTO is not supported by this thermostat."""

        state = member_from_value(HeatingCoolingState, message)
        code = HEATING_COOLING_STATE_CODES.get(state) if state is not None else None
        if code is None:
            _LOGGER.debug("Suppressing unsupported heating/cooling state %s", message)
        return code

    def decode_heating_cooling_state(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> HeatingCoolingState | None:
        """Decode a reported HVAC mode code."""

        state = _STATES_BY_CODE.get(parse_int(message))
        if state is None:
            _LOGGER.debug("Ignoring unknown heating/cooling code %s", message)
        return state

    def encode_temperature(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> int | float | None:
        """Convert a Celsius temperature into the current display unit."""

        celsius = number_from_value(message)
        if celsius is None:
            _LOGGER.debug("Suppressing non-numeric temperature %s", message)
            return None
        if self._display_units is TemperatureDisplayUnits.FAHRENHEIT:
            return celsius_to_fahrenheit(celsius)
        return celsius

    def decode_temperature(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> int | float | None:
        """Convert a reported temperature to Celsius.

        In Fahrenheit mode the firmware still sends some readings in Celsius.
        Any value at or below 32 is therefore taken to be Celsius already and
        passed through. This is a quirk of this device, not a general rule.
        """

        raw = number_from_value(message)
        if raw is None:
            _LOGGER.debug("Ignoring non-numeric temperature %s", message)
            return None
        if (
            self._display_units is TemperatureDisplayUnits.FAHRENHEIT
            and raw > _CELSIUS_REPORT_CEILING
        ):
            return fahrenheit_to_celsius(raw)
        return raw

    def encode_target_temperature(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> None:
        """Write the target temperature to both device setpoints.

        The setpoints are published directly, so nothing is returned for the
        ``targetTemperature`` topic itself.
        """

        temperature = self.encode_temperature(message, info, output)
        if temperature is None:
            return None

        self._publish(self._topics.set_heating_threshold_temperature, temperature)
        self._publish(self._topics.set_cooling_threshold_temperature, temperature)
        return None

    def encode_cooling_threshold_temperature(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> None:
        """Never write the cooling setpoint; ``targetTemperature`` owns it."""

        return None

    def decode_cooling_threshold_temperature(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> None:
        """Mirror a reported cooling setpoint onto ``targetTemperature``."""

        self._notify_target_temperature(message, info, output)
        return None

    def encode_heating_threshold_temperature(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> None:
        """Never write the heating setpoint; ``targetTemperature`` owns it."""

        return None

    def decode_heating_threshold_temperature(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> None:
        """Mirror a reported heating setpoint onto ``targetTemperature``."""

        self._notify_target_temperature(message, info, output)
        return None

    def encode_temperature_display_units(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> int | None:
        """Encode the requested display unit."""

        units = member_from_value(TemperatureDisplayUnits, message)
        return DISPLAY_UNIT_CODES.get(units) if units is not None else None

    def decode_temperature_display_units(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> TemperatureDisplayUnits | None:
        """Decode the reported display unit and switch conversions to it."""

        units = _UNITS_BY_CODE.get(parse_int(message))
        if units is None:
            _LOGGER.debug("Ignoring unknown display unit code %s", message)
            return None
        if units is not self._display_units:
            self._log("Thermostat display units changed to %s", units.value)
        self._display_units = units
        return units

    def _notify_target_temperature(
        self, message: Any, info: MessageInfo | None, output: Output | None
    ) -> None:
        celsius = self.decode_temperature(message, info, output)
        if celsius is None:
            return
        self._notify(PROPERTY_TARGET_TEMPERATURE, celsius)


def init(params: Mapping[str, Any]) -> ThermostatCodec:
    """Build the thermostat codec for one accessory."""

    return ThermostatCodec(params)
