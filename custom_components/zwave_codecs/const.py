"""Constants shared by the Z-Wave MQTT codecs."""

from __future__ import annotations

from enum import Enum

DOMAIN = "zwave_codecs"

# Property names understood by the host plugin framework.
PROPERTY_CURRENT_HEATING_COOLING_STATE = "currentHeatingCoolingState"
PROPERTY_TARGET_HEATING_COOLING_STATE = "targetHeatingCoolingState"
PROPERTY_CURRENT_TEMPERATURE = "currentTemperature"
PROPERTY_TARGET_TEMPERATURE = "targetTemperature"
PROPERTY_TEMPERATURE_DISPLAY_UNITS = "temperatureDisplayUnits"
PROPERTY_COOLING_THRESHOLD_TEMPERATURE = "coolingThresholdTemperature"
PROPERTY_HEATING_THRESHOLD_TEMPERATURE = "heatingThresholdTemperature"
PROPERTY_LOCK_TARGET_STATE = "lockTargetState"
PROPERTY_LOCK_CURRENT_STATE = "lockCurrentState"
PROPERTY_BATTERY_LEVEL = "batteryLevel"
PROPERTY_STATUS_LOW_BATTERY = "statusLowBattery"

# Accessory topic keys used for direct publishes.
TOPIC_SET_HEATING_THRESHOLD_TEMPERATURE = "setHeatingThresholdTemperature"
TOPIC_SET_COOLING_THRESHOLD_TEMPERATURE = "setCoolingThresholdTemperature"


class HeatingCoolingState(str, Enum):
    """HVAC modes as named by the host framework."""

    OFF = "OFF"
    HEAT = "HEAT"
    COOL = "COOL"
    AUTO = "AUTO"


class TemperatureDisplayUnits(str, Enum):
    """Units a thermostat may report temperatures in."""

    FAHRENHEIT = "FAHRENHEIT"
    CELSIUS = "CELSIUS"


class LockState(str, Enum):
    """Lock state codes used by the host framework."""

    UNSECURED = "U"
    SECURED = "S"
    UNKNOWN = "?"


HEATING_COOLING_STATE_CODES: dict[HeatingCoolingState, int] = {
    HeatingCoolingState.OFF: 0,
    HeatingCoolingState.HEAT: 1,
    HeatingCoolingState.COOL: 2,
}

DISPLAY_UNIT_CODES: dict[TemperatureDisplayUnits, int] = {
    TemperatureDisplayUnits.FAHRENHEIT: 0,
    TemperatureDisplayUnits.CELSIUS: 1,
}

LOCK_STATE_CODES: dict[LockState, int] = {
    LockState.UNSECURED: 0,
    LockState.SECURED: 255,
}
