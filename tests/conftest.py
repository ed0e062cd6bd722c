"""Pytest configuration for the Z-Wave codec tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

root_path = Path(__file__).resolve().parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))

HEATING_TOPIC = "zwave/thermostat/67/1/setpoint/heating/set"
COOLING_TOPIC = "zwave/thermostat/67/1/setpoint/cooling/set"


class Collaborators:
    """Record publish, notify and log calls made by a codec."""

    def __init__(self) -> None:
        """Initialise empty call logs."""

        self.published: list[tuple[str, Any]] = []
        self.notified: list[tuple[str, Any]] = []
        self.logged: list[str] = []

    def publish(self, topic: str, value: Any) -> None:
        """Record a direct publish."""

        self.published.append((topic, value))

    def notify(self, property_name: str, value: Any) -> None:
        """Record a property notification."""

        self.notified.append((property_name, value))

    def log(self, message: str) -> None:
        """Record a diagnostic message."""

        self.logged.append(message)

    def params(self, config: dict[str, Any] | None = None) -> dict[str, Any]:
        """Return codec ``init`` parameters wired to this recorder."""

        return {
            "config": config if config is not None else {},
            "publish": self.publish,
            "notify": self.notify,
            "log": self.log,
        }


def pytest_configure(config: pytest.Config) -> None:
    """Register markers used throughout the test suite."""

    config.addinivalue_line("markers", "codec: codec behaviour tests")


@pytest.fixture
def collaborators() -> Collaborators:
    """Return a fresh collaborator recorder."""

    return Collaborators()


@pytest.fixture
def heating_topic() -> str:
    """Return the heating setpoint topic used by the thermostat fixture."""

    return HEATING_TOPIC


@pytest.fixture
def cooling_topic() -> str:
    """Return the cooling setpoint topic used by the thermostat fixture."""

    return COOLING_TOPIC


@pytest.fixture
def thermostat_config() -> dict[str, Any]:
    """Return an accessory block for the thermostat."""

    return {
        "name": "Hallway Thermostat",
        "type": "thermostat",
        "codec": "th6320zw-codec.js",
        "topics": {
            "setHeatingThresholdTemperature": HEATING_TOPIC,
            "setCoolingThresholdTemperature": COOLING_TOPIC,
            "getCurrentTemperature": "zwave/thermostat/49/0/Air_temperature",
        },
    }
