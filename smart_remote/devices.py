"""Home devices controlled by remote commands.

Each device keeps its own state and exposes paired operations (on/off,
open/close, arm/disarm, increase/decrease). Every operation reports the new
state as a single INFO line on this module's logger, e.g.
``[Light] LivingRoom: ON``.
"""

from __future__ import annotations

import logging

from . import constants

LOGGER = logging.getLogger(__name__)


class Light:
    def __init__(self, name: str) -> None:
        self.name = name
        self._is_on = False

    @property
    def is_on(self) -> bool:
        return self._is_on

    def turn_on(self) -> None:
        self._is_on = True
        LOGGER.info("[Light] %s: ON", self.name)

    def turn_off(self) -> None:
        self._is_on = False
        LOGGER.info("[Light] %s: OFF", self.name)

    def __repr__(self) -> str:
        return f"Light({self.name!r}, is_on={self._is_on})"


class Door:
    def __init__(self, name: str) -> None:
        self.name = name
        self._is_open = False

    @property
    def is_open(self) -> bool:
        return self._is_open

    def open(self) -> None:
        self._is_open = True
        LOGGER.info("[Door] %s: OPEN", self.name)

    def close(self) -> None:
        self._is_open = False
        LOGGER.info("[Door] %s: CLOSED", self.name)

    def __repr__(self) -> str:
        return f"Door({self.name!r}, is_open={self._is_open})"


class Thermostat:
    """Integer-degree thermostat.

    ``increase`` and ``decrease`` are exact inverses for the same delta.
    ``set`` overwrites the temperature and has no inverse of its own.
    """

    def __init__(
        self, name: str, initial: int = constants.DEFAULT_THERMOSTAT_TEMPERATURE
    ) -> None:
        self.name = name
        self._temperature = initial

    @property
    def temperature(self) -> int:
        return self._temperature

    def increase(self, delta: int) -> None:
        self._temperature += delta
        LOGGER.info("[Thermostat] %s: %d°C", self.name, self._temperature)

    def decrease(self, delta: int) -> None:
        self._temperature -= delta
        LOGGER.info("[Thermostat] %s: %d°C", self.name, self._temperature)

    def set(self, temperature: int) -> None:
        self._temperature = temperature
        LOGGER.info("[Thermostat] %s: set to %d°C", self.name, self._temperature)

    def __repr__(self) -> str:
        return f"Thermostat({self.name!r}, temperature={self._temperature})"


class Alarm:
    def __init__(self, name: str) -> None:
        self.name = name
        self._armed = False

    @property
    def armed(self) -> bool:
        return self._armed

    def arm(self) -> None:
        self._armed = True
        LOGGER.info("[Alarm] %s: ARMED", self.name)

    def disarm(self) -> None:
        self._armed = False
        LOGGER.info("[Alarm] %s: DISARMED", self.name)

    def __repr__(self) -> str:
        return f"Alarm({self.name!r}, armed={self._armed})"
