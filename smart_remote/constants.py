"""Constants used across the smart-remote package."""

from __future__ import annotations

from pathlib import Path

APP_NAME = "smart-remote"
DEFAULT_CONFIG_FILENAME = f"{APP_NAME}.cfg"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / APP_NAME / DEFAULT_CONFIG_FILENAME

DEFAULT_HISTORY_CAPACITY = 20
DEMO_HISTORY_CAPACITY = 10

DEFAULT_LIGHT_NAME = "LivingRoom"
DEFAULT_DOOR_NAME = "FrontDoor"
DEFAULT_THERMOSTAT_NAME = "MainThermo"
DEFAULT_ALARM_NAME = "HomeAlarm"
DEFAULT_THERMOSTAT_TEMPERATURE = 22
