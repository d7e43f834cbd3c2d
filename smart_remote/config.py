"""Configuration loader for smart-remote."""

from __future__ import annotations

import logging
from configparser import ConfigParser
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from . import constants

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class DispatcherConfig:
    history_capacity: int = constants.DEFAULT_HISTORY_CAPACITY


@dataclass(slots=True)
class LoggingConfig:
    level: str = "INFO"
    path: Optional[Path] = None
    verbose_devices: bool = True


@dataclass(slots=True)
class DevicesConfig:
    light: str = constants.DEFAULT_LIGHT_NAME
    door: str = constants.DEFAULT_DOOR_NAME
    thermostat: str = constants.DEFAULT_THERMOSTAT_NAME
    alarm: str = constants.DEFAULT_ALARM_NAME
    thermostat_initial: int = constants.DEFAULT_THERMOSTAT_TEMPERATURE


@dataclass(frozen=True, slots=True)
class SlotBinding:
    """A ``[slots]`` entry such as ``5 = thermostat:increase:2``."""

    slot: Union[int, str]
    kind: str
    delta: Optional[int] = None

    @property
    def domain(self) -> str:
        return self.kind.split(":", 1)[0]


@dataclass(slots=True)
class RemoteConfig:
    dispatcher: DispatcherConfig
    logging: LoggingConfig
    devices: DevicesConfig
    raw: ConfigParser
    path: Path
    slots: List[SlotBinding] = field(default_factory=list)


def _parse_slot_key(key: str) -> Union[int, str]:
    key = key.strip()
    try:
        return int(key)
    except ValueError:
        return key


def _parse_slot_binding(key: str, value: str) -> Optional[SlotBinding]:
    parts = [part.strip().lower() for part in value.split(":") if part.strip()]
    if len(parts) < 2:
        LOGGER.warning("Ignoring slot %s: expected domain:action, got %r", key, value)
        return None

    kind = f"{parts[0]}:{parts[1]}"
    delta: Optional[int] = None
    if len(parts) > 2:
        try:
            delta = int(parts[2])
        except ValueError:
            LOGGER.warning("Ignoring slot %s: invalid delta %r", key, parts[2])
            return None
    if len(parts) > 3:
        LOGGER.warning("Ignoring slot %s: too many fields in %r", key, value)
        return None

    return SlotBinding(slot=_parse_slot_key(key), kind=kind, delta=delta)


def _parse_slots(parser: ConfigParser) -> List[SlotBinding]:
    if not parser.has_section("slots"):
        return []

    bindings: List[SlotBinding] = []
    for key, value in parser.items("slots"):
        binding = _parse_slot_binding(key, value)
        if binding is not None:
            bindings.append(binding)
    return bindings


def load_config(path: Optional[Path] = None) -> RemoteConfig:
    """Load configuration from disk, applying defaults where necessary."""

    config_path = path or constants.DEFAULT_CONFIG_PATH
    parser = ConfigParser()
    parser.read_dict(
        {
            "dispatcher": {
                "history_capacity": str(constants.DEFAULT_HISTORY_CAPACITY),
            },
            "logging": {
                "level": "INFO",
                "path": "",
                "verbose_devices": "true",
            },
            "devices": {
                "light": constants.DEFAULT_LIGHT_NAME,
                "door": constants.DEFAULT_DOOR_NAME,
                "thermostat": constants.DEFAULT_THERMOSTAT_NAME,
                "alarm": constants.DEFAULT_ALARM_NAME,
                "thermostat_initial": str(constants.DEFAULT_THERMOSTAT_TEMPERATURE),
            },
        }
    )

    if config_path.exists():
        parser.read(config_path, encoding="utf-8")

    try:
        capacity_value = parser.getint(
            "dispatcher",
            "history_capacity",
            fallback=constants.DEFAULT_HISTORY_CAPACITY,
        )
    except ValueError:
        capacity_value = constants.DEFAULT_HISTORY_CAPACITY

    dispatcher = DispatcherConfig(history_capacity=max(1, capacity_value))

    log_path_value = parser.get("logging", "path", fallback="").strip()
    logging_config = LoggingConfig(
        level=parser.get("logging", "level", fallback="INFO"),
        path=Path(log_path_value).expanduser() if log_path_value else None,
        verbose_devices=parser.getboolean(
            "logging", "verbose_devices", fallback=True
        ),
    )

    device_defaults = DevicesConfig()
    try:
        thermostat_initial = parser.getint(
            "devices",
            "thermostat_initial",
            fallback=device_defaults.thermostat_initial,
        )
    except ValueError:
        thermostat_initial = device_defaults.thermostat_initial

    devices = DevicesConfig(
        light=parser.get("devices", "light", fallback=device_defaults.light),
        door=parser.get("devices", "door", fallback=device_defaults.door),
        thermostat=parser.get(
            "devices", "thermostat", fallback=device_defaults.thermostat
        ),
        alarm=parser.get("devices", "alarm", fallback=device_defaults.alarm),
        thermostat_initial=thermostat_initial,
    )

    return RemoteConfig(
        dispatcher=dispatcher,
        logging=logging_config,
        devices=devices,
        raw=parser,
        path=config_path,
        slots=_parse_slots(parser),
    )


def save_config(config: RemoteConfig) -> None:
    """Persist the current configuration to disk."""

    config_path = config.path
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w", encoding="utf-8") as stream:
        config.raw.write(stream)
