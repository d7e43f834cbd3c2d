"""Reversible commands bound to home devices."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Tuple, Type

from .devices import Alarm, Door, Light, Thermostat

LOGGER = logging.getLogger(__name__)


class CommandConfigurationError(RuntimeError):
    """Raised when a command cannot be built from its description."""


class Command(ABC):
    """Base class for everything a remote slot can hold.

    A command is an immutable binding to a device. It does not own the
    device, and applying it twice produces the forward effect twice.
    Exceptions raised by the device propagate to the caller.
    """

    __slots__ = ()

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def apply(self) -> None:
        ...

    @abstractmethod
    def revert(self) -> None:
        ...

    def describe(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class LightOnCommand(Command):
    light: Light

    def apply(self) -> None:
        self.light.turn_on()

    def revert(self) -> None:
        self.light.turn_off()

    def describe(self) -> str:
        return f"{self.name}({self.light.name})"


@dataclass(frozen=True, slots=True)
class LightOffCommand(Command):
    light: Light

    def apply(self) -> None:
        self.light.turn_off()

    def revert(self) -> None:
        self.light.turn_on()

    def describe(self) -> str:
        return f"{self.name}({self.light.name})"


@dataclass(frozen=True, slots=True)
class DoorOpenCommand(Command):
    door: Door

    def apply(self) -> None:
        self.door.open()

    def revert(self) -> None:
        self.door.close()

    def describe(self) -> str:
        return f"{self.name}({self.door.name})"


@dataclass(frozen=True, slots=True)
class DoorCloseCommand(Command):
    door: Door

    def apply(self) -> None:
        self.door.close()

    def revert(self) -> None:
        self.door.open()

    def describe(self) -> str:
        return f"{self.name}({self.door.name})"


@dataclass(frozen=True, slots=True)
class ThermostatIncreaseCommand(Command):
    thermostat: Thermostat
    delta: int = 1

    def apply(self) -> None:
        self.thermostat.increase(self.delta)

    def revert(self) -> None:
        self.thermostat.decrease(self.delta)

    def describe(self) -> str:
        return f"{self.name}({self.thermostat.name}, +{self.delta})"


@dataclass(frozen=True, slots=True)
class ThermostatDecreaseCommand(Command):
    thermostat: Thermostat
    delta: int = 1

    def apply(self) -> None:
        self.thermostat.decrease(self.delta)

    def revert(self) -> None:
        self.thermostat.increase(self.delta)

    def describe(self) -> str:
        return f"{self.name}({self.thermostat.name}, -{self.delta})"


@dataclass(frozen=True, slots=True)
class AlarmArmCommand(Command):
    alarm: Alarm

    def apply(self) -> None:
        self.alarm.arm()

    def revert(self) -> None:
        self.alarm.disarm()

    def describe(self) -> str:
        return f"{self.name}({self.alarm.name})"


@dataclass(frozen=True, slots=True)
class AlarmDisarmCommand(Command):
    alarm: Alarm

    def apply(self) -> None:
        self.alarm.disarm()

    def revert(self) -> None:
        self.alarm.arm()

    def describe(self) -> str:
        return f"{self.name}({self.alarm.name})"


class MacroCommand(Command):
    """A composite command that applies its members in order.

    ``revert`` walks the members backwards so the most recent effect is
    retired first. Apply is not atomic: if a member raises, the members
    already applied stay applied and the exception propagates. Call
    ``revert`` yourself if you need to unwind a partial run.
    """

    __slots__ = ("_commands",)

    def __init__(self, commands: Iterable[Command]) -> None:
        self._commands: Tuple[Command, ...] = tuple(commands)

    @property
    def commands(self) -> Tuple[Command, ...]:
        return self._commands

    def apply(self) -> None:
        for command in self._commands:
            command.apply()

    def revert(self) -> None:
        for command in reversed(self._commands):
            command.revert()

    def describe(self) -> str:
        inner = ", ".join(command.describe() for command in self._commands)
        return f"{self.name}[{inner}]"

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"MacroCommand({list(self._commands)!r})"


_CommandFactory = Callable[..., Command]

# kind -> (device type, factory)
COMMAND_KINDS: Dict[str, Tuple[Type[Any], _CommandFactory]] = {
    "light:on": (Light, LightOnCommand),
    "light:off": (Light, LightOffCommand),
    "door:open": (Door, DoorOpenCommand),
    "door:close": (Door, DoorCloseCommand),
    "thermostat:increase": (Thermostat, ThermostatIncreaseCommand),
    "thermostat:decrease": (Thermostat, ThermostatDecreaseCommand),
    "alarm:arm": (Alarm, AlarmArmCommand),
    "alarm:disarm": (Alarm, AlarmDisarmCommand),
}


def build_command(kind: str, device: Any, **params: Any) -> Command:
    """Build a command from a ``domain:action`` kind string.

    Raises:
        CommandConfigurationError: If the kind is unknown, the device does not
            match the kind's domain, or the parameters are not accepted.
    """

    entry = COMMAND_KINDS.get(kind.strip().lower())
    if entry is None:
        raise CommandConfigurationError(f"Unknown command kind: {kind}")

    device_type, factory = entry
    if not isinstance(device, device_type):
        raise CommandConfigurationError(
            f"Command {kind} requires a {device_type.__name__}, "
            f"got {type(device).__name__}"
        )

    try:
        command = factory(device, **params)
    except TypeError as exc:
        raise CommandConfigurationError(
            f"Invalid parameters for {kind}: {exc}"
        ) from exc

    LOGGER.debug("Built %s for %s", command.describe(), kind)
    return command
