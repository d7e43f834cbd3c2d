"""Demonstration programs driving the remote, the beverages and the chat."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from . import constants
from .beverage import Coffee, Tea
from .chat import ChatError, ChatRoomMediator, User
from .commands import (
    AlarmArmCommand,
    AlarmDisarmCommand,
    Command,
    CommandConfigurationError,
    DoorCloseCommand,
    DoorOpenCommand,
    LightOffCommand,
    LightOnCommand,
    MacroCommand,
    ThermostatDecreaseCommand,
    ThermostatIncreaseCommand,
    build_command,
)
from .config import DevicesConfig, SlotBinding
from .devices import Alarm, Door, Light, Thermostat
from .dispatcher import Dispatcher

LOGGER = logging.getLogger(__name__)

AskCallable = Callable[[str], str]

MACRO_SLOT = 10


@dataclass(slots=True)
class Home:
    light: Light
    door: Door
    thermostat: Thermostat
    alarm: Alarm

    def device_for(self, domain: str):
        return {
            "light": self.light,
            "door": self.door,
            "thermostat": self.thermostat,
            "alarm": self.alarm,
        }.get(domain)


def build_home(devices: Optional[DevicesConfig] = None) -> Home:
    devices = devices or DevicesConfig()
    return Home(
        light=Light(devices.light),
        door=Door(devices.door),
        thermostat=Thermostat(devices.thermostat, devices.thermostat_initial),
        alarm=Alarm(devices.alarm),
    )


def default_bindings(home: Home, *, delta: int = 2) -> List[Tuple[int, Command]]:
    """The factory layout: slots 1-8 hold each device operation."""
    return [
        (1, LightOnCommand(home.light)),
        (2, LightOffCommand(home.light)),
        (3, DoorOpenCommand(home.door)),
        (4, DoorCloseCommand(home.door)),
        (5, ThermostatIncreaseCommand(home.thermostat, delta)),
        (6, ThermostatDecreaseCommand(home.thermostat, delta)),
        (7, AlarmArmCommand(home.alarm)),
        (8, AlarmDisarmCommand(home.alarm)),
    ]


def evening_macro(home: Home, *, delta: int = 2) -> MacroCommand:
    """Lights on, heating down, alarm armed."""
    return MacroCommand(
        [
            LightOnCommand(home.light),
            ThermostatDecreaseCommand(home.thermostat, delta),
            AlarmArmCommand(home.alarm),
        ]
    )


def apply_bindings(
    dispatcher: Dispatcher, home: Home, bindings: Iterable[SlotBinding]
) -> int:
    """Assign configured slot bindings. Returns the number assigned.

    Bindings that cannot be turned into a command are logged and skipped.
    """
    assigned = 0
    for binding in bindings:
        device = home.device_for(binding.domain)
        params = {} if binding.delta is None else {"delta": binding.delta}
        try:
            command: Command = build_command(binding.kind, device, **params)
        except CommandConfigurationError as exc:
            LOGGER.warning("Skipping slot %s: %s", binding.slot, exc)
            continue
        dispatcher.assign(binding.slot, command)
        assigned += 1
    return assigned


def run_command_demo(
    home: Optional[Home] = None,
    *,
    capacity: int = constants.DEMO_HISTORY_CAPACITY,
    ask: Optional[AskCallable] = None,
    interactive: bool = True,
) -> Dispatcher:
    home = home or build_home()
    dispatcher = Dispatcher(capacity=capacity)

    for slot, command in default_bindings(home):
        dispatcher.assign(slot, command)

    dispatcher.execute_slot(1)
    dispatcher.execute_slot(5)
    dispatcher.execute_slot(3)

    dispatcher.undo()
    dispatcher.undo()

    dispatcher.assign(MACRO_SLOT, evening_macro(home))
    dispatcher.execute_slot(MACRO_SLOT)

    dispatcher.undo()

    dispatcher.show_history()

    if interactive:
        ask = ask or input
        while True:
            try:
                answer = ask("Undo another command? (y/n): ")
            except EOFError:
                break
            if (answer or "").strip().lower() != "y":
                break
            dispatcher.undo()

    return dispatcher


def run_beverage_demo(ask: Optional[AskCallable] = None) -> List[List[str]]:
    LOGGER.info("--- Tea ---")
    tea_steps = Tea(ask=ask).prepare_recipe()

    LOGGER.info("--- Coffee ---")
    coffee_steps = Coffee(ask=ask).prepare_recipe()

    return [tea_steps, coffee_steps]


def run_chat_demo() -> ChatRoomMediator:
    mediator = ChatRoomMediator()

    alice = User("Alice", mediator)
    bob = User("Bob", mediator)
    ann = User("Ann", mediator)

    alice.join("general")
    bob.join("general")
    ann.join("random")

    alice.send_to_room("general", "Hello everyone!")
    bob.send_to_room("general", "Hi Alice!")

    alice.send_private(bob, "Hi! This is a private message.")

    try:
        bob.send_to_room("random", "Am I in random?")
    except ChatError as exc:
        LOGGER.warning("[Mediator] %s", exc)

    ann.join("general")
    ann.send_to_room("general", "Now I'm here too.")

    bob.leave("general")
    alice.send_to_room("general", "Bob left?")

    LOGGER.info("Rooms: %s", ", ".join(mediator.list_rooms()))
    return mediator
