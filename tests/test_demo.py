"""Tests for the demonstration programs."""

import logging

from smart_remote.config import DevicesConfig, SlotBinding
from smart_remote.core import DispatchStatus
from smart_remote.demo import (
    MACRO_SLOT,
    apply_bindings,
    build_home,
    run_beverage_demo,
    run_chat_demo,
    run_command_demo,
)
from smart_remote.dispatcher import Dispatcher


def test_build_home_uses_configured_names():
    home = build_home(DevicesConfig(light="Porch", thermostat_initial=18))

    assert home.light.name == "Porch"
    assert home.door.name == "FrontDoor"
    assert home.thermostat.temperature == 18


def test_command_demo_leaves_light_on_only(home, device_lines):
    dispatcher = run_command_demo(home, interactive=False)

    # slots 1, 5, 3 pressed; door and thermostat undone; macro applied then undone
    assert [c.name for c in dispatcher.history] == ["LightOnCommand"]
    assert home.light.is_on is False
    assert home.door.is_open is False
    assert home.alarm.armed is False
    assert home.thermostat.temperature == 22
    assert device_lines()[-3:] == [
        "[Alarm] HomeAlarm: DISARMED",
        "[Thermostat] MainThermo: 22°C",
        "[Light] LivingRoom: OFF",
    ]
    assert MACRO_SLOT in dispatcher.slots


def test_command_demo_interactive_undo_loop(home):
    replies = iter(["y", "y", "n"])

    dispatcher = run_command_demo(home, ask=lambda _prompt: next(replies))

    assert dispatcher.history == ()


def test_command_demo_stops_on_closed_input(home):
    def ask(_prompt):
        raise EOFError

    dispatcher = run_command_demo(home, ask=ask)

    assert len(dispatcher.history) == 1


def test_apply_bindings_skips_bad_entries(home, caplog):
    dispatcher = Dispatcher()
    bindings = [
        SlotBinding(slot=1, kind="light:on"),
        SlotBinding(slot=2, kind="thermostat:increase", delta=4),
        SlotBinding(slot=3, kind="garage:open"),
        SlotBinding(slot=4, kind="light:on", delta=1),
    ]

    with caplog.at_level(logging.WARNING, logger="smart_remote.demo"):
        assigned = apply_bindings(dispatcher, home, bindings)

    assert assigned == 2
    assert sorted(dispatcher.slots) == [1, 2]
    assert len(caplog.records) == 2

    assert dispatcher.execute_slot(2).status is DispatchStatus.EXECUTED
    assert home.thermostat.temperature == 26


def test_beverage_demo_with_answers():
    tea_steps, coffee_steps = run_beverage_demo(ask=lambda _prompt: "y")

    assert tea_steps[-1] == "Adding lemon and honey..."
    assert coffee_steps[-1] == "Coffee is ready, enjoy!"


def test_chat_demo_routes_messages(caplog):
    with caplog.at_level(logging.WARNING, logger="smart_remote.demo"):
        mediator = run_chat_demo()

    assert mediator.list_rooms() == ["general", "random"]
    assert [user.name for user in mediator.members("general")] == ["Alice", "Ann"]
    assert any("not a member" in r.getMessage() for r in caplog.records)
