"""Tests for device state and status lines."""

from smart_remote.devices import Alarm, Door, Light, Thermostat


def test_light_reports_each_transition(device_lines):
    light = Light("Kitchen")

    light.turn_on()
    light.turn_off()

    assert light.is_on is False
    assert device_lines() == ["[Light] Kitchen: ON", "[Light] Kitchen: OFF"]


def test_door_reports_each_transition(device_lines):
    door = Door("Garage")

    door.open()
    assert door.is_open is True
    door.close()

    assert device_lines() == ["[Door] Garage: OPEN", "[Door] Garage: CLOSED"]


def test_alarm_reports_each_transition(device_lines):
    alarm = Alarm("Perimeter")

    alarm.arm()
    assert alarm.armed is True
    alarm.disarm()

    assert device_lines() == ["[Alarm] Perimeter: ARMED", "[Alarm] Perimeter: DISARMED"]


def test_thermostat_defaults_and_operations(device_lines):
    thermostat = Thermostat("Hall")
    assert thermostat.temperature == 22

    thermostat.increase(3)
    thermostat.decrease(1)
    thermostat.set(19)

    assert thermostat.temperature == 19
    assert device_lines() == [
        "[Thermostat] Hall: 25°C",
        "[Thermostat] Hall: 24°C",
        "[Thermostat] Hall: set to 19°C",
    ]


def test_thermostat_custom_initial():
    assert Thermostat("Cellar", initial=12).temperature == 12


def test_devices_start_inactive():
    assert Light("a").is_on is False
    assert Door("b").is_open is False
    assert Alarm("c").armed is False
