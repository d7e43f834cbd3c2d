"""Tests for the command-line entry point."""

from pathlib import Path

import pytest

from smart_remote import cli


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda *args, **kwargs: None)


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "smart-remote.cfg"


def test_parser_requires_subcommand():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_show_config(config_path, capsys):
    exit_code = cli.main(["-c", str(config_path), "show-config"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "[dispatcher]" in out
    assert "history_capacity = 20" in out


def test_run_default_slots(config_path, caplog):
    caplog.set_level("INFO", logger="smart_remote.dispatcher")

    exit_code = cli.main(["-c", str(config_path), "run", "1", "3", "--undo", "1"])

    assert exit_code == 0
    messages = [r.getMessage() for r in caplog.records]
    assert messages[-1] == "  - LightOnCommand"


def test_run_unassigned_slot_fails(config_path):
    assert cli.main(["-c", str(config_path), "run", "99"]) == 1


def test_run_configured_slots(config_path, caplog):
    config_path.write_text(
        "[dispatcher]\nhistory_capacity = 1\n\n[slots]\nmovie = light:off\nnight = alarm:arm\n",
        encoding="utf-8",
    )
    caplog.set_level("INFO", logger="smart_remote.dispatcher")

    exit_code = cli.main(["-c", str(config_path), "run", "Movie", "night"])

    assert exit_code == 0
    messages = [r.getMessage() for r in caplog.records]
    assert messages[-2:] == [
        "[Dispatcher] History (most recent last):",
        "  - AlarmArmCommand",
    ]


def test_demo_non_interactive(config_path, monkeypatch):
    def fail(_prompt):
        raise AssertionError("prompted in non-interactive mode")

    monkeypatch.setattr("builtins.input", fail)

    assert cli.main(["-c", str(config_path), "demo", "--no-interactive"]) == 0


@pytest.mark.parametrize("only", cli.DEMO_CHOICES)
def test_demo_single(config_path, only, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda _prompt: "n")

    assert cli.main(["-c", str(config_path), "demo", "--only", only]) == 0
