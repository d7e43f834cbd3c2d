import logging
from typing import List, Optional

import pytest

from smart_remote.demo import Home, build_home


class RecordingCommand:
    """Reversible test double that records apply/revert calls in a shared log."""

    def __init__(
        self,
        label: str,
        log: List[str],
        *,
        fail_on_apply: Optional[str] = None,
        fail_on_revert: Optional[str] = None,
    ) -> None:
        self.label = label
        self._log = log
        self._fail_on_apply = fail_on_apply
        self._fail_on_revert = fail_on_revert

    @property
    def name(self) -> str:
        return self.label

    def apply(self) -> None:
        if self._fail_on_apply:
            raise RuntimeError(self._fail_on_apply)
        self._log.append(f"apply:{self.label}")

    def revert(self) -> None:
        if self._fail_on_revert:
            raise RuntimeError(self._fail_on_revert)
        self._log.append(f"revert:{self.label}")


@pytest.fixture
def effects() -> List[str]:
    return []


@pytest.fixture
def recorder(effects):
    def factory(label: str, **kwargs) -> RecordingCommand:
        return RecordingCommand(label, effects, **kwargs)

    return factory


@pytest.fixture
def home() -> Home:
    return build_home()


@pytest.fixture
def device_lines(caplog):
    """Return a callable yielding the device status lines emitted so far."""
    caplog.set_level(logging.INFO, logger="smart_remote.devices")

    def lines() -> List[str]:
        return [
            record.getMessage()
            for record in caplog.records
            if record.name == "smart_remote.devices"
        ]

    return lines
