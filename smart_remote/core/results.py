"""Outcome records returned by dispatcher operations.

The dispatcher never lets a device fault escape. Instead every operation
reports what happened through a :class:`DispatchResult`, so callers and tests
can assert on outcomes rather than on log text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .protocols import SlotKey


class DispatchStatus(str, Enum):
    EXECUTED = "executed"
    UNDONE = "undone"
    SLOT_NOT_ASSIGNED = "slot_not_assigned"
    HISTORY_EMPTY = "history_empty"
    APPLY_FAILED = "apply_failed"
    REVERT_FAILED = "revert_failed"


class OperationFault(RuntimeError):
    """Wraps an exception raised by a command's ``apply`` or ``revert``."""

    def __init__(
        self,
        message: str,
        *,
        stage: str,
        command_name: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.stage = stage
        self.command_name = command_name


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Record of a single dispatcher operation."""

    status: DispatchStatus
    slot: Optional[SlotKey] = None
    command_name: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status in (DispatchStatus.EXECUTED, DispatchStatus.UNDONE)

    @property
    def fault(self) -> Optional[OperationFault]:
        """The failure as an exception object, or None on non-fault outcomes."""
        if self.status is DispatchStatus.APPLY_FAILED:
            stage = "apply"
        elif self.status is DispatchStatus.REVERT_FAILED:
            stage = "revert"
        else:
            return None
        return OperationFault(
            self.error_message or "",
            stage=stage,
            command_name=self.command_name,
        )
