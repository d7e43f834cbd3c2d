"""Slot-based command dispatcher with bounded undo history.

The dispatcher plays the part of a programmable remote: commands are bound to
slots, a slot press applies its command, and ``undo`` reverts the most recent
successful press. History is shared across all slots and holds at most
``capacity`` entries; pushing past the limit drops the oldest entry.

Faults raised by commands are caught here, logged, and reported through the
returned :class:`~smart_remote.core.results.DispatchResult`. A command that
failed to apply is not recorded. A command whose revert failed is not put
back.

Usage:
    dispatcher = Dispatcher(capacity=10)
    dispatcher.assign(1, LightOnCommand(light))

    dispatcher.execute_slot(1)   # light on, history = [LightOnCommand]
    dispatcher.undo()            # light off, history = []
"""

from __future__ import annotations

import logging
from collections import deque
from types import MappingProxyType
from typing import Deque, Dict, List, Mapping, Tuple

from . import constants
from .core.protocols import Reversible, SlotKey
from .core.results import DispatchResult, DispatchStatus

LOGGER = logging.getLogger(__name__)


class Dispatcher:
    """Maps slot keys to commands and keeps a bounded undo history.

    Not thread-safe: all operations are expected from a single caller.
    """

    def __init__(self, capacity: int = constants.DEFAULT_HISTORY_CAPACITY) -> None:
        """
        Args:
            capacity: Maximum number of undoable entries. Values below 1 are
                coerced to 1.
        """
        self._capacity = max(1, capacity)
        self._slots: Dict[SlotKey, Reversible] = {}
        self._history: Deque[Reversible] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def slots(self) -> Mapping[SlotKey, Reversible]:
        return MappingProxyType(self._slots)

    @property
    def history(self) -> Tuple[Reversible, ...]:
        """Snapshot of retained entries, oldest first."""
        return tuple(self._history)

    @property
    def can_undo(self) -> bool:
        return len(self._history) > 0

    def assign(self, slot: SlotKey, command: Reversible) -> None:
        """Bind ``command`` to ``slot``, replacing any previous binding."""
        previous = self._slots.get(slot)
        self._slots[slot] = command
        if previous is not None and previous is not command:
            LOGGER.debug(
                "Slot %s reassigned: %s -> %s", slot, previous.name, command.name
            )
        else:
            LOGGER.debug("Slot %s assigned: %s", slot, command.name)

    def unassign(self, slot: SlotKey) -> bool:
        """Remove the binding for ``slot``. Returns whether one existed."""
        removed = self._slots.pop(slot, None)
        if removed is None:
            return False
        LOGGER.debug("Slot %s cleared (was %s)", slot, removed.name)
        return True

    def execute_slot(self, slot: SlotKey) -> DispatchResult:
        command = self._slots.get(slot)
        if command is None:
            LOGGER.warning("[Dispatcher] Slot %s is not assigned", slot)
            return DispatchResult(DispatchStatus.SLOT_NOT_ASSIGNED, slot=slot)

        try:
            command.apply()
        except Exception as exc:
            LOGGER.error(
                "[Dispatcher] Error while executing %s from slot %s: %s",
                command.name,
                slot,
                exc,
            )
            return DispatchResult(
                DispatchStatus.APPLY_FAILED,
                slot=slot,
                command_name=command.name,
                error_message=str(exc),
            )

        self._push(command)
        return DispatchResult(
            DispatchStatus.EXECUTED, slot=slot, command_name=command.name
        )

    def undo(self) -> DispatchResult:
        if not self._history:
            LOGGER.info("[Dispatcher] Nothing to undo")
            return DispatchResult(DispatchStatus.HISTORY_EMPTY)

        # Popped before revert; a failed revert is not retried or restored.
        command = self._history.pop()
        try:
            command.revert()
        except Exception as exc:
            LOGGER.error(
                "[Dispatcher] Error while undoing %s: %s", command.name, exc
            )
            return DispatchResult(
                DispatchStatus.REVERT_FAILED,
                command_name=command.name,
                error_message=str(exc),
            )

        return DispatchResult(DispatchStatus.UNDONE, command_name=command.name)

    def show_history(self) -> List[str]:
        """Log the retained history, oldest first, and return the entry names."""
        names = [command.name for command in self._history]
        LOGGER.info("[Dispatcher] History (most recent last):")
        if not names:
            LOGGER.info("  (empty)")
        for name in names:
            LOGGER.info("  - %s", name)
        return names

    def clear_history(self) -> None:
        self._history.clear()
        LOGGER.debug("Dispatcher history cleared")

    def _push(self, command: Reversible) -> None:
        self._history.append(command)
        if len(self._history) > self._capacity:
            evicted = self._history.popleft()
            LOGGER.debug(
                "History capacity %d reached, dropped oldest entry %s",
                self._capacity,
                evicted.name,
            )
