"""Protocol definitions for reversible operations."""

from __future__ import annotations

from typing import Protocol, Union, runtime_checkable


SlotKey = Union[int, str]


@runtime_checkable
class Reversible(Protocol):
    """Minimal contract for anything the dispatcher can execute and undo."""

    @property
    def name(self) -> str:
        """Identifier shown in history listings."""
        ...

    def apply(self) -> None:
        """Perform the forward effect."""
        ...

    def revert(self) -> None:
        """Perform the exact inverse of ``apply``.

        Raises:
            Exception: Whatever the underlying device raises; callers decide
                whether to suppress it.
        """
        ...

