"""Core primitives for smart-remote."""

from .protocols import Reversible, SlotKey
from .results import DispatchResult, DispatchStatus, OperationFault

__all__ = [
    "DispatchResult",
    "DispatchStatus",
    "OperationFault",
    "Reversible",
    "SlotKey",
]
