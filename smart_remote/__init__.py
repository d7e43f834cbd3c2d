"""Programmable home remote with slot bindings and bounded undo."""

__version__ = "0.1.0"
