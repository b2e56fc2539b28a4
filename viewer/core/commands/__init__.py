"""
Command System.

Provides:
- Command / UndoableCommand: Base classes with enabled state and value
- CompositeCommand: Commands grouping sub-commands
- DynamicCompositeCommand: Sub-commands rebuilt from the active windows
- DataCommand, DataHideCommand, HideImageCommand: Data menu commands
"""
from .base import Command, CommandError, UndoableCommand
from .composite import ActiveWindowProvider, CompositeCommand, DynamicCompositeCommand, WindowRef
from .data import DataCommand, DataHideCommand, HideImageCommand

__all__ = [
    # Base classes
    "Command",
    "CommandError",
    "UndoableCommand",
    # Composites
    "ActiveWindowProvider",
    "WindowRef",
    "CompositeCommand",
    "DynamicCompositeCommand",
    # Data menu
    "DataCommand",
    "DataHideCommand",
    "HideImageCommand",
]
