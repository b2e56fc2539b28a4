"""
Command Pattern - Base Classes.

Provides:
- Command: Named, enable-able command exposing a "current value"
- UndoableCommand: Command with undo/redo support
- CommandError: Raised when a command cannot run
"""
from abc import ABC, abstractmethod
from typing import Any

from ..events import Signal


class CommandError(Exception):
    """Raised when a command is executed without what it needs to run."""
    pass


class Command:
    """
    Base command shown in menus and toolbars.

    Holds the enable/disable state and a "current value" that observers
    read after being notified. Menus connect to enabled_changed and
    value_changed to rebind themselves.

    Example:
        cmd = Command("Zoom", tooltip="Zoom the view")
        cmd.enabled_changed.connect(menu_item.setEnabled)
        cmd.set_enabled(True)
    """

    def __init__(self, label: str, tooltip: str = ""):
        self.label = label
        self.tooltip = tooltip
        self.is_global = True
        self._enabled = False
        self._value: Any = None
        self.enabled_changed = Signal(f"{label}.enabled_changed")
        self.value_changed = Signal(f"{label}.value_changed")

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.label!r} enabled={self._enabled}>"

    @property
    def key(self) -> Any:
        """Identity used to compare command lists across rebuilds."""
        return self.label

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        """Set enabled state; notifies only when the state changes."""
        enabled = bool(enabled)
        if enabled == self._enabled:
            return
        self._enabled = enabled
        self.enabled_changed.emit(enabled)

    @property
    def value(self) -> Any:
        return self._value

    def set_value(self, value: Any) -> None:
        """Publish a new current value. Always notifies."""
        self._value = value
        self.value_changed.emit(value)

    def reset_enabled(self) -> None:
        """
        Re-evaluate availability.

        Called when the set of active windows changes. Global commands
        keep their state; subclasses extend this to derive it.
        """
        pass

    def execute(self) -> None:
        raise NotImplementedError(f"{self.__class__.__name__} has no action")


class UndoableCommand(Command, ABC):
    """
    Command that supports undo/redo operations.

    Use this for operations that modify state and should be reversible.

    Example:
        class ShowImageCommand(UndoableCommand):
            def execute(self):
                window.set_data_visible(image_id, True)

            def undo(self):
                window.set_data_visible(image_id, False)
    """

    @property
    def description(self) -> str:
        """
        Human-readable description for UI display.

        Returns:
            Description string (default: label)
        """
        return self.label

    @abstractmethod
    def execute(self) -> None:
        """
        Execute the command (forward operation).

        This is called when the command is first run and on redo.
        """
        pass

    @abstractmethod
    def undo(self) -> None:
        """
        Reverse the command.

        Must restore state to exactly what it was before execute().
        """
        pass

    def redo(self) -> None:
        """
        Re-execute the command after undo.

        Default implementation calls execute().
        """
        self.execute()
