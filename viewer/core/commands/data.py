"""
Data Commands - Commands acting on the images loaded in a window.

Provides:
- DataCommand: The "data" command family windows opt into
- HideImageCommand: Hide one visible image
- DataHideCommand: "Hide" sub-menu listing one HideImageCommand per visible image
"""
from typing import Any, List, Optional
from loguru import logger

from .base import Command, CommandError, UndoableCommand
from .composite import ActiveWindowProvider, DynamicCompositeCommand, WindowRef
from ..config import CommandSettings


class DataCommand(Command):
    """
    The "Data" menu. Windows that list DataCommand.KIND among their
    supported kinds take part in every data command.
    """

    KIND = "data"

    def __init__(self, provider: Optional[ActiveWindowProvider] = None,
                 label: str = "Data", tooltip: str = "Data commands"):
        super().__init__(label, tooltip=tooltip)
        self.is_global = False
        self._provider = provider

    def reset_enabled(self) -> None:
        """Enabled while at least one active window supports data commands."""
        try:
            windows = self._provider.list_active_windows() if self._provider else None
            enabled = any(w.supports_command(self.KIND) for w in windows or [])
        except Exception as e:
            logger.warning(f"{self.label}: could not read active windows: {e}")
            enabled = False
        self.set_enabled(enabled)


class HideImageCommand(UndoableCommand):
    """
    Hide a single image.

    Two commands with the same display name are still distinct when
    their source ids differ.
    """

    def __init__(self, display_name: str, source_id: Any, window: Optional[Any] = None):
        super().__init__(display_name, tooltip=f"Hide {display_name}")
        self.display_name = display_name
        self.source_id = source_id
        self.window = window
        self.is_global = False
        self._enabled = True

    @property
    def key(self) -> Any:
        return self.source_id

    @property
    def description(self) -> str:
        return f"Hide {self.display_name}"

    def execute(self) -> None:
        self._set_visible(False)

    def undo(self) -> None:
        self._set_visible(True)

    def _set_visible(self, visible: bool) -> None:
        if self.window is None:
            raise CommandError(f"No window to hide image {self.display_name!r} in")
        self.window.set_data_visible(self.source_id, visible)


class DataHideCommand(DynamicCompositeCommand):
    """
    "Hide" sub-menu: one HideImageCommand per visible image, across all
    active windows that support data commands.

    Owned by CommandService; one instance per application.
    """

    kind = DataCommand.KIND

    def __init__(self, provider: Optional[ActiveWindowProvider], bus: Any,
                 settings: Optional[CommandSettings] = None):
        settings = settings or CommandSettings()
        super().__init__(settings.hide_label, provider, bus,
                         tooltip=settings.hide_tooltip,
                         notify_unchanged=settings.notify_unchanged)

    def on_external_data_changed(self, *_args) -> None:
        """
        Images were added, removed or shown/hidden in some window.

        Needed even when the active windows did not change: the enabled
        state may stay the same while the image list does not.
        """
        self.recompute()

    def collect_children(self, window: WindowRef) -> List[Command]:
        children: List[Command] = []
        for item in window.list_data() or []:
            if item.visible:
                children.append(HideImageCommand(item.name, item.id, window=window))
        return children
