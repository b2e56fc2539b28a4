"""
Command Service - Owns the application's command instances.

Builds each command once, injects the window provider and the EventBus,
and keeps the commands in step with window changes.
"""
from typing import Dict, Optional
from loguru import logger

from .base_system import BaseSystem
from .commands import Command, DataCommand, DataHideCommand
from .decorators import subscribe_event, system
from .events import EventBus, Events
from viewer.ui.windows import ActiveWindowManager


@system(depends_on=[EventBus, ActiveWindowManager])
class CommandService(BaseSystem):
    """
    Holds the single instance of every command.

    Usage:
        commands = locator.get_system(CommandService)
        hide = commands.data_hide
        event_bus.subscribe(Events.COMMANDS_CHANGED, lambda _: menu.rebuild(hide.children))
    """

    def __init__(self, locator, config):
        super().__init__(locator, config)
        self._commands: Dict[str, Command] = {}
        self._data_hide: Optional[DataHideCommand] = None
        self._bus: Optional[EventBus] = None

    async def initialize(self):
        """Build commands and subscribe them to window events."""
        self._bus = self.locator.get_system(EventBus)
        try:
            provider = self.locator.get_system(ActiveWindowManager)
        except KeyError:
            logger.warning("ActiveWindowManager not registered, data commands stay disabled")
            provider = None

        self._data_hide = DataHideCommand(provider, self._bus, self.config.data.commands)
        self._commands = {
            "data": DataCommand(provider),
            "data.hide": self._data_hide,
        }

        self._bus.subscribe(Events.DATA_CHANGED, self._data_hide.on_external_data_changed)
        self.config.on_changed.connect(self._on_config_changed)

        self.on_windows_activated(None)
        await super().initialize()
        logger.info("CommandService initialized")

    async def shutdown(self):
        if self._bus is not None and self._data_hide is not None:
            self._bus.unsubscribe(Events.DATA_CHANGED, self._data_hide.on_external_data_changed)
            self._bus.unsubscribe(Events.WINDOWS_ACTIVATED, self.on_windows_activated)
        self.config.on_changed.disconnect(self._on_config_changed)
        self._commands.clear()
        await super().shutdown()

    @property
    def data_hide(self) -> DataHideCommand:
        if self._data_hide is None:
            raise RuntimeError("CommandService is not initialized")
        return self._data_hide

    @property
    def commands(self) -> Dict[str, Command]:
        return dict(self._commands)

    def get(self, name: str) -> Optional[Command]:
        """Get a command by its dotted name (e.g. "data.hide")."""
        return self._commands.get(name)

    @subscribe_event(Events.WINDOWS_ACTIVATED)
    def on_windows_activated(self, _window_ids) -> None:
        """Active windows changed: every command re-evaluates its availability."""
        for name, command in self._commands.items():
            try:
                command.reset_enabled()
            except Exception as e:
                logger.error(f"Command {name} failed to reset: {e}")

    def _on_config_changed(self, section: str, key: str, value) -> None:
        if section != "commands" or self._data_hide is None:
            return
        if key == "hide_label":
            self._data_hide.label = value
        elif key == "hide_tooltip":
            self._data_hide.tooltip = value
        elif key == "notify_unchanged":
            self._data_hide.notify_unchanged = value
