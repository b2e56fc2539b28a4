from abc import ABC, abstractmethod
import inspect
from typing import TYPE_CHECKING
from loguru import logger

if TYPE_CHECKING:
    from .locator import ServiceLocator
    from .config import ConfigManager


class BaseSystem(ABC):
    """
    Abstract Base Class for all core systems (EventBus, windows, commands).
    Ensures consistent initialization and access to globals (Locator, Config).

    Supports automatic event subscription via @subscribe_event decorator:
        from viewer.core.decorators import subscribe_event

        class MyService(BaseSystem):
            @subscribe_event("data.changed")
            def on_data_changed(self, data):
                pass
    """
    def __init__(self, locator: 'ServiceLocator', config: 'ConfigManager'):
        self.locator = locator
        self.config = config
        self._is_ready = False

    @abstractmethod
    async def initialize(self):
        """
        Async initialization logic.
        Called by the ServiceLocator during startup.

        Automatically subscribes methods decorated with @subscribe_event.
        """
        self._auto_subscribe_events()
        self._is_ready = True

    def _auto_subscribe_events(self) -> None:
        """Subscribe methods carrying a _subscribed_events attribute to the EventBus."""
        from .events import EventBus

        try:
            bus = self.locator.get_system(EventBus)
        except KeyError:
            logger.warning(f"{self.__class__.__name__}: EventBus not available for auto-subscription")
            return

        for name, method in inspect.getmembers(self, predicate=inspect.ismethod):
            if hasattr(method, '_subscribed_events'):
                for event in method._subscribed_events:
                    bus.subscribe(event, method)
                    logger.debug(f"{self.__class__.__name__}.{name} auto-subscribed to: {event}")

    @abstractmethod
    async def shutdown(self):
        """
        Cleanup logic (e.g. dropping subscriptions).
        """
        self._is_ready = False

    @property
    def is_ready(self) -> bool:
        return self._is_ready

    async def __aenter__(self):
        """Async context manager entry: Initialize system."""
        if not self._is_ready:
            await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit: Shutdown system."""
        if self._is_ready:
            await self.shutdown()
