"""
Active Window Manager - Tracks which windows commands apply to.

Single source of truth for the "active windows" commands read when
they recompute their state.
"""
from typing import Dict, List, Optional
from PySide6.QtCore import QObject, Signal
from loguru import logger

from viewer.core.base_system import BaseSystem
from viewer.core.events import EventBus, Events
from .image_window import ImageWindow


class _WindowSignals(QObject):
    """Signal holder to avoid metaclass conflict."""
    active_changed = Signal(list)  # active window ids
    data_changed = Signal(str)  # window id


class ActiveWindowManager(BaseSystem):
    """
    Registry of image windows and of the active (selected) ones.

    Forwards image list changes of every registered window, both as a
    Qt signal and on the EventBus (Events.DATA_CHANGED). Activation
    changes are published as Events.WINDOWS_ACTIVATED.

    Usage:
        win_mgr = locator.get_system(ActiveWindowManager)
        win_mgr.register(ImageWindow("image1"))
        win_mgr.set_active(["image1"])

        for window in win_mgr.list_active_windows():
            ...
    """

    def __init__(self, locator, config):
        """Initialize ActiveWindowManager."""
        super().__init__(locator, config)

        # Qt signals via composition
        self._signals = _WindowSignals()

        self._windows: Dict[str, ImageWindow] = {}
        self._active_ids: List[str] = []

    @property
    def signals(self) -> _WindowSignals:
        """Get Qt signals object for UI binding."""
        return self._signals

    async def initialize(self):
        """Initialize the ActiveWindowManager."""
        await super().initialize()
        logger.info("ActiveWindowManager initialized")

    async def shutdown(self):
        """Shutdown and forget all windows."""
        for window_id in list(self._windows):
            self.unregister(window_id)
        await super().shutdown()

    @property
    def windows(self) -> Dict[str, ImageWindow]:
        return dict(self._windows)

    @property
    def active_ids(self) -> List[str]:
        return list(self._active_ids)

    def get(self, window_id: str) -> Optional[ImageWindow]:
        return self._windows.get(window_id)

    def register(self, window: ImageWindow) -> None:
        """
        Register a window so its image changes are forwarded.

        Args:
            window: Window to track
        """
        if window.window_id in self._windows:
            logger.warning(f"Window already registered: {window.window_id}")
            return

        self._windows[window.window_id] = window
        window.datas_changed.connect(self._on_window_datas_changed)
        logger.info(f"Window registered: {window.window_id}")

    def unregister(self, window_id: str) -> bool:
        """
        Forget a window. Deactivates it first if it was active.

        Returns:
            True if the window was registered
        """
        window = self._windows.pop(window_id, None)
        if window is None:
            return False

        window.datas_changed.disconnect(self._on_window_datas_changed)
        if window_id in self._active_ids:
            self.set_active([wid for wid in self._active_ids if wid != window_id])
        logger.info(f"Window unregistered: {window_id}")
        return True

    def set_active(self, window_ids: List[str]) -> None:
        """
        Replace the active windows. Order is kept; unknown ids are ignored.

        Args:
            window_ids: Ids of the windows to activate
        """
        active: List[str] = []
        for window_id in window_ids:
            if window_id not in self._windows:
                logger.warning(f"Cannot activate unknown window: {window_id}")
                continue
            if window_id not in active:
                active.append(window_id)

        if active == self._active_ids:
            return

        self._active_ids = active
        self._signals.active_changed.emit(list(active))
        self._publish(Events.WINDOWS_ACTIVATED, list(active))

    def list_active_windows(self) -> List[ImageWindow]:
        """Active windows, in activation order."""
        return [self._windows[wid] for wid in self._active_ids if wid in self._windows]

    def _on_window_datas_changed(self, window_id: str) -> None:
        self._signals.data_changed.emit(window_id)
        self._publish(Events.DATA_CHANGED, window_id)

    def _publish(self, event: str, data) -> None:
        try:
            bus = self.locator.get_system(EventBus)
        except KeyError:
            logger.debug(f"EventBus not registered, dropping {event}")
            return
        bus.publish_sync(event, data)
