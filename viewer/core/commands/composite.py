"""
Composite Commands - Commands whose value is a list of sub-commands.

Provides:
- WindowRef / ActiveWindowProvider: what a composite reads from the window layer
- CompositeCommand: Fixed list of child commands
- DynamicCompositeCommand: Children rebuilt from the active windows on every change
"""
import threading
from typing import Any, Iterable, List, Optional, Protocol, Sequence, Tuple
from loguru import logger

from .base import Command
from ..events import Events


class WindowRef(Protocol):
    """Read-only view of a window as seen by commands."""

    def supports_command(self, kind: str) -> bool: ...

    def list_data(self) -> Sequence[Any]: ...


class ActiveWindowProvider(Protocol):
    """Source of the currently active windows, in activation order."""

    def list_active_windows(self) -> Optional[Sequence[WindowRef]]: ...


class CompositeCommand(Command):
    """
    Command grouping other commands, e.g. a sub-menu.

    The children are exposed both as `children` and as the command value.
    They are replaced wholesale; callers must not mutate the tuple.
    """

    def __init__(self, label: str, children: Iterable[Command] = (), tooltip: str = ""):
        super().__init__(label, tooltip=tooltip)
        self._children: Tuple[Command, ...] = tuple(children)
        self._value = self._children

    @property
    def children(self) -> Tuple[Command, ...]:
        return self._children

    def set_children(self, children: Iterable[Command]) -> None:
        self._children = tuple(children)
        self.set_value(self._children)

    def execute(self) -> None:
        """Composites have no action of their own; their children do."""
        pass


class DynamicCompositeCommand(CompositeCommand):
    """
    Composite whose children are derived from the active windows.

    Every recomputation is a full rebuild:
    1. read the active windows from the provider (None counts as empty)
    2. skip windows that do not support `kind`
    3. ask collect_children() for each remaining window, in order
    4. replace the children, enable iff there is at least one child,
       publish the children as the value
    5. publish Events.COMMANDS_CHANGED on the bus with no data

    Subclasses set `kind` and implement collect_children().

    Example:
        class CloseImage(DynamicCompositeCommand):
            kind = "data"

            def collect_children(self, window):
                return [CloseImageCommand(d.name, d.id) for d in window.list_data()]
    """

    kind: str = ""

    def __init__(self, label: str, provider: Optional[ActiveWindowProvider], bus: Any,
                 tooltip: str = "", notify_unchanged: bool = True):
        super().__init__(label, tooltip=tooltip)
        self.is_global = False
        self.notify_unchanged = notify_unchanged
        self._provider = provider
        self._bus = bus
        # Guards the read of window state together with the (children, enabled) update
        self._lock = threading.RLock()

    def reset_enabled(self) -> None:
        super().reset_enabled()
        self.recompute()

    def collect_children(self, window: WindowRef) -> List[Command]:
        raise NotImplementedError

    def recompute(self) -> Tuple[Command, ...]:
        """Rebuild children and enabled state, then notify. Never raises."""
        with self._lock:
            previous = self._children
            children = tuple(self._scan_windows())
            enabled = len(children) > 0
            enabled_changed = enabled != self._enabled
            self._children = children
            self._enabled = enabled
            self._value = children

        # Observers run unlocked; they may trigger another recomputation
        if enabled_changed:
            self.enabled_changed.emit(enabled)
        self.value_changed.emit(children)

        logger.debug(f"{self.label}: recomputed {len(children)} child command(s)")
        if self.notify_unchanged or _keys(previous) != _keys(children):
            self._notify()
        return children

    def _scan_windows(self) -> List[Command]:
        children: List[Command] = []
        for window in self._active_windows():
            try:
                if not window.supports_command(self.kind):
                    continue
                children.extend(self.collect_children(window))
            except Exception as e:
                logger.warning(f"{self.label}: skipping window {window!r}: {e}")
        return children

    def _active_windows(self) -> List[WindowRef]:
        if self._provider is None:
            return []
        try:
            windows = self._provider.list_active_windows()
            return list(windows) if windows else []
        except Exception as e:
            logger.warning(f"{self.label}: could not read active windows: {e}")
            return []

    def _notify(self) -> None:
        if self._bus is None:
            return
        self._bus.publish_sync(Events.COMMANDS_CHANGED)


def _keys(commands: Sequence[Command]) -> List[Any]:
    return [command.key for command in commands]
