"""
EventBus - Unified Event System

Provides a single event bus for decoupled publish/subscribe communication.
"""
import asyncio
import inspect
from typing import Any, Callable, Dict, List, Set
from loguru import logger

from viewer.core.base_system import BaseSystem


class EventBus(BaseSystem):
    """
    Unified event bus for application-wide pub/sub.

    Usage:
        # Subscribe
        event_bus.subscribe("commands.changed", refresh_menu)

        # Publish from sync code (UI callbacks, command recomputation)
        event_bus.publish_sync("commands.changed")

        # Publish from async code
        await event_bus.publish("data.changed", "image_window_1")
    """

    def __init__(self, locator, config):
        super().__init__(locator, config)
        self._subscribers: Dict[str, List[Callable]] = {}
        # Async handlers started by publish_sync, kept until they finish
        self._tasks: Set[asyncio.Task] = set()

    async def initialize(self):
        """Initialize event bus."""
        logger.info("EventBus initialized")
        await super().initialize()

    async def shutdown(self):
        """Shutdown event bus, letting pending async handlers finish."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
        self._subscribers.clear()
        await super().shutdown()

    def subscribe(self, event: str, handler: Callable) -> None:
        """
        Subscribe to an event.

        Args:
            event: Event name (e.g., "commands.changed")
            handler: Callback function (sync or async)
        """
        if event not in self._subscribers:
            self._subscribers[event] = []

        if handler not in self._subscribers[event]:
            self._subscribers[event].append(handler)
            logger.debug(f"Subscribed to {event}: {_handler_name(handler)}")

    def unsubscribe(self, event: str, handler: Callable) -> None:
        """
        Unsubscribe from an event.

        Args:
            event: Event name
            handler: Handler to remove
        """
        if event in self._subscribers and handler in self._subscribers[event]:
            self._subscribers[event].remove(handler)
            logger.debug(f"Unsubscribed from {event}: {_handler_name(handler)}")

    def subscriber_count(self, event: str) -> int:
        return len(self._subscribers.get(event, []))

    async def publish(self, event: str, data: Any = None) -> None:
        """
        Publish an event to all subscribers.

        Args:
            event: Event name
            data: Optional data to pass to handlers
        """
        handlers = list(self._subscribers.get(event, []))

        for handler in handlers:
            try:
                if inspect.iscoroutinefunction(handler):
                    await handler(data)
                else:
                    handler(data)
            except Exception as e:
                logger.error(f"Error in handler for {event}: {e}")

    def publish_sync(self, event: str, data: Any = None) -> None:
        """
        Publish an event synchronously.

        Sync handlers run inline. Async handlers are scheduled on the
        running loop and not awaited; without a running loop they are
        skipped.

        Args:
            event: Event name
            data: Optional data to pass to handlers
        """
        handlers = list(self._subscribers.get(event, []))

        for handler in handlers:
            try:
                if inspect.iscoroutinefunction(handler):
                    self._schedule(event, handler, data)
                else:
                    handler(data)
            except Exception as e:
                logger.error(f"Error in sync handler for {event}: {e}")

    def _schedule(self, event: str, handler: Callable, data: Any) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(f"No running event loop, skipped async handler for {event}: {_handler_name(handler)}")
            return

        task = loop.create_task(handler(data))
        self._tasks.add(task)
        task.add_done_callback(lambda t: self._on_task_done(event, t))

    def _on_task_done(self, event: str, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Error in async handler for {event}: {error}")


def _handler_name(handler: Callable) -> str:
    return getattr(handler, "__name__", repr(handler))
