"""
Event System - Pub/Sub Messaging.

Provides:
- Signal: Simple observer pattern for sync notifications (e.g., enabled state)
- EventBus: Application-wide pub/sub (e.g., "commands changed")
- Events: Standard event type constants

Usage:
    from viewer.core.events import EventBus, Events

    event_bus.subscribe(Events.COMMANDS_CHANGED, on_commands_changed)
    event_bus.publish_sync(Events.COMMANDS_CHANGED)
"""
from .observer import Signal
from .bus import EventBus
from .constants import Events


__all__ = ["Signal", "EventBus", "Events"]
