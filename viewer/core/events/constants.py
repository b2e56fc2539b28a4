"""
Event Type Constants.

Standard event types for application-wide pub/sub messaging.
Use these constants with EventBus instead of string literals.

Usage:
    from viewer.core.events import Events, EventBus

    event_bus.subscribe(Events.COMMANDS_CHANGED, refresh_menu)
"""


class Events:
    """
    Standard event type constants for EventBus.

    Organized by domain (commands, windows, app lifecycle).
    """

    # Command events - the command tree was rebuilt; carries no payload
    COMMANDS_CHANGED = "commands.changed"

    # Window events
    WINDOWS_ACTIVATED = "windows.activated"
    DATA_CHANGED = "data.changed"

    # Application lifecycle events
    APP_INITIALIZED = "app.initialized"
    APP_STOPPING = "app.stopping"
