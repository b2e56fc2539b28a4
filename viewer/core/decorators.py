"""
Decorator Utilities.

Provides syntactic sugar for common patterns.
"""
from typing import Type, TypeVar, Optional, List

T = TypeVar('T')


def system(depends_on: Optional[List[Type]] = None, name: Optional[str] = None):
    """
    Decorator to mark a class as a system and declare its start order.

    Args:
        depends_on: List of system types this depends on
        name: System name (defaults to class name)

    Usage:
        @system(depends_on=[EventBus, ActiveWindowManager])
        class CommandService(BaseSystem):
            pass
    """
    def decorator(cls: Type[T]) -> Type[T]:
        cls.depends_on = depends_on or []
        cls._system_name = name or cls.__name__
        return cls
    return decorator


def subscribe_event(*event_types: str):
    """
    Decorator to mark a method as an event subscriber.

    BaseSystem.initialize() subscribes the method to each event type.

    Args:
        *event_types: Event types to subscribe to

    Usage:
        @subscribe_event("data.changed")
        def on_data_changed(self, data):
            pass
    """
    def decorator(func):
        func._subscribed_events = list(event_types)
        return func
    return decorator
