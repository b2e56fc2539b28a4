"""
Viewer - Image viewer command core.

Command hierarchy, active window tracking and the services that wire
them together.
"""
from viewer.core.base_system import BaseSystem
from viewer.core.locator import ServiceLocator, sl
from viewer.core.config import ConfigManager, AppConfig, GeneralSettings, CommandSettings
from viewer.core.events import Signal, EventBus, Events
from viewer.core.logging import setup_logging
from viewer.core.bootstrap import ApplicationBuilder
from viewer.core.commands import (
    Command,
    UndoableCommand,
    CompositeCommand,
    DynamicCompositeCommand,
    DataCommand,
    DataHideCommand,
    HideImageCommand,
    CommandError,
)
from viewer.core.command_service import CommandService
from viewer.ui.windows import ActiveWindowManager, ImageWindow, DataItem

__all__ = [
    "BaseSystem",
    "ServiceLocator",
    "sl",
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "CommandSettings",
    "Signal",
    "EventBus",
    "Events",
    "setup_logging",
    "ApplicationBuilder",
    "Command",
    "UndoableCommand",
    "CompositeCommand",
    "DynamicCompositeCommand",
    "DataCommand",
    "DataHideCommand",
    "HideImageCommand",
    "CommandError",
    "CommandService",
    "ActiveWindowManager",
    "ImageWindow",
    "DataItem",
]
