import os
import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock

from viewer.core.events import EventBus
from viewer.core.locator import sl

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeWindow:
    """Window stand-in exposing only what commands read."""

    def __init__(self, datas=(), supported=True):
        self.datas = list(datas)
        self.supported = supported

    def supports_command(self, kind):
        return self.supported

    def list_data(self):
        return list(self.datas)


class FakeProvider:
    def __init__(self, windows=None):
        self.windows = windows

    def list_active_windows(self):
        return self.windows


def item(name, id, visible=True):
    return SimpleNamespace(name=name, id=id, visible=visible)


@pytest.fixture
def event_bus():
    """Create a test EventBus instance."""
    return EventBus(MagicMock(), MagicMock())


@pytest.fixture
def changes(event_bus):
    """Record every "commands.changed" publication."""
    received = []
    event_bus.subscribe("commands.changed", received.append)
    return received


@pytest.fixture
def locator(tmp_path):
    """Fresh global ServiceLocator backed by a temporary config file."""
    sl.reset()
    sl.init(str(tmp_path / "config.json"))
    yield sl
    sl.reset()
