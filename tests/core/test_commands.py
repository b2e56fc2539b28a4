import pytest
from unittest.mock import MagicMock

from viewer.core.commands import (
    Command,
    CommandError,
    CompositeCommand,
    DataCommand,
    DynamicCompositeCommand,
    HideImageCommand,
)
from tests.conftest import FakeProvider, FakeWindow, item


# --- Command ---
def test_command_defaults():
    cmd = Command("Zoom", tooltip="Zoom the view")

    assert cmd.enabled is False
    assert cmd.value is None
    assert cmd.key == "Zoom"
    assert cmd.is_global is True


def test_set_enabled_notifies_on_change_only():
    cmd = Command("Zoom")
    observer = MagicMock()
    cmd.enabled_changed.connect(observer)

    cmd.set_enabled(True)
    cmd.set_enabled(True)
    cmd.set_enabled(False)

    assert [call.args for call in observer.call_args_list] == [(True,), (False,)]


def test_set_value_always_notifies():
    cmd = Command("Zoom")
    observer = MagicMock()
    cmd.value_changed.connect(observer)

    cmd.set_value(1)
    cmd.set_value(1)

    assert observer.call_count == 2


def test_base_command_has_no_action():
    with pytest.raises(NotImplementedError):
        Command("Nothing").execute()


# --- CompositeCommand ---
def test_composite_exposes_children_as_value():
    a, b = Command("a"), Command("b")
    composite = CompositeCommand("Group", [a, b])

    assert composite.children == (a, b)
    assert composite.value == (a, b)

    composite.set_children([b])
    assert composite.value == (b,)


# --- DynamicCompositeCommand ---
class CloseImage(DynamicCompositeCommand):
    kind = "close"

    def collect_children(self, window):
        return [Command(d.name) for d in window.list_data()]


def test_dynamic_composite_uses_subclass_hook(event_bus, changes):
    window = FakeWindow([item("a", 1, visible=False), item("b", 2)])
    cmd = CloseImage("Close", FakeProvider([window]), event_bus)

    children = cmd.recompute()

    assert [c.label for c in children] == ["a", "b"]
    assert cmd.enabled is True
    assert changes == [None]


def test_dynamic_composite_filters_on_kind(event_bus):
    class KindWindow(FakeWindow):
        def supports_command(self, kind):
            return kind == "close"

    hide_only = FakeWindow([item("x", 1)], supported=False)
    cmd = CloseImage("Close", FakeProvider([hide_only, KindWindow([item("y", 2)])]), event_bus)

    assert [c.label for c in cmd.recompute()] == ["y"]


def test_dynamic_composite_is_not_global(event_bus):
    assert CloseImage("Close", None, event_bus).is_global is False


def test_collect_children_is_required(event_bus):
    cmd = DynamicCompositeCommand("Raw", FakeProvider([FakeWindow([item("a", 1)])]), event_bus)

    # The missing hook only skips the window
    assert cmd.recompute() == ()


# --- HideImageCommand ---
def test_hide_image_hides_in_its_window():
    window = MagicMock()
    cmd = HideImageCommand("m31.fits", "id-7", window=window)

    cmd.execute()
    window.set_data_visible.assert_called_once_with("id-7", False)

    cmd.undo()
    window.set_data_visible.assert_called_with("id-7", True)

    cmd.redo()
    window.set_data_visible.assert_called_with("id-7", False)


def test_hide_image_description_and_key():
    cmd = HideImageCommand("m31.fits", "id-7")

    assert cmd.label == "m31.fits"
    assert cmd.description == "Hide m31.fits"
    assert cmd.key == "id-7"
    assert cmd.enabled is True


def test_hide_image_without_window():
    with pytest.raises(CommandError):
        HideImageCommand("m31.fits", "id-7").execute()


# --- DataCommand ---
def test_data_command_enabled_with_supporting_window():
    provider = FakeProvider([FakeWindow(supported=False)])
    cmd = DataCommand(provider)

    cmd.reset_enabled()
    assert cmd.enabled is False

    provider.windows.append(FakeWindow())
    cmd.reset_enabled()
    assert cmd.enabled is True

    provider.windows = None
    cmd.reset_enabled()
    assert cmd.enabled is False


def test_data_command_provider_failure_disables():
    class BrokenProvider:
        def list_active_windows(self):
            raise RuntimeError("window registry unavailable")

    provider = FakeProvider([FakeWindow()])
    cmd = DataCommand(provider)
    cmd.reset_enabled()
    assert cmd.enabled is True

    cmd._provider = BrokenProvider()
    cmd.reset_enabled()

    assert cmd.enabled is False
