import pytest
from unittest.mock import MagicMock

from viewer.core.commands import DataHideCommand
from viewer.core.events import EventBus, Events
from viewer.ui.windows import ActiveWindowManager, DataItem, ImageWindow


@pytest.fixture
def bus():
    return EventBus(MagicMock(), MagicMock())


@pytest.fixture
def manager(bus):
    locator = MagicMock()
    locator.get_system.return_value = bus
    return ActiveWindowManager(locator, MagicMock())


def loaded_window(window_id, *names, supported=("data",)):
    window = ImageWindow(window_id, supported_kinds=supported)
    for name in names:
        window.add_data(DataItem(id=f"{window_id}/{name}", name=name))
    return window


class TestImageWindow:

    def test_supports_data_commands_by_default(self):
        assert ImageWindow("w").supports_command("data")
        assert not ImageWindow("w", supported_kinds=()).supports_command("data")

    def test_list_data_is_a_copy(self):
        window = loaded_window("w", "a.fits")

        window.list_data().clear()

        assert len(window.list_data()) == 1

    def test_set_data_visible(self):
        window = loaded_window("w", "a.fits")
        changes = []
        window.datas_changed.connect(changes.append)

        window.set_data_visible("w/a.fits", False)
        window.set_data_visible("w/a.fits", False)

        assert window.list_data()[0].visible is False
        assert changes == ["w"]

    def test_unknown_image(self):
        window = loaded_window("w", "a.fits")

        with pytest.raises(KeyError):
            window.set_data_visible("missing", False)
        with pytest.raises(KeyError):
            window.remove_data("missing")

    def test_duplicate_id_rejected(self):
        window = loaded_window("w")
        window.add_data(DataItem(id="x", name="a.fits"))

        with pytest.raises(ValueError):
            window.add_data(DataItem(id="x", name="copy of a.fits"))

        window.set_data_visible("x", False)
        assert [(d.name, d.visible) for d in window.list_data()] == [("a.fits", False)]

    def test_remove_data(self):
        window = loaded_window("w", "a.fits", "b.fits")

        removed = window.remove_data("w/a.fits")

        assert removed.name == "a.fits"
        assert [d.name for d in window.list_data()] == ["b.fits"]


class TestActiveWindowManager:

    def test_active_windows_in_activation_order(self, manager):
        w1, w2 = loaded_window("w1"), loaded_window("w2")
        manager.register(w1)
        manager.register(w2)

        manager.set_active(["w2", "w1", "w2", "unknown"])

        assert manager.list_active_windows() == [w2, w1]
        assert manager.active_ids == ["w2", "w1"]

    def test_activation_published(self, manager, bus):
        received = []
        bus.subscribe(Events.WINDOWS_ACTIVATED, received.append)
        manager.register(loaded_window("w1"))

        manager.set_active(["w1"])
        manager.set_active(["w1"])

        assert received == [["w1"]]

    def test_qt_signals(self, qapp, manager):
        active, data = [], []
        manager.signals.active_changed.connect(active.append)
        manager.signals.data_changed.connect(data.append)
        window = loaded_window("w1")
        manager.register(window)

        manager.set_active(["w1"])
        window.add_data(DataItem(id=1, name="a.fits"))

        assert active == [["w1"]]
        assert data == ["w1"]

    def test_data_changes_forwarded_to_bus(self, manager, bus):
        received = []
        bus.subscribe(Events.DATA_CHANGED, received.append)
        window = loaded_window("w1")
        manager.register(window)

        window.add_data(DataItem(id=1, name="a.fits"))

        assert received == ["w1"]

    def test_unregister_deactivates(self, manager):
        window = loaded_window("w1")
        manager.register(window)
        manager.set_active(["w1"])

        assert manager.unregister("w1") is True
        assert manager.unregister("w1") is False
        assert manager.list_active_windows() == []

        # No longer forwarded
        window.add_data(DataItem(id=1, name="a.fits"))

    def test_register_twice_keeps_first(self, manager):
        first = loaded_window("w1")
        manager.register(first)
        manager.register(loaded_window("w1"))

        assert manager.get("w1") is first

    @pytest.mark.asyncio
    async def test_shutdown_forgets_windows(self, manager):
        manager.register(loaded_window("w1"))

        await manager.initialize()
        await manager.shutdown()

        assert manager.windows == {}
        assert manager.is_ready is False

    def test_drives_hide_command(self, manager, bus):
        hide = DataHideCommand(manager, bus)
        bus.subscribe(Events.DATA_CHANGED, hide.on_external_data_changed)
        bus.subscribe(Events.WINDOWS_ACTIVATED, lambda _: hide.reset_enabled())
        window = loaded_window("w1", "a.fits", "b.fits")
        manager.register(window)

        manager.set_active(["w1"])
        assert [c.display_name for c in hide.children] == ["a.fits", "b.fits"]

        hide.children[0].execute()
        assert [c.display_name for c in hide.children] == ["b.fits"]

        hide.children[0].execute()
        assert hide.children == ()
        assert hide.enabled is False
