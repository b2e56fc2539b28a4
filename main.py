import asyncio

from viewer.core.bootstrap import ApplicationBuilder, shutdown_app
from viewer.core.command_service import CommandService
from viewer.core.events import EventBus, Events
from viewer.ui.windows import ActiveWindowManager, DataItem, ImageWindow


def print_hide_menu(hide):
    state = "enabled" if hide.enabled else "disabled"
    names = ", ".join(child.display_name for child in hide.children) or "-"
    print(f"[Menu] {hide.label} ({state}): {names}")


async def async_main():
    print("--- 1. Initialize Core ---")
    locator = await ApplicationBuilder("Viewer Demo", "settings.json").with_logging().build()

    windows = locator.get_system(ActiveWindowManager)
    hide = locator.get_system(CommandService).data_hide
    locator.get_system(EventBus).subscribe(Events.COMMANDS_CHANGED, lambda _: print_hide_menu(hide))

    print("--- 2. Open Windows ---")
    image1 = ImageWindow("image1")
    image2 = ImageWindow("image2")
    histogram = ImageWindow("histogram", supported_kinds=())
    for window in (image1, image2, histogram):
        windows.register(window)

    image1.add_data(DataItem(id="m31", name="m31.fits"))
    image2.add_data(DataItem(id="m33", name="m33.fits"))
    image2.add_data(DataItem(id="m51", name="m51.fits"))

    print("--- 3. Select Windows ---")
    windows.set_active(["image1", "histogram", "image2"])

    print("--- 4. Hide Images ---")
    for child in list(hide.children):
        print(f"Running: {child.description}")
        child.execute()

    await shutdown_app(locator)


if __name__ == "__main__":
    asyncio.run(async_main())
