"""
Image Window - A window displaying a stack of images.
"""
from typing import Any, Iterable, List
from loguru import logger

from viewer.core.commands.data import DataCommand
from viewer.core.events import Signal
from .models import DataItem


class ImageWindow:
    """
    Window owning an ordered list of images.

    Commands read the window through supports_command() and list_data().
    Every change to the image list emits datas_changed(window_id).

    Usage:
        win = ImageWindow("image1")
        win.add_data(DataItem(id="a.fits", name="a.fits"))
        win.set_data_visible("a.fits", False)
    """

    def __init__(self, window_id: str, supported_kinds: Iterable[str] = (DataCommand.KIND,)):
        self.window_id = window_id
        self._supported_kinds = set(supported_kinds)
        self._datas: List[DataItem] = []
        self.datas_changed = Signal(f"{window_id}.datas_changed")

    def __repr__(self) -> str:
        return f"<ImageWindow {self.window_id!r} images={len(self._datas)}>"

    def supports_command(self, kind: str) -> bool:
        return kind in self._supported_kinds

    def list_data(self) -> List[DataItem]:
        return list(self._datas)

    def add_data(self, item: DataItem) -> None:
        """
        Append an image.

        Raises:
            ValueError: If an image with the same id is already loaded
        """
        if any(existing.id == item.id for existing in self._datas):
            raise ValueError(f"Image {item.id!r} already loaded in window {self.window_id}")
        self._datas.append(item)
        logger.debug(f"{self.window_id}: added image {item.name}")
        self.datas_changed.emit(self.window_id)

    def remove_data(self, data_id: Any) -> DataItem:
        """
        Remove an image.

        Raises:
            KeyError: If no image has this id
        """
        index = self._index_of(data_id)
        item = self._datas.pop(index)
        logger.debug(f"{self.window_id}: removed image {item.name}")
        self.datas_changed.emit(self.window_id)
        return item

    def set_data_visible(self, data_id: Any, visible: bool) -> None:
        """
        Show or hide an image. No notification if nothing changes.

        Raises:
            KeyError: If no image has this id
        """
        index = self._index_of(data_id)
        item = self._datas[index]
        if item.visible == visible:
            return
        self._datas[index] = item.model_copy(update={"visible": visible})
        logger.debug(f"{self.window_id}: {item.name} visible={visible}")
        self.datas_changed.emit(self.window_id)

    def _index_of(self, data_id: Any) -> int:
        for index, item in enumerate(self._datas):
            if item.id == data_id:
                return index
        raise KeyError(f"No image {data_id!r} in window {self.window_id}")
