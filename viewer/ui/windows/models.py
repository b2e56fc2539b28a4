"""
Window data models.
"""
from typing import Any
from pydantic import BaseModel, ConfigDict


class DataItem(BaseModel):
    """
    One image loaded into a window.

    Attributes:
        id: Identifier of the image within the application
        name: Display name (usually the file name)
        visible: Whether the image is currently shown
    """
    model_config = ConfigDict(frozen=True)

    id: Any
    name: str
    visible: bool = True
