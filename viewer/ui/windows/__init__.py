"""
Window layer - image windows and active window tracking.
"""
from .models import DataItem
from .image_window import ImageWindow
from .window_manager import ActiveWindowManager

__all__ = ["DataItem", "ImageWindow", "ActiveWindowManager"]
