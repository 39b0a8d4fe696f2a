# __init__.py

from .config import WidgetConfig
from .logger import Logger
from .interface import Interface

__all__ = ["Interface", "Logger", "WidgetConfig"]
