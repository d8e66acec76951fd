# helperspec/config/__init__.py
from .settings import HelperSettings, LogLevel
from .loader import load_settings

__all__ = ["HelperSettings", "LogLevel", "load_settings"]
