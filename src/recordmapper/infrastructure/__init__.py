"""Settings and logging for the record mapper."""

from .config import MapperSettings, get_settings
from .logging import configure_logging

__all__ = ["MapperSettings", "get_settings", "configure_logging"]
