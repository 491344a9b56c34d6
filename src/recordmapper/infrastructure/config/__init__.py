"""Record mapper settings."""

from .config import MapperSettings, get_settings

__all__ = ["MapperSettings", "get_settings"]
