"""Configuration management for oaspec"""

from .settings import Settings, configure_logging, get_settings

__all__ = ["Settings", "get_settings", "configure_logging"]
