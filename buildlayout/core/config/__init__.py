"""Configuration management for buildlayout."""

from buildlayout.core.config.loader import ConfigLoader
from buildlayout.core.config.settings import (
    MAVEN_CMD_LINE_ARGS,
    LayoutSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "MAVEN_CMD_LINE_ARGS",
    "ConfigLoader",
    "LayoutSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
