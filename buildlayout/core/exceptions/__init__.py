"""Exception definitions module."""

from buildlayout.core.exceptions.errors import (
    BuildLayoutError,
    ConfigurationError,
    LayoutResolutionError,
)

__all__ = ["BuildLayoutError", "ConfigurationError", "LayoutResolutionError"]
