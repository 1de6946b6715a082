"""Data models module."""

from buildlayout.models.layout import BuildTool, LayoutInfo, PackagingType

__all__ = ["BuildTool", "LayoutInfo", "PackagingType"]
