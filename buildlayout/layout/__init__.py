"""Build tool file system layouts.

This module provides:
- The FileSystemLayout contract and archive name derivation
- Maven and Gradle layouts
- Layout resolution from a project root, with a configurable override
- Maven command line argument extraction
"""

from buildlayout.layout.args import (
    MavenArg,
    MavenArgs,
    MavenArgsParser,
    resolve_maven_build_file_name,
)
from buildlayout.layout.base import (
    FileSystemLayout,
    archive_name_for_classes_dir,
    describe_layout,
)
from buildlayout.layout.factory import LayoutFactory, create_layout, load_layout_class
from buildlayout.layout.gradle import GradleFileSystemLayout
from buildlayout.layout.maven import MavenFileSystemLayout

__all__ = [
    "FileSystemLayout",
    "archive_name_for_classes_dir",
    "describe_layout",
    "MavenFileSystemLayout",
    "GradleFileSystemLayout",
    "LayoutFactory",
    "create_layout",
    "load_layout_class",
    "MavenArg",
    "MavenArgs",
    "MavenArgsParser",
    "resolve_maven_build_file_name",
]
