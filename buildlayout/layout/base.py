"""Base class for build tool file system layouts.

A layout knows, for one build tool's conventions, where compiled classes,
processed resources and web application sources live for a project rooted at
a given path. Layouts are queried, never mutated, after construction.
"""

import os
import uuid
from abc import ABC, abstractmethod
from pathlib import Path, PurePath

from buildlayout.models.layout import BuildTool, LayoutInfo, PackagingType

JAR = ".jar"

POM_XML = "pom.xml"
BUILD_GRADLE = "build.gradle"
BUILD_GRADLE_KTS = "build.gradle.kts"

TARGET_CLASSES = ("target", "classes")
BUILD_CLASSES_MAIN = ("build", "classes", "main")
BUILD_CLASSES_JAVA_MAIN = ("build", "classes", "java", "main")
BUILD_RESOURCES_MAIN = ("build", "resources", "main")
SRC_MAIN_WEBAPP = ("src", "main", "webapp")


def _name_segments(path: str | os.PathLike) -> tuple[str, ...]:
    """Return the name components of a path, without its anchor."""
    pure = PurePath(os.fspath(path))
    parts = pure.parts
    if pure.anchor:
        parts = parts[1:]
    return parts


def _ends_with(names: tuple[str, ...], suffix: tuple[str, ...]) -> bool:
    return len(names) >= len(suffix) and names[-len(suffix):] == suffix


def archive_name_for_classes_dir(path: str | os.PathLike) -> str:
    """Derive the archive name for a compiled classes directory.

    ``<module>/target/classes`` (Maven) yields ``<module>.jar``;
    ``<module>/build/classes/main`` and ``<module>/build/resources/main``
    (Gradle) yield ``<module>.jar``. Anything else, including
    ``build/classes/java/main`` and paths too short to carry a module
    directory, gets a random UUID based name, so the result is only stable
    for the recognized conventions.

    Args:
        path: Classes directory path.

    Returns:
        Archive file name ending in ``.jar``.
    """
    names = _name_segments(path)

    if _ends_with(names, TARGET_CLASSES) and len(names) > len(TARGET_CLASSES):
        return names[-3] + JAR

    if (
        _ends_with(names, BUILD_CLASSES_MAIN) or _ends_with(names, BUILD_RESOURCES_MAIN)
    ) and len(names) > len(BUILD_CLASSES_MAIN):
        return names[-4] + JAR

    return f"{uuid.uuid4()}{JAR}"


class FileSystemLayout(ABC):
    """Build tool file system abstraction rooted at a project directory.

    Subclasses must be constructible from a single root path argument so that
    they can be named in the ``layout_class`` override.
    """

    build_tool: BuildTool = BuildTool.CUSTOM

    def __init__(self, path: str | os.PathLike) -> None:
        """Initialize the layout.

        Args:
            path: Project root directory.
        """
        self._root_path = Path(os.fspath(path)).resolve()

    @property
    def root_path(self) -> Path:
        """Absolute project root supplied at construction."""
        return self._root_path

    @abstractmethod
    def determine_packaging_type(self) -> PackagingType:
        """Inspect build metadata to decide between jar and war packaging."""

    @abstractmethod
    def resolve_build_classes_dir(self) -> Path:
        """Return the absolute path of the compiled classes directory."""

    @abstractmethod
    def resolve_build_resources_dir(self) -> Path:
        """Return the absolute path of the processed resources directory."""

    @abstractmethod
    def resolve_src_webapp_dir(self) -> Path:
        """Return the absolute path of the web application sources."""

    def describe(self) -> LayoutInfo:
        """Resolve everything this layout knows into a LayoutInfo snapshot."""
        return describe_layout(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.root_path)!r})"


def describe_layout(layout: FileSystemLayout) -> LayoutInfo:
    """Build a LayoutInfo snapshot from a layout's resolvers.

    The archive name is derived from the resolved classes directory, so it
    is random for conventions archive_name_for_classes_dir does not know.

    Args:
        layout: Any FileSystemLayout, including custom ones.

    Returns:
        The resolved values.
    """
    classes_dir = layout.resolve_build_classes_dir()
    layout_type = type(layout)
    return LayoutInfo(
        root_path=layout.root_path,
        build_tool=layout.build_tool,
        layout_class=f"{layout_type.__module__}.{layout_type.__qualname__}",
        packaging_type=layout.determine_packaging_type(),
        build_classes_dir=classes_dir,
        build_resources_dir=layout.resolve_build_resources_dir(),
        src_webapp_dir=layout.resolve_src_webapp_dir(),
        archive_name=archive_name_for_classes_dir(classes_dir),
    )
