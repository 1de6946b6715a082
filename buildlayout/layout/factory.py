"""File system layout resolution.

Decides which layout applies to a project root:

1. the ``layout_class`` override, when configured;
2. a Maven build file (``pom.xml`` or the ``-f`` value of the Maven command line);
3. ``build.gradle``.

A root matching none of these is an error.
"""

import importlib
import os
from pathlib import Path

from buildlayout.core.config.settings import LayoutSettings
from buildlayout.core.exceptions.errors import ConfigurationError, LayoutResolutionError
from buildlayout.core.logger.logger import get_logger
from buildlayout.layout.args import resolve_maven_build_file_name
from buildlayout.layout.base import BUILD_GRADLE, FileSystemLayout
from buildlayout.layout.gradle import GradleFileSystemLayout
from buildlayout.layout.maven import MavenFileSystemLayout

logger = get_logger(__name__)

INVALID_LAYOUT = "Invalid file system layout provided: {}"


def load_layout_class(name: str) -> object:
    """Import the object named by ``package.module.Name`` or ``package.module:Name``.

    Args:
        name: Fully-qualified name.

    Returns:
        The named object.

    Raises:
        ImportError: If the module or attribute cannot be found.
    """
    if ":" in name:
        module_name, _, qualname = name.partition(":")
    else:
        module_name, _, qualname = name.rpartition(".")
    if not module_name or not qualname:
        raise ImportError(f"'{name}' is not a fully-qualified class name")

    target: object = importlib.import_module(module_name)
    for attribute in qualname.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as e:
            raise ImportError(f"No class '{qualname}' in module '{module_name}'") from e
    return target


class LayoutFactory:
    """Creates the FileSystemLayout for a project root."""

    def __init__(self, settings: LayoutSettings | None = None) -> None:
        """Initialize the factory.

        Args:
            settings: Layout settings. When not given, the environment is
                read again on every create call.
        """
        self._settings = settings

    @property
    def settings(self) -> LayoutSettings:
        if self._settings is not None:
            return self._settings
        return LayoutSettings()

    def create_from_working_dir(self) -> FileSystemLayout:
        """Create the layout for the configured or current working directory.

        Raises:
            ConfigurationError: If no working directory is available.
            LayoutResolutionError: If no layout applies.
        """
        settings = self.settings
        working_dir = settings.working_dir
        if working_dir is None:
            try:
                working_dir = Path.cwd()
            except OSError as e:
                raise ConfigurationError(
                    "Working directory is not available",
                    config_key="working_dir",
                    details={"error": str(e)},
                ) from e
        return self._create(str(working_dir), settings)

    def create(self, root: str | os.PathLike) -> FileSystemLayout:
        """Create the layout for an explicit project root.

        Args:
            root: Project root directory.

        Returns:
            The override layout, or the Maven or Gradle layout.

        Raises:
            LayoutResolutionError: If the override cannot be instantiated or
                no build tool evidence is found under root.
        """
        return self._create(os.fspath(root), self.settings)

    def _create(self, root: str, settings: LayoutSettings) -> FileSystemLayout:
        layout = self._create_override(root, settings.layout_class)
        if layout is not None:
            return layout

        maven_build_file = resolve_maven_build_file_name(settings)
        if Path(root, maven_build_file).exists():
            logger.debug(f"Found {maven_build_file} in {root}, using Maven layout")
            return MavenFileSystemLayout(root, build_file_name=maven_build_file)
        if Path(root, BUILD_GRADLE).exists():
            logger.debug(f"Found {BUILD_GRADLE} in {root}, using Gradle layout")
            return GradleFileSystemLayout(root)

        raise LayoutResolutionError(
            f"Cannot identify file system layout for given path: {root}",
            root=root,
        )

    def _create_override(self, root: str, layout_class: str | None) -> FileSystemLayout | None:
        """Instantiate the configured override layout.

        Returns None when there is no usable override, in which case the
        caller falls back to build tool evidence.
        """
        if layout_class is None:
            return None

        class_name = layout_class.strip()
        if not class_name:
            logger.warning(INVALID_LAYOUT.format("Implementation class name is empty."))
            return None

        try:
            impl = load_layout_class(class_name)
            if not (isinstance(impl, type) and issubclass(impl, FileSystemLayout)):
                logger.warning(
                    INVALID_LAYOUT.format(
                        f"{class_name} does not subclass "
                        f"{FileSystemLayout.__module__}.{FileSystemLayout.__qualname__}"
                    )
                )
                return None
            layout = impl(root)
        except Exception as e:
            msg = f"Unable to instantiate layout class ({class_name}) due to: {e}"
            logger.warning(INVALID_LAYOUT.format(msg))
            logger.debug(INVALID_LAYOUT.format(msg), exc_info=True)
            raise LayoutResolutionError(
                f"Cannot identify file system layout: {msg}",
                root=root,
                layout_class=class_name,
            ) from e

        logger.debug(f"Using layout {class_name} for {root}")
        return layout


def create_layout(
    root: str | os.PathLike | None = None,
    settings: LayoutSettings | None = None,
) -> FileSystemLayout:
    """Convenience function to resolve the layout of a project.

    Args:
        root: Project root. The working directory is used when not given.
        settings: Layout settings. Read from the environment when not given.

    Returns:
        The resolved FileSystemLayout.
    """
    factory = LayoutFactory(settings)
    if root is None:
        return factory.create_from_working_dir()
    return factory.create(root)
