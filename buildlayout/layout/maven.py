"""Maven file system layout."""

import os
import re
import xml.etree.ElementTree as ET
from pathlib import Path

from buildlayout.core.logger.logger import get_logger
from buildlayout.layout.args import resolve_maven_build_file_name
from buildlayout.layout.base import SRC_MAIN_WEBAPP, TARGET_CLASSES, FileSystemLayout
from buildlayout.models.layout import BuildTool, PackagingType

logger = get_logger(__name__)


class MavenFileSystemLayout(FileSystemLayout):
    """Layout of a project built by Maven.

    Classes and resources are both processed into ``target/classes``; the
    packaging type comes from the ``<packaging>`` element of the build file.
    """

    build_tool = BuildTool.MAVEN

    def __init__(self, path: str | os.PathLike, build_file_name: str | None = None) -> None:
        """Initialize Maven layout.

        Args:
            path: Project root directory.
            build_file_name: Build file name relative to the root. Resolved
                from the Maven command line when not given.
        """
        super().__init__(path)
        if build_file_name is None:
            build_file_name = resolve_maven_build_file_name()
        self._build_file_name = build_file_name

    @property
    def build_file(self) -> Path:
        """Path of the Maven build file."""
        return self.root_path / self._build_file_name

    def determine_packaging_type(self) -> PackagingType:
        """Read ``<packaging>`` from the build file, defaulting to jar."""
        packaging = self._read_packaging()
        if packaging == PackagingType.WAR.value:
            return PackagingType.WAR
        return PackagingType.JAR

    def resolve_build_classes_dir(self) -> Path:
        return self.root_path.joinpath(*TARGET_CLASSES)

    def resolve_build_resources_dir(self) -> Path:
        return self.root_path.joinpath(*TARGET_CLASSES)

    def resolve_src_webapp_dir(self) -> Path:
        return self.root_path.joinpath(*SRC_MAIN_WEBAPP)

    def _read_packaging(self) -> str | None:
        """Return the trimmed ``<packaging>`` text of the project, if any."""
        try:
            content = self.build_file.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning(f"Failed to read {self.build_file}: {e}")
            return None

        try:
            root = ET.fromstring(self._clean_xml(content))
        except ET.ParseError as e:
            logger.warning(f"Failed to parse {self.build_file}: {e}")
            return None

        namespace = self._extract_namespace(root)
        element = root.find(f"{namespace}packaging")
        if element is None or not element.text:
            return None
        return element.text.strip()

    @staticmethod
    def _clean_xml(content: str) -> str:
        """Strip the XML declaration and comments before parsing."""
        content = re.sub(r"<\?xml[^>]*\?>", "", content)
        content = re.sub(r"<!--.*?-->", "", content, flags=re.DOTALL)
        return content.strip()

    @staticmethod
    def _extract_namespace(root: ET.Element) -> str:
        """Return the root namespace with its trailing brace, or ''."""
        if "}" in root.tag:
            return root.tag.split("}")[0] + "}"
        return ""
