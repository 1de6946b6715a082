"""Gradle file system layout."""

import re
from pathlib import Path

from buildlayout.core.logger.logger import get_logger
from buildlayout.layout.base import (
    BUILD_CLASSES_JAVA_MAIN,
    BUILD_CLASSES_MAIN,
    BUILD_GRADLE,
    BUILD_GRADLE_KTS,
    BUILD_RESOURCES_MAIN,
    SRC_MAIN_WEBAPP,
    FileSystemLayout,
)
from buildlayout.models.layout import BuildTool, PackagingType

logger = get_logger(__name__)

# apply plugin: 'war' / apply(plugin = "war") / id 'war' / id("war")
WAR_PLUGIN_PATTERNS = [
    re.compile(r"""apply\s*\(?\s*plugin\s*[:=]\s*['"]war['"]"""),
    re.compile(r"""\bid\s*\(?\s*['"]war['"]"""),
]

PLUGINS_BLOCK = re.compile(r"\bplugins\s*\{([^}]*)\}", re.DOTALL)
BARE_WAR = re.compile(r"^\s*`?war`?\s*$", re.MULTILINE)


class GradleFileSystemLayout(FileSystemLayout):
    """Layout of a project built by Gradle.

    Gradle 4+ compiles Java classes into ``build/classes/java/main``; older
    versions use ``build/classes/main``. Resources always go to
    ``build/resources/main``.
    """

    build_tool = BuildTool.GRADLE

    def determine_packaging_type(self) -> PackagingType:
        """Return war when the build script applies the war plugin."""
        content = self._read_build_script()
        if content is None:
            return PackagingType.JAR

        content = self._remove_comments(content)
        if any(pattern.search(content) for pattern in WAR_PLUGIN_PATTERNS):
            return PackagingType.WAR
        for block in PLUGINS_BLOCK.findall(content):
            if BARE_WAR.search(block):
                return PackagingType.WAR
        return PackagingType.JAR

    def resolve_build_classes_dir(self) -> Path:
        java_main = self.root_path.joinpath(*BUILD_CLASSES_JAVA_MAIN)
        if java_main.exists():
            return java_main
        return self.root_path.joinpath(*BUILD_CLASSES_MAIN)

    def resolve_build_resources_dir(self) -> Path:
        return self.root_path.joinpath(*BUILD_RESOURCES_MAIN)

    def resolve_src_webapp_dir(self) -> Path:
        return self.root_path.joinpath(*SRC_MAIN_WEBAPP)

    def _read_build_script(self) -> str | None:
        """Read build.gradle, or build.gradle.kts when only that exists."""
        for name in (BUILD_GRADLE, BUILD_GRADLE_KTS):
            script = self.root_path / name
            if not script.exists():
                continue
            try:
                return script.read_text(encoding="utf-8")
            except OSError as e:
                logger.warning(f"Failed to read {script}: {e}")
                return None
        return None

    @staticmethod
    def _remove_comments(content: str) -> str:
        """Remove // and /* */ comments from a Gradle script."""
        content = re.sub(r"//.*$", "", content, flags=re.MULTILINE)
        content = re.sub(r"/\*.*?\*/", "", content, flags=re.DOTALL)
        return content
