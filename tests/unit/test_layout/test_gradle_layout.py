"""Unit tests for the Gradle file system layout."""

from pathlib import Path

import pytest

from buildlayout.layout.gradle import GradleFileSystemLayout
from buildlayout.models.layout import BuildTool, PackagingType


class TestGradleDirectories:
    """Tests for Gradle directory resolution."""

    def test_legacy_classes_dir(self, gradle_project: Path) -> None:
        """Test build/classes/main when the Gradle 4+ directory is absent."""
        layout = GradleFileSystemLayout(str(gradle_project))

        assert layout.resolve_build_classes_dir() == gradle_project.resolve() / "build" / "classes" / "main"

    def test_gradle4_classes_dir(self, gradle_project: Path) -> None:
        """Test build/classes/java/main is preferred when it exists."""
        java_main = gradle_project / "build" / "classes" / "java" / "main"
        java_main.mkdir(parents=True)

        layout = GradleFileSystemLayout(gradle_project)

        assert layout.resolve_build_classes_dir() == java_main.resolve()

    def test_classes_dir_follows_file_system(self, gradle_project: Path) -> None:
        """Test resolution reflects the file system at call time."""
        layout = GradleFileSystemLayout(gradle_project)
        before = layout.resolve_build_classes_dir()

        (gradle_project / "build" / "classes" / "java" / "main").mkdir(parents=True)

        assert before.parts[-2:] == ("classes", "main")
        assert layout.resolve_build_classes_dir().parts[-3:] == ("classes", "java", "main")

    def test_resources_and_webapp(self, gradle_project: Path) -> None:
        """Test resources and web app directories."""
        layout = GradleFileSystemLayout(gradle_project)
        root = gradle_project.resolve()

        assert layout.resolve_build_resources_dir() == root / "build" / "resources" / "main"
        assert layout.resolve_src_webapp_dir() == root / "src" / "main" / "webapp"

    def test_build_tool(self, gradle_project: Path) -> None:
        """Test the build tool marker."""
        assert GradleFileSystemLayout(gradle_project).build_tool is BuildTool.GRADLE


class TestGradlePackaging:
    """Tests for Gradle packaging type detection."""

    def test_java_plugin_is_jar(self, gradle_project: Path) -> None:
        """Test a plain Java build is a jar."""
        assert GradleFileSystemLayout(gradle_project).determine_packaging_type() is PackagingType.JAR

    @pytest.mark.parametrize(
        "script",
        [
            "apply plugin: 'war'\n",
            'apply plugin: "war"\n',
            "apply(plugin = \"war\")\n",
            "plugins {\n    id 'war'\n}\n",
            "plugins {\n    id(\"war\")\n}\n",
            "plugins {\n    java\n    war\n}\n",
        ],
    )
    def test_war_plugin(self, temp_dir: Path, script: str) -> None:
        """Test the war plugin in its common spellings."""
        (temp_dir / "build.gradle").write_text(script)

        assert GradleFileSystemLayout(temp_dir).determine_packaging_type() is PackagingType.WAR

    def test_commented_war_plugin(self, temp_dir: Path) -> None:
        """Test commented-out plugins are ignored."""
        (temp_dir / "build.gradle").write_text(
            "apply plugin: 'java'\n// apply plugin: 'war'\n/* id 'war' */\n"
        )

        assert GradleFileSystemLayout(temp_dir).determine_packaging_type() is PackagingType.JAR

    def test_war_task_configuration_is_not_plugin(self, temp_dir: Path) -> None:
        """Test a war { } block outside plugins does not count."""
        (temp_dir / "build.gradle").write_text("apply plugin: 'java'\nwar {\n    archiveName 'x.war'\n}\n")

        assert GradleFileSystemLayout(temp_dir).determine_packaging_type() is PackagingType.JAR

    def test_kotlin_script(self, temp_dir: Path) -> None:
        """Test build.gradle.kts is read when build.gradle is absent."""
        (temp_dir / "build.gradle.kts").write_text("plugins {\n    war\n}\n")

        assert GradleFileSystemLayout(temp_dir).determine_packaging_type() is PackagingType.WAR

    def test_missing_script(self, temp_dir: Path) -> None:
        """Test a root without build scripts is a jar."""
        assert GradleFileSystemLayout(temp_dir).determine_packaging_type() is PackagingType.JAR


class TestGradleDescribe:
    """Tests for the layout snapshot."""

    def test_describe_gradle4(self, temp_dir: Path) -> None:
        """Test a Gradle 4+ classes dir yields a random archive name."""
        project = temp_dir / "api"
        (project / "build" / "classes" / "java" / "main").mkdir(parents=True)
        (project / "build.gradle").write_text("apply plugin: 'java'\n")

        info = GradleFileSystemLayout(project).describe()

        assert info.build_tool is BuildTool.GRADLE
        assert info.archive_name != "api.jar"
        assert info.archive_name.endswith(".jar")

    def test_describe_legacy(self, gradle_project: Path) -> None:
        """Test the legacy classes dir yields the module name."""
        info = GradleFileSystemLayout(gradle_project).describe()

        assert info.archive_name == f"{gradle_project.name}.jar"
