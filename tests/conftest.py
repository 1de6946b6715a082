"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

LAYOUT_ENV_VARS = (
    "BUILDLAYOUT_LAYOUT_CLASS",
    "BUILDLAYOUT_WORKING_DIR",
    "MAVEN_CMD_LINE_ARGS",
)


@pytest.fixture(autouse=True)
def clean_layout_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from layout settings in the process environment.

    Also moves into an empty directory so no stray .env file is picked up.
    """
    for name in LAYOUT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    sandbox = tmp_path / "cwd"
    sandbox.mkdir()
    monkeypatch.chdir(sandbox)


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create an empty project directory.

    Returns:
        Path to the directory.
    """
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def maven_project(temp_dir: Path) -> Path:
    """Create a minimal Maven project.

    Returns:
        Path to the project root.
    """
    (temp_dir / "pom.xml").write_text(
        """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
    <modelVersion>4.0.0</modelVersion>
    <groupId>com.example</groupId>
    <artifactId>demo</artifactId>
    <version>1.0.0</version>
</project>
"""
    )
    return temp_dir


@pytest.fixture
def gradle_project(temp_dir: Path) -> Path:
    """Create a minimal Gradle project.

    Returns:
        Path to the project root.
    """
    (temp_dir / "build.gradle").write_text("apply plugin: 'java'\n")
    return temp_dir
