"""Layout-related data models."""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class PackagingType(str, Enum):
    """Archive kind produced by a project."""

    JAR = "jar"
    WAR = "war"


class BuildTool(str, Enum):
    """Build tool a layout follows."""

    MAVEN = "maven"
    GRADLE = "gradle"
    CUSTOM = "custom"


class LayoutInfo(BaseModel):
    """Snapshot of what a layout resolves for one project root."""

    root_path: Path = Field(description="Absolute project root")
    build_tool: BuildTool = Field(description="Build tool convention in use")
    layout_class: str = Field(description="Fully-qualified layout class name")
    packaging_type: PackagingType = Field(description="Archive kind (jar/war)")
    build_classes_dir: Path = Field(description="Compiled classes directory")
    build_resources_dir: Path = Field(description="Processed resources directory")
    src_webapp_dir: Path = Field(description="Web application source directory")
    archive_name: str = Field(description="Archive name derived from the classes directory")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return self.model_dump(mode="json")
