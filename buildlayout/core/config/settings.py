"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from buildlayout.core.config.loader import ConfigLoader
from buildlayout.core.exceptions.errors import ConfigurationError

MAVEN_CMD_LINE_ARGS = "MAVEN_CMD_LINE_ARGS"


class LayoutSettings(BaseSettings):
    """Inputs consulted when resolving a file system layout."""

    model_config = SettingsConfigDict(
        env_prefix="BUILDLAYOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    layout_class: str | None = Field(
        default=None,
        description="Fully-qualified layout class used instead of auto-detection",
    )
    maven_cmd_line_args: str | None = Field(
        default=None,
        validation_alias=AliasChoices("maven_cmd_line_args", MAVEN_CMD_LINE_ARGS),
        description="Command line of the last Maven invocation",
    )
    working_dir: Path | None = Field(
        default=None,
        description="Working directory used when no project root is given",
    )

    @field_validator("working_dir", mode="before")
    @classmethod
    def validate_working_dir(cls, v: str | Path | None) -> Path | None:
        """Validate and convert working_dir to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="BUILDLAYOUT_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="WARNING",
        description="Log level",
    )
    format: str = Field(
        default="[%(name)s] %(message)s",
        description="Log format string",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    use_rich: bool = Field(
        default=True,
        description="Use Rich console for output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: str | None) -> Path | None:
        """Validate and convert file to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="BUILDLAYOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    layout: LayoutSettings = Field(default_factory=LayoutSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file.

        Values from the file take precedence over environment variables.

        Args:
            path: Path to YAML configuration file.

        Returns:
            Settings instance with values from YAML.

        Raises:
            ConfigurationError: If the file cannot be loaded or holds invalid values.
        """
        loader = ConfigLoader(path)
        loader.load()

        try:
            return cls(
                layout=LayoutSettings(**loader.get_section("layout")),
                logging=LoggingSettings(**loader.get_section("logging")),
            )
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid settings in configuration file: {path}",
                config_key=str(path),
                details={"error": str(e)},
            ) from e

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        """Load settings from an optional YAML file, then the environment.

        Args:
            path: Optional YAML configuration file.

        Returns:
            Settings instance.
        """
        if path is not None:
            return cls.from_yaml(path)
        return cls()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings singleton.
    """
    return Settings.load()
