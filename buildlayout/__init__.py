"""Build layout detection for Maven and Gradle projects."""

__version__ = "0.1.0"
