"""Maven command line argument extraction.

Maven exposes the command line of the current invocation through the
``MAVEN_CMD_LINE_ARGS`` environment variable. Only flags followed by a value
are of interest here, most notably ``-f``/``--file`` which names an alternate
build file.
"""

import shlex
from collections.abc import Iterator, Mapping
from enum import Enum

from buildlayout.core.config.settings import LayoutSettings
from buildlayout.layout.base import POM_XML


class MavenArg(Enum):
    """Maven command line options, as (short form, long form)."""

    ALSO_MAKE = ("-am", "--also-make")
    ALSO_MAKE_DEPENDENTS = ("-amd", "--also-make-dependents")
    BATCH_MODE = ("-B", "--batch-mode")
    BUILDER = ("-b", "--builder")
    STRICT_CHECKSUMS = ("-C", "--strict-checksums")
    LAX_CHECKSUMS = ("-c", "--lax-checksums")
    DEFINE = ("-D", "--define")
    ERRORS = ("-e", "--errors")
    ENCRYPT_MASTER_PASSWORD = ("-emp", "--encrypt-master-password")
    ENCRYPT_PASSWORD = ("-ep", "--encrypt-password")
    FILE = ("-f", "--file")
    FAIL_AT_END = ("-fae", "--fail-at-end")
    FAIL_FAST = ("-ff", "--fail-fast")
    FAIL_NEVER = ("-fn", "--fail-never")
    GLOBAL_SETTINGS = ("-gs", "--global-settings")
    GLOBAL_TOOLCHAINS = ("-gt", "--global-toolchains")
    HELP = ("-h", "--help")
    LOG_FILE = ("-l", "--log-file")
    LEGACY_LOCAL_REPOSITORY = ("-llr", "--legacy-local-repository")
    NON_RECURSIVE = ("-N", "--non-recursive")
    NO_PLUGIN_REGISTRY = ("-npr", "--no-plugin-registry")
    NO_PLUGIN_UPDATES = ("-npu", "--no-plugin-updates")
    NO_SNAPSHOT_UPDATES = ("-nsu", "--no-snapshot-updates")
    OFFLINE = ("-o", "--offline")
    ACTIVATE_PROFILES = ("-P", "--activate-profiles")
    PROJECTS = ("-pl", "--projects")
    QUIET = ("-q", "--quiet")
    RESUME_FROM = ("-rf", "--resume-from")
    SETTINGS = ("-s", "--settings")
    THREADS = ("-T", "--threads")
    TOOLCHAINS = ("-t", "--toolchains")
    UPDATE_SNAPSHOTS = ("-U", "--update-snapshots")
    UPDATE_PLUGINS = ("-up", "--update-plugins")
    SHOW_VERSION = ("-V", "--show-version")
    VERSION = ("-v", "--version")
    DEBUG = ("-X", "--debug")

    @property
    def short(self) -> str:
        return self.value[0]

    @property
    def long(self) -> str:
        return self.value[1]

    @classmethod
    def from_token(cls, token: str) -> "MavenArg | None":
        """Look up an option by its short or long form (case-sensitive)."""
        return _ARGS_BY_TOKEN.get(token)


_ARGS_BY_TOKEN: dict[str, MavenArg] = {}
for _arg in MavenArg:
    _ARGS_BY_TOKEN[_arg.short] = _arg
    _ARGS_BY_TOKEN[_arg.long] = _arg


def _is_flag(token: str) -> bool:
    return token.startswith("-")


class MavenArgs(Mapping[MavenArg, str]):
    """Immutable, ordered mapping of Maven options to their values."""

    def __init__(self, values: dict[MavenArg, str] | None = None) -> None:
        self._values = dict(values or {})

    def __getitem__(self, arg: MavenArg) -> str:
        return self._values[arg]

    def __iter__(self) -> Iterator[MavenArg]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{arg.short}={value!r}" for arg, value in self._values.items())
        return f"MavenArgs({pairs})"


class MavenArgsParser:
    """Parse a Maven command line into option/value pairs."""

    @staticmethod
    def parse(cmd_line: str | None) -> MavenArgs:
        """Parse a Maven command line.

        Tokens are split the way a shell would. A recognized option followed
        by a token that is not itself an option binds that token as its value;
        ``--long=value`` binds as well. Unknown options are ignored, and a
        blank or unparsable command line yields an empty result. When an
        option occurs more than once the last value wins.

        Args:
            cmd_line: Raw command line, e.g. ``"-o -f custom.xml -q"``.

        Returns:
            Parsed arguments.
        """
        if not cmd_line or not cmd_line.strip():
            return MavenArgs()

        try:
            tokens = shlex.split(cmd_line)
        except ValueError:
            return MavenArgs()

        values: dict[MavenArg, str] = {}
        for index, token in enumerate(tokens):
            if token.startswith("--") and "=" in token:
                name, _, value = token.partition("=")
                arg = MavenArg.from_token(name)
                if arg is not None and value:
                    values[arg] = value
                continue

            arg = MavenArg.from_token(token)
            if arg is None:
                continue
            if index + 1 < len(tokens) and not _is_flag(tokens[index + 1]):
                values[arg] = tokens[index + 1]

        return MavenArgs(values)


def resolve_maven_build_file_name(settings: LayoutSettings | None = None) -> str:
    """Return the Maven build file name for the current invocation.

    The ``-f``/``--file`` value of the Maven command line wins; otherwise
    ``pom.xml``. The command line is re-read on every call.

    Args:
        settings: Layout settings. Read from the environment when not given.

    Returns:
        Build file name relative to the project root.
    """
    if settings is None:
        settings = LayoutSettings()

    build_file_name = POM_XML
    if settings.maven_cmd_line_args is not None:
        args = MavenArgsParser.parse(settings.maven_cmd_line_args)
        build_file_name = args.get(MavenArg.FILE, build_file_name)
    return build_file_name
