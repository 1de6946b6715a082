"""Main CLI entry point for buildlayout."""

import json
from pathlib import Path

import click

from buildlayout import __version__
from buildlayout.cli.display import show_error, show_layout
from buildlayout.core.config.settings import Settings
from buildlayout.core.exceptions.errors import BuildLayoutError
from buildlayout.core.logger.logger import setup_logging
from buildlayout.layout.args import resolve_maven_build_file_name
from buildlayout.layout.base import archive_name_for_classes_dir
from buildlayout.layout.factory import create_layout


def _is_verbose(ctx: click.Context) -> bool:
    return bool(ctx.obj and ctx.obj.get("verbose"))


@click.group()
@click.version_option(__version__, "--version", prog_name="buildlayout")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """buildlayout - locate Maven and Gradle build output.

    Detects the build tool of a project and reports where compiled classes,
    resources and web application sources live.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@main.command()
@click.option("--path", "-p", type=click.Path(exists=True, file_okay=False), help="Project root (default: working directory)")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False), help="YAML configuration file")
@click.option("--format", "-f", "output_format", type=click.Choice(["text", "json"]), default="text", help="Output format")
@click.pass_context
def detect(ctx: click.Context, path: str | None, config_path: str | None, output_format: str) -> None:
    """Detect the build tool layout of a project.

    Examples:
        buildlayout detect
        buildlayout detect --path /path/to/project -f json
        buildlayout -v detect -c buildlayout.yaml
    """
    try:
        settings = Settings.load(Path(config_path) if config_path else None)
        setup_logging(settings.logging, verbose=_is_verbose(ctx))
        layout = create_layout(path, settings=settings.layout)
        info = layout.describe()
    except BuildLayoutError as e:
        show_error("Layout Resolution Failed", str(e))
        raise SystemExit(1) from e

    if output_format == "json":
        click.echo(json.dumps(info.to_dict(), indent=2))
    else:
        show_layout(info)


@main.command("archive-name")
@click.argument("classes_dir", type=click.Path())
def archive_name(classes_dir: str) -> None:
    """Print the archive name derived from a classes directory.

    Unrecognized directory conventions get a random name.
    """
    click.echo(archive_name_for_classes_dir(classes_dir))


@main.command("build-file")
@click.pass_context
def build_file(ctx: click.Context) -> None:
    """Print the effective Maven build file name."""
    setup_logging(verbose=_is_verbose(ctx))
    click.echo(resolve_maven_build_file_name())


if __name__ == "__main__":
    main()
