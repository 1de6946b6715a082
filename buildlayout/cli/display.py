"""Display components for CLI using Rich."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from buildlayout.models.layout import LayoutInfo

console = Console()


def show_error(title: str, message: str) -> None:
    """Display an error message."""
    console.print()
    console.print(
        Panel(
            f"[bold red]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="red",
        )
    )


def create_layout_table(info: LayoutInfo) -> Table:
    """Build a two-column table describing a resolved layout."""
    table = Table(title="File System Layout", show_header=False, border_style="cyan")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Root", escape(str(info.root_path)))
    table.add_row("Build tool", info.build_tool.value)
    table.add_row("Layout class", escape(info.layout_class))
    table.add_row("Packaging", info.packaging_type.value)
    table.add_row("Classes dir", escape(str(info.build_classes_dir)))
    table.add_row("Resources dir", escape(str(info.build_resources_dir)))
    table.add_row("Web app dir", escape(str(info.src_webapp_dir)))
    table.add_row("Archive name", escape(info.archive_name))
    return table


def show_layout(info: LayoutInfo) -> None:
    """Display a resolved layout."""
    console.print()
    console.print(create_layout_table(info))
