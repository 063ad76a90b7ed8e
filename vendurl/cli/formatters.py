"""
Functions for formatting and displaying data in the console using Rich.
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from vendurl.models.config import VendorConfig
from vendurl.models.stats import VendorStats
from vendurl.utils.formatting import format_duration, format_size


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "ConfigurationError": [
            '• Add a "vendurl" object with a "packages" mapping to package.json.',
            "• Run vendurl from the directory that holds package.json.",
        ],
        "SpecifierResolutionError": [
            '• Check that "provider" is an absolute URL such as https://esm.sh/.',
            "• Use a full URL as the specifier to bypass the provider.",
        ],
        "WriteError": [
            '• Check the permissions of the "destination" directory.',
            "• Make sure the disk is not full.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -v for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(Text("\n".join(suggestions)))

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_config_table(console: Console, config: VendorConfig, destination: str):
    """Displays the effective manifest settings."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()

    table.add_row("Destination:", escape(destination))
    table.add_row("Provider:", escape(config.provider))
    table.add_row("Bundle:", "✓ Enabled" if config.bundle else "✗ Disabled")
    table.add_row("Packages:", str(len(config.packages)))

    console.print(table)


def print_summary_panel(console: Console, stats: VendorStats, duration_s: float):
    """Displays the final summary of a vendoring run."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column(justify="left")

    table.add_row("✓ Vendored:", f"[bold green]{stats.files_vendored}[/bold green]")
    if stats.files_failed > 0:
        failed = ", ".join(escape(name) for name in stats.failed_files)
        table.add_row(
            "✗ Failed:", f"[bold red]{stats.files_failed}[/bold red] ({failed})"
        )
    table.add_row("Written:", format_size(stats.bytes_written))
    table.add_row("Duration:", format_duration(duration_s))

    border = "green" if stats.succeeded else "red"
    console.print(Panel(table, title="Summary", border_style=border, expand=False))
