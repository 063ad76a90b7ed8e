"""
Console reporting for a vendoring run.

All output goes through a Reporter built from the run's options, so
color and verbosity are decided once at startup.
"""

from rich.console import Console
from rich.markup import escape

from vendurl.models.options import RunOptions


class Reporter:
    """Prints status, detail and error messages with optional color."""

    def __init__(
        self,
        options: RunOptions,
        console: Console | None = None,
        err_console: Console | None = None,
        force_terminal: bool | None = None,
    ):
        self.options = options
        self.force_terminal = force_terminal
        self.console = console or self._make_console(stderr=False)
        self.err_console = err_console or self._make_console(stderr=True)

    def _make_console(self, stderr: bool) -> Console:
        return Console(
            stderr=stderr,
            force_terminal=self.force_terminal,
            color_system="auto" if self.options.color else None,
            no_color=not self.options.color,
            highlight=False,
            soft_wrap=True,
        )

    def info(self, message: str) -> None:
        self.console.print(f"[blue]{escape(message)}[/blue]")

    def success(self, message: str) -> None:
        self.console.print(f"[green]{escape(message)}[/green]")

    def detail(self, message: str) -> None:
        """Prints a grey progress line, only in verbose mode."""
        if self.options.verbose:
            self.console.print(f"[grey50]{escape(message)}[/grey50]")

    def error(self, message: str) -> None:
        self.err_console.print(f"[red]{escape(message)}[/red]")

    def plain(self, message: str) -> None:
        self.console.print(escape(message))

    def confirm(self, question: str) -> bool:
        """Asks a yes/no question; only an answer of 'y' counts as yes."""
        answer = self.console.input(
            f"[yellow]{escape(question)}[/yellow] {escape('[y/N]')} "
        )
        return answer.strip().lower() == "y"
