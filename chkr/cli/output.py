"""Rich console output formatting."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from chkr.models.checksum import ManifestItem, Mismatch, Outcome, RecordParseError
from chkr.verify.status import Status, VerificationSummary


class RichOutput:
    """Rich console output formatting."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize with Rich console.

        Args:
            console: Rich Console instance.
        """
        self.console = console or Console()

    def print_progress(self, current: int, total: int, item: ManifestItem) -> None:
        """Display one manifest element with its position in the run.

        Args:
            current: 1-based element number.
            total: Total elements.
            item: Checksum result or record parse error.
        """
        pct = (current / total * 100) if total > 0 else 0
        progress = f"({current}/{total} {pct:.2f}%)"

        if isinstance(item, RecordParseError):
            self.console.print(
                f"{progress} [red]Error:[/red] {escape(str(item))}", highlight=False
            )
            return

        file = escape(item.file)
        if item.error is not None:
            self.console.print(
                f"{progress} {file}: [red]Error:[/red] {escape(item.error.message)}",
                highlight=False,
            )
        elif isinstance(item.outcome, Mismatch):
            self.console.print(
                f"{progress} {file}: [yellow]{escape(str(item.outcome))}[/yellow]",
                highlight=False,
            )
        else:
            self.console.print(f"{progress} {file}: [green]Match[/green]", highlight=False)

    def print_file_result(self, path: Path, outcome: Outcome) -> None:
        """Display the result of single-file verification.

        Args:
            path: Verified file.
            outcome: Match or Mismatch.
        """
        name = escape(str(path))
        if isinstance(outcome, Mismatch):
            self.console.print(
                f"{name} checksum mismatch: [yellow]{escape(str(outcome))}[/yellow]",
                highlight=False,
            )
        else:
            self.console.print(f"{name} checksum [green]matched[/green]", highlight=False)

    def print_summary(self, summary: VerificationSummary) -> None:
        """Display the totals of a manifest run.

        Args:
            summary: Folded run summary.
        """
        status_color = {
            Status.OK: "green",
            Status.MISMATCH: "yellow",
            Status.ERROR: "red",
        }[summary.status]

        panel_content = f"""
[bold]Verified:[/bold] {summary.total}
[bold]Matched:[/bold] [green]{summary.matched}[/green]
[bold]Mismatched:[/bold] [yellow]{summary.mismatched}[/yellow]
[bold]Unreadable:[/bold] [red]{summary.file_errors}[/red]
[bold]Unparseable lines:[/bold] [red]{summary.parse_errors}[/red]

[bold]Status:[/bold] [{status_color}]{summary.status.name}[/{status_color}]
"""
        self.console.print(Panel(panel_content, title="Verification Complete"))

    def print_error(self, message: str, details: str | None = None) -> None:
        """Display error message.

        Args:
            message: Error message.
            details: Optional additional details.
        """
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")
        if details:
            self.console.print(f"[dim]{escape(details)}[/dim]")

    def print_warning(self, message: str) -> None:
        """Display warning message.

        Args:
            message: Warning message.
        """
        self.console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")
