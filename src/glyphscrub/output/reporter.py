"""Line-at-a-time console reporting used during the walk."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape

from glyphscrub.outcomes.models import FileOutcome, OutcomeKind


class Reporter:
    """Thin wrapper over a stderr Rich console with a verbose switch."""

    def __init__(self, console: Optional[Console] = None, *, verbose: bool = False) -> None:
        self.console = console or Console(stderr=True)
        self.verbose_enabled = verbose

    def verbose(self, msg: str) -> None:
        if self.verbose_enabled:
            self.console.print(f"[dim]  → {escape(msg)}[/dim]")

    def info(self, msg: str) -> None:
        self.console.print(f"[cyan]ℹ[/cyan] {escape(msg)}")

    def success(self, msg: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(msg)}")

    def warning(self, msg: str) -> None:
        self.console.print(f"[yellow]⚠[/yellow]  {escape(msg)}")

    def error(self, msg: str) -> None:
        self.console.print(f"[bold red]✗ Error:[/bold red] {escape(msg)}")

    def outcome(self, outcome: FileOutcome) -> None:
        """Report a single outcome as soon as it is produced."""
        path = str(outcome.path)
        if outcome.kind is OutcomeKind.CLEANED:
            self.success(f"Cleaned {path}")
        elif outcome.kind is OutcomeKind.WOULD_CHANGE:
            self.info(f"Would clean {path}")
        elif outcome.kind is OutcomeKind.SKIPPED:
            what = "directory" if outcome.is_directory else "file"
            self.warning(f"Skipped {what} {path}: {outcome.reason}")
        else:
            kind = outcome.error_kind.value if outcome.error_kind else "error"
            self.error(f"{path} [{kind}]: {outcome.reason}")
