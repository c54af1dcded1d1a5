"""Rich terminal summary — changed-file table and run counts."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from glyphscrub.outcomes.models import OutcomeKind, RunResult

_KIND_STYLE = {
    OutcomeKind.CLEANED: "green",
    OutcomeKind.WOULD_CHANGE: "cyan",
    OutcomeKind.SKIPPED: "yellow",
    OutcomeKind.ERROR: "bold red",
}


def _relative(result: RunResult, path) -> str:
    try:
        return path.relative_to(result.root).as_posix() or "."
    except ValueError:
        return str(path)


def render(result: RunResult, *, show_summary: bool = True, console: Console | None = None) -> None:
    """Print the run's outcomes and summary to the terminal using Rich."""
    console = console or Console(stderr=True)

    touched = [
        o for o in result.outcomes
        if o.kind is not OutcomeKind.CLEANED or o.stats is None or o.stats.total
    ]
    if touched:
        console.print()
        table = Table(
            title="glyphscrub" + (" (dry run)" if result.dry_run else ""),
            title_style="bold",
            border_style="dim",
        )
        table.add_column("Outcome", justify="center")
        table.add_column("Path", style="magenta")
        table.add_column("Removed", justify="right")
        table.add_column("Homoglyphs", justify="right")
        table.add_column("EOL", justify="right")
        table.add_column("Detail", style="dim")

        for o in touched:
            style = _KIND_STYLE.get(o.kind, "")
            stats = o.stats
            table.add_row(
                f"[{style}]{o.kind.value}[/{style}]",
                escape(_relative(result, o.path)),
                str(stats.removed) if stats else "-",
                str(stats.homoglyphs) if stats else "-",
                str(stats.line_endings) if stats else "-",
                escape(o.reason or ""),
            )
        console.print(table)

    if show_summary:
        _print_summary(console, result)


def _print_summary(console: Console, result: RunResult) -> None:
    console.print()
    if result.dry_run:
        console.print(f"[dim]Would change:[/dim]  {len(result.would_change)}")
    else:
        console.print(f"[dim]Cleaned:[/dim]       {len(result.cleaned)}")
    console.print(f"[dim]Skipped:[/dim]       {len(result.skipped)}")
    console.print(f"[dim]Errors:[/dim]        {len(result.errors)}")
    console.print(f"[dim]Ignored:[/dim]       {len(result.ignored)}")
    console.print(f"[dim]Binary:[/dim]        {len(result.binary)}")
    console.print(f"[dim]Chars removed:[/dim] {result.chars_removed}")
    console.print(f"[dim]Homoglyphs:[/dim]    {result.homoglyphs_replaced}")
    console.print(f"[dim]Duration:[/dim]      {result.duration_ms:.0f}ms")
