"""glyphscrub CLI — Typer application with the clean command."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from glyphscrub import __version__

app = typer.Typer(
    name="glyphscrub",
    help="Strip invisible and look-alike Unicode characters from text files.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


# ── clean ─────────────────────────────────────────────────────────────────────


@app.command()
def clean(
    root: Path = typer.Argument(..., help="Directory to clean"),
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Report what would be cleaned without writing"),
    force: bool = typer.Option(False, "--force", help="Include hidden and ignored paths"),
    crlf: bool = typer.Option(False, "--crlf", help="Convert line endings to CRLF (wins over --lf)"),
    lf: bool = typer.Option(False, "--lf", help="Convert line endings to LF"),
    preserve_timestamp: bool = typer.Option(
        False, "--preserve-timestamp", "-p", help="Restore each file's modification time after writing",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
) -> None:
    """Walk ROOT and clean every admitted text file in place."""
    from glyphscrub.config.loader import build_options, build_output_config
    from glyphscrub.outcomes.errors import RootUnavailableError
    from glyphscrub.output import json_report, terminal
    from glyphscrub.output.reporter import Reporter
    from glyphscrub.scanner.walker import Walker

    try:
        out_cfg = build_output_config(format, output)
    except ValueError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    options = build_options(
        root,
        dry_run=dry_run,
        force=force,
        crlf=crlf,
        lf=lf,
        preserve_timestamp=preserve_timestamp,
    )

    if crlf and lf:
        console.print("[yellow]⚠[/yellow]  Both --crlf and --lf given; using CRLF.")

    reporter = Reporter(console, verbose=verbose)
    if verbose:
        console.print(f"[dim]Root: {escape(str(options.root))}[/dim]")
        console.print(f"[dim]Dry run: {options.dry_run}[/dim]")
        console.print(f"[dim]Line endings: {options.line_ending.value}[/dim]")

    try:
        result = Walker(reporter=reporter).run(options)
    except RootUnavailableError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    # --- Output ---
    report_text: Optional[str] = None
    if out_cfg.format == "terminal":
        terminal.render(result, show_summary=out_cfg.show_summary, console=console)
    else:
        report_text = json_report.render(result)
        print(report_text)

    if out_cfg.output:
        out_cfg.output.write_text(report_text or json_report.render(result), encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {escape(str(out_cfg.output))}[/dim]")

    # Per-file errors are reported, never fatal.
    raise typer.Exit(code=0)


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"glyphscrub {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """glyphscrub — strip invisible and confusable Unicode from text trees."""
