#!/usr/bin/env python3
"""
Command-line interface for the combat log DPS parser.
"""

import csv
import json
import sys
import click
import logging
import yaml
from pathlib import Path
from datetime import datetime
from rich.console import Console
from rich.logging import RichHandler

from .analyzer.displays import DisplayBuilder
from .analyzer.roster import build_performance_rows
from .config.loader import load_and_apply_config
from .config.settings import get_settings
from .processing.runner import run_parse


# Set up rich consoles: output on stdout, logs on stderr
console = Console()
log_console = Console(stderr=True)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    handlers=[RichHandler(console=log_console, rich_tracebacks=True)],
)
logger = logging.getLogger(__name__)

ENTRY_FIELDS = ["rank", "player_name", "dps", "total_damage", "duration"]


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--config", "config_path", type=click.Path(), help="Custom game data YAML file")
def cli(verbose, config_path):
    """Guild DPS Parser - combat log leaderboards"""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Load custom configuration if available
    load_and_apply_config(config_path)


def _read_log(log_path: Path) -> str:
    return log_path.read_text(encoding="utf-8", errors="ignore")


@cli.command()
@click.argument("log_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", help="Output file for results")
@click.option("--format", type=click.Choice(["json", "csv", "summary"]), default="summary")
@click.option(
    "--threads",
    default=None,
    type=int,
    help="Number of threads for parallel processing (default: CPU count)",
)
@click.option(
    "--no-parallel",
    is_flag=True,
    help="Disable parallel processing (force sequential)",
)
@click.option("--target", help="Target name to use when none is detected in the log")
def parse(log_file, output, format, threads, no_parallel, target):
    """Parse a combat log file and rank players by DPS."""
    log_path = Path(log_file)
    settings = get_settings()

    if format == "summary":
        console.print(f"[bold green]Parsing combat log:[/bold green] {log_path.name}")
        console.print(f"[cyan]File size:[/cyan] {log_path.stat().st_size / 1024:.1f} KB")

    start_time = datetime.now()
    run = run_parse(
        _read_log(log_path),
        settings.parser,
        no_parallel=no_parallel,
        max_workers=threads,
    )
    processing_time = (datetime.now() - start_time).total_seconds()
    run.target = run.target or target

    if format == "summary":
        display_summary(run, processing_time)
    elif format == "json":
        export_json(run, output)
    elif format == "csv":
        export_csv(run, output)


def display_summary(run, processing_time):
    """Display the leaderboard and parse statistics."""
    console.print("\n[bold cyan]═══ Parsing Complete ═══[/bold cyan]")
    if run.parallel:
        console.print("[cyan]Used parallel processing[/cyan]")

    console.print(DisplayBuilder.create_stats_table(run.stats, processing_time))

    if not run.entries:
        console.print("[yellow]No DamageDone entries parsed.[/yellow]")
        return

    console.print(DisplayBuilder.create_rankings_table(run.entries, run.target))


def export_json(run, output_file):
    """Export rankings to JSON (stdout when no output file is given)."""
    data = {
        "target": run.target,
        "entries": [entry.to_dict() for entry in run.entries],
        "stats": run.stats,
    }
    text = json.dumps(data, indent=2, default=str)

    if not output_file:
        click.echo(text)
        return

    with open(output_file, "w", encoding="utf-8") as f:
        f.write(text)
    console.print(f"[green]Exported {len(run.entries)} entries to {output_file}[/green]")


def export_csv(run, output_file):
    """Export rankings to CSV (stdout when no output file is given)."""
    if not output_file:
        writer = csv.DictWriter(sys.stdout, fieldnames=ENTRY_FIELDS)
        writer.writeheader()
        writer.writerows(entry.to_dict() for entry in run.entries)
        return

    with open(output_file, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=ENTRY_FIELDS)
        writer.writeheader()
        writer.writerows(entry.to_dict() for entry in run.entries)
    console.print(f"[green]Exported {len(run.entries)} entries to {output_file}[/green]")


def load_roster(roster_path: Path) -> dict:
    """
    Load a roster YAML file.

    Accepts either a plain ``name: user_id`` mapping or a mapping under a
    ``profiles`` key.
    """
    with open(roster_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if isinstance(data, dict) and isinstance(data.get("profiles"), dict):
        data = data["profiles"]

    if not isinstance(data, dict):
        raise click.BadParameter("roster must be a mapping of in-game name to user id")

    return {str(name): str(user_id) for name, user_id in data.items()}


@cli.command("import")
@click.argument("log_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--roster", "roster_file", required=True, type=click.Path(exists=True, dir_okay=False),
    help="YAML mapping of in-game name to user id",
)
@click.option("--guild-id", help="Guild the scores belong to")
@click.option("--event-id", help="Raid event the scores belong to")
@click.option("--target", help="Target category (overrides detection)")
@click.option("--output", "-o", help="Write rows to this JSON file instead of stdout")
def import_rankings(log_file, roster_file, guild_id, event_id, target, output):
    """Parse a combat log and match the rankings against a guild roster."""
    settings = get_settings()
    run = run_parse(_read_log(Path(log_file)), settings.parser)

    if not run.entries:
        log_console.print("[red]No DamageDone entries parsed.[/red]")
        sys.exit(1)

    try:
        profiles = load_roster(Path(roster_file))
    except yaml.YAMLError as e:
        raise click.BadParameter(f"invalid roster file: {e}", param_hint="--roster")

    result = build_performance_rows(
        run.entries,
        profiles,
        guild_id=guild_id,
        event_id=event_id,
        target=target or run.target,
    )

    text = json.dumps(result.rows, indent=2)
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
        console.print(f"[green]{result.imported} scores written to {output}[/green]")
    else:
        click.echo(text)

    if result.skipped:
        log_console.print(
            f"[yellow]{result.skipped} player(s) not found, scores ignored: "
            f"{', '.join(result.skipped_players)}[/yellow]"
        )


@cli.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
def serve(host, port):
    """Start the DPS parser API server."""
    from .api.app import run_server

    console.print("[bold green]Starting DPS parser API[/bold green]")
    run_server(host=host, port=port)


def main():
    """Entry point for the dps-parser command."""
    cli()


if __name__ == "__main__":
    main()
