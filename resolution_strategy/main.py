"""Resolution strategy CLI - inspect the effective strategy built from settings."""

import logging
import sys
from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table

from .cache_policy import CACHE_FOREVER
from .console import console
from .console import error_console
from .coordinates import parse_coordinate
from .errors import StrategyError
from .logging_setup import init_json_logging
from .resolve_rules import DependencyResolveDetails
from .settings import SettingsManager
from .settings import load_strategy
from .time_units import TimeUnit
from .time_units import aliases_for

logger = logging.getLogger(__name__)


def _format_ttl(ttl_ms: int) -> str:
    if ttl_ms == 0:
        return "always revalidate"
    if ttl_ms >= CACHE_FOREVER:
        return "forever"
    for unit in reversed(TimeUnit):
        if ttl_ms and ttl_ms % unit.millis == 0:
            amount = ttl_ms // unit.millis
            name = unit.name.lower()
            return f"{amount} {name[:-1] if amount == 1 else name}"
    return f"{ttl_ms} milliseconds"


@click.group()
@click.option(
    "--settings-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding settings.yaml and settings.local.yaml",
)
@click.option("--log-path", default=None, help="Write JSONL logs to this file")
@click.pass_context
def cli(ctx: click.Context, settings_dir: Path | None, log_path: str | None):
    """Inspect dependency resolution strategies."""
    if log_path:
        init_json_logging(log_path)
    ctx.obj = SettingsManager(settings_dir)


@cli.command(name="show")
@click.pass_obj
def show(manager: SettingsManager):
    """Show the effective strategy from merged settings."""
    try:
        summary = load_strategy(manager).describe()
    except StrategyError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        sys.exit(1)

    table = Table(title="Resolution Strategy")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Forced modules", "\n".join(summary["forced_modules"]) or "(none)")
    table.add_row("Conflict resolution", summary["conflict_resolution"])
    table.add_row("Dynamic versions TTL", _format_ttl(summary["cache"]["dynamic_versions_ms"]))
    table.add_row("Changing modules TTL", _format_ttl(summary["cache"]["changing_modules_ms"]))
    console.print(table)


@cli.command(name="resolve")
@click.argument("coordinate")
@click.option("--force", "forced", multiple=True, help="Additional forced module (group:name:version)")
@click.pass_obj
def resolve(manager: SettingsManager, coordinate: str, forced: tuple[str, ...]):
    """Apply the strategy's resolve rule to COORDINATE."""
    try:
        strategy = load_strategy(manager)
        if forced:
            strategy.force(*forced)
        details = DependencyResolveDetails(parse_coordinate(coordinate))
        strategy.copy().dependency_resolve_rule(details)
    except StrategyError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        sys.exit(1)

    logger.info(f"Resolved {details.requested} -> {details.target}")
    reason = details.selection_reason.description if details.selection_reason else "requested"
    console.print(f"{details.requested} -> {details.target} ({reason})", markup=False, highlight=False)


@cli.command(name="units")
def units():
    """List recognised cache duration units."""
    table = Table(title="Cache Duration Units")
    table.add_column("Unit", style="cyan")
    table.add_column("Milliseconds", justify="right")
    table.add_column("Aliases", style="dim")
    for unit in TimeUnit:
        table.add_row(unit.name.lower(), str(unit.millis), ", ".join(aliases_for(unit)))
    console.print(table)


def main():
    cli()


if __name__ == "__main__":
    main()
