"""Flask CLI commands for inspecting the catalog and matching CSV exports."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from scimuscle.services._shared.base import ServiceContext
from scimuscle.services._shared.errors import CatalogError, ServiceError
from scimuscle.services.automatch.matcher import MIN_CONFIDENCE
from scimuscle.services.catalog.index import load_canonical_exercises, search_exercises
from scimuscle.services.imports.service import CsvImportService

LOGGER = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    """Raise logging verbosity for service modules when requested."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger("scimuscle.services").setLevel(level)
    LOGGER.setLevel(level)


@click.group("catalog")
@click.option("--verbose", is_flag=True, help="Enable verbose logging.")
@click.pass_context
def catalog_cli(ctx: click.Context, verbose: bool) -> None:
    """Canonical exercise catalog commands."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)


@catalog_cli.command("check")
def check_command() -> None:
    """Load and validate the bundled exercise list."""
    try:
        exercises = load_canonical_exercises()
    except CatalogError as exc:
        raise click.ClickException(f"Invalid exercise list: {exc}") from exc
    click.echo(f"{len(exercises)} canonical exercises OK")


@catalog_cli.command("search")
@click.argument("query")
@click.option("--limit", default=10, show_default=True, type=click.IntRange(min=1))
def search_command(query: str, limit: int) -> None:
    """Rank canonical exercises against QUERY."""
    results = search_exercises(query, limit=limit)
    if not results:
        click.echo("  (no matches)")
        return
    width = max(len(r.name) for r in results)
    for result in results:
        click.echo(f"  {result.name.ljust(width)}  {result.id}  score={result.score:.2f}")


@catalog_cli.command("automatch")
@click.argument("csv_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--profile", "profile_id", default="cli", show_default=True)
def automatch_command(csv_path: Path, profile_id: str) -> None:
    """Suggest canonical matches for the unmapped names of a Hevy export."""
    service = CsvImportService(ctx=ServiceContext(profile_id=profile_id))
    try:
        summary = service.import_csv(csv_path.read_text(encoding="utf-8-sig"))
    except ServiceError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(
        f"{len(summary.workouts)} workouts, {summary.set_count} sets, "
        f"{len(summary.unmapped)} unmapped exercise names"
    )
    by_name = {s.unmapped_normalized_name: s for s in summary.suggestions}
    for record in summary.unmapped:
        suggestion = by_name.get(record.normalized_name)
        if suggestion is None:
            click.echo(
                f"  {record.original_name} (x{record.occurrence_count}): "
                f"no match >= {MIN_CONFIDENCE}"
            )
            continue
        click.echo(
            f"  {record.original_name} (x{record.occurrence_count}) -> "
            f"{suggestion.suggested_canonical_name} [{suggestion.confidence:.2f}] "
            f"{suggestion.match_reason}"
        )
