"""Command line interface for CivicFolio."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from .config import BaseConfig
from .desktop.context import create_store
from .logging_config import setup_logging
from .services import export_csv, importers
from .services.graph import build_graph
from .services.importers import DataKind
from .services.reports import compute_metrics, sector_breakdown
from .services.store import PortfolioStore
from .services.timeline import derive_timeline
from .utils import format_currency

KIND_CHOICES = [kind.value for kind in DataKind] + [kind.plural for kind in DataKind]


def _echo_summary(store: PortfolioStore) -> None:
    portfolio = store.current()
    metrics = compute_metrics(portfolio)
    graph = build_graph(portfolio)
    timeline = derive_timeline(portfolio)

    click.echo(f"Portfolio: {portfolio.name}")
    click.echo(
        f"  Actions: {metrics.total_actions} "
        f"({metrics.completed_actions} completed, {metrics.in_progress_actions} in progress)"
    )
    click.echo(f"  Actors: {metrics.total_actors} ({metrics.cross_sector_collaborations} cross-sector collaborations)")
    click.echo(f"  Assets: {metrics.total_assets} ({format_currency(metrics.total_funding)} total funding)")
    click.echo(f"  Synergistic solutions: {metrics.synergistic_solutions}")
    click.echo(f"  Average impact score: {metrics.average_impact_score}")
    click.echo(f"  Network: {len(graph.nodes)} nodes, {len(graph.edges)} edges")
    if graph.dropped:
        click.echo(f"  Skipped connections: {len(graph.dropped)} (missing endpoints)")
    click.echo(f"  Milestone progress: {timeline.rounded_progress}%")

    sectors = sector_breakdown(portfolio)
    if not sectors.empty:
        click.echo("")
        click.echo(sectors.to_string(index=False))


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Build and inspect a civic action portfolio."""

    config = BaseConfig()
    setup_logging(config)
    ctx.obj = config


@cli.command("import")
@click.option("--actions", "actions_path", type=click.Path(path_type=Path), help="Actions CSV file.")
@click.option("--actors", "actors_path", type=click.Path(path_type=Path), help="Actors CSV file.")
@click.option("--assets", "assets_path", type=click.Path(path_type=Path), help="Assets CSV file.")
@click.option(
    "--connections", "connections_path", type=click.Path(path_type=Path), help="Connections CSV file."
)
@click.pass_obj
def import_command(
    config: BaseConfig,
    actions_path: Optional[Path],
    actors_path: Optional[Path],
    assets_path: Optional[Path],
    connections_path: Optional[Path],
) -> None:
    """Import CSV files into the portfolio and print the result.

    Each file is imported on its own; a failure in one does not stop the others.
    """

    uploads = [
        (DataKind.ACTION, actions_path),
        (DataKind.ACTOR, actors_path),
        (DataKind.ASSET, assets_path),
        (DataKind.CONNECTION, connections_path),
    ]
    uploads = [(kind, path) for kind, path in uploads if path is not None]
    if not uploads:
        raise click.UsageError("Pass at least one of --actions, --actors, --assets, --connections.")

    store = create_store(config)
    failures = 0
    for kind, path in uploads:
        result = importers.import_csv_path(path, kind)
        label = kind.plural.title()
        if result.success:
            store.merge_imported(result.to_batch())
            click.echo(f"{label}: {result.message}")
        else:
            failures += 1
            click.echo(f"{label}: {result.message}", err=True)

    click.echo("")
    _echo_summary(store)
    if failures:
        raise SystemExit(1)


@cli.command("template")
@click.argument("kind", type=click.Choice(KIND_CHOICES))
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    default=None,
    help="Where to write the template (defaults to the exports directory).",
)
@click.pass_obj
def template_command(config: BaseConfig, kind: str, output: Optional[Path]) -> None:
    """Write the example CSV for KIND."""

    target = output or (config.export_dir / export_csv.template_filename(kind))
    written = export_csv.write_template(kind, target)
    click.echo(f"Template written: {written}")


@cli.command("export")
@click.argument("kind", type=click.Choice(KIND_CHOICES))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None, help="Destination CSV.")
@click.pass_obj
def export_command(config: BaseConfig, kind: str, output: Optional[Path]) -> None:
    """Export one collection of the baseline portfolio as importable CSV."""

    data_kind = importers.resolve_kind(kind)
    portfolio = create_store(config).current()
    entities = {
        DataKind.ACTION: portfolio.actions,
        DataKind.ACTOR: portfolio.actors,
        DataKind.ASSET: portfolio.assets,
        DataKind.CONNECTION: portfolio.connections,
    }[data_kind]
    target = output or (config.export_dir / f"{data_kind.plural}.csv")
    written = export_csv.export_entities_csv(kind=data_kind, entities=entities, output_path=target)
    click.echo(f"Exported {len(entities)} {data_kind.plural}: {written}")


@cli.command("summary")
@click.pass_obj
def summary_command(config: BaseConfig) -> None:
    """Print dashboard metrics for the starting portfolio."""

    _echo_summary(create_store(config))


@cli.command("desktop")
def desktop_command() -> None:
    """Launch the desktop application."""

    from .desktop.app import run

    run()


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
