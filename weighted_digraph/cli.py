"""Command-line entry point for querying a weighted digraph file."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Callable, Optional, TypeVar

import click

from . import __version__
from .config import AppConfig, GraphConfig, configure_logging, get_config
from .container import Container, get_container
from .domain.errors import DigraphError
from .services import DigraphQueryService

T = TypeVar("T")


def _format_weight(weight: float) -> str:
    return "inf" if math.isinf(weight) else f"{weight:g}"


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _run(ctx: click.Context, query: Callable[[DigraphQueryService], T]) -> T:
    """Run a query against the service, exiting non-zero on domain errors."""
    service: DigraphQueryService = ctx.obj
    try:
        return query(service)
    except DigraphError as e:
        click.echo(str(e), err=True)
        raise click.exceptions.Exit(1) from e


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="wdg")
@click.option(
    "-f",
    "--file",
    "graph_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Graph description file (defaults to the configured data file).",
)
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.pass_context
def cli(ctx: click.Context, graph_file: Optional[Path], verbose: bool) -> None:
    """wdg: query an immutable weighted digraph."""
    if graph_file is None:
        container = get_container()
    else:
        container = Container.create_default(
            AppConfig(
                graph=GraphConfig(data_dir=graph_file.parent, graph_file=graph_file.name),
                observability=get_config().observability,
            )
        )
    configure_logging(container.config.observability, verbose=verbose)

    ctx.obj = container.resolve(DigraphQueryService)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show the vertex count and the number of arc insertions."""
    summary = _run(ctx, lambda s: s.summary())
    click.echo(f"vertices: {summary['vertices']}")
    click.echo(f"arcs: {summary['arcs']}")


@cli.command()
@click.argument("vertex", type=int)
@click.pass_context
def degree(ctx: click.Context, vertex: int) -> None:
    """Print the out-degree of VERTEX."""
    click.echo(_run(ctx, lambda s: s.out_degree(vertex)))


@cli.command()
@click.argument("source", type=int)
@click.argument("target", type=int)
@click.pass_context
def weight(ctx: click.Context, source: int, target: int) -> None:
    """Print the weight of the arc SOURCE -> TARGET (inf if absent)."""
    click.echo(_format_weight(_run(ctx, lambda s: s.arc_weight(source, target))))


@cli.command("path-weight")
@click.argument("path", type=int, nargs=-1, required=True)
@click.pass_context
def path_weight(ctx: click.Context, path: tuple[int, ...]) -> None:
    """Print the total weight of PATH (inf if broken)."""
    click.echo(_format_weight(_run(ctx, lambda s: s.path_weight(path))))


@cli.command()
@click.argument("source", type=int)
@click.argument("target", type=int)
@click.pass_context
def connected(ctx: click.Context, source: int, target: int) -> None:
    """Check for a direct arc SOURCE -> TARGET."""
    click.echo(_format_bool(_run(ctx, lambda s: s.are_connected(source, target))))


@cli.command()
@click.argument("source", type=int)
@click.argument("target", type=int)
@click.pass_context
def reachable(ctx: click.Context, source: int, target: int) -> None:
    """Check whether TARGET can be reached from SOURCE."""
    click.echo(_format_bool(_run(ctx, lambda s: s.does_path_exist(source, target))))


@cli.command()
@click.argument("path", type=int, nargs=-1)
@click.pass_context
def valid(ctx: click.Context, path: tuple[int, ...]) -> None:
    """Check that PATH follows existing arcs."""
    click.echo(_format_bool(_run(ctx, lambda s: s.is_path_valid(path))))


@cli.command()
@click.argument("source", type=int)
@click.argument("target", type=int)
@click.pass_context
def shortest(ctx: click.Context, source: int, target: int) -> None:
    """Print a minimum-weight path from SOURCE to TARGET."""
    result = _run(ctx, lambda s: s.shortest_path(source, target))
    route = " -> ".join(str(v) for v in result.path)
    click.echo(f"{route} (weight {_format_weight(result.total_weight)})")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
