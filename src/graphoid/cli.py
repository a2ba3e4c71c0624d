"""Command line interface for :mod:`graphoid`."""

import logging
from typing import List, Sequence, Tuple, get_args

import click

from .algorithm.reachability import connected_components
from .algorithm.separation import build_relation
from .constants import DEFAULT_METHOD, ReachabilityMethod
from .graph import InvalidEdge, UndirectedGraph, describe

__all__ = [
    "main",
]

size_argument = click.argument("n", type=click.IntRange(min=0))
edges_argument = click.argument("edges", nargs=-1)
verbose_option = click.option(
    "-v", "--verbose", is_flag=True, help="Show progress and debug logging"
)


def _parse_edges(edges: Sequence[str]) -> List[Tuple[int, int]]:
    rv = []
    for edge in edges:
        parts = edge.split("-")
        if len(parts) != 2 or not all(part.strip().isdigit() for part in parts):
            raise click.BadParameter(
                f"edges are written like 1-2, got {edge!r}", param_hint="EDGES"
            )
        rv.append((int(parts[0]), int(parts[1])))
    return rv


def _get_graph(n: int, edges: Sequence[str]) -> UndirectedGraph:
    try:
        return UndirectedGraph.from_size(n, _parse_edges(edges))
    except InvalidEdge as e:
        raise click.BadParameter(str(e), param_hint="EDGES") from e


@click.group()
@click.version_option()
def main() -> None:
    """CLI for graphoid."""


@main.command()
@size_argument
@edges_argument
@click.option(
    "--method",
    type=click.Choice(get_args(ReachabilityMethod)),
    default=DEFAULT_METHOD,
    show_default=True,
    help="How reachability is computed",
)
@click.option("--independencies", is_flag=True, help="List the separations instead")
@verbose_option
def relation(n: int, edges: Sequence[str], method: str, independencies: bool, verbose: bool):
    """Print the separation relation of a graph on vertices 1..N."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    graph = _get_graph(n, edges)
    rv = build_relation(graph, method=method, verbose=verbose)  # type:ignore
    if independencies:
        for judgement in rv.independencies():
            click.echo(str(judgement))
    else:
        click.echo(rv.to_str())


@main.command(name="describe")
@size_argument
@edges_argument
def describe_graph(n: int, edges: Sequence[str]):
    """Print a graph on vertices 1..N and its connected components."""
    graph = _get_graph(n, edges)
    click.echo(describe(graph))
    for component in connected_components(graph):
        click.echo(f"component: {describe(component)}")


if __name__ == "__main__":
    main()
