import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from depgraph._graph import CycleError, Graph
from depgraph._manifest import ManifestError, load_manifest

from .config import ConfigError, DepgraphConfig, get_config
from .graph_query import get_reach_tree, list_nodes
from .graph_render import render_cycle, render_node_table, render_order_table, render_tree

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

ManifestArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to manifest TOML file (defaults to the configured manifest)"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Depgraph CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _get_config() -> DepgraphConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _load_graph(manifest: Path | None, config: DepgraphConfig) -> Graph[str]:
    """Load the graph from the given manifest or the configured one."""
    if manifest is None:
        manifest = config.manifest
    if manifest is None:
        err_console.print(f"[red]Error: No manifest given and no {escape('[tool.depgraph]')}.manifest configured[/red]")
        raise typer.Exit(code=1)

    try:
        graph = load_manifest(manifest).to_graph()
    except ManifestError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    logger.debug(f"Graph from {manifest}: {graph!r}")
    return graph


@app.command()
def sort(
    manifest: ManifestArgument = None,
    *,
    seeds: Annotated[
        list[str] | None,
        typer.Option("-s", "--seed", help="Start the sort from this node (repeatable). Defaults to all nodes"),
    ] = None,
    include: Annotated[
        bool,
        typer.Option("--include-seeds", help="List seed nodes in the output"),
    ] = False,
    exclude: Annotated[
        bool,
        typer.Option("--exclude-seeds", help="Leave seed nodes out of the output"),
    ] = False,
    plain: Annotated[
        bool,
        typer.Option("--plain", help="Print one node per line without formatting"),
    ] = False,
) -> None:
    """Print nodes in dependency order."""
    if include and exclude:
        err_console.print("[red]Error: --include-seeds and --exclude-seeds are mutually exclusive[/red]")
        raise typer.Exit(code=1)

    config = _get_config()
    graph = _load_graph(manifest, config)

    include_seeds = include or (False if exclude else config.include_seeds)
    if include_seeds is None:
        # Sorting the whole graph reports every node unless told otherwise
        include_seeds = not seeds

    for seed in seeds or []:
        if seed not in graph:
            logger.warning(f"Seed '{seed}' is not in the graph")

    try:
        order = graph.topological_sort(seeds or None, include_seeds=include_seeds)
    except CycleError as e:
        render_cycle(e, err_console)
        raise typer.Exit(code=1) from e

    if plain:
        for node in order:
            typer.echo(node)
        return

    render_order_table(order, out_console)


@app.command()
def nodes(manifest: ManifestArgument = None) -> None:
    """List nodes with their in- and out-degree."""
    graph = _load_graph(manifest, _get_config())
    render_node_table(list_nodes(graph), out_console)


@app.command()
def tree(
    node: Annotated[str, typer.Argument(help="Node to start from")],
    manifest: ManifestArgument = None,
    *,
    depth: Annotated[
        int | None,
        typer.Option("--depth", help="Maximum depth to show"),
    ] = None,
) -> None:
    """Show the nodes reachable from a node as a tree."""
    graph = _load_graph(manifest, _get_config())

    try:
        reach_tree = get_reach_tree(graph, node, max_depth=depth)
    except KeyError as e:
        err_console.print(f"[red]Error: Node not found: {escape(node)}[/red]")
        raise typer.Exit(code=1) from e

    render_tree(reach_tree, out_console)


@app.command()
def check(manifest: ManifestArgument = None) -> None:
    """Check that the graph has no cycles."""
    graph = _load_graph(manifest, _get_config())

    try:
        graph.topological_sort(include_seeds=True)
    except CycleError as e:
        render_cycle(e, err_console)
        raise typer.Exit(code=1) from e

    err_console.print(f"[green]✓ No cycles in {len(graph)} nodes[/green]")


def main() -> None:
    app()
