"""Rich rendering utilities for graph commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

if TYPE_CHECKING:
    from rich.console import Console

    from depgraph._graph import CycleError

    from .graph_query import NodeInfo, TreeNode


def render_order_table(order: list[str], console: Console) -> None:
    """Render a topological order as a numbered Rich table.

    Args:
        order: Nodes in topological order.
        console: Rich Console to output to.

    """
    if not order:
        console.print("[dim]Nothing to order[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Node", style="bold")

    for index, node in enumerate(order, start=1):
        table.add_row(str(index), escape(node))

    console.print(table)


def render_node_table(nodes: list[NodeInfo], console: Console) -> None:
    """Render node list as a Rich table.

    Args:
        nodes: List of NodeInfo to render.
        console: Rich Console to output to.

    """
    if not nodes:
        console.print("[dim]Graph has no nodes[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Node", style="bold")
    table.add_column("In", justify="right")
    table.add_column("Out", justify="right")

    for info in nodes:
        table.add_row(escape(info.node), str(info.indegree), str(info.outdegree))

    console.print(table)


def render_tree(tree_node: TreeNode, console: Console) -> None:
    """Render a reachability tree using Rich Tree.

    Labels are cropped rather than wrapped, so every node takes one line
    however deep the tree is.

    Args:
        tree_node: TreeNode root to render.
        console: Rich Console to output to.

    """
    rich_tree = Tree(Text(tree_node.node, style="bold", no_wrap=True))

    # Each entry pairs a Rich branch with the TreeNode children still to add
    pending: list[tuple[Tree, list[TreeNode]]] = [(rich_tree, tree_node.children)]
    while pending:
        parent, children = pending.pop()
        for child in children:
            pending.append((parent.add(Text(child.node, no_wrap=True)), child.children))

    console.print(rich_tree)


def render_cycle(error: CycleError, console: Console) -> None:
    """Render a detected cycle as an arrow-separated path."""
    path = " -> ".join(escape(str(node)) for node in error.cycle)
    console.print(f"[red]✗ Cycle detected:[/red] {path}")
