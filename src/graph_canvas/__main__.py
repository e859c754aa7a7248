"""CLI entry point for graph-canvas."""

import logging
import sys

import click

from graph_canvas import render_graph
from graph_canvas.config import FORMATS, RenderConfig
from graph_canvas.options import GraphOptions
from graph_canvas.store import GraphStore


def parse_node_arg(arg: str) -> tuple[str, float, float]:
    """Parse ``LABEL:X,Y`` into its parts."""
    label, sep, coords = arg.rpartition(":")
    parts = coords.split(",")
    if not sep or not label or len(parts) != 2:
        raise ValueError(f"bad node '{arg}'; expected LABEL:X,Y")
    try:
        x, y = (float(p) for p in parts)
    except ValueError:
        raise ValueError(f"bad node '{arg}'; coordinates must be numbers") from None
    return label, x, y


def parse_edge_arg(arg: str) -> tuple[str, str]:
    """Parse ``FROM:TO`` into its labels."""
    from_label, sep, to_label = arg.partition(":")
    if not sep or not from_label or not to_label:
        raise ValueError(f"bad edge '{arg}'; expected FROM:TO")
    return from_label, to_label


def build_store(node_args: tuple[str, ...], edge_args: tuple[str, ...]) -> GraphStore:
    store = GraphStore()
    for arg in node_args:
        label, x, y = parse_node_arg(arg)
        store.add_node(x=x, y=y, label=label)
    for arg in edge_args:
        store.add_edge(*parse_edge_arg(arg))
    return store


@click.command()
@click.option("--node", "-n", "nodes", multiple=True, help="Node as LABEL:X,Y (repeatable)")
@click.option("--edge", "-e", "edges", multiple=True, help="Edge as FROM:TO (repeatable)")
@click.option("--format", "-f", "fmt", type=click.Choice(FORMATS), default="text", help="Output format")
@click.option("--ascii", "-a", "use_ascii", is_flag=True, help="Use plain ASCII instead of Unicode")
@click.option("--scale", "-s", "scale", type=float, default=10, help="World units per text column")
@click.option("--node-size", "node_size", type=float, default=35, help="Node radius")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", is_flag=True, help="Log store and render activity to stderr")
def main(
    nodes: tuple[str, ...],
    edges: tuple[str, ...],
    fmt: str,
    use_ascii: bool,
    scale: float,
    node_size: float,
    output: str | None,
    verbose: bool,
) -> None:
    """Node-and-edge diagram to text or SVG output."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        store = build_store(nodes, edges)
        config = RenderConfig(format=fmt, unicode=not use_ascii, scale=scale)
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    rendered = render_graph(store, GraphOptions.create(node_size=node_size), config)

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
