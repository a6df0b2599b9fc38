"""CLI entry point for gitgraph-drawio."""

import logging
import sys

import click

from gitgraph_drawio.config import LayoutConfig, RenderConfig
from gitgraph_drawio.ir.graph import GraphIR
from gitgraph_drawio.layout.engine import build_model
from gitgraph_drawio.parsers import parse
from gitgraph_drawio.renderers.drawio import DrawioRenderer

logger = logging.getLogger("gitgraph_drawio")


@click.command()
@click.option("--input", "-i", "input", required=True, type=str, help="Input mermaid file path")
@click.option("--output", "-o", "output", type=str, default="output.drawio", show_default=True, help="Output drawio file path")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log skipped lines and branch decisions")
def main(input: str, output: str, verbose: bool) -> None:
    """Mermaid gitGraph to draw.io diagram converter."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s - %(name)s - %(message)s",
    )

    try:
        with open(input, encoding="utf-8", errors="replace") as f:
            text = f.read()
    except OSError as e:
        click.echo(f"Error: cannot read '{input}': {e}", err=True)
        sys.exit(1)

    try:
        script = parse(text)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    layout = LayoutConfig()
    model = build_model(script, layout)
    gir = GraphIR.from_model(model)
    for edge in gir.dangling_edges():
        logger.warning("edge %s -> %s references an unknown node", edge.source_id, edge.target_id)
    if not gir.is_dag():
        logger.warning("history contains a cycle; check for repeated commit ids")

    rendered = DrawioRenderer(RenderConfig(), spacing_y=layout.spacing_y).render(model)

    try:
        with open(output, "w", encoding="utf-8") as f:
            f.write(rendered)
    except OSError as e:
        click.echo(f"Error: cannot write '{output}': {e}", err=True)
        sys.exit(1)

    click.echo(f"Successfully converted {input} to {output}")
    click.echo(
        f"   {len(model.commits)} commits, {len(model.edges)} edges, {len(model.branches)} branches"
    )
    click.echo("   (Try 'Arrange > Layout > Horizontal Flow' in Draw.io if it looks messy, though coordinates are pre-calculated)")


if __name__ == "__main__":
    main()
