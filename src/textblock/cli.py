"""CLI entry point for textblock-demo. Uses Click for argument parsing."""

from __future__ import annotations

import logging

import click

from textblock.block import Block

logger = logging.getLogger(__name__)


def _show(block: Block) -> None:
    logger.debug("Rendering %dx%d block", block.width, block.height)
    click.echo(block.render())


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, verbose):
    """Render example layouts built from text blocks."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
def invoice():
    """Render a sample invoice."""
    from textblock.examples.invoice import render_invoice, sample_invoice
    _show(render_invoice(sample_invoice()))


@main.command("math")
def math_():
    """Render a typeset integral calculation."""
    from textblock.examples.math_expressions import integral_calculation
    _show(integral_calculation())


@main.command()
def boxes():
    """Render two squares layered with transparency."""
    from textblock.examples.boxes import overlapping_boxes
    click.echo("Blocks can be put on top of each other, with transparency!")
    click.echo()
    _show(overlapping_boxes())


if __name__ == "__main__":
    main()
