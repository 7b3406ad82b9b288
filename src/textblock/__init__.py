"""text-block-layout: compose aligned text layouts from immutable blocks."""

from textblock.align import Align, split_padding
from textblock.block import Block
from textblock.config import DEFAULT_TRANSPARENCY, TAB_WIDTH, RenderConfig
from textblock.convert import SupportsBlock, to_text
from textblock.errors import BlockError, InvalidArgumentError, LayoutInvariantError
from textblock.width import display_width, graphemes, split_cells

__all__ = [
    # Blocks
    "Align",
    "Block",
    "split_padding",
    # Conversion
    "SupportsBlock",
    "to_text",
    # Configuration
    "DEFAULT_TRANSPARENCY",
    "RenderConfig",
    "TAB_WIDTH",
    # Errors
    "BlockError",
    "InvalidArgumentError",
    "LayoutInvariantError",
    # Width measurement
    "display_width",
    "graphemes",
    "split_cells",
]
