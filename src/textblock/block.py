"""Immutable rectangular blocks of text and the combinators that join them.

A block is a width plus a tuple of lines, every line exactly ``width``
display columns wide. Operations never modify a block; each one returns a
new block, so blocks can be shared freely.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from textblock.align import Align, split_padding
from textblock.config import (
    DEFAULT_RENDER_CONFIG,
    DEFAULT_TRANSPARENCY,
    TAB_WIDTH,
    RenderConfig,
)
from textblock.convert import SupportsBlock, to_text
from textblock.errors import InvalidArgumentError, LayoutInvariantError
from textblock.overlay import composite_line
from textblock.width import display_width, graphemes

logger = logging.getLogger(__name__)


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")


def _check_cell(name: str, char: str) -> None:
    if len(graphemes(char)) != 1 or display_width(char) != 1:
        raise InvalidArgumentError(
            f"{name} must be a single character one column wide, got {char!r}"
        )


def _split_rows(text: str) -> list[str]:
    return text.replace("\r\n", "\n").replace("\t", " " * TAB_WIDTH).split("\n")


@dataclass(frozen=True)
class Block:
    """A rectangle of text ``width`` columns wide and ``len(lines)`` tall."""

    width: int = 0
    lines: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.lines, tuple):
            object.__setattr__(self, "lines", tuple(self.lines))
        _check_size("width", self.width)
        for line in self.lines:
            line_width = display_width(line)
            if line_width != self.width:
                logger.error(
                    "Block line %r is %d columns wide, expected %d",
                    line,
                    line_width,
                    self.width,
                )
                raise LayoutInvariantError("Block", self.width, line_width)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> Block:
        """Create a block with width and height zero."""
        return cls(0, ())

    @classmethod
    def of_width(cls, width: int) -> Block:
        """Create a block of the given width and height zero."""
        return cls.empty().pad_right(width)

    @classmethod
    def of_height(cls, height: int) -> Block:
        """Create a block of the given height and width zero."""
        return cls.empty().pad_bottom(height)

    @classmethod
    def of_text(cls, text: str) -> Block:
        """Create a block holding *text*, as wide as the text is.

        Line breaks inside *text* start new lines; shorter lines are padded
        on the right. Content is not kept verbatim when *text* contains a
        tab: each tab becomes ``TAB_WIDTH`` spaces.
        """
        rows = _split_rows(text)
        if len(rows) == 1:
            return cls(display_width(rows[0]), (rows[0],))

        widths = [display_width(row) for row in rows]
        width = max(widths)
        return cls(width, tuple(row + " " * (width - w) for row, w in zip(rows, widths)))

    @classmethod
    def of_lines(cls, texts: Iterable[str]) -> Block:
        """Create a block with one or more lines per text, left aligned."""
        blocks = [cls.of_text(text) for text in texts]
        width = max((b.width for b in blocks), default=0)
        lines = tuple(
            line for b in blocks for line in b.pad_to_width_right(width).lines
        )
        return cls(width, lines)

    @classmethod
    def of(cls, value: Any) -> Block:
        """Create a block from any value with a textual representation.

        Values implementing ``__block__`` (including blocks themselves)
        provide their own layout; anything else is converted to text.
        """
        if isinstance(value, SupportsBlock):
            return value.__block__()
        return cls.of_text(to_text(value))

    def __block__(self) -> Block:
        return self

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    @property
    def height(self) -> int:
        return len(self.lines)

    # ------------------------------------------------------------------
    # Adding text
    # ------------------------------------------------------------------

    def add_text(self, text: str) -> Block:
        """Add *text* as new line(s) at the bottom, widening the block to fit."""
        return self.stack_left(Block.of_text(text))

    def add_multiple_texts(self, texts: Iterable[str]) -> Block:
        """Add each of *texts* at the bottom in order."""
        return self.stack_left(Block.of_lines(texts))

    # ------------------------------------------------------------------
    # Filling and padding
    # ------------------------------------------------------------------

    def fill_right(self, width: int, filler: str) -> Block:
        """Widen the block by *width* columns of *filler*."""
        _check_size("width", width)
        _check_cell("filler", filler)
        if width == 0:
            return self
        suffix = filler * width
        return Block(self.width + width, tuple(line + suffix for line in self.lines))

    def fill_bottom(self, height: int, filler: str) -> Block:
        """Heighten the block by *height* rows of *filler*."""
        _check_size("height", height)
        _check_cell("filler", filler)
        if height == 0:
            return self
        row = filler * self.width
        return Block(self.width, self.lines + (row,) * height)

    def pad_right(self, width: int) -> Block:
        return self.fill_right(width, " ")

    def pad_bottom(self, height: int) -> Block:
        return self.fill_bottom(height, " ")

    def pad_left(self, width: int) -> Block:
        """Pad the left side with *width* columns of spaces."""
        _check_size("width", width)
        if width == 0:
            return self
        return Block.of_width(width).beside_top(self)

    def pad_top(self, height: int) -> Block:
        """Pad the top with *height* empty lines."""
        _check_size("height", height)
        if height == 0:
            return self
        return Block.of_height(height).stack_left(self)

    def pad_to_width(self, width: int, align: Align = Align.START) -> Block:
        """Pad with spaces until *width* is reached, keeping content at *align*.

        Never shrinks: a block already at least *width* wide is returned as is.
        """
        _check_size("width", width)
        if width <= self.width:
            return self
        left, right = split_padding(width - self.width, align)
        return self.pad_left(left).pad_right(right)

    def pad_to_height(self, height: int, align: Align = Align.START) -> Block:
        """Pad with empty lines until *height* is reached, keeping content at *align*."""
        _check_size("height", height)
        if height <= self.height:
            return self
        top, bottom = split_padding(height - self.height, align)
        return self.pad_top(top).pad_bottom(bottom)

    def pad_to_width_right(self, width: int) -> Block:
        return self.pad_to_width(width, Align.START)

    def pad_to_width_left(self, width: int) -> Block:
        return self.pad_to_width(width, Align.END)

    def pad_to_width_center_right(self, width: int) -> Block:
        """Center horizontally; odd padding puts the extra column on the right."""
        return self.pad_to_width(width, Align.CENTER_START)

    def pad_to_width_center_left(self, width: int) -> Block:
        """Center horizontally; odd padding puts the extra column on the left."""
        return self.pad_to_width(width, Align.CENTER_END)

    def pad_to_height_bottom(self, height: int) -> Block:
        return self.pad_to_height(height, Align.START)

    def pad_to_height_top(self, height: int) -> Block:
        return self.pad_to_height(height, Align.END)

    def pad_to_height_center_bottom(self, height: int) -> Block:
        """Center vertically; odd padding puts the extra line at the bottom."""
        return self.pad_to_height(height, Align.CENTER_START)

    def pad_to_height_center_top(self, height: int) -> Block:
        """Center vertically; odd padding puts the extra line at the top."""
        return self.pad_to_height(height, Align.CENTER_END)

    # ------------------------------------------------------------------
    # Splicing
    # ------------------------------------------------------------------

    def _splice_beside(self, right: Block) -> Block:
        if self.height != right.height:
            logger.error(
                "beside splice with unequal heights %d and %d", self.height, right.height
            )
            raise LayoutInvariantError("beside", self.height, right.height)
        lines = tuple(left + r for left, r in zip(self.lines, right.lines))
        return Block(self.width + right.width, lines)

    def _splice_stack(self, bottom: Block) -> Block:
        if self.width != bottom.width:
            logger.error(
                "stack splice with unequal widths %d and %d", self.width, bottom.width
            )
            raise LayoutInvariantError("stack", self.width, bottom.width)
        return Block(self.width, self.lines + bottom.lines)

    # ------------------------------------------------------------------
    # Horizontal and vertical composition
    # ------------------------------------------------------------------

    def beside(self, right: Block, align: Align = Align.START) -> Block:
        """Join *right* to the right of this block.

        The shorter block is padded vertically so that its content sits at
        *align* (``START`` is the top edge) before the lines are joined.
        """
        height = max(self.height, right.height)
        return self.pad_to_height(height, align)._splice_beside(
            right.pad_to_height(height, align)
        )

    def stack(self, bottom: Block, align: Align = Align.START) -> Block:
        """Put *bottom* below this block.

        The narrower block is padded horizontally so that its content sits
        at *align* (``START`` is the left edge) before the lines are joined.
        """
        width = max(self.width, bottom.width)
        return self.pad_to_width(width, align)._splice_stack(
            bottom.pad_to_width(width, align)
        )

    def beside_top(self, right: Block) -> Block:
        return self.beside(right, Align.START)

    def beside_bottom(self, right: Block) -> Block:
        return self.beside(right, Align.END)

    def beside_center_top(self, right: Block) -> Block:
        """Center vertically; uneven padding leaves content nearer the top."""
        return self.beside(right, Align.CENTER_START)

    def beside_center_bottom(self, right: Block) -> Block:
        """Center vertically; uneven padding leaves content nearer the bottom."""
        return self.beside(right, Align.CENTER_END)

    def stack_left(self, bottom: Block) -> Block:
        return self.stack(bottom, Align.START)

    def stack_right(self, bottom: Block) -> Block:
        return self.stack(bottom, Align.END)

    def stack_center_left(self, bottom: Block) -> Block:
        """Center horizontally; uneven padding leaves content nearer the left."""
        return self.stack(bottom, Align.CENTER_START)

    def stack_center_right(self, bottom: Block) -> Block:
        """Center horizontally; uneven padding leaves content nearer the right."""
        return self.stack(bottom, Align.CENTER_END)

    # ------------------------------------------------------------------
    # Overlay
    # ------------------------------------------------------------------

    def in_front_of(self, back: Block, transparency: str = DEFAULT_TRANSPARENCY) -> Block:
        """Lay this block over *back*, top-left corners aligned.

        The result covers both blocks. Cells of this block equal to
        *transparency*, and every cell outside its extent, show *back*.
        """
        _check_cell("transparency", transparency)
        width = max(self.width, back.width)
        height = max(self.height, back.height)
        logger.debug(
            "Overlaying %dx%d block on %dx%d block",
            self.width,
            self.height,
            back.width,
            back.height,
        )

        front = self.fill_right(width - self.width, transparency).fill_bottom(
            height - self.height, transparency
        )
        behind = back.pad_to_width_right(width).pad_to_height_bottom(height)
        lines = tuple(
            composite_line(f, b, transparency) for f, b in zip(front.lines, behind.lines)
        )
        return Block(width, lines)

    def in_front_of_with_transparency(self, back: Block, transparency: str) -> Block:
        return self.in_front_of(back, transparency)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, config: RenderConfig | None = None) -> str:
        """Join the lines into one string, trimming trailing whitespace per line."""
        cfg = config or DEFAULT_RENDER_CONFIG
        if cfg.trim_trailing:
            return cfg.separator.join(line.rstrip() for line in self.lines)
        return cfg.separator.join(self.lines)

    def __str__(self) -> str:
        return self.render()
