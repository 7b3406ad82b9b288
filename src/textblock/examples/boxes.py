"""Bordered squares layered with transparency."""

from __future__ import annotations

from textblock.block import Block
from textblock.errors import InvalidArgumentError


def square(border: str, size: int, offset_left: int = 0, offset_top: int = 0) -> Block:
    """Create a hollow square of *border* characters, shifted by the offsets."""
    if size < 2:
        raise InvalidArgumentError(f"square size must be at least 2, got {size}")

    top_line = Block.of_height(1).fill_right(size, border)
    middle_lines = (
        Block.of_height(size - 2)
        .fill_right(1, border)
        .pad_right(size - 2)
        .fill_right(1, border)
    )

    return (
        top_line.stack_left(middle_lines)
        .stack_left(top_line)
        .pad_left(offset_left)
        .pad_top(offset_top)
    )


def overlapping_boxes() -> Block:
    frontmost = square("O", 5)
    backmost = square("*", 7, 2, 2)
    return frontmost.in_front_of(backmost)
