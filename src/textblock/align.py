"""Alignment of content along one axis when a block is padded."""

from __future__ import annotations

from enum import Enum


class Align(str, Enum):
    """Where content sits along an axis once padding is added.

    ``START`` is the top or left edge, ``END`` the bottom or right edge.
    The centered members differ only when the padding is odd:
    ``CENTER_START`` leans toward the start (the extra unit goes after the
    content) and ``CENTER_END`` leans toward the end (the extra unit goes
    before it).
    """

    START = "start"
    END = "end"
    CENTER_START = "center_start"
    CENTER_END = "center_end"


def split_padding(total: int, align: Align) -> tuple[int, int]:
    """Split *total* padding into ``(before, after)`` amounts for *align*."""
    if align is Align.START:
        return 0, total
    if align is Align.END:
        return total, 0

    small = total // 2
    large = total - small
    if align is Align.CENTER_START:
        return small, large
    return large, small
