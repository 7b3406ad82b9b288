"""Display-width measurement for block content.

Widths are counted in terminal columns, not code points: text is split into
grapheme clusters and each cluster is measured with wcwidth, with emoji
sequences forced to two columns.
"""

from __future__ import annotations

import functools
import unicodedata

import grapheme
import wcwidth as _wcwidth

_WIDTH_CACHE_MAX = 512


# ---------------------------------------------------------------------------
# Grapheme clusters
# ---------------------------------------------------------------------------

def graphemes(text: str) -> list[str]:
    """Return the grapheme clusters of *text* in order."""
    return list(grapheme.graphemes(text))


def _is_emoji_marker(cp: int) -> bool:
    """True for code points that make a multi-codepoint cluster an emoji."""
    return (
        cp in (0xFE0F, 0x200D)  # VS16, ZWJ
        or 0x1F3FB <= cp <= 0x1F3FF  # skin tone modifiers
        or 0x1F1E6 <= cp <= 0x1F1FF  # regional indicators
    )


def _codepoint_width(ch: str) -> int:
    cp = ord(ch)
    if cp < 0x20 or (0x7F <= cp <= 0x9F):
        return 0
    return max(_wcwidth.wcwidth(ch), 0)


def cluster_width(g: str) -> int:
    """Return the number of columns a single grapheme cluster occupies.

    A lone code point is measured by wcwidth, with control characters
    counted as zero. A longer cluster is two columns when it is an emoji
    sequence, zero when it starts with a mark or format character, and
    otherwise as wide as its base character.
    """
    if not g:
        return 0
    if len(g) == 1:
        return _codepoint_width(g)

    base = ord(g[0])
    if any(_is_emoji_marker(ord(ch)) for ch in g):
        return 2
    if base >= 0x1F000 or 0x2600 <= base <= 0x27BF:
        return 2

    category = unicodedata.category(g[0])
    if category.startswith("M") or category == "Cf":
        return 0
    return _codepoint_width(g[0])


# ---------------------------------------------------------------------------
# display_width
# ---------------------------------------------------------------------------

def display_width(text: str) -> int:
    """Calculate the number of terminal columns *text* occupies.

    * Uses a fast path when every character is printable ASCII.
    * Caches results for non-ASCII strings.
    """
    if not text:
        return 0

    if text.isascii() and text.isprintable():
        return len(text)

    return _measure(text)


@functools.lru_cache(maxsize=_WIDTH_CACHE_MAX)
def _measure(text: str) -> int:
    """Full grapheme-cluster measurement, cached for non-ASCII strings."""
    return sum(cluster_width(g) for g in grapheme.graphemes(text))


# ---------------------------------------------------------------------------
# split_cells
# ---------------------------------------------------------------------------

def split_cells(text: str) -> list[tuple[str, int]]:
    """Split *text* into ``(cluster, columns)`` cells of at least one column.

    Zero-width clusters are attached to the cell before them, or to the
    first cell when they lead the string, so joining the cell texts always
    reproduces *text*. A string with no visible columns yields no cells.
    """
    cells: list[tuple[str, int]] = []
    leading = ""

    for g in grapheme.graphemes(text):
        w = cluster_width(g)
        if w == 0:
            if cells:
                prev, prev_w = cells[-1]
                cells[-1] = (prev + g, prev_w)
            else:
                leading += g
            continue
        cells.append((leading + g, w))
        leading = ""

    return cells
