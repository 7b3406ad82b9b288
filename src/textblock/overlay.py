"""Column-wise compositing of one line over another."""

from __future__ import annotations

from textblock.width import split_cells


def _column_index(cells: list[tuple[str, int]]) -> dict[int, int]:
    """Map the starting column of each cell to its index in *cells*."""
    starts: dict[int, int] = {}
    col = 0
    for i, (_text, w) in enumerate(cells):
        starts[col] = i
        col += w
    return starts


def composite_line(front: str, back: str, transparency: str) -> str:
    """Merge *front* over *back*, letting *back* show through transparent cells.

    Both lines must span the same number of columns. A front cell whose text
    equals *transparency* reveals the back cell in the same column. A back
    glyph wider than one column is shown only when every front column it
    covers is transparent; otherwise the uncovered columns become spaces.
    """
    front_cells = split_cells(front)
    if not front_cells:
        # No visible columns; keep any zero-width text rather than dropping it.
        return front or back
    back_cells = split_cells(back)
    front_starts = _column_index(front_cells)
    back_starts = _column_index(back_cells)

    def is_clear(col: int) -> bool:
        i = front_starts.get(col)
        return i is not None and front_cells[i][0] == transparency

    parts: list[str] = []
    i = 0
    col = 0
    while i < len(front_cells):
        text, w = front_cells[i]
        if text != transparency:
            parts.append(text)
            col += w
            i += 1
            continue

        j = back_starts.get(col)
        if j is None:
            # Continuation column of a wide back glyph that is partly covered.
            parts.append(" ")
            col += 1
            i += 1
            continue

        back_text, back_w = back_cells[j]
        if all(is_clear(c) for c in range(col, col + back_w)):
            parts.append(back_text)
            col += back_w
            i += back_w
        else:
            parts.append(" ")
            col += 1
            i += 1

    return "".join(parts)
