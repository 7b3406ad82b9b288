"""Tests for textblock.block -- construction, filling and padding."""

from __future__ import annotations

import dataclasses

import pytest

from textblock.block import Block
from textblock.errors import InvalidArgumentError, LayoutInvariantError


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    """Blocks created from nothing, sizes and text."""

    def test_empty_has_no_size(self) -> None:
        block = Block.empty()
        assert block.width == 0
        assert block.height == 0
        assert block.lines == ()

    def test_of_width_has_no_lines(self) -> None:
        block = Block.of_width(3)
        assert block.width == 3
        assert block.height == 0

    def test_of_height_has_empty_lines(self) -> None:
        block = Block.of_height(2)
        assert block.width == 0
        assert block.lines == ("", "")

    def test_of_text_keeps_text_verbatim(self) -> None:
        block = Block.of_text(" a a   ")
        assert block.width == 7
        assert block.lines == (" a a   ",)

    def test_of_text_measures_display_width(self) -> None:
        block = Block.of_text("a\u4e16")
        assert block.width == 3
        assert block.height == 1

    def test_of_empty_text_is_one_empty_line(self) -> None:
        block = Block.of_text("")
        assert block.width == 0
        assert block.lines == ("",)

    def test_of_text_splits_line_breaks(self) -> None:
        block = Block.of_text("ab\nc")
        assert block.lines == ("ab", "c ")

    def test_of_text_handles_crlf(self) -> None:
        assert Block.of_text("ab\r\nc").lines == ("ab", "c ")

    def test_of_text_expands_tabs(self) -> None:
        block = Block.of_text("a\tb")
        assert block.lines == ("a   b",)
        assert block.width == 5

    def test_of_lines_left_aligns(self) -> None:
        block = Block.of_lines(["x", "yyy", "zz"])
        assert block.lines == ("x  ", "yyy", "zz ")

    def test_of_lines_empty_iterable(self) -> None:
        assert Block.of_lines([]) == Block.empty()

    def test_lines_list_is_stored_as_tuple(self) -> None:
        block = Block(2, ["ab", "cd"])
        assert block.lines == ("ab", "cd")

    def test_blocks_compare_by_value(self) -> None:
        assert Block.of_text("ab") == Block(2, ("ab",))
        assert hash(Block.of_text("ab")) == hash(Block(2, ("ab",)))


# ---------------------------------------------------------------------------
# Rectangularity
# ---------------------------------------------------------------------------


class TestRectangularity:
    """The constructor rejects blocks whose lines do not match their width."""

    def test_short_line_rejected(self) -> None:
        with pytest.raises(LayoutInvariantError):
            Block(5, ("a",))

    def test_long_line_rejected(self) -> None:
        with pytest.raises(LayoutInvariantError):
            Block(1, ("ab", "c"))

    def test_wide_character_measured_in_columns(self) -> None:
        with pytest.raises(LayoutInvariantError):
            Block(1, ("\u4e16",))
        assert Block(2, ("\u4e16",)).width == 2

    def test_mismatched_block_never_reaches_combinators(self) -> None:
        with pytest.raises(AssertionError):
            Block(5, ("a",)).beside_top(Block.of_text("x"))

    def test_negative_width_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Block(-1, ())

    def test_width_without_lines_accepted(self) -> None:
        assert Block(4, ()).height == 0


# ---------------------------------------------------------------------------
# Immutability
# ---------------------------------------------------------------------------


class TestImmutability:
    """Operations leave their inputs untouched."""

    def test_fields_cannot_be_assigned(self) -> None:
        block = Block.of_text("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            block.width = 5  # type: ignore[misc]

    def test_padding_returns_new_block(self) -> None:
        block = Block.of_text("ab")
        padded = block.pad_right(2)
        assert padded is not block
        assert block.lines == ("ab",)
        assert padded.lines == ("ab  ",)

    def test_combining_leaves_operands_unchanged(self) -> None:
        a = Block.of_text("a")
        b = Block.of_text("bb").add_text("bb")
        a.beside_bottom(b)
        a.stack_right(b)
        assert a.lines == ("a",)
        assert b.lines == ("bb", "bb")


# ---------------------------------------------------------------------------
# Adding text
# ---------------------------------------------------------------------------


class TestAddText:
    """Appending lines grows the block instead of truncating."""

    def test_add_shorter_text_is_padded(self) -> None:
        block = Block.of_text("abc").add_text("d")
        assert block.lines == ("abc", "d  ")

    def test_add_longer_text_widens_block(self) -> None:
        block = Block.of_text("a").add_text("bcd")
        assert block.width == 3
        assert block.lines == ("a  ", "bcd")

    def test_add_multiple_texts_in_order(self) -> None:
        block = Block.empty().add_multiple_texts(["x", "yy"])
        assert block.lines == ("x ", "yy")

    def test_add_multiple_texts_to_existing_block(self) -> None:
        block = Block.of_text("top").add_multiple_texts(["a", "bcdef"])
        assert block.lines == ("top  ", "a    ", "bcdef")


# ---------------------------------------------------------------------------
# Filling
# ---------------------------------------------------------------------------


class TestFill:
    """Growing a block with a filler character."""

    def test_fill_right(self) -> None:
        block = Block.of_text("ab").fill_right(2, "-")
        assert block.width == 4
        assert block.lines == ("ab--",)

    def test_fill_bottom(self) -> None:
        block = Block.of_text("ab").fill_bottom(2, "=")
        assert block.lines == ("ab", "==", "==")

    def test_fill_right_on_height_zero_only_changes_width(self) -> None:
        block = Block.of_width(2).fill_right(3, "x")
        assert block.width == 5
        assert block.lines == ()

    def test_fill_zero_is_noop(self) -> None:
        block = Block.of_text("ab")
        assert block.fill_right(0, "x") is block
        assert block.fill_bottom(0, "x") is block

    def test_fill_with_box_drawing_character(self) -> None:
        block = Block.of_height(1).fill_right(3, "─")
        assert block.lines == ("───",)

    def test_multi_character_filler_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Block.of_text("a").fill_right(1, "ab")

    def test_wide_filler_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Block.of_text("a").fill_bottom(1, "\u4e16")

    def test_empty_filler_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Block.of_text("a").fill_right(1, "")

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Block.of_text("a").fill_right(-1, "x")

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Block.of_text("a").pad_bottom(-2)


# ---------------------------------------------------------------------------
# Padding
# ---------------------------------------------------------------------------


class TestPad:
    """Padding with spaces on each side."""

    def test_pad_right(self) -> None:
        assert Block.of_text("ab").pad_right(2).lines == ("ab  ",)

    def test_pad_left(self) -> None:
        block = Block.of_text("b").add_text("b").pad_left(2)
        assert block.lines == ("  b", "  b")
        assert block.width == 3

    def test_pad_top(self) -> None:
        block = Block.of_text("ab").pad_top(1)
        assert block.lines == ("  ", "ab")

    def test_pad_bottom(self) -> None:
        block = Block.of_text("ab").pad_bottom(2)
        assert block.lines == ("ab", "  ", "  ")

    def test_zero_padding_is_noop(self) -> None:
        block = Block.of_text("ab")
        assert block.pad_left(0) == block
        assert block.pad_top(0) == block
        assert block.pad_right(0) == block
        assert block.pad_bottom(0) == block

    def test_pad_left_negative_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Block.of_text("ab").pad_left(-1)


class TestPadToWidth:
    """Padding until a target width is reached."""

    def test_pad_to_width_right(self) -> None:
        assert Block.of_text("ab").pad_to_width_right(5).lines == ("ab   ",)

    def test_pad_to_width_left(self) -> None:
        assert Block.of_text("ab").pad_to_width_left(5).lines == ("   ab",)

    def test_center_left_puts_extra_on_left(self) -> None:
        assert Block.of_text("ab").pad_to_width_center_left(5).lines == ("  ab ",)

    def test_center_right_puts_extra_on_right(self) -> None:
        assert Block.of_text("ab").pad_to_width_center_right(5).lines == (" ab  ",)

    def test_even_center_padding_is_symmetric(self) -> None:
        block = Block.of_text("ab")
        assert block.pad_to_width_center_left(6).lines == ("  ab  ",)
        assert block.pad_to_width_center_right(6).lines == ("  ab  ",)

    @pytest.mark.parametrize("width", [0, 1, 2, 3])
    def test_never_shrinks(self, width: int) -> None:
        block = Block.of_text("abc")
        for method in (
            block.pad_to_width_right,
            block.pad_to_width_left,
            block.pad_to_width_center_left,
            block.pad_to_width_center_right,
        ):
            assert method(width) == block

    def test_wide_characters_padded_by_columns(self) -> None:
        block = Block.of_text("\u4e16").pad_to_width_right(4)
        assert block.lines == ("\u4e16  ",)


class TestPadToHeight:
    """Padding until a target height is reached."""

    def test_pad_to_height_bottom(self) -> None:
        assert Block.of_text("x").pad_to_height_bottom(3).lines == ("x", " ", " ")

    def test_pad_to_height_top(self) -> None:
        assert Block.of_text("x").pad_to_height_top(3).lines == (" ", " ", "x")

    def test_center_top_puts_extra_on_top(self) -> None:
        block = Block.of_text("x").pad_to_height_center_top(4)
        assert block.lines == (" ", " ", "x", " ")

    def test_center_bottom_puts_extra_on_bottom(self) -> None:
        block = Block.of_text("x").pad_to_height_center_bottom(4)
        assert block.lines == (" ", "x", " ", " ")

    @pytest.mark.parametrize("height", [0, 1, 2])
    def test_never_shrinks(self, height: int) -> None:
        block = Block.of_text("x").add_text("y")
        assert block.pad_to_height_top(height) == block
        assert block.pad_to_height_bottom(height) == block
        assert block.pad_to_height_center_top(height) == block
        assert block.pad_to_height_center_bottom(height) == block
