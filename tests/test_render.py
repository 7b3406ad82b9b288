"""Tests for flattening blocks into strings."""

from __future__ import annotations

from textblock.block import Block
from textblock.config import RenderConfig


class TestRender:
    """Rendering joins lines and trims trailing whitespace."""

    def test_empty_block_renders_empty_string(self) -> None:
        assert Block.empty().render() == ""

    def test_single_line(self) -> None:
        assert Block.of_text("aaa").render() == "aaa"

    def test_trailing_spaces_trimmed(self) -> None:
        assert Block.of_text("a a   ").render() == "a a"

    def test_leading_spaces_kept(self) -> None:
        assert Block.of_text("  a").render() == "  a"

    def test_blank_lines_render_empty(self) -> None:
        assert Block.of_height(3).render() == "\n\n"
        assert Block.of_width(4).pad_bottom(2).render() == "\n"

    def test_separator_count_is_height_minus_one(self) -> None:
        block = Block.of_lines(["a", "b", "c", "d"])
        assert block.render().count("\n") == block.height - 1

    def test_stack_scenario(self) -> None:
        a = Block.of_text("aaa")
        b = Block.of_text("b").add_text("b").pad_left(1)
        assert a.render() == "aaa"
        assert b.render() == " b\n b"
        assert a.stack_left(b).render() == "aaa\n b\n b"

    def test_add_text_scenario(self) -> None:
        block = (
            Block.of_text(" a a   ")
            .add_text("bbbbb  ")
            .add_text("c  ")
            .pad_bottom(2)
        )
        assert block.render() == " a a\nbbbbb\nc\n\n"

    def test_rendering_keeps_width(self) -> None:
        block = Block.of_text("a a   ")
        block.render()
        assert block.width == 6
        assert block.lines == ("a a   ",)

    def test_str_matches_render(self) -> None:
        block = Block.of_text("x ").add_text("yz")
        assert str(block) == block.render()


class TestRenderConfig:
    """Rendering options."""

    def test_untrimmed(self) -> None:
        block = Block.of_text("a").add_text("bcd")
        assert block.render(RenderConfig(trim_trailing=False)) == "a  \nbcd"

    def test_custom_separator(self) -> None:
        block = Block.of_lines(["a", "b"])
        assert block.render(RenderConfig(separator="\r\n")) == "a\r\nb"

    def test_default_config_matches_plain_render(self) -> None:
        block = Block.of_lines(["a  ", "b"])
        assert block.render(RenderConfig()) == block.render()
