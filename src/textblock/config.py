"""Rendering configuration and shared defaults."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TRANSPARENCY = " "
TAB_WIDTH = 3


@dataclass(frozen=True)
class RenderConfig:
    """Options for flattening a block into a string."""

    separator: str = "\n"
    trim_trailing: bool = True


DEFAULT_RENDER_CONFIG = RenderConfig()
