"""Conversion of arbitrary values into block text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from textblock.block import Block

logger = logging.getLogger(__name__)


@runtime_checkable
class SupportsBlock(Protocol):
    """A value that knows how to lay itself out as a block."""

    def __block__(self) -> Block: ...


def to_text(value: Any) -> str:
    """Return the canonical display string for *value*.

    Booleans render as ``"true"``/``"false"``; strings are used verbatim;
    everything else goes through ``str()``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if not isinstance(value, (int, float)):
        logger.debug("Converting %s to block text via str()", type(value).__name__)
    return str(value)
