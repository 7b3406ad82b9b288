"""Exceptions raised by the block algebra."""

from __future__ import annotations


class BlockError(Exception):
    """Base class for block layout errors."""


class InvalidArgumentError(BlockError, ValueError):
    """A size or fill character that no block operation can accept."""


class LayoutInvariantError(BlockError, AssertionError):
    """Two blocks were spliced without first equalizing their shared edge."""

    def __init__(self, operation: str, expected: int, actual: int) -> None:
        super().__init__(
            f"{operation}: operands must agree on the shared dimension "
            f"(got {expected} and {actual})"
        )
        self.operation = operation
        self.expected = expected
        self.actual = actual
