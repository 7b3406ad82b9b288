"""Example layouts built with the block algebra."""

from textblock.examples.boxes import overlapping_boxes, square
from textblock.examples.invoice import Invoice, Item, render_invoice, sample_invoice
from textblock.examples.math_expressions import integral_calculation

__all__ = [
    "Invoice",
    "Item",
    "integral_calculation",
    "overlapping_boxes",
    "render_invoice",
    "sample_invoice",
    "square",
]
