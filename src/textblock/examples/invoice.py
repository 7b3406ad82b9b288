"""Plain-text invoice laid out with blocks."""

from __future__ import annotations

from dataclasses import dataclass, field

from textblock.block import Block

PAGE_WIDTH = 70
LEFT_MARGIN = 2
INFO_LEFT_MARGIN = 10

# Item table columns: description, unit price, quantity, amount
DESCRIPTION_WIDTH = 36
PRICE_WIDTH = 12
QUANTITY_WIDTH = 10
AMOUNT_WIDTH = 12

TOTALS_WIDTH = 22


@dataclass
class Item:
    description: str
    unit_price: float
    quantity: int

    @property
    def amount(self) -> float:
        return self.unit_price * self.quantity


@dataclass
class Invoice:
    date: str
    invoice_no: str
    company_name: str
    company_slogan: str
    company_address: list[str] = field(default_factory=list)
    bill_to: list[str] = field(default_factory=list)
    ship_to: list[str] = field(default_factory=list)
    items: list[Item] = field(default_factory=list)
    tax_rate: float = 0.0

    @property
    def subtotal(self) -> float:
        return sum(item.amount for item in self.items)

    @property
    def sales_tax(self) -> float:
        return self.tax_rate * self.subtotal

    @property
    def total(self) -> float:
        return self.subtotal + self.sales_tax


def _info(left_column: int, title: str, content_lines: list[str]) -> Block:
    """Right-aligned title in a fixed column, content lines to its right."""
    left = Block.of(title).pad_to_width_left(left_column)
    right = Block.of_lines(content_lines)
    return left.pad_right(1).beside_top(right)


def _money(value: float, width: int) -> Block:
    return Block.of(f"$ {value:.2f}").pad_to_width_left(width)


def _hline(width: int, char: str = "─") -> Block:
    return Block.of_height(1).fill_right(width, char)


def _item_line(item: Item) -> Block:
    desc = Block.of(item.description).pad_to_width_right(DESCRIPTION_WIDTH)
    unit = _money(item.unit_price, PRICE_WIDTH)
    quantity = Block.of(item.quantity).pad_to_width_left(QUANTITY_WIDTH)
    amount = _money(item.amount, AMOUNT_WIDTH)
    return desc.beside_top(unit).beside_top(quantity).beside_top(amount)


def render_invoice(invoice: Invoice) -> Block:
    right_column = PAGE_WIDTH - 32

    # Header
    company_info = (
        Block.of(invoice.company_name)
        .add_text(invoice.company_slogan)
        .pad_bottom(1)
        .add_multiple_texts(invoice.company_address)
    )
    invoice_info = (
        Block.of("INVOICE")
        .pad_to_width_left(10)
        .pad_bottom(1)
        .stack_left(_info(INFO_LEFT_MARGIN, "DATE", [invoice.date]))
        .stack_left(_info(INFO_LEFT_MARGIN, "INVOICE #", [invoice.invoice_no]))
    )
    top = company_info.pad_top(2).in_front_of(invoice_info.pad_left(right_column))

    # Customer addresses
    bill_address = _info(INFO_LEFT_MARGIN, "BILL TO", invoice.bill_to)
    ship_address = _info(INFO_LEFT_MARGIN, "SHIP TO", invoice.ship_to)
    addresses = bill_address.in_front_of(ship_address.pad_left(right_column))

    # Item table
    hline = _hline(PAGE_WIDTH)
    header = (
        Block.of("DESCRIPTION")
        .pad_to_width_right(DESCRIPTION_WIDTH)
        .beside_top(Block.of("UNIT PRICE").pad_to_width_left(PRICE_WIDTH))
        .beside_top(Block.of("QUANTITY").pad_to_width_left(QUANTITY_WIDTH))
        .beside_top(Block.of("AMOUNT").pad_to_width_left(AMOUNT_WIDTH))
    )
    items = Block.empty()
    for item in invoice.items:
        items = items.stack_left(_item_line(item))
    table = header.stack_left(hline).stack_left(items).stack_left(hline)

    # Totals
    thin = _hline(TOTALS_WIDTH)
    thick = _hline(TOTALS_WIDTH, "═")
    tax_rate = Block.of(f"{invoice.tax_rate * 100:.0f} %").pad_to_width_left(PRICE_WIDTH)
    totals = (
        Block.of("SUBTOTAL").beside_top(_money(invoice.subtotal, PRICE_WIDTH))
        .stack_right(thin)
        .stack_right(Block.of("TAX RATE").beside_top(tax_rate))
        .stack_right(thin)
        .stack_right(Block.of("SALES TAX").beside_top(_money(invoice.sales_tax, PRICE_WIDTH)))
        .stack_right(thin)
        .stack_right(Block.of("TOTAL").beside_top(_money(invoice.total, PRICE_WIDTH)))
        .stack_right(thick)
        .pad_to_width_left(PAGE_WIDTH)
    )

    return (
        top.pad_bottom(3)
        .stack_left(addresses)
        .pad_bottom(3)
        .stack_left(table)
        .stack_left(totals)
        .pad_left(LEFT_MARGIN)
    )


def sample_invoice() -> Invoice:
    return Invoice(
        date="2020/01/01",
        invoice_no="12345678",
        company_name="Acme",
        company_slogan="Where customers are billed",
        company_address=["Address", "City, State ZIP"],
        bill_to=["Name", "Address", "City, State ZIP"],
        ship_to=["Name", "Address", "City, State ZIP"],
        items=[
            Item("Toilet paper, 13-pack", 3.95, 200),
            Item("Coffee, medium ground, 3 lbs", 6.95, 4),
        ],
        tax_rate=0.08,
    )
