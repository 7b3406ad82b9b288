"""Two-dimensional typesetting of mathematical expressions."""

from __future__ import annotations

from textblock.block import Block


def num(n: int) -> Block:
    return Block.of(n)


def add(a: Block, b: Block) -> Block:
    return a.beside_center_bottom(Block.of(" + ")).beside_center_bottom(b)


def power(base: Block, exponent: Block) -> Block:
    """Raise *exponent* above the top-right corner of *base*."""
    return base.pad_top(exponent.height).beside_top(exponent)


def mult(term1: Block, term2: Block) -> Block:
    return term1.pad_right(1).beside_center_bottom(term2)


def div(dividend: Block, divisor: Block) -> Block:
    """Fraction with a bar as wide as the wider operand."""
    width = max(dividend.width, divisor.width)
    bar = Block.of_width(width).fill_bottom(1, "─")
    return dividend.stack_left(bar).stack_center_right(divisor)


def _growing_middle_stack(total_height: int, top: str, middle: str, bottom: str) -> Block:
    m = Block.of_width(1).fill_bottom(total_height - 2, middle)
    return Block.of(top).stack_left(m).stack_left(Block.of(bottom))


def paren(expr: Block) -> Block:
    """Surround *expr* with parentheses tall enough to enclose it."""
    if expr.height <= 1:
        left = Block.of_text("(")
        right = Block.of_text(")")
    else:
        left = _growing_middle_stack(expr.height, "⎛", "⎜", "⎝")
        right = _growing_middle_stack(expr.height, "⎞", "⎟", "⎠")
    return left.beside_center_bottom(expr).beside_center_bottom(right)


def func(name: Block, argument: Block) -> Block:
    return name.beside_center_bottom(paren(argument))


def integral(expr: Block, differential: str) -> Block:
    symbol = Block.of_text("⌠").add_text("⎮").add_text("⌡")
    return (
        symbol.pad_right(1)
        .beside_center_top(expr)
        .pad_right(1)
        .beside_center_top(Block.of(differential))
    )


def equals(left: Block, right: Block) -> Block:
    return left.beside_center_bottom(Block.of("  =  ")).beside_center_bottom(right)


def _e() -> Block:
    return Block.of("e")


def _pow2(base: Block) -> Block:
    return power(base, num(2))


def integral_calculation() -> Block:
    """Step-by-step evaluation of the integral of cos(x) squared."""
    expr1 = integral(func(_pow2(Block.of("cos")), Block.of("x")), "dx")

    expr2 = integral(
        _pow2(
            paren(
                div(
                    add(power(_e(), Block.of("ix")), power(_e(), Block.of("-ix"))),
                    num(2),
                )
            )
        ),
        "dx",
    )

    expr3 = mult(
        div(num(1), num(4)),
        integral(
            paren(
                add(
                    power(_e(), Block.of("2ix")),
                    add(num(2), power(_e(), Block.of("-2ix"))),
                )
            ),
            "dx",
        ),
    )

    expr4 = add(
        mult(
            div(num(1), num(4)),
            paren(add(Block.of("2x"), func(Block.of("sin"), Block.of("2x")))),
        ),
        Block.of("C"),
    )

    left_column = expr1.width
    line1 = equals(expr1, expr2)
    line2 = equals(Block.of_width(left_column), expr3)
    line3 = equals(Block.of_width(left_column), expr4)

    return (
        line1.pad_bottom(2)
        .stack_left(line2)
        .pad_bottom(2)
        .stack_left(line3)
    )
