"""Presentation-boundary helpers: the only place money gets rounded."""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP, localcontext

from spendboard.config import CURRENCY_SYMBOL, LABEL_MAX_CHARS

CENT = Decimal("0.01")


def round_money(value) -> Decimal:
    amount = Decimal(str(value))
    if not amount.is_finite():
        return amount
    with localcontext() as ctx:
        # quantize needs every integer digit plus two decimals
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(value, currency: str = CURRENCY_SYMBOL) -> str:
    """Return a human-readable currency string."""

    return f"{currency}{round_money(value):,.2f}"


def format_date(d: date) -> str:
    # e.g. "Nov 28, 2025"
    return f"{d.strftime('%b')} {d.day}, {d.year}"


def truncate_label(text: str, max_chars: int = LABEL_MAX_CHARS) -> str:
    if len(text) > max_chars:
        return text[:max_chars] + "..."
    return text
