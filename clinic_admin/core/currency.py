"""Currency formatting for amounts stored in cents."""

from decimal import Decimal

CURRENCY_SYMBOL = "R$"


def format_currency_in_cents(amount_in_cents: int | None) -> str:
    """
    Format an amount in cents as Brazilian real.

    Examples:
        >>> format_currency_in_cents(123456)
        'R$ 1.234,56'
        >>> format_currency_in_cents(None)
        'R$ 0,00'
    """
    cents = amount_in_cents or 0
    sign = "-" if cents < 0 else ""
    amount = Decimal(abs(cents)) / 100
    # 1,234.56 -> 1.234,56
    formatted = f"{amount:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{CURRENCY_SYMBOL} {formatted}"
