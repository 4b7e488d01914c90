"""Currency Formatting — integer cents to US-dollar display strings and back.

Invariants:
    - format_currency never goes through float: 1999 -> "$19.99" exactly
    - parse_currency(format_currency(c)) == c for every integer c, however large
    - Negative amounts render with a leading minus: -150 -> "-$1.50"
    - Conversion failures surface as ValueError, never decimal.InvalidOperation
"""

from decimal import (
    Decimal, DecimalException, InvalidOperation, ROUND_HALF_UP, localcontext,
)

CURRENCY_SYMBOL = "$"
_CENT = Decimal("1")


def format_currency(cents: int) -> str:
    """Render integer cents as "$1,234.56"."""
    sign = "-" if cents < 0 else ""
    dollars, remainder = divmod(abs(int(cents)), 100)
    return f"{sign}{CURRENCY_SYMBOL}{dollars:,}.{remainder:02d}"


def parse_currency(text: str) -> int:
    """Parse a display string produced by format_currency back to cents.

    Raises ValueError for text that is not a dollar amount.
    """
    raw = text.strip()
    negative = raw.startswith("-")
    if negative:
        raw = raw[1:]
    raw = raw.removeprefix(CURRENCY_SYMBOL).replace(",", "")
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ValueError(f"not a currency amount: {text!r}")
    cents = to_cents(value)
    return -cents if negative else cents


def to_cents(amount: Decimal) -> int:
    """Convert a major-unit amount to integer cents, rounding half up.

    Precision grows with the amount so large values convert exactly.
    Raises ValueError for non-finite amounts.
    """
    if not amount.is_finite():
        raise ValueError(f"not a finite amount: {amount}")
    _, digits, exponent = amount.as_tuple()
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(digits) + max(exponent, 0) + 3)
        try:
            return int((amount * 100).quantize(_CENT, rounding=ROUND_HALF_UP))
        except DecimalException:
            raise ValueError(f"amount out of range: {amount}")
