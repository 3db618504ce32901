"""
Formatting helpers shared by services and endpoints.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Union


def to_cents(amount: Decimal) -> int:
    """Convert a dollar amount to whole cents, rounding half up.

    Decimal arithmetic keeps two‑decimal inputs exact, so ``12.34``
    becomes ``1234``.
    """
    return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_currency(amount_in_cents: int) -> str:
    """Render cents as US dollars, e.g. ``123456`` -> ``"$1,234.56"``."""
    dollars = Decimal(amount_in_cents) / 100
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,.2f}"


def generate_pagination(current_page: int, total_pages: int) -> List[Union[int, str]]:
    """Page links to render, with ``"..."`` standing for skipped pages."""
    if total_pages <= 7:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return [1, 2, 3, "...", total_pages - 1, total_pages]

    if current_page >= total_pages - 2:
        return [1, 2, "...", total_pages - 2, total_pages - 1, total_pages]

    return [
        1,
        "...",
        current_page - 1,
        current_page,
        current_page + 1,
        "...",
        total_pages,
    ]
