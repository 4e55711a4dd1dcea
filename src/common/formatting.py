"""Display helpers for KRW amounts."""

from __future__ import annotations

import math

MANWON = 10_000


def format_money(amount: float) -> str:
    """Format an amount as a Korean currency string, e.g. ``3,000,000원``.

    Fractions are floored, matching how the calculators round.
    """
    return f"{math.floor(amount):,}원"


def manwon_to_won(amount: float) -> float:
    """Convert 만원 units (as typed into the calculators) to won."""
    return amount * MANWON
