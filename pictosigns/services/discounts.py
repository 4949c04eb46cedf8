# pictosigns/services/discounts.py
from __future__ import annotations

from typing import Iterable, Optional

from pictosigns.models import Discount


def select_discount(discounts: Iterable[Discount], quantity: int) -> Optional[Discount]:
    """
    Pick the volume discount tier for ``quantity``.

    The tightest qualifying tier wins: the largest threshold that is still
    ``<= quantity``. On equal thresholds the first one seen is kept.
    Returns ``None`` (no discount) when no tier qualifies.
    """
    chosen: Optional[Discount] = None
    for discount in discounts:
        if discount.quantity > quantity:
            continue
        if chosen is None or discount.quantity > chosen.quantity:
            chosen = discount
    return chosen


def discount_percent(discount: Optional[Discount]) -> int:
    return discount.amount if discount is not None else 0
