"""
payment_utilities/calculations.py

Pure helpers for sale balance math. Used by the sales and credit
repositories when deriving paid/remaining/status, and by the UI for
previews.

Do not import repos or open DB connections here.
Only compute numbers; formatting belongs in the UI.
"""
from __future__ import annotations

from typing import Tuple

from ....constants import (
    PAYMENT_CREDIT,
    STATUS_PAID,
    STATUS_PARTIAL,
    STATUS_UNPAID,
)
from ....utils.helpers import money, to_decimal

__all__ = [
    "sale_total",
    "initial_settlement",
    "status_from_paid",
    "apply_to_sale",
    "is_balanced",
]


# -----------------------------
# Sales helpers
# -----------------------------

def sale_total(sale_price: float, quantity: int) -> float:
    """total = sale_price × quantity, at cent precision."""
    return money(to_decimal(sale_price) * int(quantity))


def initial_settlement(payment_type: str, total: float) -> Tuple[float, float, str]:
    """
    (paid_amount, remaining_balance, status) for a freshly committed sale.

    Credit sales start fully outstanding; anything else is settled on the spot.
    """
    if payment_type == PAYMENT_CREDIT:
        return 0.0, total, STATUS_UNPAID
    return total, 0.0, STATUS_PAID


def status_from_paid(total: float, paid: float) -> str:
    """
    'Paid' when nothing is left, 'Unpaid' when nothing was paid, else 'Partial'.
    """
    remaining = to_decimal(total) - to_decimal(paid)
    if remaining <= 0:
        return STATUS_PAID
    if to_decimal(paid) <= 0:
        return STATUS_UNPAID
    return STATUS_PARTIAL


def apply_to_sale(paid: float, remaining: float, amount: float) -> Tuple[float, float, str]:
    """
    Project a sale after `amount` is applied against it.

    `amount` is expected to be <= remaining (the allocator guarantees it).
    Returns (new_paid, new_remaining, new_status).
    """
    amt = to_decimal(amount)
    new_paid = to_decimal(paid) + amt
    new_remaining = to_decimal(remaining) - amt
    if new_remaining < 0:
        new_remaining = to_decimal(0)
    status = status_from_paid(new_paid + new_remaining, new_paid)
    return money(new_paid), money(new_remaining), status


def is_balanced(paid: float, remaining: float, total: float) -> bool:
    """paid + remaining == total, compared in decimal."""
    return to_decimal(paid) + to_decimal(remaining) == to_decimal(total)
