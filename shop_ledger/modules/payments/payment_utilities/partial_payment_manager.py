"""
payment_utilities/partial_payment_manager.py

Split a single entered amount across a customer's open credit sales.

Pure functions; no DB and no mutation of the inputs. The credit repository
applies the returned rows to its sales and persists them.

Only the oldest-first (FIFO) policy is offered: open sales are taken in the
order given (collection order == creation order) and each is paid off in
full before the next one is touched. Whatever is left once every balance is
covered is reported as `unallocated`; callers decide what to do with it.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Sequence

from ....utils.helpers import to_decimal as _to_decimal

__all__ = ["allocate_customer_payment"]


def _safe_remaining(val: Any) -> Decimal:
    d = _to_decimal(val)
    return d if d > 0 else Decimal("0")


def allocate_customer_payment(
    amount: float,
    open_sales: Sequence[Dict[str, Any]],
) -> Dict[str, Any]:
    """
    Allocate `amount` over `open_sales` (dicts with 'sale_id' and
    'remaining_balance'), oldest first.

    Returns:
        {
          "requested_total": float,
          "allocated_total": float,
          "unallocated": float,
          "rows": [{"sale_id": ..., "alloc": float, "settles": bool}, ...],
        }
    Rows are only produced for sales that receive a non-zero amount.
    """
    requested = _to_decimal(amount)
    if requested < 0:
        requested = Decimal("0")
    left = requested

    rows: List[Dict[str, Any]] = []
    for s in open_sales:
        if left <= 0:
            break
        rem = _safe_remaining(s.get("remaining_balance", 0.0))
        if rem <= 0:
            continue
        if left >= rem:
            rows.append({"sale_id": s.get("sale_id"), "alloc": float(rem), "settles": True})
            left -= rem
        else:
            rows.append({"sale_id": s.get("sale_id"), "alloc": float(left), "settles": False})
            left = Decimal("0")

    return {
        "requested_total": float(requested),
        "allocated_total": float(requested - left),
        "unallocated": float(left),
        "rows": rows,
    }
