"""
Financial report, recomputed from scratch on every call.

    total_revenue  = Σ sale.total
    total_cost     = Σ product.cost_price × sale.quantity
    gross_profit   = total_revenue - total_cost
    total_expenses = Σ expense.amount
    net_profit     = gross_profit - total_expenses
    top_product    = name with the most units sold

Cost of goods joins each sale to the *current* product whose name equals the
sale's product_name snapshot, not by product_id. Renaming a product therefore
drops its older sales out of the cost line (they keep counting as revenue).
A sale with no product of that name contributes no cost.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Dict, Optional, Tuple

from ...utils.helpers import money, to_decimal

if TYPE_CHECKING:
    from .ledger_book import LedgerBook


@dataclass(frozen=True)
class ReportSnapshot:
    total_revenue: float
    total_cost: float
    gross_profit: float
    total_expenses: float
    net_profit: float
    top_product: Optional[str]

    def chart_values(self) -> Tuple[float, float, float, float]:
        """(revenue, gross profit, expenses, net profit), the order the chart draws them."""
        return (self.total_revenue, self.gross_profit, self.total_expenses, self.net_profit)


class ReportingRepo:
    def __init__(self, book: "LedgerBook"):
        self.book = book

    def units_by_product_name(self) -> Dict[str, int]:
        """Units sold per product name, keyed in order of first appearance."""
        units: Dict[str, int] = {}
        for s in self.book.sales:
            units[s.product_name] = units.get(s.product_name, 0) + int(s.quantity)
        return units

    @staticmethod
    def _top(units: Dict[str, int]) -> Optional[str]:
        # strict '>' keeps the earliest name on ties
        top, best = None, 0
        for name, qty in units.items():
            if qty > best:
                top, best = name, qty
        return top

    def snapshot(self) -> ReportSnapshot:
        cost_by_name: Dict[str, float] = {}
        for p in self.book.products:
            # first product with a given name wins, like a linear find
            cost_by_name.setdefault(p.name, p.cost_price)

        revenue = Decimal("0")
        cost = Decimal("0")
        for s in self.book.sales:
            revenue += to_decimal(s.total)
            unit_cost = cost_by_name.get(s.product_name)
            if unit_cost is not None:
                cost += to_decimal(unit_cost) * int(s.quantity)

        expenses = sum((to_decimal(e.amount) for e in self.book.expenses), Decimal("0"))
        gross = revenue - cost
        net = gross - expenses

        return ReportSnapshot(
            total_revenue=money(revenue),
            total_cost=money(cost),
            gross_profit=money(gross),
            total_expenses=money(expenses),
            net_profit=money(net),
            top_product=self._top(self.units_by_product_name()),
        )
