from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Dict, List

from ...constants import KEY_SALES, STATUS_PAID, STATUS_UNPAID
from ...modules.payments.payment_utilities.calculations import apply_to_sale
from ...modules.payments.payment_utilities.partial_payment_manager import (
    allocate_customer_payment,
)
from ...utils.helpers import money, to_decimal
from ...utils.validators import is_strictly_positive_number
from .errors import InvalidAmountError

if TYPE_CHECKING:
    from .ledger_book import LedgerBook
    from .sales_repo import Sale

_log = logging.getLogger(__name__)


@dataclass
class CreditAccount:
    customer_name: str
    total_outstanding: float
    status: str
    sale_count: int


@dataclass
class PaymentAllocation:
    sale_id: str
    applied: float
    remaining_balance: float
    status: str


@dataclass
class PaymentResult:
    customer_name: str
    requested: float
    applied: float
    unapplied: float
    allocations: List[PaymentAllocation] = field(default_factory=list)


class CreditRepo:
    """
    Credit settlement: per-customer view over credit sales, and payment
    allocation against them.

    Nothing here is stored on its own. The customer view is rebuilt from the
    sale list on every call, and a payment only changes the paid/remaining/
    status fields of the sales it settles.
    """

    def __init__(self, book: "LedgerBook"):
        self.book = book

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def credit_accounts(self) -> List[CreditAccount]:
        """
        Credit sales grouped by customer, in order of each customer's first
        sale. Status comes from the summed balance only ('Paid' at zero,
        'Unpaid' otherwise).
        """
        totals: Dict[str, Decimal] = {}
        counts: Dict[str, int] = {}
        for s in self.book.sales:
            if not s.is_credit:
                continue
            name = s.customer_name or ""
            totals[name] = totals.get(name, to_decimal(0)) + to_decimal(s.remaining_balance or 0)
            counts[name] = counts.get(name, 0) + 1

        accounts = []
        for name, outstanding in totals.items():
            amt = money(outstanding)
            accounts.append(
                CreditAccount(
                    customer_name=name,
                    total_outstanding=amt,
                    status=STATUS_PAID if amt == 0 else STATUS_UNPAID,
                    sale_count=counts[name],
                )
            )
        return accounts

    def sales_for(self, customer_name: str) -> List["Sale"]:
        return [s for s in self.book.sales if s.is_credit and s.customer_name == customer_name]

    def open_sales_for(self, customer_name: str) -> List["Sale"]:
        """The customer's credit sales with something still owed, oldest first."""
        return [s for s in self.sales_for(customer_name) if s.remaining_balance > 0]

    def outstanding_for(self, customer_name: str) -> float:
        return money(sum((to_decimal(s.remaining_balance) for s in self.sales_for(customer_name)), to_decimal(0)))

    def total_outstanding(self) -> float:
        return money(sum((to_decimal(a.total_outstanding) for a in self.credit_accounts()), to_decimal(0)))

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------

    def record_payment(self, customer_name: str, amount: float) -> PaymentResult:
        """
        Apply a payment to the customer's open credit sales, oldest first.

        Each sale is paid off in full while the payment covers it; the first
        one it cannot cover is settled partially and the walk stops. Any
        amount left after every balance is cleared is not kept anywhere; it
        comes back as `unapplied`.
        """
        if not is_strictly_positive_number(amount) or money(amount) <= 0:
            raise InvalidAmountError("Payment amount must be greater than zero.")

        open_sales = self.open_sales_for(customer_name)
        plan = allocate_customer_payment(
            money(amount),
            [{"sale_id": s.sale_id, "remaining_balance": s.remaining_balance} for s in open_sales],
        )

        by_id = {s.sale_id: s for s in open_sales}
        allocations: List[PaymentAllocation] = []
        for row in plan["rows"]:
            sale = by_id[row["sale_id"]]
            sale.paid_amount, sale.remaining_balance, sale.status = apply_to_sale(
                sale.paid_amount, sale.remaining_balance, row["alloc"]
            )
            allocations.append(
                PaymentAllocation(
                    sale_id=sale.sale_id,
                    applied=money(row["alloc"]),
                    remaining_balance=sale.remaining_balance,
                    status=sale.status,
                )
            )

        if allocations:
            self.book.save(KEY_SALES)

        result = PaymentResult(
            customer_name=customer_name,
            requested=money(amount),
            applied=money(plan["allocated_total"]),
            unapplied=money(plan["unallocated"]),
            allocations=allocations,
        )
        _log.info(
            "Payment from %s: %.2f applied over %d sale(s), %.2f unapplied",
            customer_name, result.applied, len(allocations), result.unapplied,
        )
        return result
