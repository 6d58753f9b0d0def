"""
Repository for operating expenses.

Expenses are independent of inventory and sales; they only feed the
`total_expenses` / `net_profit` lines of the report. Validation is limited
to a non-empty title and a strictly positive amount.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from ...constants import KEY_EXPENSES
from ...utils.helpers import money, new_id, now_str, to_decimal
from ...utils.validators import is_strictly_positive_number, non_empty
from .errors import DomainError, InvalidAmountError, NotFoundError

if TYPE_CHECKING:
    from .ledger_book import LedgerBook

_log = logging.getLogger(__name__)


@dataclass
class Expense:
    expense_id: str
    title: str
    amount: float
    date: str


class ExpensesRepo:
    def __init__(self, book: "LedgerBook"):
        self.book = book

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_expenses(self) -> List[Expense]:
        return list(self.book.expenses)

    def get(self, expense_id: str) -> Optional[Expense]:
        for e in self.book.expenses:
            if e.expense_id == expense_id:
                return e
        return None

    def total(self) -> float:
        return money(sum((to_decimal(e.amount) for e in self.book.expenses), to_decimal(0)))

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    @staticmethod
    def _validate(title: str, amount) -> None:
        if not non_empty(title):
            raise DomainError("Expense title cannot be empty.")
        if not is_strictly_positive_number(amount) or money(amount) <= 0:
            raise InvalidAmountError("Expense amount must be greater than zero.")

    def create_expense(self, title: str, amount: float) -> str:
        self._validate(title, amount)
        exp = Expense(
            expense_id=new_id(),
            title=title.strip(),
            amount=money(amount),
            date=now_str(),
        )
        self.book.expenses.append(exp)
        self.book.save(KEY_EXPENSES)
        _log.info("Expense created: %s %.2f", exp.title, exp.amount)
        return exp.expense_id

    def update_expense(self, expense_id: str, title: str, amount: float) -> None:
        """Replace title and amount; the date is re-stamped like a fresh entry."""
        exp = self.get(expense_id)
        if exp is None:
            raise NotFoundError("Expense", expense_id)
        self._validate(title, amount)
        exp.title = title.strip()
        exp.amount = money(amount)
        exp.date = now_str()
        self.book.save(KEY_EXPENSES)
        _log.info("Expense updated: %s", expense_id)

    def delete_expense(self, expense_id: str) -> None:
        exp = self.get(expense_id)
        if exp is None:
            raise NotFoundError("Expense", expense_id)
        self.book.expenses.remove(exp)
        self.book.save(KEY_EXPENSES)
        _log.info("Expense deleted: %s", expense_id)
