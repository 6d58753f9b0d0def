import logging
from PySide6.QtWidgets import QWidget, QDialog
from ..base_module import BaseModule
from .view import CreditView
from .model import CreditAccountsModel
from .payment_form import CustomerPaymentForm
from ...database.repositories.credit_repo import CreditRepo, CreditAccount, PaymentResult
from ...database.repositories.errors import DomainError
from ...utils import ui_helpers as ui
from ...utils.helpers import fmt_money

_log = logging.getLogger(__name__)


class CreditController(BaseModule):
    """Outstanding balances per credit customer and payment collection."""

    def __init__(self, book):
        super().__init__()
        self.book = book
        self.repo = CreditRepo(book)
        self.view = CreditView()
        self.model = CreditAccountsModel([])
        self.view.table.setModel(self.model)
        self.view.btn_pay.clicked.connect(self._on_pay)
        self.view.table.doubleClicked.connect(lambda _=None: self._on_pay())
        self.refresh()

    def get_widget(self) -> QWidget:
        return self.view

    def refresh(self):
        accounts = self.repo.credit_accounts()
        self.model.replace(accounts)
        self.view.table.resizeColumnsToContents()
        self.view.set_empty(not accounts)
        self.view.lbl_total.setText(
            f"Total outstanding: {fmt_money(self.repo.total_outstanding())}" if accounts else ""
        )

    def _selected(self) -> CreditAccount | None:
        row = self.view.table.selected_row()
        return None if row is None else self.model.at(row)

    def _on_pay(self):
        current = self._selected()
        if current is None:
            ui.info(self.view, "Select", "Please select a customer.")
            return
        dlg = CustomerPaymentForm(
            self.view,
            customer_name=current.customer_name,
            outstanding=current.total_outstanding,
        )
        if dlg.exec() != QDialog.Accepted:
            return
        payload = dlg.payload()
        if not payload:
            return
        result = self.record_payment(**payload)
        if result is not None and result.unapplied > 0:
            ui.info(
                self.view,
                "Payment recorded",
                f"{fmt_money(result.applied)} applied. "
                f"{fmt_money(result.unapplied)} exceeded the balance and was not recorded.",
            )

    def record_payment(self, customer_name: str, amount: float) -> PaymentResult | None:
        try:
            result = self.repo.record_payment(customer_name, amount)
        except DomainError as e:
            ui.info(self.view, *ui.map_error("Payment not recorded", e))
            return None
        self.refresh()
        self.data_changed.emit()
        return result
