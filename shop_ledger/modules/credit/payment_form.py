from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QVBoxLayout,
    QHBoxLayout,
    QGroupBox,
    QLabel,
    QGridLayout,
    QLineEdit,
    QMessageBox,
)

from ...utils.helpers import fmt_money
from ...utils.validators import try_parse_float


class CustomerPaymentForm(QDialog):
    """
    Payment dialog for a credit customer.

    The amount is spread over the customer's open credit sales by
    CreditRepo.record_payment, oldest first. Paying more than the
    outstanding total is allowed; the surplus is reported back, not kept.
    """

    def __init__(self, parent=None, *, customer_name: str, outstanding: float):
        super().__init__(parent)
        self.setWindowTitle("Record Payment")
        self.setModal(True)
        self._customer_name = customer_name
        self._outstanding = float(outstanding)
        self._payload = None

        outer = QVBoxLayout(self)
        outer.setContentsMargins(12, 12, 12, 12)
        outer.setSpacing(10)

        # --- Customer / outstanding ---
        box_info = QGroupBox("Customer")
        info_lay = QHBoxLayout(box_info)
        self.lbl_customer = QLabel(customer_name)
        self.lbl_outstanding = QLabel(f"Outstanding: {fmt_money(self._outstanding)}")
        info_lay.addWidget(self.lbl_customer)
        info_lay.addStretch(1)
        info_lay.addWidget(self.lbl_outstanding)
        outer.addWidget(box_info)

        # --- Payment details ---
        box_pay = QGroupBox("Payment Details")
        grid = QGridLayout(box_pay)
        grid.setHorizontalSpacing(12)
        grid.setVerticalSpacing(8)
        self.amount = QLineEdit()
        self.amount.setPlaceholderText(f"{self._outstanding:0.2f}")
        self.lbl_hint = QLabel("")
        self.lbl_hint.setStyleSheet("color:#8a6d00;")
        grid.addWidget(QLabel("Amount"), 0, 0)
        grid.addWidget(self.amount, 0, 1)
        grid.addWidget(self.lbl_hint, 1, 0, 1, 2)
        outer.addWidget(box_pay, 1)

        # --- Buttons ---
        bb = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.btn_ok = bb.button(QDialogButtonBox.Ok)
        self.btn_ok.setText("Record Payment")
        bb.accepted.connect(self.accept)
        bb.rejected.connect(self.reject)
        outer.addWidget(bb)

        self.amount.textChanged.connect(self._on_amount_changed)
        self._on_amount_changed()
        self.resize(420, 220)

    def _amount(self) -> float:
        ok, val = try_parse_float(self.amount.text().strip())
        return val if ok else 0.0

    def _on_amount_changed(self):
        amt = self._amount()
        self.btn_ok.setEnabled(amt > 0.0)
        if amt - self._outstanding > 1e-9:
            self.lbl_hint.setText(
                f"Only {fmt_money(self._outstanding)} is owed; the rest will not be recorded."
            )
        else:
            self.lbl_hint.setText("")

    def accept(self):
        amt = self._amount()
        if amt <= 0.0:
            QMessageBox.warning(self, "Cannot record payment", "Payment amount must be greater than zero.")
            return
        self._payload = {"customer_name": self._customer_name, "amount": amt}
        super().accept()

    def payload(self):
        return self._payload
