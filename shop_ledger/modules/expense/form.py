"""
Dialog for creating and editing expenses.

Collects: title and amount. The date is stamped by ExpensesRepo.
Validates: non-empty title, amount > 0.00.
On accept, `payload()` returns a dict compatible with ExpensesRepo.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLineEdit,
    QDoubleSpinBox,
    QVBoxLayout,
    QLabel,
    QWidget,
)
from PySide6.QtCore import Qt

from ...database.repositories.expenses_repo import Expense
from ...utils.validators import non_empty


class ExpenseForm(QDialog):
    """Modal dialog for adding or editing an expense."""

    def __init__(self, parent: QWidget | None = None, *, initial: Optional[Expense] = None):
        super().__init__(parent)
        self.setWindowTitle("Edit Expense" if initial else "Add Expense")
        self.setModal(True)
        self.setMinimumWidth(380)

        # --- Widgets ------------------------------------------------------
        self.edt_title = QLineEdit()
        self.edt_title.setPlaceholderText("e.g., Rent, electricity, transport…")
        self.edt_title.setClearButtonEnabled(True)

        self.spin_amount = QDoubleSpinBox()
        self.spin_amount.setMinimum(0.0)   # validation enforces > 0.0
        self.spin_amount.setMaximum(10**9)
        self.spin_amount.setDecimals(2)
        self.spin_amount.setButtonSymbols(QDoubleSpinBox.ButtonSymbols.NoButtons)
        self.spin_amount.setAlignment(Qt.AlignRight)

        # Inline error message (hidden by default)
        self.lbl_error = QLabel("")
        self.lbl_error.setObjectName("errorLabel")
        self.lbl_error.setStyleSheet("color:#b00020;")
        self.lbl_error.setVisible(False)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

        # --- Layout -------------------------------------------------------
        layout = QVBoxLayout(self)
        form = QFormLayout()
        form.addRow("Title*", self.edt_title)
        form.addRow("Amount*", self.spin_amount)
        layout.addLayout(form)
        layout.addWidget(self.lbl_error)
        layout.addWidget(self.buttons)

        if initial is not None:
            self.edt_title.setText(initial.title)
            self.spin_amount.setValue(float(initial.amount))

        self._payload: Optional[dict] = None

    # ----------------------------------------------------------------------
    # Validation & payload
    # ----------------------------------------------------------------------
    def _fail(self, message: str, widget_to_focus: QWidget) -> None:
        self.lbl_error.setText(message)
        self.lbl_error.setVisible(True)
        widget_to_focus.setFocus()

    def get_payload(self) -> dict | None:
        """Validate inputs and return a dict or None on failure."""
        self.lbl_error.setVisible(False)

        if not non_empty(self.edt_title.text()):
            self._fail("Title cannot be empty.", self.edt_title)
            return None

        amount = float(self.spin_amount.value())
        if amount <= 0.0:
            self._fail("Amount must be greater than 0.00.", self.spin_amount)
            return None

        return {"title": self.edt_title.text().strip(), "amount": amount}

    def accept(self) -> None:  # type: ignore[override]
        p = self.get_payload()
        if p is None:
            return
        self._payload = p
        super().accept()

    def payload(self) -> dict | None:
        """Return the last accepted payload, or None if dialog was canceled."""
        return self._payload
