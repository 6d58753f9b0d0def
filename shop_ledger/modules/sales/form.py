"""
Inline sale entry panel.

Collects: product (search-as-you-type), quantity, sale price, payment type
and, for credit sales only, the customer name. Picking a product pre-fills
the sale price with the product's default sell price and shows its stock
and prices.

The panel has two modes. In "new" mode Submit records a sale. After the
controller opens a sale for editing (`load_draft`) Submit commits the edit
and "Cancel Edit" puts the original sale back.

The panel only collects typed values; every business rule is enforced by
SalesRepo.
"""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QComboBox,
    QDoubleSpinBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from ...constants import PAYMENT_CASH, PAYMENT_CREDIT
from ...database.repositories.products_repo import Product
from ...database.repositories.sales_repo import SaleDraft
from ...utils.helpers import fmt_money


class SaleForm(QGroupBox):
    #: emitted with the search text whenever the product search box changes
    search_requested = Signal(str)
    submitted = Signal()
    edit_cancelled = Signal()

    def __init__(self, parent: QWidget | None = None):
        super().__init__("New Sale", parent)
        self._product: Product | None = None
        self._draft: SaleDraft | None = None

        root = QVBoxLayout(self)

        # --- Product search ---
        self.txt_search = QLineEdit()
        self.txt_search.setPlaceholderText("Type to search products…")
        self.txt_search.setClearButtonEnabled(True)
        self.lst_results = QListWidget()
        self.lst_results.setMaximumHeight(120)
        self.lst_results.hide()
        self.lbl_product_info = QLabel("")
        self.lbl_product_info.setTextFormat(Qt.RichText)

        root.addWidget(QLabel("Product:"))
        root.addWidget(self.txt_search)
        root.addWidget(self.lst_results)
        root.addWidget(self.lbl_product_info)

        # --- Sale fields ---
        self.spin_qty = QSpinBox()
        self.spin_qty.setRange(1, 10**9)

        self.spin_price = QDoubleSpinBox()
        self.spin_price.setDecimals(2)
        self.spin_price.setRange(0.0, 10**9)
        self.spin_price.setButtonSymbols(QDoubleSpinBox.ButtonSymbols.NoButtons)
        self.spin_price.setAlignment(Qt.AlignRight)

        self.cmb_payment = QComboBox()
        self.cmb_payment.addItem("Cash", PAYMENT_CASH)
        self.cmb_payment.addItem("Credit", PAYMENT_CREDIT)

        self.txt_customer = QLineEdit()
        self.txt_customer.setPlaceholderText("Customer name")
        self.lbl_customer = QLabel("Customer*")

        form = QFormLayout()
        form.addRow("Quantity", self.spin_qty)
        form.addRow("Sale Price", self.spin_price)
        form.addRow("Payment", self.cmb_payment)
        form.addRow(self.lbl_customer, self.txt_customer)
        root.addLayout(form)

        # --- Buttons ---
        btns = QHBoxLayout()
        self.btn_submit = QPushButton("Submit Sale")
        self.btn_cancel_edit = QPushButton("Cancel Edit")
        self.btn_cancel_edit.hide()
        btns.addStretch(1)
        btns.addWidget(self.btn_cancel_edit)
        btns.addWidget(self.btn_submit)
        root.addLayout(btns)
        root.addStretch(1)

        # --- Wiring ---
        self.txt_search.textChanged.connect(self._on_search_text)
        self.lst_results.itemClicked.connect(self._on_result_clicked)
        self.cmb_payment.currentIndexChanged.connect(lambda _=None: self._sync_customer_field())
        self.btn_submit.clicked.connect(self.submitted)
        self.btn_cancel_edit.clicked.connect(self.edit_cancelled)

        self._sync_customer_field()

    # ------------------------------------------------------------------
    # Search results
    # ------------------------------------------------------------------
    def _on_search_text(self, text: str) -> None:
        # typing after a pick drops the selection
        if self._product is not None and text != self._product.name:
            self._product = None
            self.lbl_product_info.setText("")
        self.search_requested.emit(text)

    def show_results(self, products: list[Product]) -> None:
        self.lst_results.clear()
        if not products:
            self.lst_results.hide()
            return
        for p in products:
            it = QListWidgetItem(p.name)
            it.setData(Qt.UserRole, p)
            self.lst_results.addItem(it)
        self.lst_results.show()

    def _on_result_clicked(self, item: QListWidgetItem) -> None:
        self.select_product(item.data(Qt.UserRole))

    def select_product(self, product: Product | None, *, prefill_price: bool = True) -> None:
        self._product = product
        self.lst_results.hide()
        if product is None:
            self.lbl_product_info.setText("")
            return
        self.txt_search.blockSignals(True)
        self.txt_search.setText(product.name)
        self.txt_search.blockSignals(False)
        self.lbl_product_info.setText(
            f"<b>Stock:</b> {product.quantity} &nbsp; "
            f"<b>Cost Price:</b> {fmt_money(product.cost_price)} &nbsp; "
            f"<b>Default Sell Price:</b> {fmt_money(product.sell_price)}"
        )
        if prefill_price:
            self.spin_price.setValue(float(product.sell_price))

    # ------------------------------------------------------------------
    # Payment type
    # ------------------------------------------------------------------
    def _sync_customer_field(self) -> None:
        credit = self.payment_type == PAYMENT_CREDIT
        self.txt_customer.setVisible(credit)
        self.lbl_customer.setVisible(credit)
        if not credit:
            self.txt_customer.clear()

    # ------------------------------------------------------------------
    # Edit mode
    # ------------------------------------------------------------------
    def load_draft(self, draft: SaleDraft, product: Product | None) -> None:
        """Pre-fill from a sale that was opened for editing."""
        self._draft = draft
        self.setTitle("Edit Sale")
        self.btn_submit.setText("Save Changes")
        self.btn_cancel_edit.show()
        if product is None:
            # product deleted since; the user has to pick another one
            self.select_product(None)
            self.txt_search.blockSignals(True)
            self.txt_search.setText(draft.original.product_name)
            self.txt_search.blockSignals(False)
        else:
            self.select_product(product, prefill_price=False)
        self.spin_qty.setValue(int(draft.quantity))
        self.spin_price.setValue(float(draft.sale_price))
        i = self.cmb_payment.findData(draft.payment_type)
        self.cmb_payment.setCurrentIndex(i if i >= 0 else 0)
        self._sync_customer_field()
        if draft.payment_type == PAYMENT_CREDIT:
            self.txt_customer.setText(draft.customer_name or "")

    @property
    def draft(self) -> SaleDraft | None:
        return self._draft

    def reset(self) -> None:
        self._draft = None
        self._product = None
        self.setTitle("New Sale")
        self.btn_submit.setText("Submit Sale")
        self.btn_cancel_edit.hide()
        self.txt_search.blockSignals(True)
        self.txt_search.clear()
        self.txt_search.blockSignals(False)
        self.lst_results.clear()
        self.lst_results.hide()
        self.lbl_product_info.setText("")
        self.spin_qty.setValue(1)
        self.spin_price.setValue(0.0)
        self.cmb_payment.setCurrentIndex(0)
        self._sync_customer_field()

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------
    @property
    def payment_type(self) -> str:
        return self.cmb_payment.currentData() or PAYMENT_CASH

    def payload(self) -> dict:
        """Typed values, ready for SalesRepo.create_sale / commit_edit."""
        return {
            "product_id": self._product.product_id if self._product else None,
            "quantity": int(self.spin_qty.value()),
            "sale_price": float(self.spin_price.value()),
            "payment_type": self.payment_type,
            "customer_name": self.txt_customer.text().strip() or None,
        }
