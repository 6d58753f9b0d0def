from PySide6.QtWidgets import (
    QDialog, QFormLayout, QLineEdit, QDialogButtonBox, QVBoxLayout, QSpinBox, QDoubleSpinBox,
)
from PySide6.QtCore import Qt
from ...database.repositories.products_repo import Product
from ...utils.validators import non_empty
from ...utils.ui_helpers import info


class ProductForm(QDialog):
    """
    Add/edit a product: name, quantity on hand, cost price, sell price.
    On accept, `payload()` returns kwargs for ProductsRepo.create/update.
    """

    def __init__(self, parent=None, initial: Product | None = None):
        super().__init__(parent)
        self.setWindowTitle("Edit Product" if initial else "Add Product")
        self.setModal(True)
        self.setMinimumWidth(360)
        self._payload = None
        root = QVBoxLayout(self)

        # --- Basic fields ---
        self.name = QLineEdit()
        self.name.setPlaceholderText("e.g., Rice 5kg")
        self.quantity = QSpinBox()
        self.quantity.setRange(0, 10**9)
        self.cost_price = QDoubleSpinBox()
        self.sell_price = QDoubleSpinBox()
        for sp in (self.cost_price, self.sell_price):
            sp.setDecimals(2)
            sp.setRange(0.0, 10**9)
            sp.setButtonSymbols(QDoubleSpinBox.ButtonSymbols.NoButtons)
            sp.setAlignment(Qt.AlignRight)

        form = QFormLayout()
        form.addRow("Name*", self.name)
        form.addRow("Quantity", self.quantity)
        form.addRow("Cost Price*", self.cost_price)
        form.addRow("Sell Price*", self.sell_price)
        root.addLayout(form)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)
        root.addWidget(self.buttons)

        if initial is not None:
            self.name.setText(initial.name)
            self.quantity.setValue(int(initial.quantity))
            self.cost_price.setValue(float(initial.cost_price))
            self.sell_price.setValue(float(initial.sell_price))

    def accept(self):
        if not non_empty(self.name.text()):
            info(self, "Required", "Product name is required.")
            self.name.setFocus()
            return
        cost = float(self.cost_price.value())
        sell = float(self.sell_price.value())
        if cost <= 0:
            info(self, "Invalid", "Cost price must be greater than zero.")
            self.cost_price.setFocus()
            return
        if sell <= cost:
            info(self, "Invalid", "Sell Price must be greater than Cost Price!")
            self.sell_price.setFocus()
            return
        self._payload = {
            "name": self.name.text().strip(),
            "quantity": int(self.quantity.value()),
            "cost_price": cost,
            "sell_price": sell,
        }
        super().accept()

    def payload(self) -> dict | None:
        return self._payload
