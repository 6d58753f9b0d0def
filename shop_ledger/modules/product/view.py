from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLineEdit, QLabel
from ...widgets.table_view import TableView

class ProductView(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        # Top row: actions + search
        row = QHBoxLayout()
        self.btn_add = QPushButton("Add")
        self.btn_edit = QPushButton("Edit")
        self.btn_delete = QPushButton("Delete")
        self.btn_restock = QPushButton("Restock")
        row.addWidget(self.btn_add)
        row.addWidget(self.btn_edit)
        row.addWidget(self.btn_delete)
        row.addWidget(self.btn_restock)
        row.addStretch(1)

        self.search = QLineEdit()
        self.search.setPlaceholderText("Search products by name…")
        self.search.setClearButtonEnabled(True)
        row.addWidget(QLabel("Search:"))
        row.addWidget(self.search, 2)

        layout.addLayout(row)
        self.table = TableView()
        layout.addWidget(self.table, 1)

        self.lbl_low_stock = QLabel("")
        layout.addWidget(self.lbl_low_stock)
