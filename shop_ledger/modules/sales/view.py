from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QSplitter
from PySide6.QtCore import Qt
from ...widgets.table_view import TableView
from .form import SaleForm


class SalesView(QWidget):
    """Entry panel on the left, sales list with Edit/Delete on the right."""

    def __init__(self, parent=None):
        super().__init__(parent)
        root = QVBoxLayout(self)

        split = QSplitter(Qt.Horizontal)
        self.form = SaleForm()
        split.addWidget(self.form)

        right = QWidget()
        rv = QVBoxLayout(right)
        rv.setContentsMargins(0, 0, 0, 0)
        row = QHBoxLayout()
        self.btn_edit = QPushButton("Edit")
        self.btn_delete = QPushButton("Delete")
        row.addWidget(self.btn_edit)
        row.addWidget(self.btn_delete)
        row.addStretch(1)
        rv.addLayout(row)
        self.tbl_sales = TableView()
        rv.addWidget(self.tbl_sales, 1)
        split.addWidget(right)

        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)
        root.addWidget(split, 1)
