from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel
from ...widgets.table_view import TableView


class ExpenseView(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        root = QVBoxLayout(self)

        bar = QHBoxLayout()
        self.btn_add = QPushButton("Add")
        self.btn_edit = QPushButton("Edit")
        self.btn_delete = QPushButton("Delete")
        bar.addWidget(self.btn_add)
        bar.addWidget(self.btn_edit)
        bar.addWidget(self.btn_delete)
        bar.addStretch(1)
        self.lbl_total = QLabel("Total: 0.00")
        bar.addWidget(self.lbl_total)
        root.addLayout(bar)

        self.tbl_expenses = TableView()
        root.addWidget(self.tbl_expenses, 1)
