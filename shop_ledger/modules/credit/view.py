from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel
from PySide6.QtCore import Qt
from ...widgets.table_view import TableView


class CreditView(QWidget):
    EMPTY_TEXT = "No credit records found."

    def __init__(self, parent=None):
        super().__init__(parent)
        root = QVBoxLayout(self)

        bar = QHBoxLayout()
        self.btn_pay = QPushButton("Record Payment")
        bar.addWidget(self.btn_pay)
        bar.addStretch(1)
        self.lbl_total = QLabel("")
        bar.addWidget(self.lbl_total)
        root.addLayout(bar)

        self.table = TableView()
        root.addWidget(self.table, 1)

        self.lbl_empty = QLabel(self.EMPTY_TEXT)
        self.lbl_empty.setAlignment(Qt.AlignCenter)
        self.lbl_empty.setStyleSheet("color:#666;")
        root.addWidget(self.lbl_empty)

    def set_empty(self, empty: bool) -> None:
        self.table.setVisible(not empty)
        self.lbl_empty.setVisible(empty)
        self.btn_pay.setEnabled(not empty)
