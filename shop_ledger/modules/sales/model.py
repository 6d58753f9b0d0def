from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex
from PySide6.QtGui import QBrush, QColor
from ...database.repositories.sales_repo import Sale
from ...utils.helpers import fmt_money
from ..payments.payment_utilities.status import description, style_tokens


class SalesTableModel(QAbstractTableModel):
    HEADERS = ["Date", "Product", "Qty", "Price", "Total", "Payment", "Customer", "Paid", "Balance", "Status"]
    STATUS_COL = 9

    def __init__(self, rows: list[Sale]):
        super().__init__()
        self._rows = rows

    def rowCount(self, parent=QModelIndex()):
        return len(self._rows)

    def columnCount(self, parent=QModelIndex()):
        return len(self.HEADERS)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        s = self._rows[index.row()]
        c = index.column()
        if role in (Qt.DisplayRole, Qt.EditRole):
            mapping = [
                s.date,
                s.product_name,
                str(s.quantity),
                fmt_money(s.sale_price),
                fmt_money(s.total),
                s.payment_type,
                s.customer_name or "-",
                fmt_money(s.paid_amount),
                fmt_money(s.remaining_balance),
                s.status,
            ]
            return mapping[c] if c < len(mapping) else None
        if c == self.STATUS_COL and role == Qt.ToolTipRole:
            return description(s.status)
        if c == self.STATUS_COL and role in (Qt.ForegroundRole, Qt.BackgroundRole):
            tokens = style_tokens(s.status)
            return QBrush(QColor(tokens["fg" if role == Qt.ForegroundRole else "bg"]))
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if orientation == Qt.Horizontal and role == Qt.DisplayRole:
            return self.HEADERS[section] if section < len(self.HEADERS) else None
        return super().headerData(section, orientation, role)

    def at(self, row: int) -> Sale:
        return self._rows[row]

    def replace(self, rows: list[Sale]):
        self.beginResetModel()
        self._rows = rows
        self.endResetModel()
