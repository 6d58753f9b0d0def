from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex
from PySide6.QtGui import QBrush, QColor
from ...constants import LOW_STOCK_THRESHOLD
from ...database.repositories.products_repo import Product
from ...utils.helpers import fmt_money

_LOW_STOCK_FG = QColor("#991B1B")
_LOW_STOCK_BG = QColor("#FEE2E2")


class ProductsTableModel(QAbstractTableModel):
    HEADERS = ["Name", "Quantity", "Cost Price", "Sell Price"]
    QTY_COL = 1

    def __init__(self, rows: list[Product], low_stock_threshold: int = LOW_STOCK_THRESHOLD):
        super().__init__()
        self._rows = rows
        self._threshold = low_stock_threshold

    # Qt model basics
    def rowCount(self, parent=QModelIndex()):
        return len(self._rows)

    def columnCount(self, parent=QModelIndex()):
        return len(self.HEADERS)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        p = self._rows[index.row()]
        c = index.column()
        if role in (Qt.DisplayRole, Qt.EditRole):
            return [
                p.name,
                str(p.quantity),
                fmt_money(p.cost_price),
                fmt_money(p.sell_price),
            ][c]
        if c == self.QTY_COL and p.is_low_stock(self._threshold):
            # highlight low stock
            if role == Qt.ForegroundRole:
                return QBrush(_LOW_STOCK_FG)
            if role == Qt.BackgroundRole:
                return QBrush(_LOW_STOCK_BG)
        if role == Qt.TextAlignmentRole and c > 0:
            return int(Qt.AlignRight | Qt.AlignVCenter)
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if orientation == Qt.Horizontal and role == Qt.DisplayRole:
            return self.HEADERS[section]
        return super().headerData(section, orientation, role)

    def at(self, row: int) -> Product:
        return self._rows[row]

    def replace(self, rows: list[Product]):
        self.beginResetModel()
        self._rows = rows
        self.endResetModel()
