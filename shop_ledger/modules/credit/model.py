from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex
from PySide6.QtGui import QBrush, QColor
from ...database.repositories.credit_repo import CreditAccount
from ...utils.helpers import fmt_money
from ..payments.payment_utilities.status import style_tokens


class CreditAccountsModel(QAbstractTableModel):
    HEADERS = ["Customer", "Credit Sales", "Total Outstanding", "Status"]

    def __init__(self, rows: list[CreditAccount]):
        super().__init__()
        self._rows = rows

    def rowCount(self, parent=QModelIndex()):
        return len(self._rows)

    def columnCount(self, parent=QModelIndex()):
        return len(self.HEADERS)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        a = self._rows[index.row()]
        c = index.column()
        if role in (Qt.DisplayRole, Qt.EditRole):
            return (a.customer_name, str(a.sale_count), fmt_money(a.total_outstanding), a.status)[c]
        if c == 3 and role in (Qt.ForegroundRole, Qt.BackgroundRole):
            tokens = style_tokens(a.status)
            return QBrush(QColor(tokens["fg" if role == Qt.ForegroundRole else "bg"]))
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if orientation == Qt.Horizontal and role == Qt.DisplayRole:
            return self.HEADERS[section]
        return super().headerData(section, orientation, role)

    def at(self, row: int) -> CreditAccount:
        return self._rows[row]

    def replace(self, rows: list[CreditAccount]):
        self.beginResetModel()
        self._rows = rows
        self.endResetModel()
