from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex
from ...database.repositories.expenses_repo import Expense
from ...utils.helpers import fmt_money


class ExpensesTableModel(QAbstractTableModel):
    HEADERS = ["Title", "Amount", "Date"]

    def __init__(self, rows: list[Expense]):
        super().__init__()
        self._rows = rows

    def rowCount(self, parent=QModelIndex()):
        return len(self._rows)

    def columnCount(self, parent=QModelIndex()):
        return len(self.HEADERS)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        e = self._rows[index.row()]
        c = index.column()
        if role in (Qt.DisplayRole, Qt.EditRole):
            return (e.title, fmt_money(e.amount), e.date)[c]
        if role == Qt.TextAlignmentRole and c == 1:
            return int(Qt.AlignRight | Qt.AlignVCenter)
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if orientation == Qt.Horizontal and role == Qt.DisplayRole:
            return self.HEADERS[section]
        return super().headerData(section, orientation, role)

    def at(self, row: int) -> Expense:
        return self._rows[row]

    def replace(self, rows: list[Expense]):
        self.beginResetModel()
        self._rows = rows
        self.endResetModel()
