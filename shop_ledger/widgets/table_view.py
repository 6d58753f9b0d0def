from PySide6.QtWidgets import QTableView

class TableView(QTableView):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAlternatingRowColors(True)
        self.setSelectionBehavior(QTableView.SelectRows)
        self.setSelectionMode(QTableView.SingleSelection)
        self.setEditTriggers(QTableView.NoEditTriggers)
        self.setWordWrap(False)
        self.horizontalHeader().setStretchLastSection(True)

    def selected_row(self) -> int | None:
        """Source row of the current selection (models here are never proxied)."""
        sm = self.selectionModel()
        if sm is None:
            return None
        rows = sm.selectedRows()
        return rows[0].row() if rows else None
