from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QListWidget,
    QListWidgetItem,
    QStackedWidget,
    QHBoxLayout,
    QSizePolicy,
)
from PySide6.QtCore import Qt
import logging
import sys

from .constants import APP_NAME
from .database import get_connection
from .database.repositories.ledger_book import LedgerBook
from .modules.base_module import BaseModule
from .modules.product.controller import ProductController
from .modules.sales.controller import SalesController
from .modules.expense.controller import ExpenseController
from .modules.credit.controller import CreditController
from .modules.reporting.controller import ReportingController
from .utils.loggers import get_logger

_log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Left nav + stacked pages. All pages share one LedgerBook; whenever a page
    reports a change every page reloads, so the credit list and the report
    always reflect the latest sale, payment or expense.
    """

    def __init__(self, book: LedgerBook):
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.setWindowFlag(Qt.WindowMinimizeButtonHint, True)
        self.setWindowFlag(Qt.WindowMaximizeButtonHint, True)
        self.setMinimumSize(820, 520)

        self.book = book

        # ---- Central layout: left nav + stacked pages ----
        central = QWidget(self)
        layout = QVBoxLayout(central)
        self.setCentralWidget(central)

        self.nav = QListWidget()
        self.nav.setFixedWidth(110)
        self.nav.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Expanding)

        self.stack = QStackedWidget()

        row = QWidget()
        row_lay = QHBoxLayout(row)
        row_lay.addWidget(self.nav)
        row_lay.addWidget(self.stack, 1)
        layout.addWidget(row, 1)

        self.modules: list[tuple[str, BaseModule]] = []
        self.nav.currentRowChanged.connect(self.stack.setCurrentIndex)

        self.add_module("Products", ProductController(book))
        self.add_module("Sales", SalesController(book))
        self.add_module("Expenses", ExpenseController(book))
        self.add_module("Credit", CreditController(book))
        self.add_module("Reports", ReportingController(book))

        if self.nav.count():
            self.nav.setCurrentRow(0)

    def add_module(self, title: str, module: BaseModule):
        page = module.get_widget()
        item = QListWidgetItem(title)
        self.nav.addItem(item)
        self.stack.addWidget(page)
        self.modules.append((title, module))
        module.data_changed.connect(self.refresh_all)

    def module(self, title: str) -> BaseModule | None:
        for t, m in self.modules:
            if t == title:
                return m
        return None

    def refresh_all(self):
        for _, mod in self.modules:
            mod.refresh()


def main():
    get_logger()
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    conn = get_connection()
    book = LedgerBook.open(conn)
    _log.info("%s started", APP_NAME)

    win = MainWindow(book)
    win.resize(1000, 600)
    win.show()

    code = app.exec()
    conn.close()
    sys.exit(code)


if __name__ == "__main__":
    main()
