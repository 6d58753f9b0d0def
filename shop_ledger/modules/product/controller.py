import logging
from PySide6.QtWidgets import QWidget, QInputDialog
from ..base_module import BaseModule
from .view import ProductView
from .form import ProductForm
from .model import ProductsTableModel
from ...database.repositories.products_repo import ProductsRepo, Product
from ...database.repositories.errors import DomainError, NotFoundError
from ...utils import ui_helpers as ui

_log = logging.getLogger(__name__)


class ProductController(BaseModule):
    def __init__(self, book):
        super().__init__()
        self.book = book
        self.repo = ProductsRepo(book)
        self.view = ProductView()
        self.model = ProductsTableModel([])
        self.view.table.setModel(self.model)
        self._wire()
        self.refresh()

    def get_widget(self) -> QWidget:
        return self.view

    def _wire(self):
        self.view.btn_add.clicked.connect(self._add)
        self.view.btn_edit.clicked.connect(self._edit)
        self.view.btn_delete.clicked.connect(self._delete)
        self.view.btn_restock.clicked.connect(self._restock)
        self.view.search.textChanged.connect(lambda _=None: self.refresh())
        self.view.table.doubleClicked.connect(lambda _=None: self._edit())

    # ------------------------------------------------------------------
    # Data loading
    # ------------------------------------------------------------------
    def refresh(self):
        text = self.view.search.text()
        rows = self.repo.find_by_name(text) if text.strip() else self.repo.list_products()
        self.model.replace(rows)
        self.view.table.resizeColumnsToContents()
        low = self.repo.low_stock()
        self.view.lbl_low_stock.setText(
            f"Low stock: {', '.join(p.name for p in low)}" if low else ""
        )

    def _selected(self) -> Product | None:
        row = self.view.table.selected_row()
        return None if row is None else self.model.at(row)

    def _changed(self):
        self.refresh()
        self.data_changed.emit()

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------
    def _add(self):
        dlg = ProductForm(self.view)
        if not dlg.exec():
            return
        payload = dlg.payload()
        if not payload:
            return
        try:
            self.repo.create(**payload)
        except DomainError as e:
            ui.info(self.view, *ui.map_error("Failed to add product", e))
            return
        self._changed()

    def _edit(self):
        current = self._selected()
        if current is None:
            ui.info(self.view, "Select", "Please select a product to edit.")
            return
        dlg = ProductForm(self.view, initial=current)
        if not dlg.exec():
            return
        payload = dlg.payload()
        if not payload:
            return
        try:
            self.repo.update(current.product_id, **payload)
        except NotFoundError:
            _log.debug("Product %s vanished before edit; reloading", current.product_id)
        except DomainError as e:
            ui.info(self.view, *ui.map_error("Failed to update product", e))
            return
        self._changed()

    def _delete(self):
        current = self._selected()
        if current is None:
            ui.info(self.view, "Select", "Please select a product to delete.")
            return
        if not ui.confirm(self.view, "Delete", "Are you sure you want to delete this product?"):
            return
        try:
            self.repo.delete(current.product_id)
        except NotFoundError:
            _log.debug("Product %s already gone; reloading", current.product_id)
        self._changed()

    def _restock(self):
        current = self._selected()
        if current is None:
            ui.info(self.view, "Select", "Please select a product to restock.")
            return
        amount, ok = QInputDialog.getInt(
            self.view, "Restock", f"Enter quantity to add to '{current.name}':", 1, 1, 10**9
        )
        if not ok:
            return
        self.restock(current.product_id, amount)

    def restock(self, product_id: str, amount: int) -> None:
        try:
            self.repo.restock(product_id, amount)
        except NotFoundError:
            _log.debug("Product %s vanished before restock; reloading", product_id)
        except DomainError as e:
            ui.info(self.view, *ui.map_error("Failed to restock", e))
            return
        self._changed()
