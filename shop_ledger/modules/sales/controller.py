import logging
from PySide6.QtWidgets import QWidget
from ..base_module import BaseModule
from .view import SalesView
from .model import SalesTableModel
from ...database.repositories.products_repo import ProductsRepo
from ...database.repositories.sales_repo import SalesRepo, Sale
from ...database.repositories.errors import DomainError, NotFoundError
from ...utils import ui_helpers as ui

_log = logging.getLogger(__name__)


class SalesController(BaseModule):
    """
    Sales page.

    New sales are entered in the inline form. "Edit" opens the selected sale
    through SalesRepo.begin_edit, which puts its stock back and takes it off
    the list while the form is pre-filled; Submit then commits the edit and
    "Cancel Edit" reinstates the original.
    """

    def __init__(self, book):
        super().__init__()
        self.book = book
        self.products = ProductsRepo(book)
        self.repo = SalesRepo(book, self.products)
        self.view = SalesView()
        self.form = self.view.form
        self.model = SalesTableModel([])
        self.view.tbl_sales.setModel(self.model)
        self._wire()
        self.refresh()

    def get_widget(self) -> QWidget:
        return self.view

    def _wire(self):
        self.form.search_requested.connect(self._search)
        self.form.submitted.connect(self.submit)
        self.form.edit_cancelled.connect(self.cancel_edit)
        self.view.btn_edit.clicked.connect(self._edit_selected)
        self.view.btn_delete.clicked.connect(self._delete_selected)
        self.view.tbl_sales.doubleClicked.connect(lambda _=None: self._edit_selected())

    # ------------------------------------------------------------------
    # Data loading
    # ------------------------------------------------------------------
    def refresh(self):
        self.model.replace(self.repo.list_sales())
        self.view.tbl_sales.resizeColumnsToContents()

    def _search(self, text: str):
        self.form.show_results(self.products.find_by_name(text))

    def _selected(self) -> Sale | None:
        row = self.view.tbl_sales.selected_row()
        return None if row is None else self.model.at(row)

    def _changed(self):
        self.refresh()
        self.data_changed.emit()

    # ------------------------------------------------------------------
    # Submit / edit
    # ------------------------------------------------------------------
    def submit(self) -> Sale | None:
        payload = self.form.payload()
        draft = self.form.draft
        try:
            if draft is None:
                sale = self.repo.create_sale(**payload)
            else:
                sale = self.repo.commit_edit(draft, **payload)
        except DomainError as e:
            # an open edit stays open so the user can fix the values or cancel
            ui.info(self.view, *ui.map_error("Sale not saved", e))
            return None
        self.form.reset()
        self._changed()
        return sale

    def edit_sale(self, sale_id: str) -> None:
        # the open edit must be put back first; if it cannot be, it stays open
        if self.form.draft is not None and not self.cancel_edit():
            return
        try:
            draft = self.repo.begin_edit(sale_id)
        except NotFoundError:
            _log.debug("Sale %s vanished before edit; reloading", sale_id)
            self.refresh()
            return
        self.form.load_draft(draft, self.products.get(draft.product_id))
        self._changed()

    def cancel_edit(self) -> bool:
        """Reinstate the sale being edited. False if it could not be put back."""
        draft = self.form.draft
        if draft is None:
            return True
        try:
            self.repo.cancel_edit(draft)
        except DomainError as e:
            ui.info(self.view, *ui.map_error("Cannot restore the original sale", e))
            return False
        self.form.reset()
        self._changed()
        return True

    def _edit_selected(self):
        current = self._selected()
        if current is None:
            ui.info(self.view, "Select", "Please select a sale to edit.")
            return
        self.edit_sale(current.sale_id)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------
    def _delete_selected(self):
        current = self._selected()
        if current is None:
            ui.info(self.view, "Select", "Please select a sale to delete.")
            return
        if not ui.confirm(self.view, "Delete", "Delete this sale? Stock will be restored."):
            return
        self.delete_sale(current.sale_id)

    def delete_sale(self, sale_id: str) -> None:
        try:
            self.repo.delete_sale(sale_id)
        except NotFoundError:
            _log.debug("Sale %s already gone; reloading", sale_id)
        self._changed()
