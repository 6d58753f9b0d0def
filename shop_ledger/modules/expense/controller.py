"""
Controller for the expense module.

Wires ExpensesRepo <-> ExpensesTableModel <-> ExpenseView and connects
Add/Edit/Delete to ExpenseForm. Double-click, Enter and Delete work on the
table as well.
"""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QDialog
from PySide6.QtGui import QKeySequence, QShortcut

from ..base_module import BaseModule
from .view import ExpenseView
from .form import ExpenseForm
from .model import ExpensesTableModel
from ...database.repositories.expenses_repo import ExpensesRepo, Expense
from ...database.repositories.errors import DomainError, NotFoundError
from ...utils import ui_helpers as ui
from ...utils.helpers import fmt_money

_log = logging.getLogger(__name__)


class ExpenseController(BaseModule):
    def __init__(self, book):
        super().__init__()
        self.book = book
        self.repo = ExpensesRepo(book)
        self.view = ExpenseView()
        self.model = ExpensesTableModel([])
        self.view.tbl_expenses.setModel(self.model)

        self.view.btn_add.clicked.connect(self._on_add)
        self.view.btn_edit.clicked.connect(self._on_edit)
        self.view.btn_delete.clicked.connect(self._on_delete)
        self._wire_table_shortcuts()
        self.refresh()

    def get_widget(self) -> QWidget:
        return self.view

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def refresh(self) -> None:
        self.model.replace(self.repo.list_expenses())
        self.view.tbl_expenses.resizeColumnsToContents()
        self.view.lbl_total.setText(f"Total: {fmt_money(self.repo.total())}")

    def _changed(self) -> None:
        self.refresh()
        self.data_changed.emit()

    def _selected(self) -> Optional[Expense]:
        row = self.view.tbl_expenses.selected_row()
        return None if row is None else self.model.at(row)

    def _open_form(self, initial: Optional[Expense] = None) -> Optional[dict]:
        dlg = ExpenseForm(self.view, initial=initial)
        if dlg.exec() != QDialog.Accepted:
            return None
        return dlg.payload()

    def _wire_table_shortcuts(self) -> None:
        """Double-click and keyboard shortcuts on the table."""
        tv = self.view.tbl_expenses
        tv.doubleClicked.connect(lambda _=None: self._on_edit())

        self._sc_add = QShortcut(QKeySequence("Ctrl+N"), self.view)
        self._sc_edit_r = QShortcut(QKeySequence("Return"), self.view)
        self._sc_edit_e = QShortcut(QKeySequence("Enter"), self.view)
        self._sc_del = QShortcut(QKeySequence("Delete"), self.view)

        for sc in (self._sc_add, self._sc_edit_r, self._sc_edit_e, self._sc_del):
            sc.setContext(Qt.WidgetWithChildrenShortcut)

        self._sc_add.activated.connect(self._on_add)
        self._sc_edit_r.activated.connect(self._on_edit)
        self._sc_edit_e.activated.connect(self._on_edit)
        self._sc_del.activated.connect(self._on_delete)

    # ------------------------------------------------------------------
    # Button handlers
    # ------------------------------------------------------------------
    def _on_add(self) -> None:
        payload = self._open_form()
        if not payload:
            return
        try:
            self.repo.create_expense(**payload)
        except DomainError as e:
            ui.info(self.view, *ui.map_error("Failed to add expense", e))
            return
        self._changed()

    def _on_edit(self) -> None:
        current = self._selected()
        if current is None:
            ui.info(self.view, "Select", "Please select an expense to edit.")
            return
        payload = self._open_form(initial=current)
        if not payload:
            return
        try:
            self.repo.update_expense(current.expense_id, **payload)
        except NotFoundError:
            _log.debug("Expense %s vanished before edit; reloading", current.expense_id)
        except DomainError as e:
            ui.info(self.view, *ui.map_error("Failed to update expense", e))
            return
        self._changed()

    def _on_delete(self) -> None:
        current = self._selected()
        if current is None:
            ui.info(self.view, "Select", "Please select an expense to delete.")
            return
        if not ui.confirm(self.view, "Delete", f"Delete expense '{current.title}'?"):
            return
        try:
            self.repo.delete_expense(current.expense_id)
        except NotFoundError:
            _log.debug("Expense %s already gone; reloading", current.expense_id)
        self._changed()
