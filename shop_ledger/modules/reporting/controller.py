from __future__ import annotations

import logging

from PySide6.QtWidgets import QWidget

from ..base_module import BaseModule
from .view import ReportView
from ...constants import NO_TOP_PRODUCT_LABEL
from ...database.repositories.reporting_repo import ReportingRepo, ReportSnapshot
from ...utils.helpers import fmt_money

_log = logging.getLogger(__name__)


class ReportingController(BaseModule):
    """Recomputes the report and redraws the chart on every refresh."""

    def __init__(self, book) -> None:
        super().__init__()
        self.book = book
        self.repo = ReportingRepo(book)
        self.view = ReportView()
        self.snapshot: ReportSnapshot | None = None
        self.refresh()

    def get_widget(self) -> QWidget:
        return self.view

    def refresh(self) -> None:
        snap = self.repo.snapshot()
        self.snapshot = snap
        v = self.view
        v.row_revenue.set_value(fmt_money(snap.total_revenue))
        v.row_cost.set_value(fmt_money(snap.total_cost))
        v.row_gross.set_value(fmt_money(snap.gross_profit))
        v.row_expenses.set_value(fmt_money(snap.total_expenses))
        v.row_net.set_value(fmt_money(snap.net_profit))
        v.row_top.set_value(snap.top_product or NO_TOP_PRODUCT_LABEL)
        v.chart_view.render_values(snap.chart_values())
        _log.debug("Report refreshed: revenue=%.2f net=%.2f", snap.total_revenue, snap.net_profit)
