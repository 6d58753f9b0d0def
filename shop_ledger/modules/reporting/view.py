from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QFrame, QSizePolicy

from .chart import ReportChartView


class ReportView(QWidget):
    """
    Top: totals card (revenue, cost of goods, gross profit, expenses, net
    profit, top product).
    Bottom: bar chart of revenue / gross profit / expenses / net profit.
    """

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(12)

        card = _CardFrame()
        l = QVBoxLayout(card)
        l.setContentsMargins(12, 10, 12, 10)
        l.setSpacing(6)
        l.addWidget(_SectionTitle("Summary"))
        self.row_revenue = _MetricRow("Total Revenue")
        self.row_cost = _MetricRow("Cost of Goods")
        self.row_gross = _MetricRow("Gross Profit")
        self.row_expenses = _MetricRow("Total Expenses")
        self.row_net = _MetricRow("Net Profit")
        self.row_top = _MetricRow("Top Product")
        for row in (self.row_revenue, self.row_cost, self.row_gross, self.row_expenses):
            l.addWidget(row)
        l.addWidget(_Separator())
        l.addWidget(self.row_net)
        l.addWidget(self.row_top)
        card.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        root.addWidget(card)

        self.chart_view = ReportChartView()
        root.addWidget(self.chart_view, 1)


# ---------------------- Small building blocks ----------------------

class _CardFrame(QFrame):
    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("card")
        self.setFrameShape(QFrame.StyledPanel)
        self.setStyleSheet("""
            QFrame#card {
                border: 1px solid #dcdcdc;
                border-radius: 8px;
                background: #ffffff;
            }
        """)


class _SectionTitle(QLabel):
    def __init__(self, text: str) -> None:
        super().__init__(f"<b>{text}</b>")
        self.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)


class _Separator(QFrame):
    def __init__(self) -> None:
        super().__init__()
        self.setFrameShape(QFrame.HLine)
        self.setFrameShadow(QFrame.Sunken)


class _MetricRow(QWidget):
    def __init__(self, label: str) -> None:
        super().__init__()
        h = QHBoxLayout(self)
        h.setContentsMargins(0, 0, 0, 0)
        h.setSpacing(6)
        self.lbl = QLabel(label)
        self.val = QLabel("0.00")
        self.val.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.val.setMinimumWidth(120)
        h.addWidget(self.lbl, 1)
        h.addWidget(self.val, 0)

    def set_value(self, s: str) -> None:
        self.val.setText(s)

    def value(self) -> str:
        return self.val.text()
