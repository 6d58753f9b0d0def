"""QtCharts bar chart of the four report totals."""
from __future__ import annotations

from typing import Sequence

from PySide6 import QtCharts, QtCore
from PySide6.QtGui import QPainter

CATEGORIES = ("Revenue", "Gross Profit", "Expenses", "Net Profit")


def make_bar_chart(title: str, categories: Sequence[str], values: Sequence[float]) -> QtCharts.QChart:
    series = QtCharts.QBarSeries()
    bar_set = QtCharts.QBarSet(title)
    for v in values:
        bar_set.append(float(v or 0))
    series.append(bar_set)

    axis_x = QtCharts.QBarCategoryAxis()
    axis_x.append(list(categories))

    # net profit can be negative, so the value axis has to reach below zero
    low = min([0.0, *(float(v or 0) for v in values)])
    high = max([0.0, *(float(v or 0) for v in values)])
    axis_y = QtCharts.QValueAxis()
    axis_y.setRange(low, high if high > low else low + 1.0)
    axis_y.setLabelFormat("%.2f")

    chart = QtCharts.QChart()
    chart.addSeries(series)
    chart.addAxis(axis_x, QtCore.Qt.AlignmentFlag.AlignBottom)
    chart.addAxis(axis_y, QtCore.Qt.AlignmentFlag.AlignLeft)
    series.attachAxis(axis_x)
    series.attachAxis(axis_y)
    chart.setTitle(title)
    chart.legend().setVisible(False)
    chart.setTheme(QtCharts.QChart.ChartTheme.ChartThemeLight)
    return chart


class ReportChartView(QtCharts.QChartView):
    """
    Chart view that owns exactly one chart at a time. `render_values`
    builds a fresh chart and deletes the one it replaces.
    """

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setRenderHint(QPainter.Antialiasing)
        self.setMinimumHeight(260)

    def render_values(self, values: Sequence[float], title: str = "Summary") -> QtCharts.QChart:
        if len(values) != len(CATEGORIES):
            raise ValueError(f"expected {len(CATEGORIES)} values, got {len(values)}")
        old = self.chart()
        chart = make_bar_chart(title, CATEGORIES, values)
        self.setChart(chart)
        if old is not None and old is not chart:
            old.deleteLater()
        return chart
