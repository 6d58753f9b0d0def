from .controller import ReportingController
from .view import ReportView
from .chart import ReportChartView, make_bar_chart

__all__ = ["ReportingController", "ReportView", "ReportChartView", "make_bar_chart"]
