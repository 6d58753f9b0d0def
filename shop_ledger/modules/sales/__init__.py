"""
Sales module package exports.

- SalesController: records, edits (restore-then-recreate) and deletes sales.
- SalesView / SaleForm / SalesTableModel: the Qt pieces it drives.
"""

from .controller import SalesController
from .view import SalesView
from .form import SaleForm
from .model import SalesTableModel

__all__ = [
    "SalesController",
    "SalesView",
    "SaleForm",
    "SalesTableModel",
]
