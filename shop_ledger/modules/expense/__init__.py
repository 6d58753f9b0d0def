from .controller import ExpenseController
from .view import ExpenseView
from .form import ExpenseForm
from .model import ExpensesTableModel

__all__ = [
    "ExpenseController",
    "ExpenseView",
    "ExpenseForm",
    "ExpensesTableModel",
]
