# database/repositories/__init__.py
"""
Repository layer public API.

Usage:
    from shop_ledger.database.repositories import (
        # State & persistence
        KeyValueStore, LedgerBook,
        # Inventory
        ProductsRepo, Product,
        # Sales
        SalesRepo, Sale, SaleDraft,
        # Credit
        CreditRepo, CreditAccount, PaymentResult, PaymentAllocation,
        # Expenses
        ExpensesRepo, Expense,
        # Reporting
        ReportingRepo, ReportSnapshot,
        # Errors
        DomainError, NotFoundError, ...
    )
"""

# ---------------- Errors -------------------
from .errors import (
    DomainError,
    InsufficientStockError,
    InvalidAmountError,
    InvalidPriceError,
    MissingCustomerError,
    NoProductSelectedError,
    NotFoundError,
)

# ----------- State & persistence -----------
from .kv_store_repo import KeyValueStore
from .ledger_book import LedgerBook

# ---------------- Products -----------------
from .products_repo import ProductsRepo, Product

# ------------------ Sales ------------------
from .sales_repo import SalesRepo, Sale, SaleDraft

# ----------------- Credit ------------------
from .credit_repo import CreditRepo, CreditAccount, PaymentResult, PaymentAllocation

# ---------------- Expenses -----------------
from .expenses_repo import ExpensesRepo, Expense

# ---------------- Reporting ----------------
from .reporting_repo import ReportingRepo, ReportSnapshot

__all__ = [
    # errors
    "DomainError",
    "InsufficientStockError",
    "InvalidAmountError",
    "InvalidPriceError",
    "MissingCustomerError",
    "NoProductSelectedError",
    "NotFoundError",
    # state
    "KeyValueStore",
    "LedgerBook",
    # products_repo
    "ProductsRepo",
    "Product",
    # sales_repo
    "SalesRepo",
    "Sale",
    "SaleDraft",
    # credit_repo
    "CreditRepo",
    "CreditAccount",
    "PaymentResult",
    "PaymentAllocation",
    # expenses_repo
    "ExpensesRepo",
    "Expense",
    # reporting_repo
    "ReportingRepo",
    "ReportSnapshot",
]
