"""
In-memory mirrors of the persisted collections.

A LedgerBook is read from the key-value store once, when it is opened, and
owns the product/sale/expense lists for the life of the process. The
repositories (ProductsRepo, SalesRepo, ...) all share one book and are the
only code that mutates it; after each mutation they call `save()` with the
collections they touched, which rewrites those collections in the store.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import asdict, fields
from typing import Any, Dict, List, Type, TypeVar

from ...constants import KEY_EXPENSES, KEY_PRODUCTS, KEY_SALES
from .kv_store_repo import KeyValueStore
from .products_repo import Product
from .sales_repo import Sale
from .expenses_repo import Expense

_log = logging.getLogger(__name__)

T = TypeVar("T")

_RECORD_TYPES: Dict[str, type] = {KEY_PRODUCTS: Product, KEY_SALES: Sale, KEY_EXPENSES: Expense}


def _from_record(cls: Type[T], rec: Dict[str, Any]) -> T:
    """Build a dataclass from a stored dict, ignoring keys it does not know."""
    names = {f.name for f in fields(cls)}  # type: ignore[arg-type]
    return cls(**{k: v for k, v in rec.items() if k in names})


class LedgerBook:
    def __init__(self, store: KeyValueStore):
        self.store = store
        self.store.initialize()
        self.products: List[Product] = [_from_record(Product, r) for r in store.get(KEY_PRODUCTS)]
        self.sales: List[Sale] = [_from_record(Sale, r) for r in store.get(KEY_SALES)]
        self.expenses: List[Expense] = [_from_record(Expense, r) for r in store.get(KEY_EXPENSES)]
        _log.info(
            "Ledger loaded: %d products, %d sales, %d expenses",
            len(self.products), len(self.sales), len(self.expenses),
        )

    @classmethod
    def open(cls, conn: sqlite3.Connection) -> "LedgerBook":
        return cls(KeyValueStore(conn))

    def _collection(self, key: str) -> list:
        if key == KEY_PRODUCTS:
            return self.products
        if key == KEY_SALES:
            return self.sales
        if key == KEY_EXPENSES:
            return self.expenses
        raise KeyError(key)

    def save(self, *keys: str) -> None:
        """
        Write the named collections back to the store in one transaction.

        If the write fails the store is untouched, so those collections are
        reloaded from it before the error propagates; memory never keeps a
        change the store refused.
        """
        try:
            self.store.set_many({k: [asdict(r) for r in self._collection(k)] for k in keys})
        except (sqlite3.Error, ValueError, TypeError):
            _log.error("Saving %s failed; reverting to the stored state", ", ".join(keys))
            self.reload(*keys)
            raise

    def reload(self, *keys: str) -> None:
        """Replace the named collections with what the store holds, in place."""
        for key in keys:
            cls = _RECORD_TYPES[key]
            self._collection(key)[:] = [_from_record(cls, r) for r in self.store.get(key)]
