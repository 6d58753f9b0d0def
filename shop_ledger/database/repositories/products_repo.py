# shop_ledger/database/repositories/products_repo.py
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, List, Optional

from ...constants import KEY_PRODUCTS, LOW_STOCK_THRESHOLD
from ...utils.helpers import money, new_id
from ...utils.validators import (
    is_non_negative_int,
    is_positive_int,
    is_strictly_positive_number,
    non_empty,
    try_parse_float,
)
from .errors import (
    DomainError,
    InsufficientStockError,
    InvalidAmountError,
    InvalidPriceError,
    NotFoundError,
)

if TYPE_CHECKING:
    from .ledger_book import LedgerBook

_log = logging.getLogger(__name__)


@dataclass
class Product:
    product_id: str
    name: str
    quantity: int
    cost_price: float
    sell_price: float

    def is_low_stock(self, threshold: int = LOW_STOCK_THRESHOLD) -> bool:
        return self.quantity <= threshold


class ProductsRepo:
    """
    Inventory ledger: the product list and on-hand quantities.

    Quantities only move through `adjust_quantity` / `restock` (or a sale via
    SalesRepo), and never below zero: the check runs before the change.
    """

    def __init__(self, book: "LedgerBook"):
        self.book = book

    # ---------------------------- Reads ----------------------------

    def list_products(self) -> List[Product]:
        return list(self.book.products)

    def get(self, product_id: str | None) -> Optional[Product]:
        if product_id is None:
            return None
        for p in self.book.products:
            if p.product_id == product_id:
                return p
        return None

    def require(self, product_id: str) -> Product:
        p = self.get(product_id)
        if p is None:
            raise NotFoundError("Product", product_id)
        return p

    def find_by_name(self, query: str) -> List[Product]:
        """Case-insensitive substring match over names, in collection order."""
        q = (query or "").strip().lower()
        if not q:
            return []
        return [p for p in self.book.products if q in p.name.lower()]

    def low_stock(self, threshold: int = LOW_STOCK_THRESHOLD) -> List[Product]:
        return [p for p in self.book.products if p.is_low_stock(threshold)]

    # ---------------------------- Validation ----------------------------

    @staticmethod
    def _validate(name: str, quantity, cost_price, sell_price) -> None:
        if not non_empty(name):
            raise DomainError("Product name cannot be empty.")
        if not is_non_negative_int(quantity):
            raise InvalidAmountError("Quantity must be a whole number of zero or more.")
        # prices are checked at the cents they will be stored with
        if not is_strictly_positive_number(cost_price) or money(cost_price) <= 0:
            raise InvalidAmountError("Cost price must be greater than zero.")
        ok, sell = try_parse_float(sell_price)
        if not ok:
            raise InvalidAmountError("Sell price must be a number.")
        if money(sell) <= money(cost_price):
            raise InvalidPriceError("Sell price must be greater than cost price.")

    # ---------------------------- Writes ----------------------------

    def create(self, name: str, quantity: int, cost_price: float, sell_price: float) -> str:
        self._validate(name, quantity, cost_price, sell_price)
        product = Product(
            product_id=new_id(),
            name=name.strip(),
            quantity=int(float(quantity)),
            cost_price=money(cost_price),
            sell_price=money(sell_price),
        )
        self.book.products.append(product)
        self.book.save(KEY_PRODUCTS)
        _log.info("Product created: %s (%s), qty=%d", product.name, product.product_id, product.quantity)
        return product.product_id

    def update(
        self,
        product_id: str,
        name: str,
        quantity: int,
        cost_price: float,
        sell_price: float,
    ) -> None:
        """Replace the editable fields of a product in place; the id is kept."""
        product = self.require(product_id)
        self._validate(name, quantity, cost_price, sell_price)
        product.name = name.strip()
        product.quantity = int(float(quantity))
        product.cost_price = money(cost_price)
        product.sell_price = money(sell_price)
        self.book.save(KEY_PRODUCTS)
        _log.info("Product updated: %s (%s)", product.name, product_id)

    def delete(self, product_id: str) -> None:
        """
        Remove a product. Sales that reference it are left as they are; they
        keep their name/cost snapshots.
        """
        product = self.require(product_id)
        self.book.products.remove(product)
        self.book.save(KEY_PRODUCTS)
        _log.info("Product deleted: %s (%s)", product.name, product_id)

    # ---------------------------- Stock ----------------------------

    @staticmethod
    def check_delta(product: Product, delta: int) -> int:
        """Return the quantity `delta` would leave, or raise if it goes negative."""
        new_qty = product.quantity + int(delta)
        if new_qty < 0:
            raise InsufficientStockError(
                f"Not enough stock for '{product.name}': "
                f"{product.quantity} on hand, {-int(delta)} requested."
            )
        return new_qty

    def adjust_quantity(self, product_id: str, delta: int) -> int:
        product = self.require(product_id)
        product.quantity = self.check_delta(product, delta)
        self.book.save(KEY_PRODUCTS)
        return product.quantity

    def restock(self, product_id: str, amount: int) -> int:
        if not is_positive_int(amount):
            raise InvalidAmountError("Restock amount must be a positive whole number.")
        new_qty = self.adjust_quantity(product_id, int(float(amount)))
        _log.info("Restocked %s by %s -> %d", product_id, amount, new_qty)
        return new_qty
