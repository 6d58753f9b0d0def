from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, List, Optional

from ...constants import KEY_PRODUCTS, KEY_SALES, PAYMENT_CASH, PAYMENT_CREDIT, PAYMENT_TYPES
from ...modules.payments.payment_utilities.calculations import (
    initial_settlement,
    is_balanced,
    sale_total,
)
from ...utils.helpers import money, new_id, now_str
from ...utils.validators import is_positive_int, non_empty, try_parse_float
from .errors import (
    DomainError,
    InsufficientStockError,
    InvalidAmountError,
    InvalidPriceError,
    MissingCustomerError,
    NoProductSelectedError,
    NotFoundError,
)

if TYPE_CHECKING:
    from .ledger_book import LedgerBook
    from .products_repo import Product, ProductsRepo

_log = logging.getLogger(__name__)


@dataclass
class Sale:
    sale_id: str
    product_id: str
    product_name: str
    quantity: int
    sale_price: float
    total: float
    cost_price: float
    payment_type: str
    customer_name: str | None
    paid_amount: float
    remaining_balance: float
    status: str
    date: str

    @property
    def is_credit(self) -> bool:
        return self.payment_type == PAYMENT_CREDIT

    def is_balanced(self) -> bool:
        return is_balanced(self.paid_amount, self.remaining_balance, self.total)


@dataclass(frozen=True)
class SaleDraft:
    """
    What `begin_edit` hands back: the sale that was taken off the books and
    the position it held, so the edit form can be pre-filled and the edit
    can be cancelled.
    """
    original: Sale
    index: int

    @property
    def sale_id(self) -> str:
        return self.original.sale_id

    @property
    def product_id(self) -> str:
        return self.original.product_id

    @property
    def quantity(self) -> int:
        return self.original.quantity

    @property
    def sale_price(self) -> float:
        return self.original.sale_price

    @property
    def payment_type(self) -> str:
        return self.original.payment_type

    @property
    def customer_name(self) -> str | None:
        return self.original.customer_name


class SalesRepo:
    """
    Sale transaction processor.

    Key behavior:
      - A sale and its stock deduction are one unit: both are validated up
        front, applied together in memory and persisted in one store write.
      - Editing is restore-then-recreate. `begin_edit` puts the stock back and
        takes the sale off the books; `commit_edit` runs the normal create
        path with the new values, so every creation rule (stock included) is
        re-checked against current inventory. `cancel_edit` undoes phase one.
      - Deleting a sale always restores its stock first.
    """

    def __init__(self, book: "LedgerBook", products: Optional["ProductsRepo"] = None):
        self.book = book
        if products is None:
            from .products_repo import ProductsRepo
            products = ProductsRepo(book)
        self.products = products

    # ---------------------------------------------------------------------
    # READ
    # ---------------------------------------------------------------------
    def list_sales(self) -> List[Sale]:
        return list(self.book.sales)

    def get(self, sale_id: str) -> Optional[Sale]:
        for s in self.book.sales:
            if s.sale_id == sale_id:
                return s
        return None

    def _index_of(self, sale_id: str) -> int:
        for i, s in enumerate(self.book.sales):
            if s.sale_id == sale_id:
                return i
        raise NotFoundError("Sale", sale_id)

    # ---------------------------------------------------------------------
    # VALIDATION
    # ---------------------------------------------------------------------
    @staticmethod
    def _validate(
        product: Optional["Product"],
        quantity,
        sale_price,
        payment_type: str,
        customer_name: str | None,
    ) -> None:
        """Preconditions in order; the first failure wins."""
        if product is None:
            raise NoProductSelectedError()
        ok, price = try_parse_float(sale_price)
        if not ok:
            raise InvalidAmountError("Sale price must be a number.")
        # compared at the cents the sale will be stored with
        if money(price) <= product.cost_price:
            raise InvalidPriceError()
        if not is_positive_int(quantity):
            raise InvalidAmountError("Quantity must be a positive whole number.")
        if int(float(quantity)) > product.quantity:
            raise InsufficientStockError()
        if payment_type not in PAYMENT_TYPES:
            raise DomainError(f"Unknown payment type: {payment_type!r}.")
        if payment_type == PAYMENT_CREDIT and not non_empty(customer_name):
            raise MissingCustomerError()

    # ---------------------------------------------------------------------
    # CREATE
    # ---------------------------------------------------------------------
    def create_sale(
        self,
        product_id: str | None,
        quantity: int,
        sale_price: float,
        payment_type: str = PAYMENT_CASH,
        customer_name: str | None = None,
        *,
        sale_id: str | None = None,
    ) -> Sale:
        """
        Validate and commit a sale against the selected product.

        `sale_id` lets an edit keep the identifier of the sale it replaces;
        a fresh one is generated otherwise.
        """
        product = self.products.get(product_id)
        self._validate(product, quantity, sale_price, payment_type, customer_name)
        qty = int(float(quantity))
        new_qty = self.products.check_delta(product, -qty)

        price = money(sale_price)
        total = sale_total(price, qty)
        paid, remaining, status = initial_settlement(payment_type, total)
        sale = Sale(
            sale_id=sale_id or new_id(),
            product_id=product.product_id,
            product_name=product.name,
            quantity=qty,
            sale_price=price,
            total=total,
            cost_price=product.cost_price,
            payment_type=payment_type,
            customer_name=customer_name.strip() if payment_type == PAYMENT_CREDIT else None,
            paid_amount=paid,
            remaining_balance=remaining,
            status=status,
            date=now_str(),
        )

        product.quantity = new_qty
        self.book.sales.append(sale)
        self.book.save(KEY_PRODUCTS, KEY_SALES)
        _log.info(
            "Sale %s: %d x %s @ %.2f (%s)",
            sale.sale_id, qty, product.name, price, payment_type,
        )
        return sale

    # ---------------------------------------------------------------------
    # EDIT (restore-then-recreate)
    # ---------------------------------------------------------------------
    def begin_edit(self, sale_id: str) -> SaleDraft:
        """
        Phase one of an edit: restore the sale's stock and take it off the
        books. If its product no longer exists there is nothing to restore.
        """
        idx = self._index_of(sale_id)
        sale = self.book.sales[idx]
        product = self.products.get(sale.product_id)
        if product is not None:
            product.quantity += sale.quantity
        else:
            _log.warning("Sale %s: product %s is gone; stock not restored", sale_id, sale.product_id)
        del self.book.sales[idx]
        self.book.save(KEY_PRODUCTS, KEY_SALES)
        _log.info("Sale %s opened for edit", sale_id)
        return SaleDraft(original=replace(sale), index=idx)

    def commit_edit(
        self,
        draft: SaleDraft,
        product_id: str | None,
        quantity: int,
        sale_price: float,
        payment_type: str = PAYMENT_CASH,
        customer_name: str | None = None,
        *,
        keep_id: bool = True,
    ) -> Sale:
        """Phase two: commit the edited values through the normal create path."""
        return self.create_sale(
            product_id,
            quantity,
            sale_price,
            payment_type,
            customer_name,
            sale_id=draft.sale_id if keep_id else None,
        )

    def cancel_edit(self, draft: SaleDraft) -> Sale:
        """
        Put the original sale back where it was and take its stock again.
        Fails with InsufficientStockError if that stock has been sold since.
        """
        sale = replace(draft.original)
        product = self.products.get(sale.product_id)
        if product is not None:
            product.quantity = self.products.check_delta(product, -sale.quantity)
        self.book.sales.insert(min(draft.index, len(self.book.sales)), sale)
        self.book.save(KEY_PRODUCTS, KEY_SALES)
        _log.info("Edit of sale %s cancelled", sale.sale_id)
        return sale

    def edit_sale(
        self,
        sale_id: str,
        product_id: str | None,
        quantity: int,
        sale_price: float,
        payment_type: str = PAYMENT_CASH,
        customer_name: str | None = None,
        *,
        keep_id: bool = True,
    ) -> Sale:
        """
        Both phases in one call. If the new values are rejected the original
        sale is reinstated before the error propagates.
        """
        draft = self.begin_edit(sale_id)
        try:
            return self.commit_edit(
                draft, product_id, quantity, sale_price, payment_type, customer_name,
                keep_id=keep_id,
            )
        except DomainError:
            self.cancel_edit(draft)
            raise

    # ---------------------------------------------------------------------
    # DELETE
    # ---------------------------------------------------------------------
    def delete_sale(self, sale_id: str) -> None:
        idx = self._index_of(sale_id)
        sale = self.book.sales[idx]
        product = self.products.get(sale.product_id)
        if product is not None:
            product.quantity += sale.quantity
        else:
            _log.warning("Sale %s: product %s is gone; stock not restored", sale_id, sale.product_id)
        del self.book.sales[idx]
        self.book.save(KEY_PRODUCTS, KEY_SALES)
        _log.info("Sale %s deleted", sale_id)
