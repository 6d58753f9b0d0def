import pytest

from shop_ledger.database.repositories import (
    DomainError,
    InsufficientStockError,
    InvalidAmountError,
    InvalidPriceError,
    LedgerBook,
    NotFoundError,
)


def test_create_and_list(products, make_product):
    pid = make_product("Rice 5kg", 12, 10.0, 15.0)
    rows = products.list_products()
    assert len(rows) == 1
    p = rows[0]
    assert p.product_id == pid
    assert (p.name, p.quantity, p.cost_price, p.sell_price) == ("Rice 5kg", 12, 10.0, 15.0)


def test_ids_are_unique(make_product):
    ids = {make_product(f"Item {i}") for i in range(20)}
    assert len(ids) == 20


@pytest.mark.parametrize(
    "name, qty, cost, sell, exc",
    [
        ("", 1, 10, 15, DomainError),
        ("   ", 1, 10, 15, DomainError),
        ("Tea", -1, 10, 15, InvalidAmountError),
        ("Tea", 2.5, 10, 15, InvalidAmountError),
        ("Tea", 1, 0, 15, InvalidAmountError),
        ("Tea", 1, 10, 10, InvalidPriceError),
        ("Tea", 1, 10, 9, InvalidPriceError),
        ("Tea", 1, 10, "abc", InvalidAmountError),
        ("Tea", 1, 0.001, 15, InvalidAmountError),
        ("Tea", 1, 10, 10.004, InvalidPriceError),
        ("Tea", 1, 10, float("nan"), InvalidAmountError),
        ("Tea", 1, float("inf"), 15, InvalidAmountError),
    ],
)
def test_create_rejects_invalid_values(products, name, qty, cost, sell, exc):
    with pytest.raises(exc):
        products.create(name, qty, cost, sell)
    assert products.list_products() == []


def test_update_keeps_id(products, make_product):
    pid = make_product("Tea", 5, 2.0, 3.0)
    products.update(pid, "Green Tea", 8, 2.5, 4.0)
    p = products.get(pid)
    assert (p.name, p.quantity, p.cost_price, p.sell_price) == ("Green Tea", 8, 2.5, 4.0)


def test_update_unknown_product(products):
    with pytest.raises(NotFoundError):
        products.update("missing", "X", 1, 1.0, 2.0)


def test_delete(products, make_product):
    pid = make_product()
    products.delete(pid)
    assert products.get(pid) is None
    with pytest.raises(NotFoundError):
        products.delete(pid)


def test_find_by_name_is_case_insensitive_substring(products, make_product):
    make_product("Basmati Rice")
    make_product("Brown rice")
    make_product("Sugar")
    assert [p.name for p in products.find_by_name("RICE")] == ["Basmati Rice", "Brown rice"]
    assert [p.name for p in products.find_by_name("sug")] == ["Sugar"]


def test_find_by_name_blank_query_returns_nothing(products, make_product):
    make_product("Sugar")
    assert products.find_by_name("") == []
    assert products.find_by_name("   ") == []


def test_low_stock(products, make_product):
    make_product("A", quantity=5)
    make_product("B", quantity=6)
    make_product("C", quantity=0)
    assert [p.name for p in products.low_stock()] == ["A", "C"]
    assert [p.name for p in products.low_stock(threshold=0)] == ["C"]


def test_adjust_quantity_never_goes_negative(products, make_product):
    pid = make_product(quantity=3)
    with pytest.raises(InsufficientStockError):
        products.adjust_quantity(pid, -4)
    assert products.get(pid).quantity == 3
    assert products.adjust_quantity(pid, -3) == 0


def test_restock(products, make_product):
    pid = make_product(quantity=3)
    assert products.restock(pid, 7) == 10
    assert products.get(pid).quantity == 10


@pytest.mark.parametrize("amount", [0, -2, 1.5, "x", None])
def test_restock_rejects_non_positive_whole_amounts(products, make_product, amount):
    pid = make_product(quantity=3)
    with pytest.raises(InvalidAmountError):
        products.restock(pid, amount)
    assert products.get(pid).quantity == 3


def test_restock_unknown_product(products):
    with pytest.raises(NotFoundError):
        products.restock("missing", 1)


def test_changes_are_persisted(store, products, make_product):
    pid = make_product("Soap", 4, 1.0, 2.0)
    products.restock(pid, 6)
    reopened = LedgerBook(store)
    assert [(p.product_id, p.name, p.quantity) for p in reopened.products] == [(pid, "Soap", 10)]
