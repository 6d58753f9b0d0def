# shop_ledger/tests/conftest.py
# ---------------------------------------------------------------------
# Ground rules:
# - pytest-qt owns QApplication (use qapp/qtbot fixtures)
# - Qt runs on the offscreen platform, no display needed
# - Every test gets a fresh in-memory SQLite DB with the schema applied
# - Repos share one LedgerBook, exactly like the running app
# ---------------------------------------------------------------------

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import re
import sqlite3

import pytest
from PySide6 import QtCore

from shop_ledger.database import get_connection
from shop_ledger.database.repositories import (
    CreditRepo,
    ExpensesRepo,
    KeyValueStore,
    LedgerBook,
    ProductsRepo,
    ReportingRepo,
    SalesRepo,
)


# ---------- Silence benign Qt warnings ----------
_BENIGN_QT_PATTERNS = [
    r"^QObject::connect: .* already connected",
    r"^QObject::disconnect: Unexpected null parameter",
    r"^QBasicTimer::stop: Failed\. Platform timer not running\.",
    r"^This plugin does not support propagateSizeHints",
]

@pytest.fixture(autouse=True, scope="session")
def _silence_benign_qt():
    """Filter common harmless Qt messages during tests."""
    original = QtCore.qInstallMessageHandler(None)
    rx = [re.compile(p) for p in _BENIGN_QT_PATTERNS]

    def handler(msg_type, context, message):
        text = str(message)
        for r in rx:
            if r.search(text):
                return
        QtCore.qInstallMessageHandler(None)
        try:
            QtCore.qDebug(message)
        finally:
            QtCore.qInstallMessageHandler(handler)

    QtCore.qInstallMessageHandler(handler)
    try:
        yield
    finally:
        QtCore.qInstallMessageHandler(original)


# ---------- Per-test database ----------
@pytest.fixture()
def conn():
    con = get_connection(":memory:")
    try:
        yield con
    finally:
        con.close()


@pytest.fixture()
def store(conn: sqlite3.Connection) -> KeyValueStore:
    return KeyValueStore(conn)


@pytest.fixture()
def book(store: KeyValueStore) -> LedgerBook:
    return LedgerBook(store)


# ---------- Repos over the shared book ----------
@pytest.fixture()
def products(book) -> ProductsRepo:
    return ProductsRepo(book)


@pytest.fixture()
def sales(book, products) -> SalesRepo:
    return SalesRepo(book, products)


@pytest.fixture()
def credit(book) -> CreditRepo:
    return CreditRepo(book)


@pytest.fixture()
def expenses(book) -> ExpensesRepo:
    return ExpensesRepo(book)


@pytest.fixture()
def reporting(book) -> ReportingRepo:
    return ReportingRepo(book)


# ---------- Handy data ----------
@pytest.fixture()
def make_product(products):
    """Factory: create a product and return its id."""
    def _make(name="Rice 5kg", quantity=10, cost_price=10.0, sell_price=15.0) -> str:
        return products.create(name, quantity, cost_price, sell_price)
    return _make


@pytest.fixture()
def ui_messages(monkeypatch):
    """
    Capture ui_helpers.info/confirm instead of opening modal boxes.
    `confirm` answers with the `answer` attribute (default True).
    """
    from shop_ledger.utils import ui_helpers

    class _Recorder:
        def __init__(self):
            self.messages: list[tuple[str, str]] = []
            self.answer = True

    rec = _Recorder()
    monkeypatch.setattr(ui_helpers, "info", lambda parent, title, text: rec.messages.append((title, text)))
    monkeypatch.setattr(ui_helpers, "confirm", lambda parent, title, text: rec.answer)
    return rec
