# Widget-level tests (pytest-qt). Modal message boxes are replaced by the
# `ui_messages` recorder from conftest.
from __future__ import annotations

import pytest
import shiboken6
from PySide6.QtCore import QCoreApplication, QEvent, Qt

from shop_ledger.constants import PAYMENT_CREDIT, STATUS_PAID
from shop_ledger.main import MainWindow
from shop_ledger.modules.credit.controller import CreditController
from shop_ledger.modules.expense.controller import ExpenseController
from shop_ledger.modules.product.controller import ProductController
from shop_ledger.modules.product.model import ProductsTableModel
from shop_ledger.modules.reporting.controller import ReportingController
from shop_ledger.modules.sales.controller import SalesController


# ---------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------

def test_low_stock_rows_are_highlighted(qtbot, products, make_product):
    make_product("Low", quantity=2)
    make_product("Plenty", quantity=50)
    model = ProductsTableModel(products.list_products())

    low_qty = model.index(0, ProductsTableModel.QTY_COL)
    ok_qty = model.index(1, ProductsTableModel.QTY_COL)
    assert model.data(low_qty, Qt.BackgroundRole) is not None
    assert model.data(ok_qty, Qt.BackgroundRole) is None
    assert model.data(low_qty, Qt.DisplayRole) == "2"


def test_product_search_filters_table(qtbot, book, make_product):
    make_product("Basmati Rice")
    make_product("Sugar")
    ctrl = ProductController(book)
    qtbot.addWidget(ctrl.get_widget())
    assert ctrl.model.rowCount() == 2

    ctrl.view.search.setText("rice")
    assert ctrl.model.rowCount() == 1
    assert ctrl.model.at(0).name == "Basmati Rice"

    ctrl.view.search.clear()
    assert ctrl.model.rowCount() == 2


def test_low_stock_label(qtbot, book, make_product):
    make_product("Salt", quantity=1)
    ctrl = ProductController(book)
    qtbot.addWidget(ctrl.get_widget())
    assert "Salt" in ctrl.view.lbl_low_stock.text()


def test_restock_emits_data_changed(qtbot, book, products, make_product, ui_messages):
    pid = make_product(quantity=1)
    ctrl = ProductController(book)
    qtbot.addWidget(ctrl.get_widget())
    with qtbot.waitSignal(ctrl.data_changed, timeout=1000):
        ctrl.restock(pid, 9)
    assert products.get(pid).quantity == 10
    assert ui_messages.messages == []


def test_restock_rejection_is_reported(qtbot, book, make_product, ui_messages):
    pid = make_product(quantity=1)
    ctrl = ProductController(book)
    qtbot.addWidget(ctrl.get_widget())
    ctrl.restock(pid, 0)
    assert ui_messages.messages and ui_messages.messages[0][0] == "Invalid amount"


def test_restock_of_vanished_product_is_silent(qtbot, book, ui_messages):
    ctrl = ProductController(book)
    qtbot.addWidget(ctrl.get_widget())
    ctrl.restock("gone", 5)
    assert ui_messages.messages == []


# ---------------------------------------------------------------------
# Sales
# ---------------------------------------------------------------------

@pytest.fixture()
def sales_ctrl(qtbot, book):
    ctrl = SalesController(book)
    qtbot.addWidget(ctrl.get_widget())
    return ctrl


def test_product_search_shows_results(sales_ctrl, make_product):
    make_product("Basmati Rice")
    make_product("Sugar")
    sales_ctrl.form.txt_search.setText("ric")
    assert sales_ctrl.form.lst_results.count() == 1
    assert sales_ctrl.form.lst_results.item(0).text() == "Basmati Rice"


def test_picking_a_product_prefills_price(sales_ctrl, products, make_product):
    pid = make_product("Rice", quantity=9, cost_price=10.0, sell_price=15.5)
    sales_ctrl.form.select_product(products.get(pid))
    assert sales_ctrl.form.spin_price.value() == 15.5
    assert "9" in sales_ctrl.form.lbl_product_info.text()


def test_customer_field_only_for_credit(sales_ctrl):
    form = sales_ctrl.form
    assert form.txt_customer.isHidden()
    form.cmb_payment.setCurrentIndex(form.cmb_payment.findData(PAYMENT_CREDIT))
    assert not form.txt_customer.isHidden()


def test_submit_creates_sale(qtbot, sales_ctrl, sales, products, make_product, ui_messages):
    pid = make_product("Rice", quantity=10, cost_price=10.0, sell_price=15.0)
    form = sales_ctrl.form
    form.select_product(products.get(pid))
    form.spin_qty.setValue(4)

    with qtbot.waitSignal(sales_ctrl.data_changed, timeout=1000):
        sale = sales_ctrl.submit()

    assert sale is not None and sale.total == 60.0
    assert products.get(pid).quantity == 6
    assert sales_ctrl.model.rowCount() == 1
    assert form.txt_search.text() == ""
    assert ui_messages.messages == []


def test_submit_without_product_is_rejected(sales_ctrl, sales, ui_messages):
    assert sales_ctrl.submit() is None
    assert sales.list_sales() == []
    assert ui_messages.messages[0][0] == "Select product"


def test_credit_submit_needs_customer(sales_ctrl, sales, products, make_product, ui_messages):
    pid = make_product(quantity=10)
    form = sales_ctrl.form
    form.select_product(products.get(pid))
    form.cmb_payment.setCurrentIndex(form.cmb_payment.findData(PAYMENT_CREDIT))
    assert sales_ctrl.submit() is None
    assert ui_messages.messages[0][0] == "Customer required"

    form.txt_customer.setText("Ali")
    sale = sales_ctrl.submit()
    assert sale.customer_name == "Ali"


def test_edit_through_the_form(sales_ctrl, sales, products, make_product):
    pid = make_product(quantity=15)
    original = sales.create_sale(pid, 5, 15.0)
    sales_ctrl.refresh()

    sales_ctrl.edit_sale(original.sale_id)
    form = sales_ctrl.form
    assert form.draft is not None
    assert form.spin_qty.value() == 5
    assert products.get(pid).quantity == 15
    assert sales_ctrl.model.rowCount() == 0

    form.spin_qty.setValue(3)
    edited = sales_ctrl.submit()

    assert edited.sale_id == original.sale_id
    assert products.get(pid).quantity == 12
    assert form.draft is None
    assert sales_ctrl.model.rowCount() == 1


def test_cancel_edit_through_the_form(sales_ctrl, sales, products, make_product):
    pid = make_product(quantity=15)
    original = sales.create_sale(pid, 5, 15.0)
    sales_ctrl.edit_sale(original.sale_id)
    sales_ctrl.cancel_edit()
    assert products.get(pid).quantity == 10
    assert [s.sale_id for s in sales.list_sales()] == [original.sale_id]
    assert sales_ctrl.form.draft is None


def test_rejected_edit_stays_open(sales_ctrl, sales, products, make_product, ui_messages):
    pid = make_product(quantity=15)
    original = sales.create_sale(pid, 5, 15.0)
    sales_ctrl.edit_sale(original.sale_id)
    sales_ctrl.form.spin_qty.setValue(99)
    assert sales_ctrl.submit() is None
    assert sales_ctrl.form.draft is not None
    assert ui_messages.messages[0][0] == "Insufficient stock"
    sales_ctrl.cancel_edit()
    assert products.get(pid).quantity == 10


def test_switching_edits_keeps_an_unrestorable_edit_open(sales_ctrl, sales, products, make_product, ui_messages):
    pid = make_product(quantity=10)
    a = sales.create_sale(pid, 5, 15.0)
    b = sales.create_sale(pid, 1, 15.0)
    sales_ctrl.edit_sale(a.sale_id)
    products.adjust_quantity(pid, -products.get(pid).quantity)

    sales_ctrl.edit_sale(b.sale_id)

    assert ui_messages.messages[0][0] == "Insufficient stock"
    assert sales_ctrl.form.draft.sale_id == a.sale_id
    assert sales.get(b.sale_id) is not None
    assert sales.get(a.sale_id) is None

    products.restock(pid, 5)
    assert sales_ctrl.cancel_edit()
    assert sales.get(a.sale_id) is not None
    assert products.get(pid).quantity == 0


def test_delete_sale_restores_stock(sales_ctrl, sales, products, make_product):
    pid = make_product(quantity=10)
    s = sales.create_sale(pid, 4, 15.0)
    sales_ctrl.delete_sale(s.sale_id)
    assert products.get(pid).quantity == 10
    sales_ctrl.delete_sale(s.sale_id)   # stale id: silent
    assert sales_ctrl.model.rowCount() == 0


# ---------------------------------------------------------------------
# Expenses / credit / reports
# ---------------------------------------------------------------------

def test_expense_total_label(qtbot, book, expenses):
    expenses.create_expense("Rent", 1200)
    ctrl = ExpenseController(book)
    qtbot.addWidget(ctrl.get_widget())
    assert ctrl.model.rowCount() == 1
    assert ctrl.view.lbl_total.text() == "Total: 1,200.00"


def test_credit_view_empty_state(qtbot, book, sales, make_product):
    ctrl = CreditController(book)
    qtbot.addWidget(ctrl.get_widget())
    assert not ctrl.view.lbl_empty.isHidden()
    assert ctrl.view.lbl_empty.text() == "No credit records found."
    assert ctrl.view.table.isHidden()

    pid = make_product(quantity=10)
    sales.create_sale(pid, 2, 15.0, PAYMENT_CREDIT, "Ali")
    ctrl.refresh()
    assert ctrl.view.lbl_empty.isHidden()
    assert ctrl.model.rowCount() == 1


def test_credit_payment_through_controller(qtbot, book, sales, make_product, ui_messages):
    pid = make_product(quantity=10)
    sales.create_sale(pid, 2, 15.0, PAYMENT_CREDIT, "Ali")
    ctrl = CreditController(book)
    qtbot.addWidget(ctrl.get_widget())

    with qtbot.waitSignal(ctrl.data_changed, timeout=1000):
        result = ctrl.record_payment("Ali", 30)

    assert result.applied == 30.0
    assert ctrl.model.at(0).status == STATUS_PAID

    assert ctrl.record_payment("Ali", 0) is None
    assert ui_messages.messages[0][0] == "Invalid amount"


def test_report_view_and_chart(qtbot, book, sales, expenses, make_product):
    pid = make_product("Widget", quantity=10, cost_price=10.0, sell_price=15.0)
    sales.create_sale(pid, 2, 15.0)
    expenses.create_expense("Rent", 5)

    ctrl = ReportingController(book)
    qtbot.addWidget(ctrl.get_widget())
    v = ctrl.view
    assert v.row_revenue.value() == "30.00"
    assert v.row_net.value() == "5.00"
    assert v.row_top.value() == "Widget"

    bars = v.chart_view.chart().series()[0].barSets()[0]
    assert [bars.at(i) for i in range(bars.count())] == [30.0, 10.0, 5.0, 5.0]


def test_report_without_sales_shows_dash(qtbot, book):
    ctrl = ReportingController(book)
    qtbot.addWidget(ctrl.get_widget())
    assert ctrl.view.row_top.value() == "-"


def test_rerender_discards_previous_chart(qtbot, book):
    ctrl = ReportingController(book)
    qtbot.addWidget(ctrl.get_widget())
    old = ctrl.view.chart_view.chart()

    ctrl.refresh()
    QCoreApplication.sendPostedEvents(None, QEvent.DeferredDelete)

    assert not shiboken6.isValid(old)
    assert shiboken6.isValid(ctrl.view.chart_view.chart())


def test_chart_needs_four_values(qtbot, book):
    ctrl = ReportingController(book)
    qtbot.addWidget(ctrl.get_widget())
    with pytest.raises(ValueError):
        ctrl.view.chart_view.render_values((1.0, 2.0))


# ---------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------

def test_main_window_refreshes_every_page(qtbot, book, products, make_product, ui_messages):
    pid = make_product("Rice", quantity=10, cost_price=10.0, sell_price=15.0)
    win = MainWindow(book)
    qtbot.addWidget(win)
    assert [win.nav.item(i).text() for i in range(win.nav.count())] == [
        "Products", "Sales", "Expenses", "Credit", "Reports",
    ]

    sales_ctrl = win.module("Sales")
    form = sales_ctrl.form
    form.select_product(products.get(pid))
    form.spin_qty.setValue(2)
    form.cmb_payment.setCurrentIndex(form.cmb_payment.findData(PAYMENT_CREDIT))
    form.txt_customer.setText("Ali")
    sales_ctrl.submit()

    assert win.module("Products").model.at(0).quantity == 8
    assert win.module("Credit").model.rowCount() == 1
    assert win.module("Reports").snapshot.total_revenue == 30.0
