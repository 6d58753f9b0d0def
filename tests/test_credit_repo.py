import pytest

from shop_ledger.constants import PAYMENT_CASH, PAYMENT_CREDIT, STATUS_PAID, STATUS_PARTIAL, STATUS_UNPAID
from shop_ledger.database.repositories import InvalidAmountError, LedgerBook


@pytest.fixture()
def pid(make_product):
    return make_product("Flour", quantity=100, cost_price=5.0, sell_price=10.0)


def _credit(sales, pid, qty, customer, price=10.0):
    return sales.create_sale(pid, qty, price, PAYMENT_CREDIT, customer)


def test_fifo_settlement(sales, credit, pid):
    a = _credit(sales, pid, 3, "Ali")   # 30
    b = _credit(sales, pid, 5, "Ali")   # 50

    result = credit.record_payment("Ali", 40)

    assert (a.paid_amount, a.remaining_balance, a.status) == (30.0, 0.0, STATUS_PAID)
    assert (b.paid_amount, b.remaining_balance, b.status) == (10.0, 40.0, STATUS_PARTIAL)
    assert (result.requested, result.applied, result.unapplied) == (40.0, 40.0, 0.0)
    assert [(x.sale_id, x.applied, x.status) for x in result.allocations] == [
        (a.sale_id, 30.0, STATUS_PAID),
        (b.sale_id, 10.0, STATUS_PARTIAL),
    ]


def test_paying_exact_outstanding_settles_everything(sales, credit, pid):
    for qty in (1, 2, 4):
        _credit(sales, pid, qty, "Ali")
    owed = credit.outstanding_for("Ali")
    assert owed == 70.0

    credit.record_payment("Ali", owed)

    assert all(s.status == STATUS_PAID and s.remaining_balance == 0 for s in credit.sales_for("Ali"))
    assert credit.outstanding_for("Ali") == 0
    [account] = credit.credit_accounts()
    assert (account.total_outstanding, account.status) == (0.0, STATUS_PAID)


def test_overpayment_is_reported_not_kept(sales, credit, pid):
    _credit(sales, pid, 8, "Ali")   # 80
    result = credit.record_payment("Ali", 100)
    assert (result.applied, result.unapplied) == (80.0, 20.0)
    assert credit.outstanding_for("Ali") == 0
    assert sum(s.paid_amount for s in credit.sales_for("Ali")) == 80.0


def test_payment_only_touches_that_customer(sales, credit, pid):
    _credit(sales, pid, 2, "Ali")
    sara = _credit(sales, pid, 3, "Sara")
    credit.record_payment("Ali", 20)
    assert (sara.remaining_balance, sara.status) == (30.0, STATUS_UNPAID)


def test_payment_skips_settled_sales(sales, credit, pid):
    a = _credit(sales, pid, 1, "Ali")
    credit.record_payment("Ali", 10)
    b = _credit(sales, pid, 2, "Ali")
    result = credit.record_payment("Ali", 5)
    assert [x.sale_id for x in result.allocations] == [b.sale_id]
    assert a.paid_amount == 10.0


def test_partial_payments_keep_sales_balanced(sales, credit, make_product):
    pid = make_product("Gum", quantity=10, cost_price=0.05, sell_price=0.1)
    s = sales.create_sale(pid, 3, 0.1, PAYMENT_CREDIT, "Ali")   # 0.30
    credit.record_payment("Ali", 0.1)
    assert (s.paid_amount, s.remaining_balance, s.status) == (0.1, 0.2, STATUS_PARTIAL)
    assert s.is_balanced()
    credit.record_payment("Ali", 0.2)
    assert (s.paid_amount, s.remaining_balance, s.status) == (0.3, 0.0, STATUS_PAID)
    assert s.is_balanced()


@pytest.mark.parametrize("amount", [0, -5, "abc", None, 0.004, float("nan"), float("inf")])
def test_payment_amount_must_be_positive(sales, credit, pid, amount):
    s = _credit(sales, pid, 1, "Ali")
    with pytest.raises(InvalidAmountError):
        credit.record_payment("Ali", amount)
    assert s.remaining_balance == 10.0


def test_payment_for_unknown_customer_applies_nothing(credit):
    result = credit.record_payment("Nobody", 25)
    assert (result.applied, result.unapplied, result.allocations) == (0.0, 25.0, [])


def test_credit_accounts_group_by_customer(sales, credit, pid):
    _credit(sales, pid, 1, "Sara")
    sales.create_sale(pid, 9, 10.0, PAYMENT_CASH)
    _credit(sales, pid, 2, "Ali")
    _credit(sales, pid, 3, "Sara")
    credit.record_payment("Ali", 20)

    accounts = credit.credit_accounts()

    assert [(a.customer_name, a.sale_count, a.total_outstanding, a.status) for a in accounts] == [
        ("Sara", 2, 40.0, STATUS_UNPAID),
        ("Ali", 1, 0.0, STATUS_PAID),
    ]
    assert credit.total_outstanding() == 40.0


def test_partially_paid_customer_shows_unpaid(sales, credit, pid):
    _credit(sales, pid, 5, "Ali")
    credit.record_payment("Ali", 1)
    [account] = credit.credit_accounts()
    assert (account.total_outstanding, account.status) == (49.0, STATUS_UNPAID)


def test_no_credit_sales_means_no_accounts(sales, credit, pid):
    sales.create_sale(pid, 1, 10.0, PAYMENT_CASH)
    assert credit.credit_accounts() == []
    assert credit.total_outstanding() == 0


def test_payment_is_persisted(store, sales, credit, pid):
    _credit(sales, pid, 3, "Ali")
    credit.record_payment("Ali", 12.5)
    [s] = LedgerBook(store).sales
    assert (s.paid_amount, s.remaining_balance, s.status) == (12.5, 17.5, STATUS_PARTIAL)
