import pytest

from splitshare.app import SplitShareApp
from splitshare.demo import run_demo
from splitshare.errors import NotFound, SplitSumMismatch
from splitshare.models import Split, SplitType
from splitshare.services.settlement import Transfer


def test_demo_balances():
    app = run_demo(SplitShareApp(tolerance=1e-4))

    u1 = app.get_balance_sheet("U1001")
    assert u1.total_your_expense == 800
    assert u1.total_payment == 1100
    assert u1.total_you_owe == 400
    assert u1.total_you_get_back == 700
    assert u1.balances["U2001"].amount_get_back == 400
    assert u1.balances["U2001"].amount_owe == 400
    assert u1.balances["U3001"].amount_get_back == 300

    u2 = app.get_balance_sheet("U2001")
    assert (u2.total_your_expense, u2.total_payment, u2.total_you_owe, u2.total_you_get_back) == (500, 500, 400, 400)

    u3 = app.get_balance_sheet("U3001")
    assert u3.total_you_owe == 300
    assert u3.total_payment == 0
    assert u3.balances["U1001"].amount_owe == 300

    group = app.groups.get("G1001")
    assert [e.expense_id for e in group.expenses] == ["Exp1001", "Exp1002", "Exp1003"]
    assert [s.amount for s in group.expenses[2].splits] == [100, 100]


def test_demo_settlement_suggestion():
    app = run_demo(SplitShareApp(tolerance=1e-4))
    assert app.suggest_settlements() == [Transfer(from_user="U3001", to_user="U1001", amount_cents=30000)]


def test_balance_sheet_is_a_snapshot():
    app = SplitShareApp(tolerance=1e-4)
    app.create_user("U1", "Ann")
    app.create_user("U2", "Bob")
    app.create_group("G1", "Flat", "U1")
    app.add_member("G1", "U2")

    before = app.get_balance_sheet("U2")
    app.create_expense("G1", "E1", "Rent", 40, [Split(app.users.get("U2"), 40)], SplitType.EXACT, "U1")

    assert before.total_you_owe == 0
    assert app.get_balance_sheet("U2").total_you_owe == 40

    snapshot = app.get_balance_sheet("U2")
    snapshot.total_you_owe = 0
    assert app.get_balance_sheet("U2").total_you_owe == 40


def test_unknown_ids_raise_not_found():
    app = SplitShareApp(tolerance=1e-4)
    app.create_user("U1", "Ann")

    with pytest.raises(NotFound):
        app.get_balance_sheet("nope")
    with pytest.raises(NotFound):
        app.create_group("G1", "Flat", "nope")
    with pytest.raises(NotFound):
        app.add_member("G404", "U1")
    with pytest.raises(NotFound):
        app.create_expense("G404", "E1", "Fuel", 10, [], SplitType.EQUAL, "U1")


def test_invalid_expense_through_facade():
    app = SplitShareApp(tolerance=1e-4)
    u1 = app.create_user("U1", "Ann")
    u2 = app.create_user("U2", "Bob")
    app.create_group("G1", "Flat", u1)

    with pytest.raises(SplitSumMismatch):
        app.create_expense("G1", "E1", "Rent", 40, [Split(u1, 10), Split(u2, 10)], "exact", u1)

    assert app.groups.get("G1").expenses == []
    assert app.get_balance_sheet("U1").total_payment == 0


def test_format_balances():
    app = run_demo(SplitShareApp(tolerance=1e-4))
    text = app.format_balances()
    assert text.count("Balance sheet of user:") == 3
    assert app.format_balances("U3001").startswith("Balance sheet of user: U3001 (User3)")
