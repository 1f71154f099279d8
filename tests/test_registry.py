import pytest

from splitshare.errors import DuplicateId, NotFound
from splitshare.models import Split, SplitType, User
from splitshare.registry import GroupRegistry, UserRegistry
from splitshare.services.expenses import ExpenseEngine
from splitshare.services.groups import Group
from splitshare.services.ledger import BalanceLedger


def test_user_registry_lookup():
    registry = UserRegistry()
    user = registry.add(User("U1", "Ann"))

    assert registry.get("U1") is user
    assert "U1" in registry
    assert registry.list_all() == [user]

    with pytest.raises(NotFound):
        registry.get("U404")
    with pytest.raises(DuplicateId):
        registry.add(User("U1", "Other"))


def test_group_registry_lookup():
    registry = GroupRegistry()
    group = registry.add(Group("G1", "Trip", ExpenseEngine(BalanceLedger())))

    assert registry.get("G1") is group
    with pytest.raises(NotFound):
        registry.get("G2")


def test_group_members_and_expenses():
    u1, u2 = User("U1", "Ann"), User("U2", "Bob")
    group = Group("G1", "Trip", ExpenseEngine(BalanceLedger()))
    group.add_member(u1)
    group.add_member(u2)
    group.add_member(u1)

    assert [m.user_id for m in group.members] == ["U1", "U2"]

    expense = group.create_expense("E1", "Fuel", 60, [Split(u1, 30), Split(u2, 30)], SplitType.EQUAL, u1)
    assert group.expenses == [expense]
    assert group.get_expense("E1") is expense
    assert group.get_expense("E2") is None


def test_group_rejects_duplicate_expense_id():
    u1, u2 = User("U1", "Ann"), User("U2", "Bob")
    group = Group("G1", "Trip", ExpenseEngine(BalanceLedger()))
    group.create_expense("E1", "Fuel", 60, [Split(u2, 60)], SplitType.EXACT, u1)

    with pytest.raises(DuplicateId):
        group.create_expense("E1", "Fuel again", 60, [Split(u2, 60)], SplitType.EXACT, u1)

    assert u2.balance_sheet.total_you_owe == 60
    assert len(group.expenses) == 1


def test_failed_expense_not_recorded_in_group():
    u1, u2 = User("U1", "Ann"), User("U2", "Bob")
    group = Group("G1", "Trip", ExpenseEngine(BalanceLedger()))

    with pytest.raises(ValueError):
        group.create_expense("E1", "Fuel", 60, [Split(u2, 50)], SplitType.EXACT, u1)

    assert group.expenses == []
