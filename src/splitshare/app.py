from __future__ import annotations

import copy
from typing import Optional, Sequence

from splitshare.config import get_settings
from splitshare.logging import get_logger
from splitshare.models import BalanceSheet, Expense, Split, SplitType, User
from splitshare.registry import GroupRegistry, UserRegistry
from splitshare.services.expenses import ExpenseEngine
from splitshare.services.groups import Group
from splitshare.services.ledger import BalanceLedger, format_balance_sheet
from splitshare.services.settlement import Transfer, net_balances, settle


class SplitShareApp:
    """Facade wiring the registries, the expense engine and its ledger."""

    def __init__(self, ledger: Optional[BalanceLedger] = None, tolerance: Optional[float] = None) -> None:
        if tolerance is None:
            tolerance = get_settings().split_tolerance
        self.ledger = ledger or BalanceLedger()
        self.engine = ExpenseEngine(self.ledger, tolerance)
        self.users = UserRegistry()
        self.groups = GroupRegistry()
        self._log = get_logger(__name__)

    def create_user(self, user_id: str, name: str) -> User:
        user = self.users.add(User(user_id=user_id, name=name))
        self._log.info("user.created", user_id=user_id)
        return user

    def create_group(self, group_id: str, name: str, founder: User | str) -> Group:
        founder_user = self._resolve_user(founder)
        group = Group(group_id, name, self.engine)
        group.add_member(founder_user)
        self.groups.add(group)
        self._log.info("group.created", group_id=group_id, founder=founder_user.user_id)
        return group

    def add_member(self, group_id: str, user_id: str) -> Group:
        group = self.groups.get(group_id)
        group.add_member(self.users.get(user_id))
        return group

    def create_expense(
        self,
        group_id: str,
        expense_id: str,
        description: str,
        amount: float,
        splits: Sequence[Split],
        split_type: SplitType | str,
        paid_by: User | str,
    ) -> Expense:
        group = self.groups.get(group_id)
        return group.create_expense(expense_id, description, amount, splits, split_type, self._resolve_user(paid_by))

    def get_balance_sheet(self, user_id: str) -> BalanceSheet:
        return copy.deepcopy(self.users.get(user_id).balance_sheet)

    def format_balances(self, user_id: Optional[str] = None) -> str:
        users = [self.users.get(user_id)] if user_id is not None else self.users.list_all()
        return "\n\n".join(format_balance_sheet(user) for user in users)

    def suggest_settlements(self) -> list[Transfer]:
        return settle(net_balances(self.users.list_all()))

    def _resolve_user(self, user: User | str) -> User:
        if isinstance(user, User):
            return user
        return self.users.get(user)
