from __future__ import annotations

from typing import Optional, Sequence

from splitshare.errors import DuplicateId
from splitshare.logging import get_logger
from splitshare.models import Expense, Split, SplitType, User
from splitshare.services.expenses import ExpenseEngine


class Group:
    def __init__(self, group_id: str, name: str, engine: ExpenseEngine) -> None:
        self.group_id = group_id
        self.name = name
        self.members: list[User] = []
        self.expenses: list[Expense] = []
        self._engine = engine
        self._log = get_logger(__name__)

    def add_member(self, user: User) -> None:
        if self.is_member(user.user_id):
            return
        self.members.append(user)
        self._log.info("group.member_added", group_id=self.group_id, user_id=user.user_id)

    def is_member(self, user_id: str) -> bool:
        return any(member.user_id == user_id for member in self.members)

    def get_expense(self, expense_id: str) -> Optional[Expense]:
        for expense in self.expenses:
            if expense.expense_id == expense_id:
                return expense
        return None

    def create_expense(
        self,
        expense_id: str,
        description: str,
        amount: float,
        splits: Optional[Sequence[Split]],
        split_type: SplitType | str,
        paid_by: User,
    ) -> Expense:
        if self.get_expense(expense_id) is not None:
            raise DuplicateId(f"expense {expense_id} already exists in group {self.group_id}")
        expense = self._engine.create_expense(expense_id, description, amount, splits, split_type, paid_by)
        self.expenses.append(expense)
        return expense
