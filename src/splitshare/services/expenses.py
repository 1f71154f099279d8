from __future__ import annotations

from typing import Optional, Sequence

from splitshare.logging import get_logger
from splitshare.models import Expense, Split, SplitType, User
from splitshare.services.ledger import BalanceLedger
from splitshare.services.split import DEFAULT_TOLERANCE, get_split_strategy, require_amount, resolve_split_type


def percentages_to_amounts(splits: Sequence[Split], amount: float) -> list[Split]:
    return [Split(user=split.user, amount=(split.amount / 100.0) * amount) for split in splits]


class ExpenseEngine:
    def __init__(self, ledger: BalanceLedger, tolerance: float = DEFAULT_TOLERANCE) -> None:
        self.ledger = ledger
        self.tolerance = tolerance
        self._log = get_logger(__name__)

    def create_expense(
        self,
        expense_id: str,
        description: str,
        amount: float,
        splits: Optional[Sequence[Split]],
        split_type: SplitType | str,
        paid_by: User,
    ) -> Expense:
        split_type = resolve_split_type(split_type)
        require_amount(amount)
        strategy = get_split_strategy(split_type, self.tolerance)
        splits = strategy.validate(splits, amount)

        if split_type == SplitType.PERCENTAGE:
            splits = percentages_to_amounts(splits, amount)

        expense = Expense(
            expense_id=expense_id,
            description=description,
            amount=amount,
            paid_by=paid_by,
            split_type=split_type,
            splits=tuple(splits),
        )
        self.ledger.apply(paid_by, expense.splits, amount)

        self._log.info(
            "expense.created",
            expense_id=expense_id,
            amount=amount,
            split_type=split_type.value,
            paid_by=paid_by.user_id,
        )
        return expense
