from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SplitType(str, Enum):
    EQUAL = "equal"
    EXACT = "exact"
    UNEQUAL = "exact"
    PERCENTAGE = "percentage"


@dataclass(slots=True)
class Balance:
    amount_owe: float = 0.0
    amount_get_back: float = 0.0


@dataclass(slots=True)
class BalanceSheet:
    balances: dict[str, Balance] = field(default_factory=dict)
    total_your_expense: float = 0.0
    total_payment: float = 0.0
    total_you_owe: float = 0.0
    total_you_get_back: float = 0.0

    def balance_with(self, user_id: str) -> Balance:
        return self.balances.setdefault(user_id, Balance())


@dataclass(slots=True, eq=False)
class User:
    user_id: str
    name: str
    balance_sheet: BalanceSheet = field(default_factory=BalanceSheet)


@dataclass(frozen=True, slots=True)
class Split:
    user: User
    amount: float


@dataclass(frozen=True, slots=True)
class Expense:
    expense_id: str
    description: str
    amount: float
    paid_by: User
    split_type: SplitType
    splits: tuple[Split, ...]
