from __future__ import annotations

from typing import Sequence

from splitshare.logging import get_logger
from splitshare.models import BalanceSheet, Split, User


class BalanceLedger:
    """Applies expenses to the balance sheets of the payer and every participant.

    Entries are kept per ordered pair and are never netted: a second expense
    between the same two users adds to the existing counterparty balance.
    """

    def __init__(self) -> None:
        self._log = get_logger(__name__)

    def apply(self, paid_by: User, splits: Sequence[Split], total_amount: float) -> None:
        payer_sheet = paid_by.balance_sheet
        payer_sheet.total_payment += total_amount

        for split in splits:
            owe_user = split.user
            owe_amount = split.amount

            if owe_user.user_id == paid_by.user_id:
                payer_sheet.total_your_expense += owe_amount
                continue

            payer_sheet.total_you_get_back += owe_amount
            payer_sheet.balance_with(owe_user.user_id).amount_get_back += owe_amount

            owe_sheet = owe_user.balance_sheet
            owe_sheet.total_you_owe += owe_amount
            owe_sheet.total_your_expense += owe_amount
            owe_sheet.balance_with(paid_by.user_id).amount_owe += owe_amount

        self._log.info(
            "ledger.apply",
            paid_by=paid_by.user_id,
            total_amount=total_amount,
            participants=[split.user.user_id for split in splits],
        )


def net_balance(sheet: BalanceSheet) -> float:
    return sheet.total_you_get_back - sheet.total_you_owe


def format_balance_sheet(user: User) -> str:
    sheet = user.balance_sheet
    lines = [
        f"Balance sheet of user: {user.user_id} ({user.name})",
        f"Total expense: {sheet.total_your_expense:.2f}",
        f"Total paid: {sheet.total_payment:.2f}",
        f"Total you owe: {sheet.total_you_owe:.2f}",
        f"Total you get back: {sheet.total_you_get_back:.2f}",
    ]
    for counterparty_id, balance in sheet.balances.items():
        lines.append(
            f"  {counterparty_id}: get back {balance.amount_get_back:.2f}, owe {balance.amount_owe:.2f}"
        )
    return "\n".join(lines)
