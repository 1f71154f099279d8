from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from splitshare.models import User
from splitshare.services.ledger import net_balance


@dataclass(slots=True)
class Transfer:
    from_user: str
    to_user: str
    amount_cents: int

    @property
    def amount(self) -> float:
        return self.amount_cents / 100


def net_balances(users: Iterable[User]) -> dict[str, int]:
    """Net position of every user in cents; positive means others owe them."""
    return {user.user_id: round(net_balance(user.balance_sheet) * 100) for user in users}


def settle(balances: dict[str, int]) -> List[Transfer]:
    """Greedy creditor/debtor matching; largest amounts are paired first."""
    creditors = sorted(
        ([user_id, amount] for user_id, amount in balances.items() if amount > 0),
        key=lambda entry: entry[1],
        reverse=True,
    )
    debtors = sorted(
        ([user_id, -amount] for user_id, amount in balances.items() if amount < 0),
        key=lambda entry: entry[1],
        reverse=True,
    )

    transfers: list[Transfer] = []
    while creditors and debtors:
        creditor, debtor = creditors[0], debtors[0]
        amount = min(creditor[1], debtor[1])
        transfers.append(Transfer(from_user=debtor[0], to_user=creditor[0], amount_cents=amount))

        creditor[1] -= amount
        debtor[1] -= amount
        if creditor[1] == 0:
            creditors.pop(0)
        if debtor[1] == 0:
            debtors.pop(0)

    return transfers


def format_transfers(transfers: Iterable[Transfer]) -> str:
    lines = [f"{t.from_user} -> {t.to_user}: {t.amount:.2f}" for t in transfers]
    return "\n".join(lines) if lines else "All settled up."
