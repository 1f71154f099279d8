from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from splitshare.models import SplitType
from splitshare.services.split import resolve_split_type

EXPENSE_USAGE = (
    "Usage: /addexpense <group_id> | <expense_id> | <description> | <amount> | "
    "<equal|exact|percentage> | <payer_id> | <user[:value]> ..."
)


@dataclass(slots=True)
class ExpenseCommand:
    group_id: str
    expense_id: str
    description: str
    amount: float
    split_type: SplitType
    payer_id: str
    participants: list[tuple[str, Optional[float]]] = field(default_factory=list)


def command_args(text: str) -> str:
    """Strip the leading /command token from a message text."""
    parts = text.strip().split(maxsplit=1)
    return parts[1].strip() if len(parts) > 1 else ""


def pipe_args(text: str) -> list[str]:
    return [part.strip() for part in command_args(text).split("|")]


def parse_amount(value: str) -> float:
    try:
        amount = float(value.strip().replace(",", "."))
    except ValueError as exc:
        raise ValueError(f"Invalid amount: {value!r}") from exc
    if not math.isfinite(amount):
        raise ValueError(f"Invalid amount: {value!r}")
    if amount < 0:
        raise ValueError("Amount must not be negative")
    return amount


def parse_participants(value: str) -> list[tuple[str, Optional[float]]]:
    participants: list[tuple[str, Optional[float]]] = []
    for token in value.split():
        user_id, sep, raw = token.partition(":")
        if not user_id:
            raise ValueError(f"Invalid participant: {token!r}")
        participants.append((user_id, parse_amount(raw) if sep else None))
    if not participants:
        raise ValueError("At least one participant is required")
    return participants


def parse_expense_command(text: str) -> ExpenseCommand:
    parts = pipe_args(text)
    if len(parts) < 7:
        raise ValueError(EXPENSE_USAGE)

    group_id, expense_id, description, amount, mode, payer_id, participants = parts[:7]
    if not group_id or not expense_id or not payer_id:
        raise ValueError(EXPENSE_USAGE)

    return ExpenseCommand(
        group_id=group_id,
        expense_id=expense_id,
        description=description,
        amount=parse_amount(amount),
        split_type=resolve_split_type(mode),
        payer_id=payer_id,
        participants=parse_participants(participants),
    )
