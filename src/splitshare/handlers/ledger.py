from __future__ import annotations

from aiogram import Router
from aiogram.filters import Command
from aiogram.types import Message

from splitshare.app import SplitShareApp
from splitshare.errors import SplitShareError
from splitshare.logging import get_logger
from splitshare.models import Split, SplitType
from splitshare.services.settlement import format_transfers
from splitshare.services.split import equal_splits
from splitshare.utils.parse import ExpenseCommand, command_args, parse_expense_command, pipe_args

ledger_router = Router()
log = get_logger(__name__)


def build_splits(app: SplitShareApp, command: ExpenseCommand) -> list[Split]:
    users = [app.users.get(user_id) for user_id, _ in command.participants]
    values = [value for _, value in command.participants]

    if all(value is None for value in values):
        if command.split_type != SplitType.EQUAL:
            raise ValueError("Values are required for exact and percentage splits")
        return equal_splits(users, command.amount)
    if any(value is None for value in values):
        raise ValueError("Either give a value for every participant or for none")
    return [Split(user=user, amount=value) for user, value in zip(users, values)]


async def _fail(message: Message, command: str, exc: Exception) -> None:
    log.warning("bot.command_failed", command=command, error=str(exc))
    await message.answer(f"Error: {exc}")


@ledger_router.message(Command("adduser"))
async def cmd_adduser(message: Message, app: SplitShareApp) -> None:
    parts = command_args(message.text or "").split(maxsplit=1)
    if len(parts) < 2:
        await message.answer("Usage: /adduser <user_id> <name>")
        return
    try:
        user = app.create_user(parts[0], parts[1])
    except SplitShareError as exc:
        await _fail(message, "adduser", exc)
        return
    await message.answer(f"User added: {user.user_id} ({user.name})")


@ledger_router.message(Command("newgroup"))
async def cmd_newgroup(message: Message, app: SplitShareApp) -> None:
    parts = pipe_args(message.text or "")
    if len(parts) < 3 or not all(parts[:3]):
        await message.answer("Usage: /newgroup <group_id> | <name> | <founder_id>")
        return
    try:
        group = app.create_group(parts[0], parts[1], parts[2])
    except SplitShareError as exc:
        await _fail(message, "newgroup", exc)
        return
    await message.answer(f"Group created: {group.group_id} ({group.name})")


@ledger_router.message(Command("join"))
async def cmd_join(message: Message, app: SplitShareApp) -> None:
    parts = command_args(message.text or "").split()
    if len(parts) < 2:
        await message.answer("Usage: /join <group_id> <user_id>")
        return
    try:
        group = app.add_member(parts[0], parts[1])
    except SplitShareError as exc:
        await _fail(message, "join", exc)
        return
    await message.answer(f"{parts[1]} joined {group.group_id} ({len(group.members)} members)")


@ledger_router.message(Command("addexpense"))
async def cmd_addexpense(message: Message, app: SplitShareApp) -> None:
    try:
        command = parse_expense_command(message.text or "")
        splits = build_splits(app, command)
        expense = app.create_expense(
            command.group_id,
            command.expense_id,
            command.description,
            command.amount,
            splits,
            command.split_type,
            command.payer_id,
        )
    except (SplitShareError, ValueError) as exc:
        await _fail(message, "addexpense", exc)
        return

    lines = [f"Expense added: {expense.expense_id} {expense.description} {expense.amount:.2f}"]
    lines.extend(f"  {split.user.user_id}: {split.amount:.2f}" for split in expense.splits)
    await message.answer("\n".join(lines))


@ledger_router.message(Command("balance"))
async def cmd_balance(message: Message, app: SplitShareApp) -> None:
    user_id = command_args(message.text or "")
    try:
        text = app.format_balances(user_id or None)
    except SplitShareError as exc:
        await _fail(message, "balance", exc)
        return
    await message.answer(text or "No users yet.")


@ledger_router.message(Command("settle"))
async def cmd_settle(message: Message, app: SplitShareApp) -> None:
    await message.answer(format_transfers(app.suggest_settlements()))
