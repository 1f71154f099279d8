from __future__ import annotations

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.types import Message

from splitshare.utils.parse import EXPENSE_USAGE

basic_router = Router()

HELP_TEXT = "\n".join(
    [
        "SplitShare keeps track of who owes whom.",
        "",
        "/adduser <user_id> <name>",
        "/newgroup <group_id> | <name> | <founder_id>",
        "/join <group_id> <user_id>",
        EXPENSE_USAGE,
        "/balance <user_id>",
        "/settle",
    ]
)


@basic_router.message(CommandStart())
async def cmd_start(message: Message) -> None:
    await message.answer(HELP_TEXT)


@basic_router.message(Command("help"))
async def cmd_help(message: Message) -> None:
    await message.answer(HELP_TEXT)
