from __future__ import annotations

import asyncio

from aiogram import Bot, Dispatcher

from splitshare.app import SplitShareApp
from splitshare.config import get_settings
from splitshare.handlers import basic_router, ledger_router
from splitshare.logging import configure_logging, get_logger


async def main() -> None:
    settings = get_settings()
    configure_logging()
    if not settings.bot_token:
        raise RuntimeError("BOT_TOKEN is not set")

    bot = Bot(token=settings.bot_token)
    dp = Dispatcher(app=SplitShareApp(tolerance=settings.split_tolerance))

    dp.include_router(basic_router)
    dp.include_router(ledger_router)

    log = get_logger(__name__)
    log.info("bot.start")
    try:
        await dp.start_polling(bot)
    finally:
        await bot.session.close()
        log.info("bot.stop")


if __name__ == "__main__":
    asyncio.run(main())
