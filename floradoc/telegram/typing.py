"""Telegram chat-action indicator — shown per chat while a diagnosis is pending."""
import asyncio
import logging

from telegram import Bot
from telegram.constants import ChatAction

from floradoc.bot_client import TypingIndicator
from floradoc.constants import TELEGRAM_TYPING_INTERVAL

logger = logging.getLogger(__name__)


async def _keep_acting(bot: Bot, chat_id: str, action: ChatAction) -> None:
    while True:
        try:
            await bot.send_chat_action(chat_id=int(chat_id), action=action)
        except Exception as exc:
            logger.debug("Chat action failed for %s: %s", chat_id, exc)
        await asyncio.sleep(TELEGRAM_TYPING_INTERVAL)


class TelegramTypingIndicator(TypingIndicator):
    """One background task per chat; many chats can be analyzing at once."""

    def __init__(self, bot: Bot, action: ChatAction = ChatAction.TYPING) -> None:
        self._bot = bot
        self._action = action
        self._tasks: dict[str, asyncio.Task] = {}

    def is_active(self, to: str) -> bool:
        return to in self._tasks

    async def start(self, to: str) -> None:
        await self.stop(to)
        self._tasks[to] = asyncio.create_task(_keep_acting(self._bot, to, self._action))

    async def stop(self, to: str) -> None:
        match self._tasks.pop(to, None):
            case None:
                return
            case task:
                task.cancel()
                try:
                    await task
                except asyncio.CancelledError:
                    pass
