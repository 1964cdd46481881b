"""TelegramClient — photo upload surface via python-telegram-bot."""
import logging
import time
from typing import Callable, Optional

from telegram import Bot, Update
from telegram.ext import Application, CommandHandler, ContextTypes
from telegram.ext import MessageHandler as TGMessageHandler
from telegram.ext import filters

from floradoc.bot_client import BotClient, OnImage
from floradoc.config import Config
from floradoc.constants import (
    CMD_HELP,
    CMD_NEW,
    CMD_START,
    CMD_STATUS,
    DEFAULT_IMAGE_MIME_TYPE,
    IMAGE_MIME_PREFIX,
    MSG_BLOCKED_CHAT,
    MSG_GENERIC_FAILURE,
    MSG_HELP,
    MSG_SEND_FAIL,
    MSG_SEND_OK,
    MSG_SEND_PHOTO,
    MSG_UNSUPPORTED_FILE,
)
from floradoc.models import EncodedImage
from floradoc.telegram.typing import TelegramTypingIndicator

logger = logging.getLogger(__name__)


def is_image_mime_type(mime_type: Optional[str]) -> bool:
    return bool(mime_type) and mime_type.startswith(IMAGE_MIME_PREFIX)


class TelegramClient(BotClient):

    def __init__(self, config: Config) -> None:
        self._token = config.telegram_bot_token
        self._allowed_chat_ids = frozenset(config.allowed_chat_ids)
        self._app: Optional[Application] = None
        self._typing: Optional[TelegramTypingIndicator] = None

    # ── BotClient interface ───────────────────────────────────────────────────

    def run(
        self,
        on_image: OnImage,
        on_status: Callable[[str], str] | None = None,
        on_new: Callable[[str], str] | None = None,
    ) -> None:
        self._app = self._build_application()
        self._app.add_handler(
            CommandHandler([CMD_START, CMD_HELP], self._make_reply_handler(lambda _: MSG_HELP))
        )
        if on_status is not None:
            self._app.add_handler(CommandHandler(CMD_STATUS, self._make_reply_handler(on_status)))
        if on_new is not None:
            self._app.add_handler(CommandHandler(CMD_NEW, self._make_reply_handler(on_new)))
        self._app.add_handler(
            TGMessageHandler(filters.PHOTO, self._make_photo_handler(on_image))
        )
        self._app.add_handler(
            TGMessageHandler(filters.Document.ALL, self._make_document_handler(on_image))
        )
        self._app.add_handler(
            TGMessageHandler(
                filters.TEXT & ~filters.COMMAND,
                self._make_reply_handler(lambda _: MSG_SEND_PHOTO),
            )
        )
        self._app.run_polling()

    async def send_message(self, to: str, text: str) -> bool:
        match self._app:
            case None:
                logger.error("send_message called before run()")
                return False
            case app:
                try:
                    await app.bot.send_message(chat_id=int(to), text=text)
                    return True
                except Exception as exc:
                    logger.error("Telegram send_message failed: %s", exc)
                    return False

    # ── helpers (also used in tests) ─────────────────────────────────────────

    def _build_application(self) -> Application:
        # Chats are served in parallel; AnalysisStateStore keeps one request per chat.
        return (
            Application.builder()
            .token(self._token)
            .concurrent_updates(True)
            .build()
        )

    def _is_allowed(self, update: Update) -> bool:
        if update.effective_chat is None:
            return False
        match self._allowed_chat_ids:
            case empty if not empty:
                return True
            case allowed:
                return str(update.effective_chat.id) in allowed

    def _sender(self, update: Update) -> Optional[str]:
        """Chat id of an allowed update, or None (blocked updates are logged)."""
        match self._is_allowed(update):
            case False:
                chat_id = update.effective_chat.id if update.effective_chat else "?"
                logger.warning(MSG_BLOCKED_CHAT, chat_id)
                return None
            case True:
                return str(update.effective_chat.id)

    @staticmethod
    async def _download(tg_object) -> bytes:
        tg_file = await tg_object.get_file()
        return bytes(await tg_file.download_as_bytearray())

    # ── internal handler factory ──────────────────────────────────────────────

    def _make_reply_handler(self, callback: Callable[[str], str]) -> Callable:
        """Handler that replies with callback(sender)."""
        async def _handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
            match self._sender(update):
                case None:
                    return
                case sender:
                    await self.send_message(sender, callback(sender))

        return _handler

    def _make_photo_handler(self, on_image: OnImage) -> Callable:
        async def _handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
            sender = self._sender(update)
            photos = update.message.photo if update.message else None
            match (sender, photos):
                case (None, _) | (_, None | []):
                    return
                case _:
                    pass

            try:
                raw = await self._download(photos[-1])
            except Exception:
                logger.exception("Photo download failed")
                await self.send_message(sender, MSG_GENERIC_FAILURE)
                return
            # Telegram re-encodes compressed photos as JPEG.
            image = EncodedImage.from_bytes(raw, DEFAULT_IMAGE_MIME_TYPE)
            await self._process(sender, image, context.bot, on_image)

        return _handler

    def _make_document_handler(self, on_image: OnImage) -> Callable:
        async def _handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
            sender = self._sender(update)
            document = update.message.document if update.message else None
            match (sender, document):
                case (None, _) | (_, None):
                    return
                case _:
                    pass

            match is_image_mime_type(document.mime_type):
                case False:
                    await self.send_message(sender, MSG_UNSUPPORTED_FILE)
                    return
                case True:
                    pass

            try:
                raw = await self._download(document)
            except Exception:
                logger.exception("Document download failed")
                await self.send_message(sender, MSG_GENERIC_FAILURE)
                return
            image = EncodedImage.from_bytes(raw, document.mime_type)
            await self._process(sender, image, context.bot, on_image)

        return _handler

    async def _process(
        self,
        sender: str,
        image: EncodedImage,
        bot: Bot,
        on_image: OnImage,
    ) -> None:
        start = time.time()
        if self._typing is None:
            self._typing = TelegramTypingIndicator(bot)
        await self._typing.start(sender)
        try:
            reply = await on_image(sender, image)
        finally:
            await self._typing.stop(sender)

        elapsed = time.time() - start
        success = await self.send_message(sender, reply)
        match success:
            case True:
                logger.info(MSG_SEND_OK, elapsed)
            case False:
                logger.error(MSG_SEND_FAIL, elapsed)
