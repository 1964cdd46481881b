from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from floradoc.constants import (
    CLAUDE_VISION_MODEL,
    GEMINI_VISION_MODEL,
    OPENAI_VISION_MODEL,
    PROVIDER_CLAUDE,
    PROVIDER_GEMINI,
    PROVIDER_OPENAI,
    VISION_PROVIDERS,
)

_DEFAULT_MODELS = {
    PROVIDER_GEMINI: GEMINI_VISION_MODEL,
    PROVIDER_OPENAI: OPENAI_VISION_MODEL,
    PROVIDER_CLAUDE: CLAUDE_VISION_MODEL,
}

_KEY_VARIABLES = {
    PROVIDER_GEMINI: "GEMINI_API_KEY",
    PROVIDER_OPENAI: "OPENAI_API_KEY",
    PROVIDER_CLAUDE: "ANTHROPIC_API_KEY",
}


@dataclass(frozen=True)
class Config:
    telegram_bot_token: str
    allowed_chat_ids: tuple[str, ...]
    log_level: str
    vision_provider: str
    vision_model: str
    gemini_api_key: Optional[str]
    openai_api_key: Optional[str]
    anthropic_api_key: Optional[str]

    @property
    def vision_api_key(self) -> Optional[str]:
        return {
            PROVIDER_GEMINI: self.gemini_api_key,
            PROVIDER_OPENAI: self.openai_api_key,
            PROVIDER_CLAUDE: self.anthropic_api_key,
        }.get(self.vision_provider)

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        token = os.getenv("TELEGRAM_BOT_TOKEN")
        raw_chat_ids = os.getenv("ALLOWED_CHAT_IDS", "")
        log_level = os.getenv("LOG_LEVEL", "INFO")
        provider = os.getenv("VISION_PROVIDER", PROVIDER_GEMINI).strip().lower()
        model = os.getenv("VISION_MODEL") or None
        gemini_api_key = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or None
        openai_api_key = os.getenv("OPENAI_API_KEY") or None
        anthropic_api_key = os.getenv("ANTHROPIC_API_KEY") or None

        chat_ids = tuple(c.strip() for c in raw_chat_ids.split(",") if c.strip())

        return cls._validate(
            telegram_bot_token=token,
            allowed_chat_ids=chat_ids,
            log_level=log_level,
            vision_provider=provider,
            vision_model=model,
            gemini_api_key=gemini_api_key,
            openai_api_key=openai_api_key,
            anthropic_api_key=anthropic_api_key,
        )

    @staticmethod
    def _validate(
        telegram_bot_token: Optional[str],
        allowed_chat_ids: tuple[str, ...],
        log_level: str,
        vision_provider: str,
        vision_model: Optional[str],
        gemini_api_key: Optional[str],
        openai_api_key: Optional[str],
        anthropic_api_key: Optional[str],
    ) -> "Config":
        match telegram_bot_token:
            case None | "":
                raise ValueError("TELEGRAM_BOT_TOKEN must be set in .env")
            case _:
                pass

        match vision_provider:
            case p if p in VISION_PROVIDERS:
                pass
            case other:
                raise ValueError(
                    f"VISION_PROVIDER must be one of {', '.join(VISION_PROVIDERS)}, got {other!r}"
                )

        config = Config(
            telegram_bot_token=telegram_bot_token,
            allowed_chat_ids=allowed_chat_ids,
            log_level=log_level,
            vision_provider=vision_provider,
            vision_model=vision_model or _DEFAULT_MODELS[vision_provider],
            gemini_api_key=gemini_api_key,
            openai_api_key=openai_api_key,
            anthropic_api_key=anthropic_api_key,
        )

        match config.vision_api_key:
            case None | "":
                raise ValueError(
                    f"{_KEY_VARIABLES[vision_provider]} must be set in .env "
                    f"for VISION_PROVIDER={vision_provider}"
                )
            case _:
                return config
