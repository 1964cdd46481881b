"""Entry point — wires Config → VisionClient → PlantAnalyzer → DiagnosisHandler → TelegramClient."""
import logging

from rich.logging import RichHandler

from floradoc import constants
from floradoc.analyzer import PlantAnalyzer
from floradoc.config import Config
from floradoc.constants import MSG_BACKEND_SELECTED, MSG_BOT_STARTING
from floradoc.diagnosis import DiagnosisHandler
from floradoc.telegram.client import TelegramClient
from floradoc.vision.claude import ClaudeVisionClient
from floradoc.vision.client import VisionClient
from floradoc.vision.gemini import GeminiVisionClient
from floradoc.vision.openai import OpenAIVisionClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def build_vision_client(config: Config) -> VisionClient:
    match config.vision_provider:
        case constants.PROVIDER_OPENAI:
            return OpenAIVisionClient(config.openai_api_key, model=config.vision_model)
        case constants.PROVIDER_CLAUDE:
            return ClaudeVisionClient(config.anthropic_api_key, model=config.vision_model)
        case _:
            return GeminiVisionClient(config.gemini_api_key, model=config.vision_model)


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info(MSG_BOT_STARTING)

    vision = build_vision_client(config)
    logger.info(MSG_BACKEND_SELECTED, vision.provider, vision.model)

    handler = DiagnosisHandler(PlantAnalyzer(vision))
    client = TelegramClient(config)
    client.run(
        handler.handle_image,
        on_status=handler.handle_status_command,
        on_new=handler.handle_new_command,
    )


if __name__ == "__main__":
    main()
