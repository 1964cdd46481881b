"""Abstract interfaces for transport-agnostic bot clients."""
from abc import ABC, abstractmethod
from typing import Awaitable, Callable

from floradoc.models import EncodedImage

# on_image signature: (sender, image) -> reply
OnImage = Callable[[str, EncodedImage], Awaitable[str]]


class TypingIndicator(ABC):
    @abstractmethod
    async def start(self, to: str) -> None: ...

    @abstractmethod
    async def stop(self, to: str) -> None: ...


class BotClient(ABC):
    @abstractmethod
    def run(self, on_image: OnImage) -> None: ...

    @abstractmethod
    async def send_message(self, to: str, text: str) -> bool: ...
