"""VisionClient — abstract base for structured image analysis backends."""
from abc import ABC, abstractmethod
from typing import Optional

from floradoc.models import AnalysisRequest


class VisionClient(ABC):
    provider: str
    model: str

    @abstractmethod
    async def generate(self, request: AnalysisRequest) -> Optional[str]:
        """Send one structured-output request and return the raw JSON text.

        Returns None when the service answered without text. Raises on failure.
        """
        ...
