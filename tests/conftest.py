import json

import pytest

from floradoc.models import AnalysisRequest, DiseaseAnalysisResult, EncodedImage
from floradoc.vision.client import VisionClient

TOMATO_JSON = json.dumps(
    {
        "isPlant": True,
        "plantName": "Tomato",
        "condition": "Early Blight",
        "confidence": 87,
        "symptoms": ["brown spots"],
        "treatments": {"organic": ["neem oil"], "chemical": ["copper fungicide"]},
        "prevention": ["rotate crops"],
    }
)

PNG_DATA_URI = "data:image/png;base64,iVBORw0KGgo="


def make_payload(**overrides) -> dict:
    payload = json.loads(TOMATO_JSON)
    payload.update(overrides)
    return payload


def make_result(**overrides) -> DiseaseAnalysisResult:
    return DiseaseAnalysisResult.model_validate_json(json.dumps(make_payload(**overrides)))


class FakeVisionClient(VisionClient):
    """Returns canned text (or raises) and records every request."""

    provider = "fake"
    model = "fake-vision-1"

    def __init__(self, text: str | None = TOMATO_JSON, error: Exception | None = None) -> None:
        self._text = text
        self._error = error
        self.requests: list[AnalysisRequest] = []

    async def generate(self, request: AnalysisRequest) -> str | None:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return self._text


@pytest.fixture
def png_image() -> EncodedImage:
    return EncodedImage.from_data_uri(PNG_DATA_URI)
