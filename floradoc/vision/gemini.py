"""GeminiVisionClient — Google Gemini structured-output backend."""
import base64
from typing import Optional

from google import genai
from google.genai import types

from floradoc.constants import GEMINI_VISION_MODEL, JSON_MIME_TYPE, PROVIDER_GEMINI
from floradoc.models import AnalysisRequest
from floradoc.vision.client import VisionClient


def to_gemini_schema(node: dict) -> types.Schema:
    """Translate a JSON-Schema node into the SDK's OpenAPI-style Schema."""
    properties = node.get("properties")
    items = node.get("items")
    return types.Schema(
        type=types.Type(node["type"].upper()),
        description=node.get("description"),
        items=to_gemini_schema(items) if items else None,
        properties=(
            {name: to_gemini_schema(child) for name, child in properties.items()}
            if properties
            else None
        ),
        property_ordering=list(properties) if properties else None,
        required=node.get("required"),
    )


class GeminiVisionClient(VisionClient):
    provider = PROVIDER_GEMINI

    def __init__(self, api_key: str, model: str = GEMINI_VISION_MODEL) -> None:
        self._api_key = api_key
        self.model = model

    async def generate(self, request: AnalysisRequest) -> Optional[str]:
        client = genai.Client(api_key=self._api_key)
        image = types.Part(
            inline_data=types.Blob(
                mime_type=request.image.mime_type,
                data=base64.b64decode(request.image.data),
            )
        )
        response = await client.aio.models.generate_content(
            model=self.model,
            contents=[
                types.Content(role="user", parts=[image, types.Part(text=request.instruction)])
            ],
            config=types.GenerateContentConfig(
                response_mime_type=JSON_MIME_TYPE,
                response_schema=to_gemini_schema(request.response_schema),
                temperature=request.temperature,
            ),
        )
        return response.text
