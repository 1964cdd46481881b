"""OpenAIVisionClient — OpenAI GPT-4o structured-output backend."""
from typing import Optional

from openai import AsyncOpenAI

from floradoc.constants import ANALYSIS_SCHEMA_NAME, OPENAI_VISION_MODEL, PROVIDER_OPENAI
from floradoc.models import AnalysisRequest
from floradoc.vision.client import VisionClient


class OpenAIVisionClient(VisionClient):
    provider = PROVIDER_OPENAI

    def __init__(self, api_key: str, model: str = OPENAI_VISION_MODEL) -> None:
        self._api_key = api_key
        self.model = model

    async def generate(self, request: AnalysisRequest) -> Optional[str]:
        client = AsyncOpenAI(api_key=self._api_key)
        response = await client.chat.completions.create(
            model=self.model,
            temperature=request.temperature,
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": ANALYSIS_SCHEMA_NAME,
                    "schema": request.response_schema,
                },
            },
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image_url",
                            "image_url": {"url": request.image.to_data_uri()},
                        },
                        {"type": "text", "text": request.instruction},
                    ],
                }
            ],
        )
        return response.choices[0].message.content
