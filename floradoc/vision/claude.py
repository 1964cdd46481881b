"""ClaudeVisionClient — Anthropic Claude backend, structured via a forced tool call."""
import json
from typing import Optional

from anthropic import AsyncAnthropic

from floradoc.constants import (
    ANALYSIS_SCHEMA_NAME,
    CLAUDE_MAX_TOKENS,
    CLAUDE_TOOL_DESCRIPTION,
    CLAUDE_TOOL_USE,
    CLAUDE_VISION_MODEL,
    PROVIDER_CLAUDE,
)
from floradoc.models import AnalysisRequest
from floradoc.vision.client import VisionClient


class ClaudeVisionClient(VisionClient):
    provider = PROVIDER_CLAUDE

    def __init__(self, api_key: str, model: str = CLAUDE_VISION_MODEL) -> None:
        self._api_key = api_key
        self.model = model

    async def generate(self, request: AnalysisRequest) -> Optional[str]:
        client = AsyncAnthropic(api_key=self._api_key)
        message = await client.messages.create(
            model=self.model,
            max_tokens=CLAUDE_MAX_TOKENS,
            temperature=request.temperature,
            tools=[
                {
                    "name": ANALYSIS_SCHEMA_NAME,
                    "description": CLAUDE_TOOL_DESCRIPTION,
                    "input_schema": request.response_schema,
                }
            ],
            tool_choice={"type": "tool", "name": ANALYSIS_SCHEMA_NAME},
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": request.image.mime_type,
                                "data": request.image.data,
                            },
                        },
                        {"type": "text", "text": request.instruction},
                    ],
                }
            ],
        )
        tool_calls = [block for block in message.content if block.type == CLAUDE_TOOL_USE]
        match tool_calls:
            case []:
                return None
            case [call, *_]:
                return json.dumps(call.input)
