import base64
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from floradoc.constants import ANALYSIS_INSTRUCTION, ANALYSIS_TEMPERATURE, HEALTHY_MARKER
from floradoc.data_uri import parse_data_uri
from floradoc.schema import ANALYSIS_SCHEMA


@dataclass(frozen=True)
class EncodedImage:
    mime_type: str
    data: str  # base64 payload, never re-encoded

    @classmethod
    def from_data_uri(cls, uri: str) -> "EncodedImage":
        mime_type, payload = parse_data_uri(uri)
        return cls(mime_type=mime_type, data=payload)

    @classmethod
    def from_bytes(cls, raw: bytes, mime_type: str) -> "EncodedImage":
        return cls(mime_type=mime_type, data=base64.standard_b64encode(raw).decode())

    def to_data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


@dataclass(frozen=True)
class AnalysisRequest:
    image: EncodedImage
    instruction: str
    response_schema: dict
    temperature: float

    @classmethod
    def for_image(cls, image: EncodedImage) -> "AnalysisRequest":
        return cls(
            image=image,
            instruction=ANALYSIS_INSTRUCTION,
            response_schema=ANALYSIS_SCHEMA,
            temperature=ANALYSIS_TEMPERATURE,
        )


class _WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python, no type coercion."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
        frozen=True,
        extra="ignore",
    )


class TreatmentPlan(_WireModel):
    organic: list[str]
    chemical: list[str]


class DiseaseAnalysisResult(_WireModel):
    is_plant: bool
    plant_name: str
    condition: str
    confidence: float
    symptoms: list[str]
    treatments: TreatmentPlan
    description: str = ""
    causes: list[str] = []
    prevention: list[str] = []

    @field_validator("description", "causes", "prevention", mode="before")
    @classmethod
    def _null_as_absent(cls, value, info: ValidationInfo):
        # Optional fields sent as null get the same default as omitted ones.
        match value:
            case None:
                return cls.model_fields[info.field_name].get_default()
            case _:
                return value

    @property
    def is_healthy(self) -> bool:
        """'Healthy', 'healthy lettuce', ... — any condition mentioning health."""
        return HEALTHY_MARKER in self.condition.lower()


class ErrorKind(str, Enum):
    TRANSPORT_ERROR = "transport_error"
    EMPTY_RESPONSE = "empty_response"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class Success:
    result: DiseaseAnalysisResult
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    cause: Optional[BaseException] = None
    ok: bool = field(default=False, init=False)


AnalysisOutcome = Success | Failure
