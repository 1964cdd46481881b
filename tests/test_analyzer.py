"""PlantAnalyzer: one request per call, every outcome classified, never raises."""
import json
import logging

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from conftest import PNG_DATA_URI, TOMATO_JSON, FakeVisionClient, make_payload
from floradoc.analyzer import PlantAnalyzer
from floradoc.models import ErrorKind, Failure, Success


# ── request construction ──────────────────────────────────────────────────────


async def test_data_uri_string_is_decoded_into_request():
    vision = FakeVisionClient()

    await PlantAnalyzer(vision).analyze(PNG_DATA_URI)

    assert len(vision.requests) == 1
    request = vision.requests[0]
    assert request.image.mime_type == "image/png"
    assert request.image.data == "iVBORw0KGgo="
    assert request.temperature == 0.4
    assert "expert plant pathologist" in request.instruction
    assert "isPlant to false" in request.instruction


async def test_encoded_image_is_passed_through(png_image):
    vision = FakeVisionClient()

    await PlantAnalyzer(vision).analyze(png_image)

    assert vision.requests[0].image is png_image


async def test_bare_payload_defaults_to_jpeg():
    vision = FakeVisionClient()

    await PlantAnalyzer(vision).analyze("iVBORw0KGgo=")

    assert vision.requests[0].image.mime_type == "image/jpeg"
    assert vision.requests[0].image.data == "iVBORw0KGgo="


async def test_each_call_is_independent(png_image):
    vision = FakeVisionClient()
    analyzer = PlantAnalyzer(vision)

    first = await analyzer.analyze(png_image)
    second = await analyzer.analyze(png_image)

    assert len(vision.requests) == 2
    assert first == second


# ── success ───────────────────────────────────────────────────────────────────


async def test_tomato_scenario_is_success(png_image):
    outcome = await PlantAnalyzer(FakeVisionClient()).analyze(png_image)

    match outcome:
        case Success(result=result):
            assert result.plant_name == "Tomato"
            assert result.condition == "Early Blight"
            assert result.confidence == 87
            assert result.treatments.chemical == ["copper fungicide"]
            assert result.causes == []
            assert result.description == ""
        case _:
            pytest.fail(f"expected Success, got {outcome!r}")


async def test_not_a_plant_is_success_not_failure(png_image):
    payload = {
        "isPlant": False,
        "plantName": "",
        "condition": "",
        "confidence": 0,
        "symptoms": [],
        "treatments": {"organic": [], "chemical": []},
    }
    vision = FakeVisionClient(text=json.dumps(payload))

    outcome = await PlantAnalyzer(vision).analyze(png_image)

    assert isinstance(outcome, Success)
    assert outcome.result.is_plant is False


async def test_surrounding_whitespace_is_tolerated(png_image):
    vision = FakeVisionClient(text=f"\n  {TOMATO_JSON}  \n")

    outcome = await PlantAnalyzer(vision).analyze(png_image)

    assert outcome.ok is True


# ── transport failures ────────────────────────────────────────────────────────


async def test_transport_exception_becomes_failure_with_cause(png_image):
    error = ConnectionError("network unreachable")
    vision = FakeVisionClient(error=error)

    outcome = await PlantAnalyzer(vision).analyze(png_image)

    assert isinstance(outcome, Failure)
    assert outcome.kind is ErrorKind.TRANSPORT_ERROR
    assert outcome.cause is error
    assert "network unreachable" in outcome.message


async def test_transport_failure_is_not_retried(png_image):
    vision = FakeVisionClient(error=TimeoutError())

    await PlantAnalyzer(vision).analyze(png_image)

    assert len(vision.requests) == 1


async def test_transport_failure_is_logged(png_image, caplog):
    vision = FakeVisionClient(error=PermissionError("bad key"))

    with caplog.at_level(logging.WARNING, logger="floradoc.analyzer"):
        await PlantAnalyzer(vision).analyze(png_image)

    assert "transport_error" in caplog.text


async def test_undecodable_payload_surfaces_as_transport_error():
    from floradoc.vision.gemini import GeminiVisionClient

    with patch("floradoc.vision.gemini.genai.Client") as mock_cls:
        mock_genai = MagicMock()
        mock_genai.aio.models.generate_content = AsyncMock()
        mock_cls.return_value = mock_genai

        outcome = await PlantAnalyzer(GeminiVisionClient("k")).analyze("data:image/png;base64,abc")

    assert isinstance(outcome, Failure)
    assert outcome.kind is ErrorKind.TRANSPORT_ERROR
    mock_genai.aio.models.generate_content.assert_not_called()


# ── empty responses ───────────────────────────────────────────────────────────


@pytest.mark.parametrize("text", [None, "", "   \n"])
async def test_no_text_is_empty_response(png_image, text):
    outcome = await PlantAnalyzer(FakeVisionClient(text=text)).analyze(png_image)

    assert isinstance(outcome, Failure)
    assert outcome.kind is ErrorKind.EMPTY_RESPONSE
    assert outcome.cause is None


# ── malformed responses ───────────────────────────────────────────────────────


async def test_missing_confidence_is_malformed(png_image):
    payload = make_payload()
    payload.pop("confidence")

    outcome = await PlantAnalyzer(FakeVisionClient(text=json.dumps(payload))).analyze(png_image)

    assert isinstance(outcome, Failure)
    assert outcome.kind is ErrorKind.MALFORMED_RESPONSE
    assert outcome.cause is not None


@pytest.mark.parametrize(
    "text",
    [
        "not json at all",
        "[]",
        "42",
        json.dumps(make_payload(confidence="high")),
        json.dumps(make_payload(treatments={"organic": ["neem oil"]})),
        TOMATO_JSON[:-1],
    ],
)
async def test_schema_violations_are_malformed(png_image, text):
    outcome = await PlantAnalyzer(FakeVisionClient(text=text)).analyze(png_image)

    assert isinstance(outcome, Failure)
    assert outcome.kind is ErrorKind.MALFORMED_RESPONSE


async def test_code_fenced_json_is_malformed(png_image):
    vision = FakeVisionClient(text=f"```json\n{TOMATO_JSON}\n```")

    outcome = await PlantAnalyzer(vision).analyze(png_image)

    assert outcome.kind is ErrorKind.MALFORMED_RESPONSE


async def test_null_description_is_success_with_empty_description(png_image):
    vision = FakeVisionClient(text=json.dumps(make_payload(description=None, causes=None)))

    outcome = await PlantAnalyzer(vision).analyze(png_image)

    assert isinstance(outcome, Success)
    assert outcome.result.description == ""
    assert outcome.result.causes == []
