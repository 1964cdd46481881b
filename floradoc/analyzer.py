"""PlantAnalyzer — one image in, one validated diagnosis or classified failure out."""
import logging

from pydantic import ValidationError

from floradoc.constants import (
    MSG_ANALYSIS_FAILED,
    MSG_ANALYSIS_NOT_PLANT,
    MSG_ANALYSIS_OK,
    MSG_ERR_EMPTY_RESPONSE,
    MSG_ERR_MALFORMED_RESPONSE,
    MSG_ERR_TRANSPORT,
)
from floradoc.models import (
    AnalysisOutcome,
    AnalysisRequest,
    DiseaseAnalysisResult,
    EncodedImage,
    ErrorKind,
    Failure,
    Success,
)
from floradoc.vision.client import VisionClient

logger = logging.getLogger(__name__)


def parse_result(text: str) -> DiseaseAnalysisResult:
    """Strictly validate structured text. Raises pydantic.ValidationError."""
    return DiseaseAnalysisResult.model_validate_json(text)


class PlantAnalyzer:
    """Stateless adapter between an EncodedImage and a VisionClient.

    Each `analyze` call makes exactly one backend request: no retries, no
    caching, no concurrency guard. Callers that must keep a single request in
    flight track that themselves (see `AnalysisStateStore`).
    """

    def __init__(self, vision_client: VisionClient) -> None:
        self._vision_client = vision_client

    @property
    def vision_client(self) -> VisionClient:
        return self._vision_client

    async def analyze(self, image: EncodedImage | str) -> AnalysisOutcome:
        match image:
            case str() as uri:
                image = EncodedImage.from_data_uri(uri)
            case _:
                pass

        request = AnalysisRequest.for_image(image)
        try:
            text = await self._vision_client.generate(request)
        except Exception as exc:
            return self._fail(ErrorKind.TRANSPORT_ERROR, MSG_ERR_TRANSPORT % exc, exc)

        match text.strip() if text else "":
            case "":
                return self._fail(ErrorKind.EMPTY_RESPONSE, MSG_ERR_EMPTY_RESPONSE)
            case body:
                pass

        try:
            result = parse_result(body)
        except ValidationError as exc:
            return self._fail(
                ErrorKind.MALFORMED_RESPONSE,
                MSG_ERR_MALFORMED_RESPONSE % exc.error_count(),
                exc,
            )

        match result.is_plant:
            case True:
                logger.info(MSG_ANALYSIS_OK, result.plant_name, result.condition, result.confidence)
            case False:
                logger.info(MSG_ANALYSIS_NOT_PLANT)
        return Success(result)

    @staticmethod
    def _fail(kind: ErrorKind, message: str, cause: BaseException | None = None) -> Failure:
        match cause:
            case None:
                logger.warning(MSG_ANALYSIS_FAILED, kind.value, message)
            case exc:
                logger.warning(MSG_ANALYSIS_FAILED, kind.value, message, exc_info=exc)
        return Failure(kind=kind, message=message, cause=cause)
