"""DiagnosisHandler — transport-agnostic glue between chats and the analyzer."""
import asyncio

from floradoc.analysis_state import AnalysisStateStore
from floradoc.analyzer import PlantAnalyzer
from floradoc.constants import (
    MSG_ANALYSIS_BUSY,
    MSG_NEW_SESSION,
    MSG_STATUS,
    STATUS_ANALYZING,
    STATUS_IDLE,
    STATUS_LAST_ERROR,
    STATUS_LAST_NOT_PLANT,
    STATUS_LAST_RESULT,
)
from floradoc.models import EncodedImage
from floradoc.presenter import format_outcome
from floradoc.schema import SCHEMA_VERSION


class DiagnosisHandler:

    def __init__(
        self,
        analyzer: PlantAnalyzer,
        store: AnalysisStateStore | None = None,
    ) -> None:
        self._analyzer = analyzer
        self._store = store or AnalysisStateStore()

    async def handle_image(self, sender: str, image: EncodedImage) -> str:
        match self._store.begin(sender):
            case False:
                return MSG_ANALYSIS_BUSY
            case True:
                pass

        try:
            outcome = await self._analyzer.analyze(image)
        except asyncio.CancelledError:
            self._store.reset(sender)
            raise
        self._store.finish(sender, outcome)
        return format_outcome(outcome)

    def handle_new_command(self, sender: str) -> str:
        self._store.reset(sender)
        return MSG_NEW_SESSION

    def handle_status_command(self, sender: str) -> str:
        state = self._store.get(sender)
        match state:
            case _ if state.loading:
                chat_state = STATUS_ANALYZING
            case _ if state.error:
                chat_state = STATUS_LAST_ERROR
            case _ if state.data is not None and not state.data.is_plant:
                chat_state = STATUS_LAST_NOT_PLANT
            case _ if state.data is not None:
                chat_state = STATUS_LAST_RESULT % (
                    f"{state.data.plant_name} — {state.data.condition}"
                )
            case _:
                chat_state = STATUS_IDLE
        vision = self._analyzer.vision_client
        return MSG_STATUS % (vision.provider, vision.model, SCHEMA_VERSION, chat_state)
