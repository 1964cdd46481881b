import logging
from dataclasses import dataclass
from typing import Optional

from floradoc.constants import MSG_ANALYSIS_IN_FLIGHT, MSG_GENERIC_FAILURE
from floradoc.models import AnalysisOutcome, DiseaseAnalysisResult, Failure, Success

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisState:
    loading: bool = False
    error: Optional[str] = None
    data: Optional[DiseaseAnalysisResult] = None


IDLE = AnalysisState()


class AnalysisStateStore:
    """Per-chat analysis state, in memory only.

    `begin` is the loading flag: a chat with a request in flight cannot start
    another until `finish` or `reset`.
    """

    def __init__(self) -> None:
        self._states: dict[str, AnalysisState] = {}

    def get(self, chat_id: str) -> AnalysisState:
        return self._states.get(chat_id, IDLE)

    def begin(self, chat_id: str) -> bool:
        match self.get(chat_id).loading:
            case True:
                logger.debug(MSG_ANALYSIS_IN_FLIGHT, chat_id)
                return False
            case False:
                self._states[chat_id] = AnalysisState(loading=True)
                return True

    def finish(self, chat_id: str, outcome: AnalysisOutcome) -> AnalysisState:
        match outcome:
            case Success(result=result):
                state = AnalysisState(data=result)
            case Failure():
                state = AnalysisState(error=MSG_GENERIC_FAILURE)
        self._states[chat_id] = state
        return state

    def reset(self, chat_id: str) -> None:
        self._states.pop(chat_id, None)
