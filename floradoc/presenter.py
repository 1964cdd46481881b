"""Render an AnalysisOutcome as chat text.

Presentation rules:
  - any Failure → one generic message plus a retry hint, no details
  - is_plant=False → "no plant detected" only, nothing diagnosis-like
  - healthy condition → diagnosis without the treatment plan
  - otherwise → full diagnosis including organic and chemical treatments
"""
from floradoc.constants import (
    BULLET,
    MSG_DISCLAIMER,
    MSG_GENERIC_FAILURE,
    MSG_NOT_A_PLANT,
    MSG_RETRY_HINT,
    RESULT_CONDITION,
    RESULT_HEADER,
    SECTION_CAUSES,
    SECTION_CHEMICAL,
    SECTION_ORGANIC,
    SECTION_PREVENTION,
    SECTION_SYMPTOMS,
    SECTION_TREATMENT,
)
from floradoc.models import AnalysisOutcome, DiseaseAnalysisResult, Failure, Success


def format_confidence(value: float) -> str:
    return f"{value:.0f}"


def _section(title: str, items: list[str], indent: str = "") -> list[str]:
    match items:
        case []:
            return []
        case _:
            return [f"{indent}{title}:", *(f"{indent}{BULLET}{item}" for item in items)]


def _treatment_lines(result: DiseaseAnalysisResult) -> list[str]:
    lines = [
        *_section(SECTION_ORGANIC, result.treatments.organic, indent="  "),
        *_section(SECTION_CHEMICAL, result.treatments.chemical, indent="  "),
    ]
    match lines:
        case []:
            return []
        case _:
            return [f"{SECTION_TREATMENT}:", *lines]


def format_result(result: DiseaseAnalysisResult) -> str:
    if not result.is_plant:
        return MSG_NOT_A_PLANT

    blocks = [
        [
            RESULT_HEADER % result.plant_name,
            RESULT_CONDITION % (result.condition, format_confidence(result.confidence)),
        ],
        [result.description] if result.description else [],
        _section(SECTION_SYMPTOMS, result.symptoms),
        _section(SECTION_CAUSES, result.causes),
        [] if result.is_healthy else _treatment_lines(result),
        _section(SECTION_PREVENTION, result.prevention),
        [MSG_DISCLAIMER],
    ]
    return "\n\n".join("\n".join(block) for block in blocks if block)


def format_outcome(outcome: AnalysisOutcome) -> str:
    match outcome:
        case Success(result=result):
            return format_result(result)
        case Failure():
            return f"{MSG_GENERIC_FAILURE}\n{MSG_RETRY_HINT}"
