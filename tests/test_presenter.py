"""Presenter rules: failures generic, non-plants bare, healthy without treatments."""
from conftest import make_result
from floradoc.constants import MSG_DISCLAIMER, MSG_GENERIC_FAILURE, MSG_NOT_A_PLANT
from floradoc.models import ErrorKind, Failure, Success
from floradoc.presenter import format_confidence, format_outcome, format_result


def test_failure_shows_generic_message_only():
    outcome = Failure(ErrorKind.MALFORMED_RESPONSE, "3 validation errors", ValueError("x"))

    text = format_outcome(outcome)

    assert text.startswith(MSG_GENERIC_FAILURE)
    assert "validation" not in text
    assert "/new" in text


def test_every_failure_kind_renders_the_same():
    texts = {format_outcome(Failure(kind, f"detail {kind}")) for kind in ErrorKind}

    assert len(texts) == 1


def test_not_a_plant_shows_no_diagnosis():
    result = make_result(isPlant=False, condition="Early Blight", confidence=12)

    text = format_outcome(Success(result))

    assert text == MSG_NOT_A_PLANT
    assert "Early Blight" not in text
    assert "neem oil" not in text


def test_diseased_plant_shows_treatment_plan():
    text = format_result(make_result(causes=["Alternaria solani"], description="Fungal leaf spot."))

    assert "🌿 Tomato" in text
    assert "Condition: Early Blight (87% confidence)" in text
    assert "Fungal leaf spot." in text
    assert "• brown spots" in text
    assert "• Alternaria solani" in text
    assert "Treatment plan:" in text
    assert "• neem oil" in text
    assert "• copper fungicide" in text
    assert "• rotate crops" in text
    assert text.endswith(MSG_DISCLAIMER)


def test_healthy_plant_omits_treatment_plan_even_if_populated():
    text = format_result(make_result(condition="Healthy"))

    assert "Condition: Healthy" in text
    assert "Treatment plan" not in text
    assert "neem oil" not in text
    assert "• rotate crops" in text


def test_healthy_substring_match():
    text = format_result(make_result(condition="healthy lettuce"))

    assert "Treatment plan" not in text


def test_empty_sections_are_skipped():
    text = format_result(
        make_result(symptoms=[], prevention=[], treatments={"organic": [], "chemical": ["copper"]})
    )

    assert "Symptoms" not in text
    assert "Causes" not in text
    assert "Prevention" not in text
    assert "Organic" not in text
    assert "Chemical:" in text


def test_no_treatments_at_all_skips_treatment_header():
    text = format_result(make_result(treatments={"organic": [], "chemical": []}))

    assert "Treatment plan" not in text


def test_confidence_is_rounded_for_display():
    assert format_confidence(87) == "87"
    assert format_confidence(72.6) == "73"
