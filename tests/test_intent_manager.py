"""Testy jednostkowe dla pełnego przebiegu detekcji intencji."""

from aegis_core.config import SETTINGS
from aegis_core.core.intent_manager import (
    IntentDetection,
    detect_intent,
    format_intent_summary,
)


def test_detect_single_intent_routes_to_recommendation():
    detection = detect_intent("please deploy the service")
    assert detection.intents == ["action:deploy"]
    assert detection.should_clarify is False
    assert detection.route is not None
    assert detection.route.commands == ("/git",)


def test_ambiguous_request_has_no_route():
    detection = detect_intent("build and test the feature")
    assert detection.intents == ["action:build", "action:test"]
    assert detection.should_clarify is True
    assert detection.route is None
    assert detection.best.intent == "action:build"
    assert "run tests" in detection.ambiguity.clarification


def test_explicit_threshold_overrides_settings():
    detection = detect_intent("build and test the feature", ambiguity_threshold=100)
    assert detection.should_clarify is False
    assert detection.route.intent == "action:build"


def test_threshold_defaults_to_settings(monkeypatch):
    monkeypatch.setattr(SETTINGS, "AMBIGUITY_THRESHOLD", 100)
    detection = detect_intent("build and test the feature")
    assert detection.should_clarify is False


def test_languages_default_to_settings(monkeypatch):
    monkeypatch.setattr(SETTINGS, "SUPPORTED_LANGUAGES", ["en"])
    detection = detect_intent("배포")
    assert detection.intents == []


def test_team_summon_in_korean():
    detection = detect_intent("팀 소환해서 빌드해줘", ambiguity_threshold=100)
    assert detection.best.intent == "team:summon"
    assert detection.best.agents == ("orchestrator",)


def test_empty_text():
    detection = detect_intent("")
    assert detection == IntentDetection()
    assert format_intent_summary(detection) == ""


def test_summary_for_single_intent():
    detection = detect_intent("write a test for this")
    assert format_intent_summary(detection) == (
        "intent=action:test route=/test agents=[tdd-guide,e2e-runner]"
    )


def test_summary_marks_ambiguity():
    detection = detect_intent("build and test the feature")
    assert format_intent_summary(detection) == (
        "intent=action:build route=/build agents=[planner] | ambiguous score=50"
    )
