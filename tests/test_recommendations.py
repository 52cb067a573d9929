"""Testy jednostkowe dla mapowania intencji na rekomendacje."""

from aegis_core.core.intent_lexicon import KNOWN_INTENTS
from aegis_core.core.recommendations import (
    RECOMMENDATION_TABLE,
    get_best_recommendation,
    get_recommendations,
    lookup_recommendation,
)


def test_every_known_intent_has_recommendation():
    assert set(RECOMMENDATION_TABLE) == set(KNOWN_INTENTS)


def test_lookup_unknown_intent_returns_none():
    assert lookup_recommendation("unknown:x") is None
    assert lookup_recommendation(None) is None


def test_get_recommendations_preserves_order_and_skips_unknown():
    records = get_recommendations(["action:test", "unknown:x", "action:build"])
    assert [r.intent for r in records] == ["action:test", "action:build"]


def test_get_recommendations_expands_full_record():
    (record,) = get_recommendations(["action:refactor"])
    assert record.type == "action"
    assert record.description == "Refactoring or cleanup"
    assert record.agents == ("refactor-cleaner",)
    assert record.commands == ("/improve", "/cleanup")


def test_explain_has_no_agents():
    (record,) = get_recommendations(["action:explain"])
    assert record.agents == ()
    assert record.commands == ("/explain",)


def test_get_recommendations_empty():
    assert get_recommendations([]) == []


def test_team_outranks_action_regardless_of_order():
    assert get_best_recommendation(["action:build", "team:summon"]).intent == (
        "team:summon"
    )
    assert get_best_recommendation(["team:summon", "action:build"]).intent == (
        "team:summon"
    )


def test_first_known_action_wins_without_team():
    best = get_best_recommendation(["unknown:x", "action:deploy", "action:test"])
    assert best is RECOMMENDATION_TABLE["action:deploy"]


def test_best_recommendation_absent_for_empty_or_unknown():
    assert get_best_recommendation([]) is None
    assert get_best_recommendation(["unknown:x"]) is None
