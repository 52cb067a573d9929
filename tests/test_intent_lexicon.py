"""Testy jednostkowe dla wielojęzycznego matchera intencji."""

from aegis_core.core.intent_lexicon import (
    KEYWORD_LEXICON,
    KNOWN_INTENTS,
    LANGUAGES,
    IntentMatch,
    match_keywords,
    unique_intents,
)


def _intents(matches):
    return {m.intent for m in matches}


def test_build_and_test_detected():
    """Test wykrycia dwóch intencji w jednym zdaniu."""
    matches = match_keywords("build and test the feature")
    assert "action:build" in _intents(matches)
    assert "action:test" in _intents(matches)


def test_match_is_case_insensitive():
    """Test ignorowania wielkości liter dla fraz łacińskich."""
    matches = match_keywords("Please REFACTOR this module")
    assert IntentMatch("action:refactor", "refactor", "en") in matches


def test_korean_and_japanese_keywords():
    """Test dopasowania fraz w piśmie niełacińskim."""
    assert "action:deploy" in _intents(match_keywords("서버에 배포 해줘"))
    assert "action:test" in _intents(match_keywords("テストを実行して"))


def test_empty_text_returns_empty_list():
    assert match_keywords("") == []


def test_non_text_input_returns_empty_list():
    assert match_keywords(None) == []
    assert match_keywords(123) == []


def test_no_duplicate_triples_for_repeated_phrase():
    """Fraza występująca wielokrotnie daje jedno dopasowanie."""
    matches = match_keywords("test test test, then test again")
    triples = [(m.intent, m.keyword, m.language) for m in matches]
    assert len(triples) == len(set(triples))
    assert triples.count(("action:test", "test", "en")) == 1


def test_language_restriction():
    """Test ograniczenia skanowania do wybranych języków."""
    text = "build 빌드 ビルド"
    assert {m.language for m in match_keywords(text, ["ko"])} == {"ko"}
    assert {m.language for m in match_keywords(text)} == {"en", "ko", "ja"}


def test_language_restriction_as_single_code():
    matches = match_keywords("build 빌드", "ko")
    assert [m.language for m in matches] == ["ko"]


def test_unknown_language_yields_nothing():
    assert match_keywords("build everything", ["xx"]) == []


def test_matches_follow_declared_order():
    """Kolejność dopasowań: język, intencja, fraza - zgodnie z deklaracją."""
    matches = match_keywords("review and build, then compile")
    assert [m.keyword for m in matches] == ["build", "compile", "review"]


def test_default_languages_cover_lexicon():
    assert set(LANGUAGES) == set(KEYWORD_LEXICON)


def test_unique_intents_preserves_first_appearance():
    matches = [
        IntentMatch("action:test", "test", "en"),
        IntentMatch("action:build", "build", "en"),
        IntentMatch("action:test", "테스트", "ko"),
    ]
    assert unique_intents(matches) == ["action:test", "action:build"]


def test_unique_intents_empty():
    assert unique_intents([]) == []
    assert unique_intents(None) == []


def test_unique_intents_bounded_by_lexicon():
    text = " ".join(
        phrase
        for lexicon in KEYWORD_LEXICON.values()
        for phrases in lexicon.values()
        for phrase in phrases
    )
    intents = unique_intents(match_keywords(text))
    assert set(intents) == set(KNOWN_INTENTS)
    assert len(intents) <= len(KNOWN_INTENTS)
