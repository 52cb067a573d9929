"""Moduł: intent_lexicon - wielojęzyczny słownik fraz i dopasowanie intencji."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from aegis_core.utils.logger import get_logger
from aegis_core.utils.text import fold_text

logger = get_logger(__name__)


@dataclass(frozen=True)
class IntentMatch:
    """Pojedyncze trafienie frazy kluczowej w tekście użytkownika."""

    intent: str
    keyword: str
    language: str


# Kolejność języków, intencji i fraz jest deterministyczna i odpowiada
# kolejności zwracanych dopasowań.
LANGUAGES = ("en", "ko", "ja")

KEYWORD_LEXICON: dict[str, dict[str, tuple[str, ...]]] = {
    "en": {
        "team:summon": ("team", "summon", "spawn", "assemble"),
        "action:build": ("build", "compile", "create"),
        "action:implement": ("implement",),
        "action:review": ("review", "check", "audit"),
        "action:test": ("test", "e2e", "unittest"),
        "action:fix": ("fix", "debug", "troubleshoot", "resolve"),
        "action:refactor": ("refactor", "cleanup", "clean"),
        "action:deploy": ("deploy", "release", "publish"),
        "action:document": ("document", "docs", "readme"),
        "action:analyze": ("analyze", "investigate"),
        "action:explain": ("explain",),
        "action:plan": ("plan", "estimate"),
        "action:design": ("design",),
    },
    "ko": {
        "team:summon": ("팀", "소환"),
        "action:build": ("빌드", "생성", "만들"),
        "action:implement": ("구현",),
        "action:review": ("리뷰", "검토", "감사"),
        "action:test": ("테스트",),
        "action:fix": ("수정", "디버그", "버그"),
        "action:refactor": ("리팩터", "정리"),
        "action:deploy": ("배포", "릴리스"),
        "action:document": ("문서",),
        "action:analyze": ("분석", "조사"),
        "action:explain": ("설명",),
        "action:design": ("설계",),
        "action:plan": ("계획",),
    },
    "ja": {
        "team:summon": ("チーム", "召喚"),
        "action:build": ("ビルド", "作成"),
        "action:implement": ("実装",),
        "action:review": ("レビュー", "検査"),
        "action:test": ("テスト",),
        "action:fix": ("修正", "デバッグ"),
        "action:refactor": ("リファクタ",),
        "action:deploy": ("デプロイ", "リリース"),
        "action:document": ("ドキュメント",),
        "action:analyze": ("分析", "調査"),
        "action:explain": ("説明",),
        "action:design": ("設計",),
        "action:plan": ("計画",),
    },
}

KNOWN_INTENTS = frozenset(
    intent for lexicon in KEYWORD_LEXICON.values() for intent in lexicon
)


def match_keywords(
    text: str, languages: Optional[Iterable[str]] = None
) -> list[IntentMatch]:
    """
    Wyszukuje wszystkie frazy kluczowe występujące w tekście.

    Args:
        text: Tekst użytkownika (może być pusty)
        languages: Opcjonalne ograniczenie do podanych kodów języków
            (domyślnie wszystkie, w kolejności LANGUAGES)

    Returns:
        Lista dopasowań bez powtórzeń trójek (intent, keyword, language)
    """
    folded = fold_text(text)
    if not folded:
        return []

    if languages is None:
        selected = LANGUAGES
    elif isinstance(languages, str):
        selected = (languages,)
    else:
        selected = tuple(languages)
    matches: list[IntentMatch] = []
    seen: set[tuple[str, str, str]] = set()

    for language in selected:
        lexicon = KEYWORD_LEXICON.get(language)
        if not lexicon:
            continue
        for intent, phrases in lexicon.items():
            for phrase in phrases:
                if fold_text(phrase) not in folded:
                    continue
                key = (intent, phrase, language)
                if key in seen:
                    continue
                seen.add(key)
                matches.append(IntentMatch(intent=intent, keyword=phrase, language=language))

    if matches:
        logger.debug(f"Dopasowano {len(matches)} fraz kluczowych")
    return matches


def unique_intents(matches: Iterable[IntentMatch]) -> list[str]:
    """Zwraca unikalne intencje w kolejności pierwszego wystąpienia."""
    if not matches:
        return []
    return list(dict.fromkeys(match.intent for match in matches))
