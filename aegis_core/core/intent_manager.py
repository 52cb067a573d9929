"""Moduł: intent_manager - pełny przebieg detekcji intencji użytkownika."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from aegis_core.config import SETTINGS
from aegis_core.core.ambiguity import AmbiguityResult, detect_ambiguity
from aegis_core.core.intent_lexicon import IntentMatch, match_keywords, unique_intents
from aegis_core.core.recommendations import (
    RecommendationRecord,
    get_best_recommendation,
    get_recommendations,
)
from aegis_core.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class IntentDetection:
    """Wynik detekcji: intencje, dopasowania, rekomendacje i ocena niejednoznaczności."""

    intents: list[str] = field(default_factory=list)
    matches: list[IntentMatch] = field(default_factory=list)
    recommendations: list[RecommendationRecord] = field(default_factory=list)
    best: Optional[RecommendationRecord] = None
    ambiguity: AmbiguityResult = field(
        default_factory=lambda: AmbiguityResult(ambiguous=False, score=0)
    )

    @property
    def should_clarify(self) -> bool:
        """Czy przed wykonaniem trzeba zadać pytanie doprecyzowujące."""
        return self.ambiguity.ambiguous

    @property
    def route(self) -> Optional[RecommendationRecord]:
        """Rekomendacja do wykonania - tylko gdy intencja jest jednoznaczna."""
        if self.should_clarify:
            return None
        return self.best


def detect_intent(
    text: str,
    languages: Optional[Iterable[str]] = None,
    ambiguity_threshold: Optional[int] = None,
) -> IntentDetection:
    """
    Wykrywa intencję użytkownika z tekstu.

    Args:
        text: Prompt użytkownika
        languages: Języki do skanowania (domyślnie SETTINGS.SUPPORTED_LANGUAGES)
        ambiguity_threshold: Próg niejednoznaczności (domyślnie SETTINGS.AMBIGUITY_THRESHOLD)

    Returns:
        IntentDetection z kompletem wyników
    """
    if languages is None:
        languages = SETTINGS.SUPPORTED_LANGUAGES
    if ambiguity_threshold is None:
        ambiguity_threshold = SETTINGS.AMBIGUITY_THRESHOLD

    matches = match_keywords(text, languages)
    intents = unique_intents(matches)
    detection = IntentDetection(
        intents=intents,
        matches=matches,
        recommendations=get_recommendations(intents),
        best=get_best_recommendation(intents),
        ambiguity=detect_ambiguity(intents, ambiguity_threshold),
    )

    if intents:
        logger.debug(f"Wykryte intencje: {intents}")
    return detection


def format_intent_summary(detection: IntentDetection) -> str:
    """
    Buduje jednoliniową notkę routingu dla hosta.

    Przykład: "intent=action:test route=/test agents=[tdd-guide,e2e-runner]"
    """
    parts = []
    if detection.best is not None:
        best = detection.best
        route = best.commands[0] if best.commands else "none"
        parts.append(
            f"intent={best.intent} route={route} agents=[{','.join(best.agents)}]"
        )
    if detection.ambiguity.ambiguous:
        parts.append(f"ambiguous score={detection.ambiguity.score}")
    return " | ".join(parts)
