"""Moduł: ambiguity - ocena niejednoznaczności intencji i pytania doprecyzowujące."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Optional

from aegis_core.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_AMBIGUITY_THRESHOLD = 50

BASE_SCORE_PER_INTENT = 25
BASE_SCORE_CAP = 100
CATEGORY_PENALTY = 20
SIMILARITY_DISCOUNT = 20

GENERIC_CLARIFICATION = "Could you clarify what you would like to do?"

# Pary intencji o zbliżonym efekcie praktycznym (nieuporządkowane).
SIMILAR_INTENT_PAIRS = frozenset(
    {
        frozenset({"action:build", "action:implement"}),
        frozenset({"action:review", "action:analyze"}),
        frozenset({"action:fix", "action:refactor"}),
        frozenset({"action:document", "action:explain"}),
        frozenset({"action:plan", "action:design"}),
    }
)

INTENT_LABELS = {
    "team:summon": "summon a team",
    "action:build": "build something",
    "action:implement": "implement a feature",
    "action:review": "review code",
    "action:test": "run tests",
    "action:fix": "fix a bug",
    "action:refactor": "refactor code",
    "action:deploy": "deploy",
    "action:document": "write documentation",
    "action:analyze": "analyze code",
    "action:explain": "get an explanation",
    "action:design": "design a system",
    "action:plan": "create a plan",
}


@dataclass(frozen=True)
class AmbiguityResult:
    """Wynik oceny niejednoznaczności."""

    ambiguous: bool
    score: int
    clarification: Optional[str] = None


def intent_category(intent: str) -> str:
    """Zwraca kategorię intencji (część przed ':')."""
    return intent.split(":", 1)[0]


def intent_to_label(intent: str) -> Optional[str]:
    """Zwraca etykietę intencji lub None dla nieznanej intencji."""
    return INTENT_LABELS.get(intent)


def _similarity_discount(intents: list[str]) -> int:
    pairs = sum(
        1
        for first, second in combinations(intents, 2)
        if frozenset({first, second}) in SIMILAR_INTENT_PAIRS
    )
    return pairs * SIMILARITY_DISCOUNT


def score_ambiguity(intents: list[str]) -> int:
    """
    Liczy wynik niejednoznaczności dla listy unikalnych intencji.

    Wynik bazowy jest ograniczony do 100, ale kara za wiele kategorii jest
    dodawana już po tym ograniczeniu, więc końcowy wynik może przekroczyć 100.
    """
    if len(intents) <= 1:
        return 0

    base = min(BASE_SCORE_CAP, BASE_SCORE_PER_INTENT * len(intents))
    categories = {intent_category(intent) for intent in intents}
    penalty = CATEGORY_PENALTY if len(categories) > 1 else 0
    return max(0, base + penalty - _similarity_discount(intents))


def build_clarification(intents: Iterable[str]) -> str:
    """
    Buduje pytanie doprecyzowujące z etykiet intencji.

    Args:
        intents: Unikalne intencje

    Returns:
        Pytanie typu "Did you mean to A, B, or C?" albo pytanie ogólne,
        gdy żadna intencja nie ma etykiety
    """
    labels = [label for label in map(intent_to_label, intents) if label]

    if not labels:
        return GENERIC_CLARIFICATION
    if len(labels) == 1:
        return f"Did you mean to {labels[0]}?"
    if len(labels) == 2:
        return f"Did you mean to {labels[0]} or {labels[1]}?"
    return f"Did you mean to {', '.join(labels[:-1])}, or {labels[-1]}?"


def detect_ambiguity(
    intents: Iterable[str], threshold: int = DEFAULT_AMBIGUITY_THRESHOLD
) -> AmbiguityResult:
    """
    Ocenia, czy zestaw intencji jest niejednoznaczny.

    Args:
        intents: Kandydujące intencje (duplikaty są pomijane)
        threshold: Próg niejednoznaczności; niższy próg = częściej pytamy

    Returns:
        AmbiguityResult z wynikiem i ewentualnym pytaniem doprecyzowującym
    """
    distinct = list(dict.fromkeys(i for i in (intents or ()) if isinstance(i, str)))
    if len(distinct) <= 1:
        return AmbiguityResult(ambiguous=False, score=0, clarification=None)

    score = score_ambiguity(distinct)
    ambiguous = score >= threshold
    if not ambiguous:
        return AmbiguityResult(ambiguous=False, score=score, clarification=None)

    logger.debug(f"Niejednoznaczne intencje {distinct} (score={score})")
    return AmbiguityResult(
        ambiguous=True, score=score, clarification=build_clarification(distinct)
    )
