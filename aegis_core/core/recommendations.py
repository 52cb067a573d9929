"""Moduł: recommendations - mapowanie intencji na strategię wykonania (agenci, komendy)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from aegis_core.utils.logger import get_logger

logger = get_logger(__name__)

TEAM_TYPE = "team"
ACTION_TYPE = "action"


@dataclass(frozen=True)
class RecommendationRecord:
    """Rekomendowana strategia wykonania dla intencji."""

    intent: str
    type: str
    description: str
    agents: tuple[str, ...] = ()
    commands: tuple[str, ...] = ()


def _record(intent, type_, description, agents, commands) -> RecommendationRecord:
    return RecommendationRecord(
        intent=intent,
        type=type_,
        description=description,
        agents=tuple(agents),
        commands=tuple(commands),
    )


RECOMMENDATION_TABLE: dict[str, RecommendationRecord] = {
    record.intent: record
    for record in (
        _record(
            "team:summon",
            TEAM_TYPE,
            "Team orchestration requested",
            ["orchestrator"],
            ["/spawn"],
        ),
        _record(
            "action:build",
            ACTION_TYPE,
            "Build or create operation",
            ["planner"],
            ["/build"],
        ),
        _record(
            "action:implement",
            ACTION_TYPE,
            "Feature implementation",
            ["planner", "tdd-guide"],
            ["/implement"],
        ),
        _record(
            "action:review",
            ACTION_TYPE,
            "Code review or audit",
            ["code-reviewer", "security-reviewer"],
            ["/analyze"],
        ),
        _record(
            "action:test",
            ACTION_TYPE,
            "Testing workflow",
            ["tdd-guide", "e2e-runner"],
            ["/test"],
        ),
        _record(
            "action:fix",
            ACTION_TYPE,
            "Bug fix or debugging",
            ["build-error-resolver"],
            ["/troubleshoot"],
        ),
        _record(
            "action:refactor",
            ACTION_TYPE,
            "Refactoring or cleanup",
            ["refactor-cleaner"],
            ["/improve", "/cleanup"],
        ),
        _record(
            "action:deploy",
            ACTION_TYPE,
            "Deployment or release",
            ["devops-engineer"],
            ["/git"],
        ),
        _record(
            "action:document",
            ACTION_TYPE,
            "Documentation task",
            ["doc-updater"],
            ["/document"],
        ),
        _record(
            "action:analyze",
            ACTION_TYPE,
            "Analysis or investigation",
            ["architect"],
            ["/analyze"],
        ),
        _record(
            "action:explain",
            ACTION_TYPE,
            "Explanation or educational content",
            [],
            ["/explain"],
        ),
        _record(
            "action:design",
            ACTION_TYPE,
            "System or UI design",
            ["architect", "frontend-developer"],
            ["/design"],
        ),
        _record(
            "action:plan",
            ACTION_TYPE,
            "Planning or estimation",
            ["planner", "architect"],
            ["/estimate", "/task"],
        ),
    )
}


def lookup_recommendation(intent: str) -> Optional[RecommendationRecord]:
    """Zwraca rekord dla intencji albo None, gdy intencja jest nieznana."""
    if not isinstance(intent, str):
        return None
    return RECOMMENDATION_TABLE.get(intent)


def _distinct(intents: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(i for i in (intents or ()) if isinstance(i, str)))


def get_recommendations(intents: Iterable[str]) -> list[RecommendationRecord]:
    """
    Rozwija intencje do pełnych rekordów rekomendacji.

    Args:
        intents: Intencje w kolejności wykrycia

    Returns:
        Rekordy w kolejności wejścia; nieznane intencje są pomijane
    """
    records = []
    for intent in _distinct(intents):
        record = lookup_recommendation(intent)
        if record is None:
            logger.debug(f"Brak rekomendacji dla intencji: {intent}")
            continue
        records.append(record)
    return records


def get_best_recommendation(
    intents: Iterable[str],
) -> Optional[RecommendationRecord]:
    """
    Wybiera jedną najlepszą rekomendację.

    Intencje zespołowe (type == "team") zawsze wygrywają z akcjami,
    niezależnie od pozycji. W pozostałych przypadkach wygrywa pierwsza
    znana intencja.
    """
    records = get_recommendations(intents)
    for record in records:
        if record.type == TEAM_TYPE:
            return record
    return records[0] if records else None
