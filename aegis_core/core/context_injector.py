"""Moduł: context_injector - dołączanie kontekstu telemetrii systemowej do promptu."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from aegis_core.config import SETTINGS
from aegis_core.core.telemetry import snapshot_to_mapping
from aegis_core.utils.logger import get_logger
from aegis_core.utils.text import fold_text, trim_to_char_limit

logger = get_logger(__name__)

SECTION_SEPARATOR = " | "
SEPARATOR_OVERHEAD = len(SECTION_SEPARATOR)
ERROR_MESSAGE_LIMIT = 80


@dataclass(frozen=True)
class RelevanceRule:
    """Powiązanie fraz wyzwalających z sekcjami telemetrii."""

    keywords: tuple[str, ...]
    data_keys: tuple[str, ...]
    priority: int


# Kolejność reguł nie oznacza priorytetu - o wadze decyduje pole priority.
RELEVANCE_RULES: tuple[RelevanceRule, ...] = (
    RelevanceRule(
        keywords=(
            "slow", "lag", "hang", "freeze", "cpu", "process",
            "느려", "느림", "멈춤", "렉", "프로세스", "CPU",
        ),
        data_keys=("cpu", "memory"),
        priority=10,
    ),
    RelevanceRule(
        keywords=(
            "memory", "ram", "oom", "out of memory", "leak",
            "메모리", "램", "OOM", "누수",
        ),
        data_keys=("memory", "cpu"),
        priority=10,
    ),
    RelevanceRule(
        keywords=(
            "error", "crash", "fail", "exception", "bug", "broken",
            "에러", "오류", "크래시", "실패", "버그", "깨짐",
        ),
        data_keys=("errors", "cpu", "memory"),
        priority=9,
    ),
    RelevanceRule(
        keywords=(
            "deploy", "docker", "container", "k8s", "kubernetes", "compose",
            "배포", "도커", "컨테이너",
        ),
        data_keys=("docker", "network"),
        priority=8,
    ),
    RelevanceRule(
        keywords=(
            "disk", "storage", "space", "full",
            "디스크", "용량", "저장", "꽉",
        ),
        data_keys=("disk",),
        priority=8,
    ),
    RelevanceRule(
        keywords=(
            "port", "network", "connect", "listen", "socket", "http", "api",
            "포트", "네트워크", "연결", "소켓",
        ),
        data_keys=("network",),
        priority=7,
    ),
    RelevanceRule(
        keywords=(
            "git", "branch", "commit", "merge", "push", "pull",
            "브랜치", "커밋", "머지",
        ),
        data_keys=("git",),
        priority=6,
    ),
    RelevanceRule(
        keywords=(
            "system", "os", "platform", "environment", "machine",
            "시스템", "환경", "플랫폼", "머신",
        ),
        data_keys=("cpu", "memory", "disk"),
        priority=5,
    ),
)


def _matching_keywords(folded_prompt: str, rule: RelevanceRule) -> list[str]:
    # Każdy wpis listy liczy się osobno, także ten sam wyraz w innej wielkości liter
    return [kw for kw in rule.keywords if fold_text(kw) in folded_prompt]


def should_inject(prompt: str) -> bool:
    """Czy prompt zawiera jakąkolwiek frazę związaną z telemetrią."""
    folded = fold_text(prompt)
    if not folded:
        return False
    return any(_matching_keywords(folded, rule) for rule in RELEVANCE_RULES)


def score_relevance(prompt: str) -> list[tuple[str, int]]:
    """
    Ocenia istotność sekcji telemetrii dla promptu.

    Każda pasująca reguła dodaje (liczba trafionych wpisów reguły * priorytet)
    do wszystkich swoich sekcji.

    Returns:
        Lista (klucz sekcji, wynik) posortowana malejąco po wyniku
    """
    folded = fold_text(prompt)
    scores: dict[str, int] = {}
    if not folded:
        return []

    for rule in RELEVANCE_RULES:
        hits = len(_matching_keywords(folded, rule))
        if not hits:
            continue
        for key in rule.data_keys:
            scores[key] = scores.get(key, 0) + hits * rule.priority

    return sorted(scores.items(), key=lambda item: item[1], reverse=True)


def _format_process(proc: Any) -> str:
    if not isinstance(proc, Mapping):
        return ""
    name, usage = proc.get("name"), proc.get("cpu")
    if not name or usage is None:
        return ""
    return f"{name}({usage}%)"


def _format_cpu(data: Mapping) -> str:
    if data.get("usage") is None:
        return ""
    # Niekompletne wpisy procesów są pomijane, linia z użyciem CPU zostaje
    processes = [_format_process(proc) for proc in data.get("topProcesses") or []]
    top = ", ".join([entry for entry in processes if entry][:3])
    suffix = f" | top: {top}" if top else ""
    return f"CPU: {data['usage']}% used{suffix}"


def _format_memory(data: Mapping) -> str:
    return f"Memory: {data['used']}/{data['total']} ({data['usage']}% used)"


def _format_disk(data: list) -> str:
    if not data:
        return ""
    return "; ".join(
        f"Disk {disk['mount']}: {disk['used']}/{disk['total']} ({disk['usage']}%)"
        for disk in data[:3]
    )


def _format_network(data: list) -> str:
    if not data:
        return "Network: no listening ports"
    ports = ", ".join(str(entry["port"]) for entry in data[:8])
    return f"Listening ports: {ports}"


def _format_errors(data: list) -> str:
    if not data:
        return "System errors: none recent"
    recent = " | ".join(
        trim_to_char_limit(str(entry["message"]), ERROR_MESSAGE_LIMIT)[0]
        for entry in data[:3]
    )
    return f"System errors ({len(data)}): {recent}"


def _format_docker(data: list) -> str:
    if not data:
        return "Docker: no running containers"
    containers = ", ".join(
        f"{container['name']}({container['status']})" for container in data[:5]
    )
    return f"Docker: {containers}"


def _format_git(data: Mapping) -> str:
    if not data.get("branch"):
        return ""
    return f"Git: {data['branch']} | {data.get('status') or 'unknown'}"


SECTION_FORMATTERS: dict[str, tuple[type, Callable[[Any], str]]] = {
    "cpu": (Mapping, _format_cpu),
    "memory": (Mapping, _format_memory),
    "disk": (list, _format_disk),
    "network": (list, _format_network),
    "errors": (list, _format_errors),
    "docker": (list, _format_docker),
    "git": (Mapping, _format_git),
}


def format_section(key: str, telemetry: Mapping) -> str:
    """
    Formatuje pojedynczą sekcję telemetrii do zwięzłej linii.

    Brak danych, nieznany klucz albo dane w niepoprawnym kształcie
    dają pusty tekst (sekcja jest pomijana).
    """
    entry = SECTION_FORMATTERS.get(key)
    data = telemetry.get(key)
    if entry is None or data is None:
        return ""

    expected_type, formatter = entry
    if isinstance(data, tuple):
        data = list(data)
    if not isinstance(data, expected_type):
        logger.debug(f"Pomijam sekcję '{key}' - nieoczekiwany typ danych")
        return ""

    try:
        return formatter(data)
    except (KeyError, TypeError, AttributeError) as exc:
        logger.debug(f"Pomijam sekcję '{key}' - niekompletne dane: {exc}")
        return ""


def _platform_label(telemetry: Mapping) -> str:
    platform = telemetry.get("platform")
    if not isinstance(platform, Mapping):
        return "unknown"
    return f"{platform.get('os', 'unknown')}/{platform.get('arch', 'unknown')}"


def format_context(
    telemetry: Any,
    relevant_keys: Optional[Iterable[str]],
    max_chars: Optional[int] = None,
) -> str:
    """
    Składa wybrane sekcje telemetrii w kontekst mieszczący się w budżecie.

    Args:
        telemetry: Snapshot telemetrii (mapping lub TelemetrySnapshot)
        relevant_keys: Klucze sekcji w kolejności istotności
        max_chars: Budżet znaków (domyślnie CONTEXT_MAX_TOKENS * CONTEXT_CHARS_PER_TOKEN)

    Returns:
        "[System Context: <platforma> | ...]" albo pusty tekst
    """
    data = snapshot_to_mapping(telemetry)
    if not data or not relevant_keys:
        return ""

    budget = SETTINGS.context_max_chars if max_chars is None else max_chars
    sections: list[str] = []
    total = 0

    for key in relevant_keys:
        section = format_section(key, data)
        if not section:
            continue
        # Sekcja nigdy nie jest obcinana - przerywamy przed przekroczeniem budżetu
        if total + len(section) + SEPARATOR_OVERHEAD > budget:
            logger.debug(f"Budżet kontekstu wyczerpany przy sekcji '{key}'")
            break
        sections.append(section)
        total += len(section) + SEPARATOR_OVERHEAD

    if not sections:
        return ""

    return (
        f"[System Context: {_platform_label(data)}{SECTION_SEPARATOR}"
        f"{SECTION_SEPARATOR.join(sections)}]"
    )


def inject_context(prompt: str, telemetry: Any) -> str:
    """
    Dołącza kontekst systemowy do promptu, jeśli prompt go dotyczy.

    Args:
        prompt: Oryginalny prompt użytkownika
        telemetry: Snapshot telemetrii

    Returns:
        Prompt z kontekstem po dwóch znakach nowej linii albo prompt bez zmian
    """
    if not isinstance(prompt, str):
        return ""
    if not prompt or telemetry is None:
        return prompt

    if not should_inject(prompt):
        return prompt

    scored = score_relevance(prompt)
    if not scored:
        return prompt

    context = format_context(telemetry, [key for key, _ in scored])
    if not context:
        return prompt

    logger.info(f"Dołączono kontekst systemowy ({len(context)} znaków)")
    return f"{prompt}\n\n{context}"
