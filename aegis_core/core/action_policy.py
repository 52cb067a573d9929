"""Moduł: action_policy - klasyfikacja bezpieczeństwa akcji systemowych."""

from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel

from aegis_core.utils.logger import get_logger
from aegis_core.utils.text import fold_text

logger = get_logger(__name__)


class ActionTier(str, Enum):
    """Poziom bezpieczeństwa akcji."""

    AUTO = "auto"
    CONFIRM = "confirm"
    BLOCKED = "blocked"


class ActionClassification(BaseModel):
    """Wynik klasyfikacji akcji."""

    classification: ActionTier
    reason: str


# Kolejność sprawdzania: blocked -> confirm -> auto. Trafienie w blocked
# jest ostateczne.
ACTION_SPACE = MappingProxyType(
    {
        # Operacje nieodwracalne - nigdy nie wykonujemy
        ActionTier.BLOCKED: (
            "system shutdown",
            "system reboot",
            "format disk",
            "rm -rf",
            "chmod 777",
            "chown root",
            "fork bomb",
            "pipe to shell",
            "drop database",
            "truncate table",
            "unset path",
        ),
        # Operacje z wpływem na system - wymagają potwierdzenia
        ActionTier.CONFIRM: (
            "kill process",
            "restart service",
            "delete file",
            "stop container",
            "restart container",
            "clear cache",
            "close port",
        ),
        # Operacje tylko do odczytu
        ActionTier.AUTO: (
            "process list",
            "disk usage",
            "memory usage",
            "cpu usage",
            "network ports",
            "docker status",
            "git status",
            "system info",
            "uptime",
            "whoami",
            "hostname",
            "env list",
        ),
    }
)

_CHECK_ORDER = (ActionTier.BLOCKED, ActionTier.CONFIRM, ActionTier.AUTO)

_REASONS = {
    ActionTier.BLOCKED: 'Action "{pattern}" is absolutely blocked for safety',
    ActionTier.CONFIRM: 'Action "{pattern}" requires explicit user confirmation',
    ActionTier.AUTO: 'Action "{pattern}" is safe for automatic execution',
}


def classify_action(description: str) -> ActionClassification:
    """
    Klasyfikuje opis akcji do jednego z trzech poziomów bezpieczeństwa.

    Args:
        description: Opis akcji (np. "kill process 1234")

    Returns:
        ActionClassification z poziomem i uzasadnieniem. Pusty lub
        niepoprawny opis jest blokowany, nieznana akcja wymaga potwierdzenia.
    """
    folded = fold_text(description).strip()
    if not folded:
        logger.warning("Odrzucono pusty lub niepoprawny opis akcji")
        return ActionClassification(
            classification=ActionTier.BLOCKED,
            reason="Empty or invalid action description",
        )

    for tier in _CHECK_ORDER:
        for pattern in ACTION_SPACE[tier]:
            if pattern in folded:
                if tier is not ActionTier.AUTO:
                    logger.info(f"Akcja sklasyfikowana jako {tier.value}: {pattern}")
                return ActionClassification(
                    classification=tier,
                    reason=_REASONS[tier].format(pattern=pattern),
                )

    logger.debug("Nieznana akcja - domyślnie wymagane potwierdzenie")
    return ActionClassification(
        classification=ActionTier.CONFIRM,
        reason="Unrecognized action defaults to user confirmation",
    )


def requires_confirmation(description: str) -> bool:
    """Czy akcja nie może zostać wykonana automatycznie."""
    return classify_action(description).classification != ActionTier.AUTO


def is_blocked(description: str) -> bool:
    """Czy akcja jest całkowicie zablokowana."""
    return classify_action(description).classification == ActionTier.BLOCKED
