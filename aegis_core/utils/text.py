"""Pomocnicze funkcje tekstowe."""

from __future__ import annotations

from typing import Any


def trim_to_char_limit(text: str, limit: int) -> tuple[str, bool]:
    """
    Proste obcięcie tekstu do limitu znaków (przybliżenie budżetu tokenów).

    Zwraca obcięty tekst oraz flagę, czy obcięto.
    """
    if limit <= 0:
        return "", True
    if not text or len(text) <= limit:
        return text, False
    trimmed = text[:limit]
    return trimmed, True


def fold_text(value: Any) -> str:
    """
    Normalizuje wejście do porównań bez rozróżniania wielkości liter.

    Wartości niebędące tekstem traktujemy jak pusty tekst. Pisma bez
    wielkości liter (hangul, kana) pozostają bez zmian.
    """
    if not isinstance(value, str):
        return ""
    return value.lower()
