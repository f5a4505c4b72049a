from __future__ import annotations

from typing import Any

DEFAULT_FAILURE_MESSAGE = "Current and next value comparison failed."
DATETIME_FAILURE_MESSAGE = "A new datetime value must be greater than the previous one."
GUID_FAILURE_MESSAGE = "A new UUID value must be different than the previous one."


def always_valid(previous: Any, candidate: Any) -> bool:
    """Валидатор по умолчанию: не накладывает ограничений."""
    return True


def strictly_increasing(previous: Any, candidate: Any) -> bool:
    """Время: каждое новое значение строго больше предыдущего."""
    return candidate > previous


def must_differ(previous: Any, candidate: Any) -> bool:
    """Идентификаторы: новое значение не равно предыдущему."""
    return candidate != previous


__all__ = [
    "DEFAULT_FAILURE_MESSAGE",
    "DATETIME_FAILURE_MESSAGE",
    "GUID_FAILURE_MESSAGE",
    "always_valid",
    "strictly_increasing",
    "must_differ",
]
