from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """
    Назначение:
        Единая таксономия кодов ошибок источников значений.
    """

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    EMPTY_INPUT = "EMPTY_INPUT"
    EXHAUSTED_SEQUENCE = "EXHAUSTED_SEQUENCE"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    NOT_YET_STARTED = "NOT_YET_STARTED"
