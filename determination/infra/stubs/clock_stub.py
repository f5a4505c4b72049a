from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Iterable

from determination.domain.ports.values import CurrentDateTimeProviderProtocol
from determination.domain.sequencing.sequences import LiteralSequence, ProgressionSequence
from determination.domain.sequencing.source import SequencedValueSource
from determination.domain.sequencing.validators import DATETIME_FAILURE_MESSAGE, strictly_increasing

DateTimeValidator = Callable[[datetime, datetime], bool]


def add_step(current: datetime, step: timedelta) -> datetime:
    return current + step


class CurrentDateTimeProviderStub(SequencedValueSource[datetime], CurrentDateTimeProviderProtocol):
    """
    Назначение:
        Тестовая заглушка порта текущего времени.
    Инварианты/гарантии:
        - По умолчанию каждое новое время строго больше предыдущего,
          иначе ValidationFailedError с DATETIME_FAILURE_MESSAGE.
    """

    def __init__(
        self,
        sequence: Iterable[datetime] | None,
        validate: DateTimeValidator | None = strictly_increasing,
        failure_message: str | None = DATETIME_FAILURE_MESSAGE,
        *,
        logger: logging.Logger | None = None,
        run_id: str | None = None,
    ):
        super().__init__(sequence, validate, failure_message, logger=logger, run_id=run_id)

    @classmethod
    def create(
        cls,
        *values: datetime,
        validate: DateTimeValidator | None = strictly_increasing,
        failure_message: str | None = DATETIME_FAILURE_MESSAGE,
    ) -> "CurrentDateTimeProviderStub":
        return cls(LiteralSequence(values), validate, failure_message)

    @classmethod
    def from_progression(
        cls,
        seed: datetime,
        step: Any,
        combine: Callable[[datetime, Any], datetime] | None = add_step,
        *,
        validate: DateTimeValidator | None = strictly_increasing,
        failure_message: str | None = DATETIME_FAILURE_MESSAGE,
    ) -> "CurrentDateTimeProviderStub":
        """
        Назначение:
            Время, растущее с фиксированным шагом: seed, combine(seed, step), ...
            По умолчанию combine: сложение с timedelta.
        """
        return cls(ProgressionSequence(seed, step, combine), validate, failure_message)

    def _format_value(self, value: datetime) -> str:
        return value.isoformat()
