from __future__ import annotations

import logging
import uuid
from typing import Callable, Iterable

from determination.domain.exceptions import InvalidArgumentError
from determination.domain.ports.values import GuidProviderProtocol
from determination.domain.sequencing.sequences import LiteralSequence
from determination.domain.sequencing.source import SequencedValueSource
from determination.domain.sequencing.validators import GUID_FAILURE_MESSAGE, must_differ

GuidValidator = Callable[[uuid.UUID, uuid.UUID], bool]


def parse_guid(value: uuid.UUID | str | None) -> uuid.UUID:
    """
    Назначение:
        Приводит UUID или его строковое представление к uuid.UUID.
    Ошибки/исключения:
        InvalidArgumentError: None или строка, не являющаяся UUID.
    """
    if value is None:
        raise InvalidArgumentError.missing("values")
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError as exc:
        raise InvalidArgumentError(f"Invalid UUID value: {value!r}", {"argument": "values"}) from exc


class GuidProviderStub(SequencedValueSource[uuid.UUID], GuidProviderProtocol):
    """
    Назначение:
        Тестовая заглушка порта идентификаторов.
    Инварианты/гарантии:
        - По умолчанию два подряд выданных UUID различны,
          иначе ValidationFailedError с GUID_FAILURE_MESSAGE.
    """

    def __init__(
        self,
        sequence: Iterable[uuid.UUID] | None,
        validate: GuidValidator | None = must_differ,
        failure_message: str | None = GUID_FAILURE_MESSAGE,
        *,
        logger: logging.Logger | None = None,
        run_id: str | None = None,
    ):
        super().__init__(sequence, validate, failure_message, logger=logger, run_id=run_id)

    @classmethod
    def create(
        cls,
        *values: uuid.UUID | str,
        validate: GuidValidator | None = must_differ,
        failure_message: str | None = GUID_FAILURE_MESSAGE,
    ) -> "GuidProviderStub":
        return cls(LiteralSequence([parse_guid(v) for v in values]), validate, failure_message)
