from __future__ import annotations

from datetime import datetime
from typing import Protocol, TypeVar
from uuid import UUID

T_co = TypeVar("T_co", covariant=True)


class ValueProviderProtocol(Protocol[T_co]):
    """
    Назначение/ответственность:
        Порт «текущего значения» недетерминированной величины
        (время, идентификатор, случайное число).
    Взаимодействия:
        Прикладной код зависит только от протокола; в production подставляется
        реальный провайдер, в тестах: заглушка на основе SequencedValueSource.
    Ограничения:
        Каждое чтение value: отдельное логическое обращение к источнику.
    """

    @property
    def value(self) -> T_co:
        ...


class CurrentDateTimeProviderProtocol(ValueProviderProtocol[datetime], Protocol):
    """
    Назначение/ответственность:
        Порт текущего времени.
    """


class GuidProviderProtocol(ValueProviderProtocol[UUID], Protocol):
    """
    Назначение/ответственность:
        Порт генерации уникальных идентификаторов.
    """


__all__ = [
    "ValueProviderProtocol",
    "CurrentDateTimeProviderProtocol",
    "GuidProviderProtocol",
]
