from __future__ import annotations

from typing import Callable, Iterator, Protocol, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

Validator = Callable[[T, T], bool]


class SequenceProtocol(Protocol[T_co]):
    """
    Назначение/ответственность:
        Ленивая последовательность значений (конечная или бесконечная).
    Инварианты/гарантии:
        - Каждый вызов iter() начинает обход с первого элемента (reset).
        - Выход за конец сигнализируется StopIteration, без зацикливания
          и без блокировки.
    Взаимодействия:
        Потребляется SequencedValueSource.
    """

    def __iter__(self) -> Iterator[T_co]:
        ...


__all__ = ["SequenceProtocol", "Validator"]
