from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, Tuple, TypeVar

from determination.domain.exceptions import EmptyInputError, InvalidArgumentError
from determination.domain.ports.sequences import SequenceProtocol

T = TypeVar("T")
S = TypeVar("S")


class LiteralSequence(SequenceProtocol[T]):
    """
    Назначение:
        Представляет фиксированный упорядоченный список значений
        как перезапускаемую последовательность.
    Инварианты/гарантии:
        - Содержит хотя бы одно значение.
        - Значения копируются в кортеж: изменение исходного списка не влияет на обход.
        - После последнего элемента обход завершается (StopIteration).
    """

    def __init__(self, values: Iterable[T] | None):
        if values is None:
            raise InvalidArgumentError.missing("values")
        self._values: Tuple[T, ...] = tuple(values)
        if not self._values:
            raise EmptyInputError("values is empty.", {"argument": "values"})

    @property
    def values(self) -> Tuple[T, ...]:
        return self._values

    def first(self) -> T:
        return self._values[0]

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"LiteralSequence({list(self._values)!r})"


class ProgressionSequence(SequenceProtocol[T], Generic[T, S]):
    """
    Назначение:
        Ленивая бесконечная прогрессия: seed, combine(seed, step),
        combine(combine(seed, step), step), ...
    Инварианты/гарантии:
        - first() возвращает seed без вызова combine.
        - Элемент вычисляется только по запросу, вперёд ничего не считается.
        - Новый iter() снова начинается с seed.
    Ограничения:
        combine должен быть чистой функцией, иначе обход недетерминирован.
    """

    def __init__(self, seed: T, step: S, combine: Callable[[T, S], T] | None):
        if combine is None:
            raise InvalidArgumentError.missing("combine")
        if not callable(combine):
            raise InvalidArgumentError("Argument 'combine' must be callable.", {"argument": "combine"})
        self._seed = seed
        self._step = step
        self._combine = combine

    @property
    def seed(self) -> T:
        return self._seed

    @property
    def step(self) -> S:
        return self._step

    def first(self) -> T:
        return self._seed

    def next_after(self, previous: T) -> T:
        return self._combine(previous, self._step)

    def __iter__(self) -> Iterator[T]:
        current = self.first()
        yield current
        while True:
            current = self.next_after(current)
            yield current

    def __repr__(self) -> str:
        return f"ProgressionSequence(seed={self._seed!r}, step={self._step!r})"


class ComputedSequence(SequenceProtocol[T]):
    """
    Назначение:
        Бесконечная последовательность, каждый элемент которой -
        новый вызов функции без аргументов.
    """

    def __init__(self, function: Callable[[], T] | None):
        if function is None:
            raise InvalidArgumentError.missing("function")
        if not callable(function):
            raise InvalidArgumentError("Argument 'function' must be callable.", {"argument": "function"})
        self._function = function

    def __iter__(self) -> Iterator[T]:
        while True:
            yield self._function()


__all__ = ["LiteralSequence", "ProgressionSequence", "ComputedSequence"]
