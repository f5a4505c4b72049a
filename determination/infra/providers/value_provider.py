from __future__ import annotations

import random
from typing import Callable, Generic, TypeVar

from determination.domain.exceptions import InvalidArgumentError
from determination.domain.ports.values import ValueProviderProtocol

T = TypeVar("T")


class CallableValueProvider(ValueProviderProtocol[T], Generic[T]):
    """
    Назначение:
        Оборачивает функцию без аргументов в порт «текущего значения».
    Паттерн:
        Adapter.
    """

    def __init__(self, function: Callable[[], T] | None):
        if function is None:
            raise InvalidArgumentError.missing("function")
        if not callable(function):
            raise InvalidArgumentError("Argument 'function' must be callable.", {"argument": "function"})
        self._function = function

    @property
    def value(self) -> T:
        return self._function()


class RandomIntProvider(ValueProviderProtocol[int]):
    """
    Назначение:
        Случайное целое из [minimum, maximum] на каждое чтение.
    Взаимодействия:
        Генератор передаётся явно; глобальное состояние модуля random не используется.
    """

    def __init__(self, rng: random.Random | None, minimum: int, maximum: int):
        if rng is None:
            raise InvalidArgumentError.missing("rng")
        if minimum > maximum:
            raise InvalidArgumentError(
                f"minimum ({minimum}) must not be greater than maximum ({maximum}).",
                {"argument": "minimum"},
            )
        self._rng = rng
        self._minimum = minimum
        self._maximum = maximum

    @property
    def value(self) -> int:
        return self._rng.randint(self._minimum, self._maximum)
