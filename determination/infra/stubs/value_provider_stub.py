from __future__ import annotations

import logging
from typing import Callable, Iterable, TypeVar

from determination.domain.ports.values import ValueProviderProtocol
from determination.domain.sequencing.sequences import ComputedSequence, LiteralSequence, ProgressionSequence
from determination.domain.sequencing.source import SequencedValueSource
from determination.domain.sequencing.validators import DEFAULT_FAILURE_MESSAGE, always_valid

T = TypeVar("T")
S = TypeVar("S")


class ValueProviderStub(SequencedValueSource[T], ValueProviderProtocol[T]):
    """
    Назначение:
        Тестовая заглушка произвольного порта значений.
        По умолчанию не накладывает ограничений на соседние значения.
    """

    def __init__(
        self,
        sequence: Iterable[T] | None,
        validate: Callable[[T, T], bool] | None = always_valid,
        failure_message: str | None = DEFAULT_FAILURE_MESSAGE,
        *,
        logger: logging.Logger | None = None,
        run_id: str | None = None,
    ):
        super().__init__(sequence, validate, failure_message, logger=logger, run_id=run_id)

    @classmethod
    def create(
        cls,
        *values: T,
        validate: Callable[[T, T], bool] | None = always_valid,
        failure_message: str | None = DEFAULT_FAILURE_MESSAGE,
    ) -> "ValueProviderStub[T]":
        return cls(LiteralSequence(values), validate, failure_message)

    @classmethod
    def from_progression(
        cls,
        seed: T,
        step: S,
        combine: Callable[[T, S], T],
        *,
        validate: Callable[[T, T], bool] | None = always_valid,
        failure_message: str | None = DEFAULT_FAILURE_MESSAGE,
    ) -> "ValueProviderStub[T]":
        return cls(ProgressionSequence(seed, step, combine), validate, failure_message)

    @classmethod
    def from_function(
        cls,
        function: Callable[[], T],
        *,
        validate: Callable[[T, T], bool] | None = always_valid,
        failure_message: str | None = DEFAULT_FAILURE_MESSAGE,
    ) -> "ValueProviderStub[T]":
        return cls(ComputedSequence(function), validate, failure_message)
