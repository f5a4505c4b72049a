from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, Iterator, TypeVar

from determination.domain.exceptions import (
    ExhaustedSequenceError,
    InvalidArgumentError,
    NotYetStartedError,
    ValidationFailedError,
)
from determination.domain.ports.sequences import SequenceProtocol, Validator
from determination.domain.sequencing.validators import DEFAULT_FAILURE_MESSAGE, always_valid
from determination.loggingSetup import LOGGER_PREFIX, logEvent

T = TypeVar("T")

_COMPONENT = "source"


class SequencedValueSource(Generic[T]):
    """
    Назначение/ответственность:
        Выдаёт проверенный упорядоченный поток значений вместо
        недетерминированной величины (время, идентификатор, случайное число).
    Инварианты/гарантии:
        - served_count растёт ровно на 1 при каждом успешном next_value() и не убывает.
        - last_value всегда равен последнему выданному значению.
        - Первое значение выдаётся без вызова валидатора.
        - Ошибка валидации или исчерпание не меняют served_count/last_value/first_value.
        - Кандидат, отклонённый валидатором, потреблён из курсора: повтора нет.
    Взаимодействия:
        Зависит только от итерируемой последовательности; курсор сбрасывается
        (iter(sequence)) один раз, при первом next_value().
    Ограничения:
        Не потокобезопасен: один читатель на экземпляр.
    """

    def __init__(
        self,
        sequence: SequenceProtocol[T] | Iterable[T] | None,
        validate: Validator[T] | None = always_valid,
        failure_message: str | None = DEFAULT_FAILURE_MESSAGE,
        *,
        logger: logging.Logger | None = None,
        run_id: str | None = None,
    ):
        if sequence is None:
            raise InvalidArgumentError.missing("sequence")
        if not isinstance(sequence, Iterable):
            raise InvalidArgumentError("Argument 'sequence' must be iterable.", {"argument": "sequence"})
        if validate is None:
            raise InvalidArgumentError.missing("validate")
        if not callable(validate):
            raise InvalidArgumentError("Argument 'validate' must be callable.", {"argument": "validate"})
        if failure_message is None:
            raise InvalidArgumentError.missing("failure_message")

        self._sequence = sequence
        self._validate = validate
        self._failure_message = failure_message
        self._logger = logger or logging.getLogger(f"{LOGGER_PREFIX}.{_COMPONENT}")
        self._run_id = run_id or "-"

        self._cursor: Iterator[T] | None = None
        self._served_count = 0
        self._first_value: T | None = None
        self._last_value: T | None = None

    @property
    def failure_message(self) -> str:
        return self._failure_message

    @property
    def served_count(self) -> int:
        return self._served_count

    @property
    def value(self) -> T:
        """Текущее значение: каждое чтение продвигает последовательность."""
        return self.next_value()

    @property
    def first_value(self) -> T:
        if self._served_count < 1:
            raise NotYetStartedError(
                "The first_value property is only valid after the value property has been retrieved at least once."
            )
        return self._first_value  # type: ignore[return-value]

    @property
    def last_value(self) -> T:
        """Последнее выданное значение, без продвижения последовательности."""
        if self._served_count < 1:
            raise NotYetStartedError()
        return self._last_value  # type: ignore[return-value]

    def next_value(self) -> T:
        """
        Контракт (вход/выход):
            - Вход: нет, поведение определяется состоянием.
            - Выход: следующее значение последовательности.
        Ошибки/исключения:
            ExhaustedSequenceError: последовательность закончилась.
            ValidationFailedError: validate(last_value, candidate) вернул ложь.
        """
        if self._cursor is None:
            self._cursor = iter(self._sequence)
            candidate = self._draw()
        else:
            candidate = self._draw()
            previous = self._last_value
            if not self._validate(previous, candidate):
                logEvent(
                    self._logger,
                    logging.WARNING,
                    self._run_id,
                    _COMPONENT,
                    f"Validation failed after {self._served_count} served values: "
                    f"previous={previous!r} candidate={candidate!r}",
                )
                raise ValidationFailedError(
                    self._failure_message,
                    {"previous": repr(previous), "candidate": repr(candidate)},
                )

        self._served_count += 1
        self._last_value = candidate
        if self._served_count == 1:
            self._first_value = candidate
        logEvent(
            self._logger,
            logging.DEBUG,
            self._run_id,
            _COMPONENT,
            f"Served value #{self._served_count}: {candidate!r}",
        )
        return candidate

    def _draw(self) -> T:
        try:
            return next(self._cursor)  # type: ignore[arg-type]
        except StopIteration:
            logEvent(
                self._logger,
                logging.WARNING,
                self._run_id,
                _COMPONENT,
                f"Sequence exhausted after {self._served_count} served values",
            )
            raise ExhaustedSequenceError() from None

    def _format_value(self, value: Any) -> str:
        return str(value)

    def __str__(self) -> str:
        name = f"{type(self).__module__}.{type(self).__qualname__}"
        if self._served_count < 1:
            return name
        return f"{name} - {self._format_value(self._last_value)}"


__all__ = ["SequencedValueSource"]
