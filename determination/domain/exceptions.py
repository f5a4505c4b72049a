from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from determination.domain.error_codes import ErrorCode

EXHAUSTED_SEQUENCE_MESSAGE = "Enumerator has passed the end of the enumerable."
NOT_YET_STARTED_MESSAGE = (
    "The last_value property is only valid after the value property has been retrieved at least once."
)


@dataclass
class ValueSourceError(Exception):
    """
    Назначение:
        Базовая ошибка источников значений.
    Инварианты/гарантии:
        - code задаётся подклассом и не меняется.
        - str(error) возвращает message.
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    @property
    def code(self) -> ErrorCode:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details or {},
        }


@dataclass
class InvalidArgumentError(ValueSourceError, ValueError):
    """
    Назначение:
        Обязательный аргумент конструктора отсутствует или имеет недопустимый вид.
    """

    @property
    def code(self) -> ErrorCode:
        return ErrorCode.INVALID_ARGUMENT

    @classmethod
    def missing(cls, argument: str) -> "InvalidArgumentError":
        return cls(f"Argument '{argument}' must not be None.", {"argument": argument})


@dataclass
class EmptyInputError(ValueSourceError, ValueError):
    """
    Назначение:
        Литеральная последовательность создана без единого значения.
    """

    @property
    def code(self) -> ErrorCode:
        return ErrorCode.EMPTY_INPUT


@dataclass
class ExhaustedSequenceError(ValueSourceError):
    """
    Назначение:
        Последовательность больше не может выдать значение.
    """

    message: str = EXHAUSTED_SEQUENCE_MESSAGE

    @property
    def code(self) -> ErrorCode:
        return ErrorCode.EXHAUSTED_SEQUENCE


@dataclass
class ValidationFailedError(ValueSourceError):
    """
    Назначение:
        Валидатор отклонил переход от предыдущего выданного значения к кандидату.
    Инварианты/гарантии:
        - message равен сконфигурированному сообщению источника.
        - details содержит repr предыдущего значения и кандидата.
    """

    @property
    def code(self) -> ErrorCode:
        return ErrorCode.VALIDATION_FAILED


@dataclass
class NotYetStartedError(ValueSourceError):
    """
    Назначение:
        Обращение к last_value/first_value до первого выданного значения.
    """

    message: str = NOT_YET_STARTED_MESSAGE

    @property
    def code(self) -> ErrorCode:
        return ErrorCode.NOT_YET_STARTED


__all__ = [
    "EXHAUSTED_SEQUENCE_MESSAGE",
    "NOT_YET_STARTED_MESSAGE",
    "ValueSourceError",
    "InvalidArgumentError",
    "EmptyInputError",
    "ExhaustedSequenceError",
    "ValidationFailedError",
    "NotYetStartedError",
]
