import logging

from determination.domain.error_codes import ErrorCode
from determination.domain.exceptions import (
    EmptyInputError,
    ExhaustedSequenceError,
    InvalidArgumentError,
    NotYetStartedError,
    ValidationFailedError,
    ValueSourceError,
)
from determination.domain.ports.values import (
    CurrentDateTimeProviderProtocol,
    GuidProviderProtocol,
    ValueProviderProtocol,
)
from determination.domain.sequencing import (
    ComputedSequence,
    LiteralSequence,
    ProgressionSequence,
    SequencedValueSource,
)
from determination.infra.providers import (
    CallableValueProvider,
    RandomIntProvider,
    SystemClockProvider,
    Uuid4Provider,
)
from determination.infra.stubs import CurrentDateTimeProviderStub, GuidProviderStub, ValueProviderStub

logging.getLogger("determination").addHandler(logging.NullHandler())

__all__ = [
    "ErrorCode",
    "ValueSourceError",
    "InvalidArgumentError",
    "EmptyInputError",
    "ExhaustedSequenceError",
    "ValidationFailedError",
    "NotYetStartedError",
    "ValueProviderProtocol",
    "CurrentDateTimeProviderProtocol",
    "GuidProviderProtocol",
    "SequencedValueSource",
    "LiteralSequence",
    "ProgressionSequence",
    "ComputedSequence",
    "SystemClockProvider",
    "Uuid4Provider",
    "CallableValueProvider",
    "RandomIntProvider",
    "CurrentDateTimeProviderStub",
    "GuidProviderStub",
    "ValueProviderStub",
]
