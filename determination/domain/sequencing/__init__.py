from .sequences import ComputedSequence, LiteralSequence, ProgressionSequence
from .source import SequencedValueSource
from .validators import (
    DATETIME_FAILURE_MESSAGE,
    DEFAULT_FAILURE_MESSAGE,
    GUID_FAILURE_MESSAGE,
    always_valid,
    must_differ,
    strictly_increasing,
)

__all__ = [
    "SequencedValueSource",
    "LiteralSequence",
    "ProgressionSequence",
    "ComputedSequence",
    "DEFAULT_FAILURE_MESSAGE",
    "DATETIME_FAILURE_MESSAGE",
    "GUID_FAILURE_MESSAGE",
    "always_valid",
    "strictly_increasing",
    "must_differ",
]
