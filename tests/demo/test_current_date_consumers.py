from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from determination.domain.exceptions import ExhaustedSequenceError
from determination.domain.ports.values import CurrentDateTimeProviderProtocol
from determination.infra.stubs.clock_stub import CurrentDateTimeProviderStub

TEA_START = datetime(2020, 10, 1, 16, 0)
TEA_END = datetime(2020, 10, 1, 18, 0)


def todays_date_as_text(clock: CurrentDateTimeProviderProtocol) -> str:
    return clock.value.strftime("%Y/%m/%d")


def is_it_tea_time(clock: CurrentDateTimeProviderProtocol, start: datetime, end: datetime) -> bool:
    now = clock.value
    return start <= now <= end


def is_it_tea_time_reading_twice(clock: CurrentDateTimeProviderProtocol, start: datetime, end: datetime) -> bool:
    return clock.value >= start and clock.value <= end


def test_todays_date_as_text():
    assert todays_date_as_text(CurrentDateTimeProviderStub.create(datetime(2020, 10, 2))) == "2020/10/02"


def test_tea_time_with_single_read():
    assert is_it_tea_time(CurrentDateTimeProviderStub.create(TEA_END), TEA_START, TEA_END) is True


def test_second_read_of_single_value_clock_is_detected():
    with pytest.raises(ExhaustedSequenceError):
        is_it_tea_time_reading_twice(CurrentDateTimeProviderStub.create(TEA_END), TEA_START, TEA_END)


def test_clock_moving_between_reads_changes_result():
    clock = CurrentDateTimeProviderStub.create(TEA_START, TEA_END + timedelta(microseconds=1))

    assert is_it_tea_time_reading_twice(clock, TEA_START, TEA_END) is False
