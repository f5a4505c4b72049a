from __future__ import annotations

from datetime import datetime, tzinfo

from determination.domain.ports.values import CurrentDateTimeProviderProtocol


class SystemClockProvider(CurrentDateTimeProviderProtocol):
    """
    Назначение:
        Production-реализация порта текущего времени.
    Ограничения:
        Без tz возвращает naive локальное время, с tz: aware.
    """

    def __init__(self, tz: tzinfo | None = None):
        self._tz = tz

    @property
    def value(self) -> datetime:
        return datetime.now(self._tz)
