from __future__ import annotations

import uuid

from determination.domain.ports.values import GuidProviderProtocol


class Uuid4Provider(GuidProviderProtocol):
    """
    Назначение:
        Production-реализация порта идентификаторов: новый UUID4 на каждое чтение.
    """

    @property
    def value(self) -> uuid.UUID:
        return uuid.uuid4()
