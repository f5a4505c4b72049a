from determination.infra.providers.clock_provider import SystemClockProvider
from determination.infra.providers.guid_provider import Uuid4Provider
from determination.infra.providers.value_provider import CallableValueProvider, RandomIntProvider

__all__ = [
    "SystemClockProvider",
    "Uuid4Provider",
    "CallableValueProvider",
    "RandomIntProvider",
]
