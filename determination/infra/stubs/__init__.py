from determination.infra.stubs.clock_stub import CurrentDateTimeProviderStub, add_step
from determination.infra.stubs.guid_stub import GuidProviderStub, parse_guid
from determination.infra.stubs.value_provider_stub import ValueProviderStub

__all__ = [
    "CurrentDateTimeProviderStub",
    "GuidProviderStub",
    "ValueProviderStub",
    "add_step",
    "parse_guid",
]
