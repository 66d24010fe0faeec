from __future__ import annotations

import logging

import pytest

from packetcraft.core.endpoint import (
    DEFAULT_REGISTRY,
    ENDPOINT_INVALID,
    EndpointType,
    EndpointTypeError,
    EndpointTypeMetadata,
    EndpointTypeRegistrationError,
    EndpointTypeRegistry,
    lookup_endpoint_type,
    register_endpoint_type,
)
from packetcraft.layers.endpoints import ENDPOINT_TCP_PORT, register_builtin_endpoint_types


def _meta(name: str = "Test") -> EndpointTypeMetadata:
    return EndpointTypeMetadata(name, lambda raw: raw.hex())


def test_new_registry_has_only_invalid_type() -> None:
    reg = EndpointTypeRegistry()
    assert len(reg) == 1
    assert ENDPOINT_INVALID in reg
    metadata, found = reg.lookup(0)
    assert found
    assert metadata is not None
    assert metadata.name == "invalid"


def test_register_returns_handle() -> None:
    reg = EndpointTypeRegistry()
    kind = reg.register(100, _meta("Foo"))
    assert isinstance(kind, EndpointType)
    assert kind == 100
    assert repr(kind) == "EndpointType(100)"
    assert str(kind) == "100"
    assert reg.type_name(kind) == "Foo"


def test_duplicate_id_rejected() -> None:
    reg = EndpointTypeRegistry()
    reg.register(100, _meta("Foo"))
    with pytest.raises(EndpointTypeRegistrationError):
        reg.register(100, _meta("Bar"))
    metadata, _ = reg.lookup(100)
    assert metadata is not None
    assert metadata.name == "Foo"


def test_invalid_id_is_reserved() -> None:
    reg = EndpointTypeRegistry()
    with pytest.raises(EndpointTypeRegistrationError):
        reg.register(0, _meta())


def test_same_name_different_ids_accepted() -> None:
    reg = EndpointTypeRegistry()
    a = reg.register(100, _meta("Same"))
    b = reg.register(101, _meta("Same"))
    assert a != b
    assert reg.type_name(a) == reg.type_name(b) == "Same"


@pytest.mark.parametrize("bad_id", [-1, 1.5, "3", True])
def test_bad_ids_rejected(bad_id: object) -> None:
    reg = EndpointTypeRegistry()
    with pytest.raises(EndpointTypeRegistrationError):
        reg.register(bad_id, _meta())  # type: ignore[arg-type]


def test_bad_metadata_rejected() -> None:
    reg = EndpointTypeRegistry()
    with pytest.raises(EndpointTypeRegistrationError):
        reg.register(100, _meta(""))
    with pytest.raises(EndpointTypeRegistrationError):
        reg.register(101, EndpointTypeMetadata("NoFormatter", None))  # type: ignore[arg-type]


def test_registration_error_is_an_endpoint_type_error() -> None:
    assert issubclass(EndpointTypeRegistrationError, EndpointTypeError)
    assert issubclass(EndpointTypeError, ValueError)


def test_freeze_blocks_registration() -> None:
    reg = EndpointTypeRegistry()
    reg.register(100, _meta())
    reg.freeze()
    reg.freeze()
    assert reg.frozen
    with pytest.raises(EndpointTypeRegistrationError):
        reg.register(101, _meta())
    _, found = reg.lookup(100)
    assert found


def test_lookup_unknown() -> None:
    reg = EndpointTypeRegistry()
    metadata, found = reg.lookup(4242)
    assert metadata is None
    assert not found
    assert reg.type_name(4242) == "4242"


def test_iter_yields_sorted_handles() -> None:
    reg = EndpointTypeRegistry()
    reg.register(50, _meta())
    reg.register(10, _meta())
    assert list(reg) == [0, 10, 50]
    assert all(isinstance(k, EndpointType) for k in reg)


def test_builtin_catalog_registers_into_fresh_registry() -> None:
    reg = EndpointTypeRegistry()
    register_builtin_endpoint_types(reg)
    assert list(reg) == list(range(10))
    assert [reg.type_name(k) for k in reg] == [
        "invalid",
        "IPv4",
        "IPv6",
        "MAC",
        "TCP",
        "UDP",
        "SCTP",
        "RUDP",
        "UDPLite",
        "PPP",
    ]
    with pytest.raises(EndpointTypeRegistrationError):
        register_builtin_endpoint_types(reg)


def test_default_registry_holds_builtins() -> None:
    metadata, found = lookup_endpoint_type(ENDPOINT_TCP_PORT)
    assert found
    assert metadata is not None
    assert metadata.name == "TCP"
    with pytest.raises(EndpointTypeRegistrationError):
        register_endpoint_type(4, _meta("MyTCP"))
    assert DEFAULT_REGISTRY.type_name(4) == "TCP"


def test_module_helpers_accept_explicit_registry() -> None:
    reg = EndpointTypeRegistry()
    kind = register_endpoint_type(4, _meta("Mine"), registry=reg)
    metadata, found = lookup_endpoint_type(kind, registry=reg)
    assert found
    assert metadata is not None
    assert metadata.name == "Mine"


def test_checked_constructor_requires_registered_type() -> None:
    reg = EndpointTypeRegistry()
    kind = reg.register(100, _meta())
    ep = reg.new_endpoint(kind, bytearray(b"\x01"))
    assert ep.kind == kind
    assert ep.raw == b"\x01"
    with pytest.raises(EndpointTypeError):
        reg.new_endpoint(101, b"\x01")


def test_registration_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    reg = EndpointTypeRegistry()
    with caplog.at_level(logging.DEBUG, logger="packetcraft.core.endpoint"):
        reg.register(100, _meta("Logged"))
    assert any("Logged" in r.getMessage() for r in caplog.records)
