"""
Built-in endpoint kinds and the factories that build endpoints of those kinds.

IPv4 and IPv6 get separate kinds so that ordering groups all IPv4 addresses
before all IPv6 addresses, whatever the bytes.
"""

from __future__ import annotations

import ipaddress

from ..core.bytes import read_uint16_be, write_uint16_be
from ..core.endpoint import (
    DEFAULT_REGISTRY,
    INVALID_ENDPOINT,
    Endpoint,
    EndpointType,
    EndpointTypeMetadata,
    EndpointTypeRegistry,
)

ENDPOINT_IPV4 = EndpointType(1)
ENDPOINT_IPV6 = EndpointType(2)
ENDPOINT_MAC = EndpointType(3)
ENDPOINT_TCP_PORT = EndpointType(4)
ENDPOINT_UDP_PORT = EndpointType(5)
ENDPOINT_SCTP_PORT = EndpointType(6)
ENDPOINT_RUDP_PORT = EndpointType(7)
ENDPOINT_UDPLITE_PORT = EndpointType(8)
ENDPOINT_PPP = EndpointType(9)

IPAddressLike = bytes | bytearray | memoryview | ipaddress.IPv4Address | ipaddress.IPv6Address


def format_ip(raw: bytes) -> str:
    if not raw:
        return "<nil>"
    if len(raw) == 4:
        return str(ipaddress.IPv4Address(raw))
    if len(raw) == 16:
        addr = ipaddress.IPv6Address(raw)
        mapped = addr.ipv4_mapped
        return str(mapped) if mapped is not None else addr.compressed
    return "?" + raw.hex()


def format_mac(raw: bytes) -> str:
    return ":".join(f"{b:02x}" for b in raw)


def format_port16(raw: bytes) -> str:
    return str(read_uint16_be(raw))


def format_port8(raw: bytes) -> str:
    return str(raw[0])


def format_ppp(raw: bytes) -> str:
    _ = raw
    return "point"


BUILTIN_ENDPOINT_TYPES: tuple[tuple[EndpointType, EndpointTypeMetadata], ...] = (
    (ENDPOINT_IPV4, EndpointTypeMetadata("IPv4", format_ip)),
    (ENDPOINT_IPV6, EndpointTypeMetadata("IPv6", format_ip)),
    (ENDPOINT_MAC, EndpointTypeMetadata("MAC", format_mac)),
    (ENDPOINT_TCP_PORT, EndpointTypeMetadata("TCP", format_port16)),
    (ENDPOINT_UDP_PORT, EndpointTypeMetadata("UDP", format_port16)),
    (ENDPOINT_SCTP_PORT, EndpointTypeMetadata("SCTP", format_port16)),
    # RUDP ports are a single byte in this catalog.
    (ENDPOINT_RUDP_PORT, EndpointTypeMetadata("RUDP", format_port8)),
    (ENDPOINT_UDPLITE_PORT, EndpointTypeMetadata("UDPLite", format_port16)),
    (ENDPOINT_PPP, EndpointTypeMetadata("PPP", format_ppp)),
)


def register_builtin_endpoint_types(registry: EndpointTypeRegistry) -> None:
    for kind, metadata in BUILTIN_ENDPOINT_TYPES:
        registry.register(kind, metadata)


def new_ip_endpoint(address: IPAddressLike) -> Endpoint:
    """
    IPv4 endpoint for 4 bytes, IPv6 endpoint for 16 bytes, INVALID_ENDPOINT
    for anything else. Only the length is checked.
    """
    if isinstance(address, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        raw = address.packed
    else:
        raw = bytes(address)
    if len(raw) == 4:
        return Endpoint(ENDPOINT_IPV4, raw)
    if len(raw) == 16:
        return Endpoint(ENDPOINT_IPV6, raw)
    return INVALID_ENDPOINT


def new_mac_endpoint(address: bytes | bytearray | memoryview) -> Endpoint:
    return Endpoint(ENDPOINT_MAC, address)


def _new_port_endpoint(kind: EndpointType, port: int) -> Endpoint:
    return Endpoint(kind, write_uint16_be(port))


def new_tcp_port_endpoint(port: int) -> Endpoint:
    return _new_port_endpoint(ENDPOINT_TCP_PORT, port)


def new_udp_port_endpoint(port: int) -> Endpoint:
    return _new_port_endpoint(ENDPOINT_UDP_PORT, port)


def new_sctp_port_endpoint(port: int) -> Endpoint:
    return _new_port_endpoint(ENDPOINT_SCTP_PORT, port)


def new_rudp_port_endpoint(port: int) -> Endpoint:
    # Only the low 8 bits survive; see format_port8.
    return Endpoint(ENDPOINT_RUDP_PORT, bytes([int(port) & 0xFF]))


def new_udplite_port_endpoint(port: int) -> Endpoint:
    return _new_port_endpoint(ENDPOINT_UDPLITE_PORT, port)


register_builtin_endpoint_types(DEFAULT_REGISTRY)
