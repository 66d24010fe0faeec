"""
Endpoint identities for decoded packets: IP and MAC addresses and transport
ports as comparable, hashable, lazily rendered values, plus the registry that
lets protocol modules add their own endpoint kinds.

Importing this package registers the built-in kinds in DEFAULT_REGISTRY.
"""

from .core import (
    DEFAULT_REGISTRY,
    ENDPOINT_INVALID,
    INVALID_ENDPOINT,
    INVALID_FLOW,
    Endpoint,
    EndpointType,
    EndpointTypeError,
    EndpointTypeMetadata,
    EndpointTypeRegistrationError,
    EndpointTypeRegistry,
    Flow,
    FlowError,
    flow_from_endpoints,
    lookup_endpoint_type,
    new_endpoint,
    new_flow,
    register_endpoint_type,
)
from .layers import (
    ENDPOINT_IPV4,
    ENDPOINT_IPV6,
    ENDPOINT_MAC,
    ENDPOINT_PPP,
    ENDPOINT_RUDP_PORT,
    ENDPOINT_SCTP_PORT,
    ENDPOINT_TCP_PORT,
    ENDPOINT_UDP_PORT,
    ENDPOINT_UDPLITE_PORT,
    new_ip_endpoint,
    new_mac_endpoint,
    new_rudp_port_endpoint,
    new_sctp_port_endpoint,
    new_tcp_port_endpoint,
    new_udp_port_endpoint,
    new_udplite_port_endpoint,
    register_builtin_endpoint_types,
)

__all__ = [
    "DEFAULT_REGISTRY",
    "ENDPOINT_INVALID",
    "ENDPOINT_IPV4",
    "ENDPOINT_IPV6",
    "ENDPOINT_MAC",
    "ENDPOINT_PPP",
    "ENDPOINT_RUDP_PORT",
    "ENDPOINT_SCTP_PORT",
    "ENDPOINT_TCP_PORT",
    "ENDPOINT_UDP_PORT",
    "ENDPOINT_UDPLITE_PORT",
    "Endpoint",
    "EndpointType",
    "EndpointTypeError",
    "EndpointTypeMetadata",
    "EndpointTypeRegistrationError",
    "EndpointTypeRegistry",
    "Flow",
    "FlowError",
    "INVALID_ENDPOINT",
    "INVALID_FLOW",
    "flow_from_endpoints",
    "lookup_endpoint_type",
    "new_endpoint",
    "new_flow",
    "new_ip_endpoint",
    "new_mac_endpoint",
    "new_rudp_port_endpoint",
    "new_sctp_port_endpoint",
    "new_tcp_port_endpoint",
    "new_udp_port_endpoint",
    "new_udplite_port_endpoint",
    "register_builtin_endpoint_types",
    "register_endpoint_type",
]
