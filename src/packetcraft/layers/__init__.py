from .endpoints import (
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
    "ENDPOINT_IPV4",
    "ENDPOINT_IPV6",
    "ENDPOINT_MAC",
    "ENDPOINT_PPP",
    "ENDPOINT_RUDP_PORT",
    "ENDPOINT_SCTP_PORT",
    "ENDPOINT_TCP_PORT",
    "ENDPOINT_UDP_PORT",
    "ENDPOINT_UDPLITE_PORT",
    "new_ip_endpoint",
    "new_mac_endpoint",
    "new_rudp_port_endpoint",
    "new_sctp_port_endpoint",
    "new_tcp_port_endpoint",
    "new_udp_port_endpoint",
    "new_udplite_port_endpoint",
    "register_builtin_endpoint_types",
]
