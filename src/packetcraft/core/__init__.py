from .bytes import BytesError, fnv_hash
from .endpoint import (
    DEFAULT_REGISTRY,
    ENDPOINT_INVALID,
    INVALID_ENDPOINT,
    Endpoint,
    EndpointType,
    EndpointTypeError,
    EndpointTypeMetadata,
    EndpointTypeRegistrationError,
    EndpointTypeRegistry,
    Renderer,
    lookup_endpoint_type,
    new_endpoint,
    register_endpoint_type,
)
from .flow import INVALID_FLOW, Flow, FlowError, flow_from_endpoints, new_flow

__all__ = [
    "BytesError",
    "DEFAULT_REGISTRY",
    "ENDPOINT_INVALID",
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
    "Renderer",
    "flow_from_endpoints",
    "fnv_hash",
    "lookup_endpoint_type",
    "new_endpoint",
    "new_flow",
    "register_endpoint_type",
]
