from __future__ import annotations

from dataclasses import dataclass

from .bytes import fnv_hash, fnv_mix
from .endpoint import ENDPOINT_INVALID, Endpoint, EndpointType, EndpointTypeRegistry


class FlowError(ValueError):
    """Raised when a flow is built from endpoints of different kinds."""


@dataclass(frozen=True, slots=True)
class Flow:
    """
    A directed pair of endpoints of the same kind, e.g. the source and
    destination ports of a TCP segment.

    `canonical()` and `fast_hash()` ignore direction, so both halves of a
    conversation land on the same key.
    """

    kind: EndpointType
    src: bytes
    dst: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", EndpointType(self.kind))
        object.__setattr__(self, "src", bytes(self.src))
        object.__setattr__(self, "dst", bytes(self.dst))

    @property
    def src_endpoint(self) -> Endpoint:
        return Endpoint(self.kind, self.src)

    @property
    def dst_endpoint(self) -> Endpoint:
        return Endpoint(self.kind, self.dst)

    def endpoints(self) -> tuple[Endpoint, Endpoint]:
        return self.src_endpoint, self.dst_endpoint

    def reverse(self) -> Flow:
        return Flow(self.kind, self.dst, self.src)

    def canonical(self) -> Flow:
        src, dst = self.endpoints()
        if dst.less_than(src):
            return self.reverse()
        return self

    def fast_hash(self) -> int:
        # Sum of both sides keeps the hash symmetric under reverse().
        return fnv_mix(fnv_hash(self.src) + fnv_hash(self.dst), int(self.kind))

    def render(self, registry: EndpointTypeRegistry | None = None) -> str:
        src, dst = self.endpoints()
        return f"{src.render(registry)}->{dst.render(registry)}"

    def __str__(self) -> str:
        return self.render()


def new_flow(kind: int, src: bytes | bytearray | memoryview, dst: bytes | bytearray | memoryview) -> Flow:
    return Flow(EndpointType(kind), src, dst)


def flow_from_endpoints(src: Endpoint, dst: Endpoint) -> Flow:
    if src.kind != dst.kind:
        raise FlowError(f"Mismatched endpoint types: {int(src.kind)} -> {int(dst.kind)}")
    return Flow(src.kind, src.raw, dst.raw)


INVALID_FLOW = Flow(ENDPOINT_INVALID, b"", b"")
