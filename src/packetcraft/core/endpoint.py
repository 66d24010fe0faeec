from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Protocol

from .bytes import fnv_hash, fnv_mix, hex_string

logger = logging.getLogger(__name__)


class EndpointTypeError(ValueError):
    """Raised when an endpoint type is unknown to the registry it is used with."""


class EndpointTypeRegistrationError(EndpointTypeError):
    """Raised when a registration breaks the load-time contract (duplicate id, bad metadata, frozen)."""


class Renderer(Protocol):
    def __call__(self, raw: bytes) -> str: ...


class EndpointType(int):
    """
    Handle for a registered endpoint kind.

    Compares and hashes as its integer id, so kinds order numerically.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"EndpointType({int(self)})"

    def __str__(self) -> str:
        return str(int(self))


@dataclass(frozen=True, slots=True)
class EndpointTypeMetadata:
    name: str
    formatter: Renderer


ENDPOINT_INVALID = EndpointType(0)
_INVALID_METADATA = EndpointTypeMetadata("invalid", lambda raw: "invalid")


def _fallback_text(kind: int, raw: bytes) -> str:
    return f"{int(kind)}:{hex_string(raw)}"


class EndpointTypeRegistry:
    """
    Table of endpoint kinds: id -> (name, renderer).

    Registration happens once per kind while the process starts up; after that
    the table is only read. Registration is not synchronized, so finish it (and
    ideally call `freeze()`) before sharing the registry between threads.

    Id 0 is reserved for the invalid kind and is registered on construction.
    """

    __slots__ = ("_types", "_frozen")

    def __init__(self) -> None:
        self._types: dict[int, EndpointTypeMetadata] = {}
        self._frozen = False
        self.register(ENDPOINT_INVALID, _INVALID_METADATA)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        if not self._frozen:
            self._frozen = True
            logger.debug("Endpoint type registry frozen with %d types", len(self._types))

    def register(self, requested_id: int, metadata: EndpointTypeMetadata) -> EndpointType:
        if self._frozen:
            raise EndpointTypeRegistrationError(
                f"Registry is frozen; cannot register endpoint type {requested_id!r}"
            )
        if isinstance(requested_id, bool) or not isinstance(requested_id, int) or requested_id < 0:
            raise EndpointTypeRegistrationError(
                f"Endpoint type id must be a non-negative integer, got {requested_id!r}"
            )
        if not isinstance(metadata.name, str) or not metadata.name:
            raise EndpointTypeRegistrationError(f"Endpoint type {requested_id} needs a non-empty name")
        if not callable(metadata.formatter):
            raise EndpointTypeRegistrationError(
                f"Endpoint type {requested_id} ({metadata.name}) needs a callable formatter"
            )

        key = int(requested_id)
        existing = self._types.get(key)
        if existing is not None:
            raise EndpointTypeRegistrationError(
                f"Endpoint type {key} already registered as {existing.name!r}; "
                f"refusing to register {metadata.name!r}"
            )
        self._types[key] = metadata
        logger.debug("Registered endpoint type id=%d name=%s", key, metadata.name)
        return EndpointType(key)

    def lookup(self, type_id: int) -> tuple[EndpointTypeMetadata | None, bool]:
        metadata = self._types.get(int(type_id))
        return metadata, metadata is not None

    def type_name(self, type_id: int) -> str:
        metadata = self._types.get(int(type_id))
        return metadata.name if metadata is not None else str(int(type_id))

    def render(self, type_id: int, raw: bytes) -> str:
        """
        Render `raw` with the formatter registered for `type_id`.

        Never raises: unknown kinds and formatter failures produce
        "<id>:<hex payload>".
        """
        text, _ = self.try_render(type_id, raw)
        return text

    def try_render(self, type_id: int, raw: bytes) -> tuple[str, bool]:
        """Like `render`, also reporting whether the registered formatter produced the text."""
        metadata = self._types.get(int(type_id))
        if metadata is None:
            logger.debug("No endpoint type registered for id=%d; using fallback text", int(type_id))
            return _fallback_text(type_id, raw), False
        try:
            return str(metadata.formatter(raw)), True
        except Exception:  # noqa: BLE001
            logger.debug(
                "Formatter for endpoint type %s failed on %d bytes; using fallback text",
                metadata.name,
                len(raw),
                exc_info=True,
            )
            return _fallback_text(type_id, raw), False

    def new_endpoint(self, kind: int, raw: bytes | bytearray | memoryview) -> Endpoint:
        if int(kind) not in self._types:
            raise EndpointTypeError(f"Endpoint type {int(kind)} is not registered")
        return Endpoint(EndpointType(kind), raw)

    def __contains__(self, type_id: object) -> bool:
        return isinstance(type_id, int) and int(type_id) in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[EndpointType]:
        return iter([EndpointType(k) for k in sorted(self._types)])


@total_ordering
@dataclass(frozen=True, slots=True)
class Endpoint:
    """
    One side of a communication: an endpoint kind plus its raw address bytes.

    Equality and hashing use (kind, raw) only. Ordering is total: kind id,
    then payload length, then payload bytes.

    The rendered string is computed on first use and cached on the instance
    once a registered formatter has produced it; fallback text is not cached.
    Concurrent first renders may both compute it; they store the same value.
    """

    kind: EndpointType
    raw: bytes
    _text: str | None = field(default=None, init=False, compare=False, hash=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.raw, (str, int)):
            raise TypeError(f"Endpoint raw payload must be bytes-like, got {type(self.raw).__name__}")
        object.__setattr__(self, "kind", EndpointType(self.kind))
        # bytearray/memoryview inputs are copied; the caller may reuse its buffer.
        object.__setattr__(self, "raw", bytes(self.raw))

    @property
    def is_valid(self) -> bool:
        return self.kind != ENDPOINT_INVALID

    def _order_key(self) -> tuple[int, int, bytes]:
        return int(self.kind), len(self.raw), self.raw

    def less_than(self, other: Endpoint) -> bool:
        return self._order_key() < other._order_key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.less_than(other)

    def fast_hash(self) -> int:
        return fnv_mix(fnv_hash(self.raw), int(self.kind))

    def render(self, registry: EndpointTypeRegistry | None = None) -> str:
        text = self._text
        if text is None:
            reg = DEFAULT_REGISTRY if registry is None else registry
            text, rendered = reg.try_render(self.kind, self.raw)
            # Fallback text is not cached; the kind may be known to another registry.
            if rendered:
                object.__setattr__(self, "_text", text)
        return text

    def __str__(self) -> str:
        return self.render()


def new_endpoint(kind: int, raw: bytes | bytearray | memoryview) -> Endpoint:
    return Endpoint(EndpointType(kind), raw)


INVALID_ENDPOINT = Endpoint(ENDPOINT_INVALID, b"")

DEFAULT_REGISTRY = EndpointTypeRegistry()


def register_endpoint_type(
    requested_id: int,
    metadata: EndpointTypeMetadata,
    *,
    registry: EndpointTypeRegistry | None = None,
) -> EndpointType:
    reg = DEFAULT_REGISTRY if registry is None else registry
    return reg.register(requested_id, metadata)


def lookup_endpoint_type(
    type_id: int,
    *,
    registry: EndpointTypeRegistry | None = None,
) -> tuple[EndpointTypeMetadata | None, bool]:
    reg = DEFAULT_REGISTRY if registry is None else registry
    return reg.lookup(type_id)
