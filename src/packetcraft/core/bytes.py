from __future__ import annotations

import struct

FNV_OFFSET_BASIS = 14695981039346656037
FNV_PRIME = 1099511628211
_MASK64 = (1 << 64) - 1


class BytesError(Exception):
    pass


def read_uint16_be(data: bytes, offset: int = 0) -> int:
    if offset < 0 or offset + 2 > len(data):
        raise BytesError("read_uint16_be out of bounds")
    return int(struct.unpack_from(">H", data, offset)[0])


def write_uint16_be(value: int) -> bytes:
    return struct.pack(">H", int(value) & 0xFFFF)


def fnv_hash(data: bytes) -> int:
    """
    64-bit FNV-1a over `data`.

    Not cryptographic; only meant for bucketing endpoints and flows.
    """
    h = FNV_OFFSET_BASIS
    for b in data:
        h ^= b
        h = (h * FNV_PRIME) & _MASK64
    return h


def fnv_mix(h: int, value: int) -> int:
    return (((h & _MASK64) ^ value) * FNV_PRIME) & _MASK64


def hex_string(data: bytes) -> str:
    return bytes(data).hex()
