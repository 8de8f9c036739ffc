"""Fixed-width primitive value codecs: null, bool, int32, int64, float64."""

from __future__ import annotations

import struct
from typing import Any, BinaryIO

from objectwriter.codec.base import StructCodec, ValueCodec, read_exact
from objectwriter.codec.registry import register_codec
from objectwriter.core.exceptions import DecodingError, EncodingError

TAG_NULL = 0x00
TAG_BOOL = 0x01
TAG_INT32 = 0x02
TAG_INT64 = 0x03
TAG_FLOAT64 = 0x04

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1


def _check_int(value: Any, low: int, high: int, kind: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingError(f"{kind} requires an int, got {type(value).__name__}")
    if not low <= value <= high:
        raise EncodingError(f"{value} is out of {kind} range [{low}, {high}]")


@register_codec()
class NullCodec(ValueCodec):
    tag = TAG_NULL
    name = "null"
    python_types = (type(None),)

    def encode(self, value: Any) -> bytes:
        return b""

    def decode(self, stream: BinaryIO) -> Any:
        return None


@register_codec()
class BoolCodec(ValueCodec):
    tag = TAG_BOOL
    name = "bool"
    python_types = (bool,)

    def encode(self, value: Any) -> bytes:
        return b"\x01" if value else b"\x00"

    def decode(self, stream: BinaryIO) -> Any:
        raw = read_exact(stream, 1, self.name)
        if raw not in (b"\x00", b"\x01"):
            raise DecodingError(f"Invalid bool byte 0x{raw[0]:02x}")
        return raw == b"\x01"


@register_codec()
class Int32Codec(StructCodec):
    tag = TAG_INT32
    name = "int32"
    python_types = (int,)
    layout = struct.Struct(">i")

    def accepts(self, value: Any) -> bool:
        return INT32_MIN <= value <= INT32_MAX

    def encode(self, value: Any) -> bytes:
        _check_int(value, INT32_MIN, INT32_MAX, self.name)
        return super().encode(value)


@register_codec()
class Int64Codec(StructCodec):
    tag = TAG_INT64
    name = "int64"
    python_types = (int,)
    layout = struct.Struct(">q")

    def accepts(self, value: Any) -> bool:
        return INT64_MIN <= value <= INT64_MAX

    def encode(self, value: Any) -> bytes:
        _check_int(value, INT64_MIN, INT64_MAX, self.name)
        return super().encode(value)


@register_codec()
class Float64Codec(StructCodec):
    tag = TAG_FLOAT64
    name = "float64"
    python_types = (float,)
    layout = struct.Struct(">d")

    def encode(self, value: Any) -> bytes:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise EncodingError(f"{self.name} requires a number, got {type(value).__name__}")
        try:
            return super().encode(float(value))
        except OverflowError as exc:
            raise EncodingError(f"{value} does not fit in {self.name}") from exc
