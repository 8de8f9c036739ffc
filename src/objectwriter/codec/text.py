"""Length-prefixed value codecs: UTF-8 strings and raw bytes."""

from __future__ import annotations

from typing import Any, BinaryIO

from objectwriter.codec.base import LENGTH_PREFIX, MAX_LENGTH, ValueCodec, read_exact
from objectwriter.codec.registry import register_codec
from objectwriter.core.exceptions import DecodingError, EncodingError

TAG_STRING = 0x05
TAG_BYTES = 0x06


def _prefixed(payload: bytes, kind: str) -> bytes:
    if len(payload) > MAX_LENGTH:
        raise EncodingError(f"{kind} of {len(payload)} bytes exceeds the {MAX_LENGTH} byte limit")
    return LENGTH_PREFIX.pack(len(payload)) + payload


def _read_prefixed(stream: BinaryIO, kind: str) -> bytes:
    (length,) = LENGTH_PREFIX.unpack(read_exact(stream, LENGTH_PREFIX.size, f"{kind} length"))
    return read_exact(stream, length, kind)


@register_codec()
class StringCodec(ValueCodec):
    tag = TAG_STRING
    name = "string"
    python_types = (str,)

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, str):
            raise EncodingError(f"string requires a str, got {type(value).__name__}")
        try:
            payload = value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise EncodingError(f"string is not encodable as UTF-8: {exc}") from exc
        return _prefixed(payload, self.name)

    def decode(self, stream: BinaryIO) -> Any:
        raw = _read_prefixed(stream, self.name)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodingError(f"string is not valid UTF-8: {exc}") from exc


@register_codec()
class BytesCodec(ValueCodec):
    tag = TAG_BYTES
    name = "bytes"
    python_types = (bytes, bytearray)

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, (bytes, bytearray)):
            raise EncodingError(f"bytes requires bytes, got {type(value).__name__}")
        return _prefixed(bytes(value), self.name)

    def decode(self, stream: BinaryIO) -> Any:
        return _read_prefixed(stream, self.name)
