"""
Object streams for the tagged binary object format.

A stream starts with ``STREAM_MAGIC`` and is followed by zero or more tagged
values until end of input. Each value is one tag byte followed by the
payload written by the codec registered for that tag:

    0x00 null        (no payload)
    0x01 bool        1 byte, 0 or 1
    0x02 int32       4 bytes, big-endian signed
    0x03 int64       8 bytes, big-endian signed
    0x04 float64     8 bytes, big-endian IEEE-754
    0x05 string      u32 big-endian length + UTF-8 bytes
    0x06 bytes       u32 big-endian length + raw bytes
    0x07 timestamp   8 bytes, big-endian signed epoch milliseconds

Streams do not own the file object they wrap; callers open and close it.
"""

from __future__ import annotations

from datetime import datetime
from io import BytesIO
from typing import Any, BinaryIO, Iterable, Iterator, List, Tuple, Type

from objectwriter.bootstrap import load_builtin_codecs
from objectwriter.codec.base import ValueCodec
from objectwriter.codec.primitives import TAG_BOOL, TAG_FLOAT64, TAG_INT32, TAG_INT64
from objectwriter.codec.registry import CodecRegistry, CodecRegistryError
from objectwriter.codec.temporal import TAG_TIMESTAMP
from objectwriter.codec.text import TAG_BYTES, TAG_STRING
from objectwriter.core.exceptions import DecodingError, EncodingError

STREAM_MAGIC = b"\xac\xed"


class ObjectOutputStream:
    """Writes tagged values to a binary file-like object."""

    def __init__(self, fp: BinaryIO):
        load_builtin_codecs()
        self._fp = fp
        self._count = 0
        self._fp.write(STREAM_MAGIC)

    @property
    def value_count(self) -> int:
        return self._count

    def write_int(self, value: int) -> None:
        self._write_tagged(TAG_INT32, value)

    def write_long(self, value: int) -> None:
        self._write_tagged(TAG_INT64, value)

    def write_bool(self, value: bool) -> None:
        self._write_tagged(TAG_BOOL, value)

    def write_double(self, value: float) -> None:
        self._write_tagged(TAG_FLOAT64, value)

    def write_string(self, value: str) -> None:
        self._write_tagged(TAG_STRING, value)

    def write_bytes(self, value: bytes) -> None:
        self._write_tagged(TAG_BYTES, value)

    def write_timestamp(self, value: datetime) -> None:
        self._write_tagged(TAG_TIMESTAMP, value)

    def write_object(self, value: Any) -> None:
        """Write ``value`` with the codec registered for its type."""
        try:
            codec_class = CodecRegistry.for_value(value)
        except CodecRegistryError as exc:
            raise EncodingError(str(exc)) from exc
        self._write_with(codec_class, value)

    def _write_tagged(self, tag: int, value: Any) -> None:
        self._write_with(CodecRegistry.get(tag), value)

    def _write_with(self, codec_class: Type[ValueCodec], value: Any) -> None:
        payload = codec_class().encode(value)
        self._fp.write(bytes((codec_class.tag,)) + payload)
        self._count += 1


class ObjectInputStream:
    """Reads tagged values from a binary file-like object.

    Reading past the last value raises EOFError; malformed input raises
    DecodingError.
    """

    def __init__(self, fp: BinaryIO):
        load_builtin_codecs()
        self._fp = fp
        magic = fp.read(len(STREAM_MAGIC))
        if magic != STREAM_MAGIC:
            raise DecodingError(
                f"Not an object stream: expected magic {STREAM_MAGIC.hex()}, got {magic.hex() or 'nothing'}",
                offset=0,
            )

    def read_tagged(self) -> Tuple[int, Any]:
        offset = self._fp.tell() if self._fp.seekable() else None
        tag_byte = self._fp.read(1)
        if not tag_byte:
            raise EOFError("End of object stream")
        tag = tag_byte[0]
        codec_class = CodecRegistry.try_get(tag)
        if codec_class is None:
            raise DecodingError(f"Unknown value tag 0x{tag:02x}", offset=offset)
        return tag, codec_class().decode(self._fp)

    def read_object(self) -> Any:
        return self.read_tagged()[1]

    def read_int(self) -> int:
        return self._read_expecting(TAG_INT32)

    def read_long(self) -> int:
        return self._read_expecting(TAG_INT64)

    def read_string(self) -> str:
        return self._read_expecting(TAG_STRING)

    def read_timestamp(self) -> datetime:
        return self._read_expecting(TAG_TIMESTAMP)

    def _read_expecting(self, expected: int) -> Any:
        tag, value = self.read_tagged()
        if tag != expected:
            raise DecodingError(
                f"Expected {CodecRegistry.get(expected).name}, found {CodecRegistry.get(tag).name}"
            )
        return value

    def __iter__(self) -> Iterator[Any]:
        while True:
            try:
                yield self.read_object()
            except EOFError:
                return


def encode_values(values: Iterable[Any]) -> bytes:
    """Encode values with their registered codecs into a complete stream."""
    buffer = BytesIO()
    out = ObjectOutputStream(buffer)
    for value in values:
        out.write_object(value)
    return buffer.getvalue()


def decode_values(data: bytes) -> List[Any]:
    """Decode every value of a complete stream."""
    return list(ObjectInputStream(BytesIO(data)))
