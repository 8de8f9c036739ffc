from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import Any, BinaryIO, ClassVar, Tuple

from objectwriter.core.exceptions import DecodingError

# Length prefix used by variable-size values (string, bytes)
LENGTH_PREFIX = struct.Struct(">I")
MAX_LENGTH = 2**32 - 1


def read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    """Read exactly ``size`` bytes or raise DecodingError."""
    offset = stream.tell() if stream.seekable() else None
    data = stream.read(size)
    if len(data) != size:
        raise DecodingError(
            f"Truncated {what}: expected {size} bytes, got {len(data)}", offset=offset
        )
    return data


class ValueCodec(ABC):
    """Encodes and decodes the payload of one tagged value kind.

    The tag byte itself is written and read by the object streams; codecs
    only deal with what follows it.
    """

    tag: ClassVar[int]
    name: ClassVar[str]
    python_types: ClassVar[Tuple[type, ...]] = ()

    def accepts(self, value: Any) -> bool:
        """Whether this codec can encode ``value`` when picked by type."""
        return True

    @abstractmethod
    def encode(self, value: Any) -> bytes:
        raise NotImplementedError

    @abstractmethod
    def decode(self, stream: BinaryIO) -> Any:
        raise NotImplementedError


class StructCodec(ValueCodec):
    """Codec for fixed-width values described by a ``struct.Struct``."""

    layout: ClassVar[struct.Struct]

    def encode(self, value: Any) -> bytes:
        return self.layout.pack(value)

    def decode(self, stream: BinaryIO) -> Any:
        (value,) = self.layout.unpack(read_exact(stream, self.layout.size, self.name))
        return value
