"""Timestamp codec: signed 64-bit milliseconds since the Unix epoch."""

from __future__ import annotations

import struct
from datetime import datetime, timedelta, timezone
from typing import Any, BinaryIO

from objectwriter.codec.base import StructCodec
from objectwriter.codec.registry import register_codec
from objectwriter.core.exceptions import DecodingError, EncodingError

TAG_TIMESTAMP = 0x07

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def to_epoch_millis(value: datetime) -> int:
    """Milliseconds since the epoch, truncated toward the past.

    Naive datetimes are taken as local time.
    """
    try:
        if value.tzinfo is None:
            value = value.astimezone()
        return (value - EPOCH) // _ONE_MS
    except (ValueError, OverflowError, OSError) as exc:
        raise EncodingError(f"timestamp {value.isoformat()} cannot be encoded: {exc}") from exc


def from_epoch_millis(millis: int) -> datetime:
    return EPOCH + timedelta(milliseconds=millis)


@register_codec()
class TimestampCodec(StructCodec):
    tag = TAG_TIMESTAMP
    name = "timestamp"
    python_types = (datetime,)
    layout = struct.Struct(">q")

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, datetime):
            raise EncodingError(f"timestamp requires a datetime, got {type(value).__name__}")
        return super().encode(to_epoch_millis(value))

    def decode(self, stream: BinaryIO) -> Any:
        millis = super().decode(stream)
        try:
            return from_epoch_millis(millis)
        except OverflowError as exc:
            raise DecodingError(f"timestamp {millis}ms is outside the supported range") from exc
