from __future__ import annotations

from datetime import datetime, timezone
from io import BytesIO
from pathlib import Path
from typing import Any, Dict

from objectwriter.codec.stream import ObjectOutputStream
from objectwriter.core.contracts import OutputRecord
from objectwriter.core.exceptions import EncodingError

from objectwriter.sinks.strategies.base import WriterStrategy


class ObjectStreamWriterStrategy(WriterStrategy):
    """
    Writes an OutputRecord as an object stream file.

    Supported payload types:
    - integers: one or more values, each as a fixed-width int32
    - string: exactly one str value
    - timestamp: exactly one datetime value, stored as epoch milliseconds
    - objects: one or more values, each tagged by its own kind

    The whole stream is encoded in memory before the target is opened, so an
    encoding error leaves any existing file untouched. The file handle is
    released on every exit path.
    """

    def supports_payload_type(self, payload_type: str) -> bool:
        return payload_type in {"integers", "string", "timestamp", "objects"}

    def write(self, record: OutputRecord, target: Path) -> Dict[str, Any]:
        payload = self.encode(record)

        with open(target, "wb") as f:
            f.write(payload)

        return {
            "extract_time_utc": datetime.now(timezone.utc).isoformat(),
            "target_location": str(target),
            "status": "success",
            "record_count": len(record.values),
            "payload_type": record.payload_type,
            "bytes_written": len(payload),
        }

    def encode(self, record: OutputRecord) -> bytes:
        """Encode the record's values into a complete object stream."""
        if not self.supports_payload_type(record.payload_type):
            raise EncodingError(f"Unsupported payload_type: {record.payload_type!r}")
        if not record.values:
            raise EncodingError(f"{record.payload_type} record '{record.object_name}' has no values")

        buffer = BytesIO()
        out = ObjectOutputStream(buffer)

        if record.payload_type == "integers":
            for value in record.values:
                out.write_int(value)
        elif record.payload_type == "string":
            self._require_single(record)
            out.write_string(record.values[0])
        elif record.payload_type == "timestamp":
            self._require_single(record)
            out.write_timestamp(record.values[0])
        else:
            for value in record.values:
                out.write_object(value)

        return buffer.getvalue()

    def _require_single(self, record: OutputRecord) -> None:
        if len(record.values) != 1:
            raise EncodingError(
                f"{record.payload_type} record '{record.object_name}' takes exactly one value, "
                f"got {len(record.values)}"
            )
