from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, Union

from objectwriter.core.contracts import OutputRecord
from objectwriter.sinks.object_file_sink import ObjectFileSink

PathLike = Union[str, "os.PathLike[str]"]


class ObjectWriter:
    """
    Writes values to object stream files, one file per call.

    Every operation opens (creating or truncating) the destination, writes the
    encoded values and releases the file handle before returning, whether the
    write succeeded or not.

    Example:
        >>> writer = ObjectWriter()
        >>> writer.write_integers("1-integers.obj", [32, 33, 34])
        >>> writer.write_string("2-string.obj", "Today")
        >>> writer.write_timestamp("3-date.obj")

    Raises:
        IOFailure: The file could not be opened, written or closed.
        EncodingError: A value cannot be encoded (e.g. int32 overflow).
    """

    def __init__(self, sink: Optional[ObjectFileSink] = None):
        self.sink = sink or ObjectFileSink()

    def write_integers(self, path: PathLike, ints: Iterable[int]) -> Dict[str, Any]:
        """Write each integer as a fixed-width signed 32-bit value."""
        return self.write_record(OutputRecord(os.fspath(path), "integers", list(ints)))

    def write_string(self, path: PathLike, value: str) -> Dict[str, Any]:
        """Write a single length-prefixed UTF-8 string."""
        return self.write_record(OutputRecord(os.fspath(path), "string", [value]))

    def write_timestamp(self, path: PathLike, value: Optional[datetime] = None) -> Dict[str, Any]:
        """Write a single timestamp; the current instant when ``value`` is omitted."""
        if value is None:
            value = datetime.now(timezone.utc)
        return self.write_record(OutputRecord(os.fspath(path), "timestamp", [value]))

    def write_objects(self, path: PathLike, values: Iterable[Any]) -> Dict[str, Any]:
        """Write values of any supported kind, each tagged by its type."""
        return self.write_record(OutputRecord(os.fspath(path), "objects", list(values)))

    def write_record(self, record: OutputRecord) -> Dict[str, Any]:
        return self.sink.write(record)
