from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from objectwriter.core.base_sink import BaseSink
from objectwriter.core.contracts import OutputRecord
from objectwriter.core.exceptions import IOFailure
from objectwriter.sinks.strategies.object_stream_writer import ObjectStreamWriterStrategy
from objectwriter.sinks.types import ObjectFileSinkRuntimeConfig


class ObjectFileSink(BaseSink):
    """
    Sink that persists OutputRecords as object stream files.

    Each write creates or truncates the record's target file. An unusable
    path, or any OSError raised while preparing, opening, writing or closing
    the file, surfaces as IOFailure.
    """

    def __init__(self, config: Optional[ObjectFileSinkRuntimeConfig] = None):
        super().__init__(config or ObjectFileSinkRuntimeConfig())
        self._writer = ObjectStreamWriterStrategy()

    def _target_path(self, record: OutputRecord) -> Path:
        if not record.object_name:
            raise IOFailure(record.object_name, "target path must not be empty")
        return Path(record.object_name)

    def write(self, record: OutputRecord) -> Dict[str, Any]:
        target = self._target_path(record)
        self.log_debug(f"Writing {record!r} to {target}")
        self.pre_write(record)

        try:
            if self.config.create_parents:
                target.parent.mkdir(parents=True, exist_ok=True)
            audit = self._writer.write(record, target)
        except OSError as exc:
            self.log_debug(f"Object write to {target} failed: {type(exc).__name__}")
            raise IOFailure(str(target), exc.strerror or str(exc)) from exc
        except ValueError as exc:
            # open() rejects some paths (e.g. embedded NUL) with ValueError.
            self.log_debug(f"Object write to {target} failed: {type(exc).__name__}")
            raise IOFailure(str(target), str(exc)) from exc

        self.log_info(
            f"Wrote {audit['record_count']} {record.payload_type} value(s) "
            f"to {target} ({audit['bytes_written']} bytes)"
        )
        return self.post_write(audit)
