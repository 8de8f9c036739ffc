from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional, Union

from objectwriter.core.exceptions import ObjectWriterException
from objectwriter.core.logger import configure_root_logger, get_logger, push_run_id, reset_run_id
from objectwriter.models.generator_config import (
    GeneratorConfig,
    IntegersRecordConfig,
    RecordConfig,
    StringRecordConfig,
    TimestampRecordConfig,
)
from objectwriter.writer import ObjectWriter


class ObjectGenerator:
    """
    Runs a write plan: one object file per configured record, in order.

    Failures raised by the writer are never fatal. Their message is printed
    to stdout and the run carries on to a normal finish; with
    ``failure_scope="shared"`` the records after the first failure are
    skipped instead of attempted.

    Example:
        >>> report = ObjectGenerator().run()
        >>> report["status"]
        'success'
    """

    def __init__(self, run_id: Optional[str] = None, writer: Optional[ObjectWriter] = None):
        self.run_id = str(run_id) if run_id is not None else str(uuid.uuid4())
        self.writer = writer or ObjectWriter()

    def run(self, cfg: Union[Dict[str, Any], GeneratorConfig, None] = None) -> Dict[str, Any]:
        """
        Write every record of the plan.

        Args:
            cfg: A GeneratorConfig, a dict to validate into one, or None for
                 the default three-record plan.

        Returns:
            Report dict with run_id, status (success|partial|failed), the
            audits of written files, failed entries and skipped names.

        Raises:
            ValidationError: If a config dict is invalid.
        """
        if cfg is None:
            cfg = GeneratorConfig()
        elif isinstance(cfg, dict):
            cfg = GeneratorConfig.model_validate(cfg)

        configure_root_logger(cfg.log_level)
        log = get_logger(__name__)
        token = push_run_id(self.run_id)
        try:
            log.info(
                f"Starting object generation: {len(cfg.records)} record(s), "
                f"failure_scope={cfg.failure_scope}"
            )
            report = self._run_records(cfg, log)
            log.info(
                f"Object generation finished: status={report['status']}, "
                f"written={len(report['written'])}, failed={len(report['failed'])}, "
                f"skipped={len(report['skipped'])}"
            )
            return report
        finally:
            reset_run_id(token)

    def _run_records(self, cfg: GeneratorConfig, log) -> Dict[str, Any]:
        written: List[Dict[str, Any]] = []
        failed: List[Dict[str, str]] = []
        skipped: List[str] = []

        for record_cfg in cfg.records:
            if failed and cfg.failure_scope == "shared":
                skipped.append(record_cfg.object_name)
                continue
            try:
                written.append(self._write(record_cfg))
            except ObjectWriterException as exc:
                print(str(exc))
                log.debug(f"Write of {record_cfg.object_name} failed: {type(exc).__name__}")
                failed.append({"object_name": record_cfg.object_name, "error": str(exc)})

        if not failed:
            status = "success"
        elif written:
            status = "partial"
        else:
            status = "failed"

        return {
            "run_id": self.run_id,
            "status": status,
            "written": written,
            "failed": failed,
            "skipped": skipped,
        }

    def _write(self, record_cfg: RecordConfig) -> Dict[str, Any]:
        if isinstance(record_cfg, IntegersRecordConfig):
            return self.writer.write_integers(record_cfg.object_name, record_cfg.values)
        if isinstance(record_cfg, StringRecordConfig):
            return self.writer.write_string(record_cfg.object_name, record_cfg.value)
        if isinstance(record_cfg, TimestampRecordConfig):
            return self.writer.write_timestamp(record_cfg.object_name, record_cfg.value)
        raise TypeError(f"Unsupported record config: {type(record_cfg).__name__}")
