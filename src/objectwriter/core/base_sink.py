from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict

from objectwriter.core.contracts import OutputRecord
from objectwriter.core.logger import get_logger


class BaseSink(ABC):
    def __init__(self, config: Any):
        self.config = config
        self.log = get_logger(f"objectwriter.sinks.{self.__class__.__name__}")

    # --- Required method ---
    @abstractmethod
    def write(self, record: OutputRecord) -> Dict[str, Any]:
        raise NotImplementedError

    # --- Optional lifecycle hooks ---
    def pre_write(self, record: OutputRecord) -> None:
        pass

    def post_write(self, output: Dict[str, Any]) -> Dict[str, Any]:
        """Hook after writing a record (e.g. audit enrichment)."""
        return output

    # --- Logging helpers ---
    def log_info(self, msg: str):
        self.log.info(msg)

    def log_debug(self, msg: str):
        self.log.debug(msg)
