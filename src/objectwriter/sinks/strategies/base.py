from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict

from objectwriter.core.contracts import OutputRecord


class WriterStrategy(ABC):
    @abstractmethod
    def supports_payload_type(self, payload_type: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def write(self, record: OutputRecord, target: Path) -> Dict[str, Any]:
        raise NotImplementedError
