from dataclasses import dataclass, field
from typing import Any, List, Literal

PayloadType = Literal["integers", "string", "timestamp", "objects"]


@dataclass
class OutputRecord:
    """An ordered sequence of values to be persisted to one named file."""

    object_name: str                    # Target file path
    payload_type: PayloadType
    values: List[Any] = field(default_factory=list)

    def __repr__(self) -> str:
        """Custom repr that truncates long value lists."""
        count = len(self.values)
        if count <= 3:
            values_preview = repr(self.values)
        else:
            values_preview = f"[{self.values[0]!r}, {self.values[1]!r}, ... +{count - 2} more]"
        return (
            f"OutputRecord(object_name='{self.object_name}'"
            f", payload_type='{self.payload_type}'"
            f", values={values_preview})"
        )
