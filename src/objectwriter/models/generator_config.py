from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from objectwriter.codec.primitives import INT32_MAX, INT32_MIN


FailureScope = Literal["per_record", "shared"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class _RecordConfigBase(BaseModel):
    # Bare file name, written to the current working directory.
    object_name: str

    @field_validator("object_name")
    @classmethod
    def _validate_object_name(cls, value: str) -> str:
        if not value or value in {".", ".."}:
            raise ValueError("object_name must be a file name")
        if "\x00" in value:
            raise ValueError("object_name must not contain a NUL byte")
        if "/" in value or "\\" in value:
            raise ValueError("object_name must not contain a directory part")
        return value


class IntegersRecordConfig(_RecordConfigBase):
    payload_type: Literal["integers"] = "integers"
    values: List[int] = Field(min_length=1)

    @field_validator("values")
    @classmethod
    def _validate_int32(cls, values: List[int]) -> List[int]:
        for value in values:
            if not INT32_MIN <= value <= INT32_MAX:
                raise ValueError(f"{value} does not fit in a signed 32-bit integer")
        return values


class StringRecordConfig(_RecordConfigBase):
    payload_type: Literal["string"] = "string"
    value: str


class TimestampRecordConfig(_RecordConfigBase):
    """Timestamp record; ``value=None`` means the instant of the write."""

    payload_type: Literal["timestamp"] = "timestamp"
    value: Optional[datetime] = None


RecordConfig = Annotated[
    Union[IntegersRecordConfig, StringRecordConfig, TimestampRecordConfig],
    Field(discriminator="payload_type"),
]


def default_records() -> List[RecordConfig]:
    """The three records written by a default run."""
    return [
        IntegersRecordConfig(object_name="1-integers.obj", values=[32, 33, 34]),
        StringRecordConfig(object_name="2-string.obj", value="Today"),
        TimestampRecordConfig(object_name="3-date.obj"),
    ]


class GeneratorConfig(BaseModel):
    records: List[RecordConfig] = Field(default_factory=default_records)

    # per_record: every write gets its own failure scope.
    # shared: the first failure skips all remaining records.
    failure_scope: FailureScope = "per_record"

    log_level: LogLevel = "INFO"

    @model_validator(mode="after")
    def _validate_unique_names(self) -> "GeneratorConfig":
        seen = set()
        for record in self.records:
            if record.object_name in seen:
                raise ValueError(f"Duplicate object_name: {record.object_name}")
            seen.add(record.object_name)
        return self
