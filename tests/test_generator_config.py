import pytest
from pydantic import ValidationError

from objectwriter.models.generator_config import (
    GeneratorConfig,
    IntegersRecordConfig,
    StringRecordConfig,
    TimestampRecordConfig,
)


def test_defaults_describe_the_three_records():
    cfg = GeneratorConfig()

    assert cfg.failure_scope == "per_record"
    assert cfg.log_level == "INFO"
    ints, string, stamp = cfg.records
    assert isinstance(ints, IntegersRecordConfig)
    assert (ints.object_name, ints.values) == ("1-integers.obj", [32, 33, 34])
    assert isinstance(string, StringRecordConfig)
    assert (string.object_name, string.value) == ("2-string.obj", "Today")
    assert isinstance(stamp, TimestampRecordConfig)
    assert (stamp.object_name, stamp.value) == ("3-date.obj", None)


def test_records_are_discriminated_by_payload_type():
    cfg = GeneratorConfig.model_validate(
        {"records": [{"payload_type": "integers", "object_name": "a.obj", "values": [1]}]}
    )
    assert isinstance(cfg.records[0], IntegersRecordConfig)


def test_unknown_payload_type_is_rejected():
    with pytest.raises(ValidationError):
        GeneratorConfig.model_validate(
            {"records": [{"payload_type": "dataframe", "object_name": "a.obj"}]}
        )


@pytest.mark.parametrize("name", ["", ".", "..", "out/a.obj", "..\\a.obj", "/tmp/a.obj"])
def test_object_name_must_be_a_bare_file_name(name):
    with pytest.raises(ValidationError, match="object_name"):
        StringRecordConfig(object_name=name, value="x")


def test_integers_must_fit_int32():
    with pytest.raises(ValidationError, match="signed 32-bit"):
        IntegersRecordConfig(object_name="a.obj", values=[2**31])


def test_integers_need_at_least_one_value():
    with pytest.raises(ValidationError):
        IntegersRecordConfig(object_name="a.obj", values=[])


def test_duplicate_object_names_are_rejected():
    with pytest.raises(ValidationError, match="Duplicate object_name"):
        GeneratorConfig.model_validate(
            {
                "records": [
                    {"payload_type": "string", "object_name": "a.obj", "value": "x"},
                    {"payload_type": "string", "object_name": "a.obj", "value": "y"},
                ]
            }
        )


def test_invalid_failure_scope():
    with pytest.raises(ValidationError):
        GeneratorConfig(failure_scope="abort")


def test_object_name_rejects_nul_byte():
    with pytest.raises(ValidationError, match="NUL byte"):
        StringRecordConfig(object_name="bad\x00name.obj", value="x")
