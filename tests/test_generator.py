"""End-to-end tests for the object generation run."""

from datetime import datetime, timedelta, timezone

import pytest

from objectwriter.generator import ObjectGenerator
from objectwriter.models.generator_config import GeneratorConfig, StringRecordConfig
from objectwriter.reader import read_integers, read_string, read_timestamp

DEFAULT_FILES = ["1-integers.obj", "2-string.obj", "3-date.obj"]


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_default_run_writes_three_files(workdir):
    started = datetime.now(timezone.utc)

    report = ObjectGenerator(run_id="run-1").run()

    assert sorted(p.name for p in workdir.iterdir()) == DEFAULT_FILES
    assert read_integers("1-integers.obj") == [32, 33, 34]
    assert read_string("2-string.obj") == "Today"
    stamp = read_timestamp("3-date.obj")
    assert started - timedelta(milliseconds=1) <= stamp <= datetime.now(timezone.utc)
    assert abs(stamp - started) < timedelta(seconds=5)

    assert report["run_id"] == "run-1"
    assert report["status"] == "success"
    assert [a["target_location"] for a in report["written"]] == DEFAULT_FILES
    assert report["failed"] == []
    assert report["skipped"] == []


def test_second_run_overwrites_deterministic_files(workdir):
    ObjectGenerator().run()
    first_ints = (workdir / "1-integers.obj").read_bytes()
    first_string = (workdir / "2-string.obj").read_bytes()

    ObjectGenerator().run()

    assert (workdir / "1-integers.obj").read_bytes() == first_ints
    assert (workdir / "2-string.obj").read_bytes() == first_string
    assert len((workdir / "3-date.obj").read_bytes()) == 11


def test_run_id_is_generated_when_missing():
    assert ObjectGenerator().run_id != ObjectGenerator().run_id


def test_per_record_scope_continues_after_failure(workdir, capsys):
    (workdir / "2-string.obj").mkdir()

    report = ObjectGenerator().run()

    out = capsys.readouterr().out
    assert "2-string.obj" in out
    assert report["status"] == "partial"
    assert [f["object_name"] for f in report["failed"]] == ["2-string.obj"]
    assert report["skipped"] == []
    assert read_integers("1-integers.obj") == [32, 33, 34]
    assert isinstance(read_timestamp("3-date.obj"), datetime)


def test_shared_scope_skips_remaining_records(workdir, capsys):
    (workdir / "1-integers.obj").mkdir()

    report = ObjectGenerator().run({"failure_scope": "shared"})

    assert report["status"] == "failed"
    assert report["written"] == []
    assert report["skipped"] == ["2-string.obj", "3-date.obj"]
    assert not (workdir / "2-string.obj").exists()
    assert not (workdir / "3-date.obj").exists()
    assert report["failed"][0]["error"] in capsys.readouterr().out


def test_every_write_failing_reports_each_message(workdir, capsys):
    for name in DEFAULT_FILES:
        (workdir / name).mkdir()

    report = ObjectGenerator().run()

    out = capsys.readouterr().out
    assert report["status"] == "failed"
    assert len(report["failed"]) == 3
    for failure in report["failed"]:
        assert failure["error"] in out


def test_custom_records(workdir):
    cfg = GeneratorConfig.model_validate(
        {
            "records": [
                {"payload_type": "string", "object_name": "greeting.obj", "value": "Hello"},
                {
                    "payload_type": "timestamp",
                    "object_name": "fixed.obj",
                    "value": "2024-01-15T09:30:00Z",
                },
            ]
        }
    )

    report = ObjectGenerator().run(cfg)

    assert report["status"] == "success"
    assert read_string("greeting.obj") == "Hello"
    assert read_timestamp("fixed.obj") == datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)
    assert not (workdir / "1-integers.obj").exists()


def test_unusable_path_does_not_stop_the_run(workdir, capsys):
    cfg = GeneratorConfig.model_construct(
        records=[
            StringRecordConfig.model_construct(
                payload_type="string", object_name="bad\x00name.obj", value="Today"
            ),
            StringRecordConfig(object_name="ok.obj", value="Today"),
        ],
        failure_scope="per_record",
        log_level="INFO",
    )

    report = ObjectGenerator().run(cfg)

    assert report["status"] == "partial"
    assert report["failed"][0]["object_name"] == "bad\x00name.obj"
    assert "embedded null byte" in report["failed"][0]["error"]
    assert read_string("ok.obj") == "Today"
    assert "embedded null byte" in capsys.readouterr().out


def test_unencodable_timestamp_does_not_stop_the_run(workdir, capsys):
    report = ObjectGenerator().run(
        {
            "records": [
                {"payload_type": "timestamp", "object_name": "t.obj", "value": "0001-01-01T00:00:00"},
                {"payload_type": "string", "object_name": "ok.obj", "value": "Today"},
            ]
        }
    )

    assert report["status"] == "partial"
    assert [f["object_name"] for f in report["failed"]] == ["t.obj"]
    assert "cannot be encoded" in capsys.readouterr().out
    assert not (workdir / "t.obj").exists()
    assert read_string("ok.obj") == "Today"


def test_failed_write_is_reported_once_on_stdout(workdir, capsys):
    (workdir / "2-string.obj").mkdir()

    report = ObjectGenerator().run()

    out = capsys.readouterr().out
    assert out.count(report["failed"][0]["error"]) == 1
