"""Tests for console, file and JSON appenders"""

import io
import json
import re
import tempfile
import threading
from pathlib import Path
from unittest.mock import Mock

import pytest

from fanout_logger import (
    Logger,
    LoggerConfig,
    Severity,
    InvalidArgumentError,
    ObjectDisposedError,
)
from fanout_logger.appenders import ConsoleAppender, FileAppender, JsonAppender
from fanout_logger.core.entry_factory import CorrelatedEntryFactory
from fanout_logger.core.log_entry import LogEntry, describe_error
from fanout_logger.core.severity import RESET_CODE


def raised(exc):
    """Return exc with a traceback attached."""
    try:
        raise exc
    except Exception as e:
        return e


class TestConsoleAppender:
    """Test console output."""

    def test_writes_severity_and_message(self):
        out, err = io.StringIO(), io.StringIO()
        appender = ConsoleAppender(colored=False, stream=out, error_stream=err)
        appender.log(LogEntry(severity=Severity.INFO, message="hello"))
        assert out.getvalue() == "[INFO] hello\n"
        assert err.getvalue() == ""

    def test_error_summary_goes_to_stderr(self):
        out, err = io.StringIO(), io.StringIO()
        appender = ConsoleAppender(colored=False, stream=out, error_stream=err)
        error = raised(RuntimeError("boom"))
        appender.log(LogEntry(severity=Severity.ERROR, message="failed", error=error))
        assert out.getvalue() == "[ERROR] failed\n"
        assert err.getvalue() == "RuntimeError: boom\n"

    def test_colored_output(self):
        out = io.StringIO()
        appender = ConsoleAppender(stream=out)
        appender.log(LogEntry(severity=Severity.WARNING, message="careful"))
        value = out.getvalue()
        assert value.startswith(Severity.WARNING.color_code)
        assert value.rstrip("\n").endswith(RESET_CODE)

    def test_unmapped_severity_falls_back(self):
        out = io.StringIO()
        appender = ConsoleAppender(stream=out)

        class Unmapped:
            severity = 99
            message = "odd"
            error = None

        appender.log(Unmapped())
        assert out.getvalue() == f"{RESET_CODE}[99] odd{RESET_CODE}\n"

    def test_defaults_to_sys_stdout(self, capsys):
        appender = ConsoleAppender(colored=False)
        appender.log(LogEntry(severity=Severity.DEBUG, message="to stdout"))
        assert capsys.readouterr().out == "[DEBUG] to stdout\n"

    def test_dispose_is_idempotent(self):
        appender = ConsoleAppender()
        appender.dispose()
        appender.dispose()
        assert appender.disposed
        assert appender.describe() == {
            "type": "ConsoleAppender",
            "name": "console",
            "colored": True,
        }


class TestFileAppender:
    """Test flat-file output."""

    def test_creates_parent_directories(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "a" / "b" / "app.log"
            appender = FileAppender(path)
            assert path.parent.is_dir()
            assert appender.path == path.resolve()
            assert appender.name == f"file:{path.resolve()}"
            appender.dispose()

    def test_appends_without_truncating(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "app.log"
            path.write_text("existing line\n", encoding="utf-8")
            with FileAppender(path) as appender:
                appender.log(LogEntry(severity=Severity.INFO, message="new line"))
            lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "existing line"
        assert lines[1].endswith("[INFO   ] new line")

    def test_each_write_is_flushed(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "app.log"
            appender = FileAppender(path)
            appender.log(LogEntry(severity=Severity.WARNING, message="durable"))
            # Read through a separate handle before dispose
            assert "durable" in path.read_text(encoding="utf-8")
            appender.dispose()

    def test_error_as_indented_lines(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "app.log"
            error = raised(ValueError("bad value"))
            with FileAppender(path) as appender:
                appender.log(LogEntry(severity=Severity.ERROR, message="failed", error=error))
            lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0].endswith("[ERROR  ] failed")
        assert len(lines) > 2
        assert all(line.startswith("    ") for line in lines[1:])
        assert lines[-1] == "    ValueError: bad value"

    def test_log_after_dispose_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            appender = FileAppender(Path(tmpdir) / "app.log")
            appender.dispose()
            appender.dispose()
            with pytest.raises(ObjectDisposedError):
                appender.log(LogEntry(severity=Severity.INFO, message="late"))

    def test_dispose_closes_handle_when_flush_fails(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            appender = FileAppender(Path(tmpdir) / "app.log")
            appender._file.close()
            handle = Mock()
            handle.flush.side_effect = OSError("No space left on device")
            appender._file = handle

            with pytest.raises(OSError):
                appender.dispose()

            handle.close.assert_called_once()
            assert appender.disposed
            appender.dispose()
            handle.close.assert_called_once()

    def test_empty_path_rejected(self):
        with pytest.raises(InvalidArgumentError):
            FileAppender("")

    def test_parent_is_a_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            blocker = Path(tmpdir) / "blocker"
            blocker.write_text("", encoding="utf-8")
            with pytest.raises(InvalidArgumentError):
                FileAppender(blocker / "app.log")

    def test_concurrent_writers_never_interleave(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "app.log"
            appender = FileAppender(path)
            entry_line = re.compile(r"^\[[\d\- :.]+\] \[INFO   \] worker-\d+ line-\d+$")

            def worker(n):
                for i in range(200):
                    appender.log(LogEntry(severity=Severity.INFO, message=f"worker-{n} line-{i}"))

            threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()
            appender.dispose()

            lines = path.read_text(encoding="utf-8").splitlines()

        assert len(lines) == 1600
        assert all(entry_line.match(line) for line in lines)

    def test_dispose_racing_writes(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            errors = []
            logger = Logger(
                LoggerConfig(min_severity=Severity.DEBUG, default_console=False),
                on_error=lambda a, e: errors.append(e),
            )
            logger.add_appender(FileAppender(Path(tmpdir) / "race.log"))
            started = threading.Barrier(5)

            def worker():
                started.wait()
                for i in range(500):
                    try:
                        logger.info(f"line {i}")
                    except ObjectDisposedError:
                        return

            threads = [threading.Thread(target=worker) for _ in range(4)]
            for t in threads:
                t.start()
            started.wait()
            logger.dispose()
            for t in threads:
                t.join()

        assert all(isinstance(e, ObjectDisposedError) for e in errors)


class TestJsonAppender:
    """Test JSON-lines output."""

    def test_round_trip(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "app.jsonl"
            error = raised(KeyError("user_id"))
            entry = LogEntry(severity=Severity.FATAL, message="lookup failed", error=error)
            with JsonAppender(path) as appender:
                appender.log(entry)
            lines = path.read_text(encoding="utf-8").splitlines()

        assert len(lines) == 1
        data = json.loads(lines[0])
        assert Severity.from_string(data["severity"]) == entry.severity
        assert data["message"] == entry.message
        assert data["error"] == describe_error(error)
        assert "KeyError: 'user_id'" in data["error"]

    def test_null_error_and_utc_timestamp(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "app.jsonl"
            with JsonAppender(path) as appender:
                appender.log(LogEntry(severity=Severity.INFO, message="plain"))
                appender.log(LogEntry(severity=Severity.DEBUG, message="second"))
            records = [json.loads(l) for l in path.read_text(encoding="utf-8").splitlines()]

        assert [r["message"] for r in records] == ["plain", "second"]
        assert records[0]["error"] is None
        assert records[0]["timestamp"].endswith("+00:00")
        assert set(records[0]) == {"timestamp", "severity", "message", "error"}

    def test_correlated_entries(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "app.jsonl"
            factory = CorrelatedEntryFactory("req-7")
            with JsonAppender(path) as appender:
                appender.log(factory.create(Severity.INFO, "tagged"))
            record = json.loads(path.read_text(encoding="utf-8"))
        assert record["correlation_id"] == "req-7"

    def test_identity_and_descriptor(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "app.jsonl"
            appender = JsonAppender(path)
            text = FileAppender(path)
            assert appender.name == f"json:{path.resolve()}"
            assert appender.name != text.name
            assert appender.describe()["type"] == "JsonAppender"
            appender.dispose()
            text.dispose()
