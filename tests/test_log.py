import re
import time

import pytest

from cowdia.exceptions import EngineRuntimeError
from cowdia.log import (
    Log,
    LogHandler,
    LogLevel,
    LogManager,
    log,
    log_exception,
)


class Collector(LogHandler):
    def __init__(self):
        self.records = []

    def handle(self, log):
        self.records.append(log)


@pytest.fixture
def manager():
    mgr = LogManager()
    try:
        yield mgr
    finally:
        mgr.release()


@pytest.mark.parametrize(
    ("level", "label"),
    [
        (LogLevel.DEBUG, "DEBUG"),
        (LogLevel.INFO, "INFO"),
        (LogLevel.WARNING, "WARNING"),
        (LogLevel.ERROR, "ERROR"),
    ],
)
def test_level_labels(level, label):
    text = Log(level, "msg", 1_600_000_000.0).to_string()
    assert text.endswith(f"({label}) msg")


def test_log_to_string_format():
    stamp = 1_600_000_000.0
    record = Log(LogLevel.WARNING, "careful", stamp)
    text = record.to_string()
    assert re.fullmatch(
        r"\[\d{4}-\d{1,2}-\d{1,2} \d{1,2}:\d{1,2}:\d{1,2}\] \(WARNING\) careful", text
    )
    assert text.startswith(f"[{time.localtime(stamp).tm_year}-")


def test_log_keeps_level_and_message():
    record = Log(LogLevel.DEBUG, "details")
    assert record.level is LogLevel.DEBUG
    assert record.message == "details"


def test_handlers_receive_records(manager):
    collector = manager.add_handler(Collector())
    manager.log(LogLevel.INFO, "one")
    manager.log(LogLevel.ERROR, "two")
    assert [(r.level, r.message) for r in collector.records] == [
        (LogLevel.INFO, "one"),
        (LogLevel.ERROR, "two"),
    ]


def test_standard_output(manager, capsys):
    manager.add_standard_output()
    manager.log(LogLevel.INFO, "hello")
    captured = capsys.readouterr()
    assert captured.out.endswith("(INFO) hello\n")
    assert captured.err == ""


def test_standard_error(manager, capsys):
    manager.add_standard_error()
    manager.log(LogLevel.WARNING, "watch out")
    captured = capsys.readouterr()
    assert captured.err.endswith("(WARNING) watch out\n")
    assert captured.out == ""


def test_file_output_appends(tmp_path):
    path = tmp_path / "engine.log"
    path.write_text("existing\n", encoding="utf-8")
    mgr = LogManager()
    try:
        mgr.add_file_output(path)
        mgr.log(LogLevel.INFO, "to file")
    finally:
        mgr.release()
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "existing"
    assert lines[1].endswith("(INFO) to file")
    assert len(lines) == 2


def test_log_exception_uses_what(manager):
    collector = manager.add_handler(Collector())
    error = EngineRuntimeError("boom", "engine.cc", 4)
    manager.log_exception(error)
    assert collector.records[0].level is LogLevel.ERROR
    assert collector.records[0].message == error.what()


def test_module_functions_route_to_manager(manager):
    collector = manager.add_handler(Collector())
    log(LogLevel.INFO, "routed")
    log_exception(EngineRuntimeError("bad"))
    assert [r.message for r in collector.records] == ["routed", "[RuntimeException] bad"]


def test_module_log_without_manager_is_dropped():
    mgr = LogManager()
    collector = mgr.add_handler(Collector())
    mgr.release()
    log(LogLevel.INFO, "nobody listens")
    assert collector.records == []


def test_handler_is_abstract():
    with pytest.raises(TypeError):
        LogHandler()