import io

import pytest

from vbbs import log
from vbbs.log import Logger, LogLevel


@pytest.fixture
def shared_logger_reset():
    yield
    log.close_log()
    log._default.level = LogLevel.DEBUG


def test_message_format_with_arguments():
    out = io.StringIO()
    logger = Logger(out)
    logger.info("hello %s %d", "world", 5)
    assert out.getvalue() == "[INFO] hello world 5\n"


def test_message_without_arguments_keeps_percent():
    out = io.StringIO()
    Logger(out).debug("100% done")
    assert out.getvalue() == "[DEBUG] 100% done\n"


@pytest.mark.parametrize(
    "method, label",
    [("debug", "DEBUG"), ("info", "INFO"), ("warn", "WARNING"), ("error", "ERROR")],
)
def test_level_labels(method, label):
    out = io.StringIO()
    getattr(Logger(out), method)("msg")
    assert out.getvalue() == f"[{label}] msg\n"


def test_messages_below_level_are_dropped():
    out = io.StringIO()
    logger = Logger(out, LogLevel.WARN)
    logger.debug("a")
    logger.info("b")
    logger.warn("c")
    logger.error("d")
    assert out.getvalue().splitlines() == ["[WARNING] c", "[ERROR] d"]


def test_set_level_announces_itself_when_allowed():
    out = io.StringIO()
    logger = Logger(out)
    logger.set_level(LogLevel.INFO)
    assert logger.level is LogLevel.INFO
    assert out.getvalue() == "[INFO] Log level set to: INFO\n"


def test_set_level_announcement_suppressed_above_info():
    out = io.StringIO()
    logger = Logger(out)
    logger.set_level(LogLevel.ERROR)
    assert out.getvalue() == ""
    logger.info("hidden")
    assert out.getvalue() == ""


def test_log_with_explicit_level():
    out = io.StringIO()
    Logger(out).log(LogLevel.ERROR, "code %d", 7)
    assert out.getvalue() == "[ERROR] code 7\n"


def test_file_receives_messages(tmp_path):
    path = tmp_path / "test.log"
    out = io.StringIO()
    with Logger(out) as logger:
        logger.open(str(path))
        assert logger.is_file_open
        logger.warn("to file")
    assert not logger.is_file_open
    assert path.read_text(encoding="utf-8") == "[WARNING] to file\n"
    assert out.getvalue().endswith("[WARNING] to file\n")


def test_file_is_appended(tmp_path):
    path = tmp_path / "append.log"
    path.write_text("old\n", encoding="utf-8")
    logger = Logger(io.StringIO())
    logger.open(str(path))
    logger.info("new")
    logger.close()
    assert path.read_text(encoding="utf-8") == "old\n[INFO] new\n"


def test_reopening_closes_previous_file(tmp_path):
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"
    out = io.StringIO()
    logger = Logger(out)
    logger.open(str(first))
    logger.open(str(second))
    logger.info("x")
    logger.close()
    assert "[INFO] Closing existing log file.\n" in first.read_text(encoding="utf-8")
    assert second.read_text(encoding="utf-8") == "[INFO] x\n"


def test_open_failure_is_reported(tmp_path):
    path = tmp_path / "missing" / "x.log"
    out = io.StringIO()
    logger = Logger(out)
    logger.open(str(path))
    assert not logger.is_file_open
    assert f"[ERROR] Error opening log file: {path}\n" in out.getvalue()


def test_shared_logger_writes_to_stderr(capsys, shared_logger_reset):
    log.info("value %d", 3)
    log.warn("careful")
    assert capsys.readouterr().err == "[INFO] value 3\n[WARNING] careful\n"


def test_shared_logger_level_and_file(tmp_path, capsys, shared_logger_reset):
    path = tmp_path / "shared.log"
    log.set_log_level(LogLevel.WARN)
    log.init_log(str(path))
    log.debug("no")
    log.log_message(LogLevel.ERROR, "yes")
    log.close_log()
    assert path.read_text(encoding="utf-8") == "[ERROR] yes\n"
    assert capsys.readouterr().err == "[ERROR] yes\n"