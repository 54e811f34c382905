import logging

import pytest

import logging_helper
from logging_helper import configure_logging, log_status


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "logs" / "run.log"
    root = logging.getLogger()
    previous_level = root.level
    yield path
    handler = logging_helper._file_handlers.pop(path.resolve(), None)
    if handler is not None:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(previous_level)


def test_configure_logging_writes_plain_text_log(log_file):
    configure_logging("INFO", log_file)
    logging.getLogger("bookstore.test").info("hello execution log")

    assert log_file.exists()
    assert "hello execution log" in log_file.read_text(encoding="utf-8")


def test_configure_logging_is_idempotent_per_file(log_file):
    configure_logging("INFO", log_file)
    configure_logging("DEBUG", log_file)

    handlers = [h for h in logging.getLogger().handlers if getattr(h, "baseFilename", None) == str(log_file.resolve())]
    assert len(handlers) == 1
    assert handlers[0].level == logging.DEBUG


def test_unknown_level_falls_back_to_info(log_file):
    assert configure_logging("chatty", log_file) == logging.INFO


@pytest.mark.parametrize(
    "status, level, color",
    [
        ("error", logging.ERROR, logging_helper.RED),
        ("WARNING", logging.WARNING, logging_helper.YELLOW),
        ("good", logging.INFO, logging_helper.GREEN),
        ("other", logging.INFO, logging_helper.WHITE),
    ],
)
def test_log_status_colours_and_levels(caplog, status, level, color):
    caplog.set_level(logging.INFO)
    log_status(status, "Test PASSED: ", "test_x")

    record = caplog.records[-1]
    assert record.levelno == level
    assert record.getMessage() == f"{color}Test PASSED: test_x{logging_helper.RESET}"


def test_log_file_has_no_colour_codes(log_file):
    configure_logging("INFO", log_file)
    log_status("error", "<<< Test FAILED: ", "test_x")

    text = log_file.read_text(encoding="utf-8")
    assert "<<< Test FAILED: test_x" in text
    assert "\033[" not in text
