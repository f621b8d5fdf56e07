import logging

import colorlog
import pytest

from rangesum.setup_logging import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_only():
    setup_logging(console_level=logging.WARNING)
    root = logging.getLogger()

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert root.handlers[0].level == logging.WARNING
    assert isinstance(root.handlers[0].formatter, colorlog.ColoredFormatter)


def test_console_and_file(tmp_path):
    log_file = tmp_path / "out.log"
    setup_logging(log_file_path=str(log_file), file_level=logging.INFO)
    setup_logging(log_file_path=str(log_file), file_level=logging.INFO)

    # Calling it twice does not duplicate handlers
    root = logging.getLogger()
    assert len(root.handlers) == 2

    logging.getLogger("rangesum.test").info("hello from the test")
    logging.getLogger("rangesum.test").debug("filtered out")
    text = log_file.read_text()
    assert "hello from the test" in text
    assert "filtered out" not in text
