import logging

from trapprofile.utils import init_logger


def test_init_logger_file_and_console(tmp_path):
    log_file = tmp_path / "logs" / "profile.log"
    logger = init_logger("test.log_utils.file", log_file=str(log_file), level=logging.DEBUG)

    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert len(logger.handlers) == 2

    logger.info("profile ready")
    for handler in logger.handlers:
        handler.flush()
    assert "profile ready" in log_file.read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_init_logger_is_idempotent():
    first = init_logger("test.log_utils.console", log_file=None)
    second = init_logger("test.log_utils.console", log_file=None)

    assert first is second
    assert len(second.handlers) == 1
