import logging
from logging.handlers import TimedRotatingFileHandler
import os
import sys
from datetime import datetime


class MicrosecondFormatter(logging.Formatter):

    def formatTime(self, record, datefmt=None):
        ct = datetime.fromtimestamp(record.created)
        if datefmt:
            return ct.strftime(datefmt)
        return super().formatTime(record, datefmt)


def init_logger(
    name: str = "trapprofile",
    log_file: str | None = "logs/profile.log",
    level: int = logging.INFO,
    console: bool = True
) -> logging.Logger:
    """
    Initialize a logger that logs to a file, the console, or both.

    Parameters
    ----------
    name : str
        Name of the logger. The default is the package logger, so that the
        generator and telemetry loggers propagate to it.
    log_file : str | None
        Path to the log file. Parent directories will be created if needed.
        If None, no file handler is added.
    level : int
        Logging level (e.g., logging.INFO or logging.DEBUG).
    console : bool
        If True, log to sys.stdout.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    if not logger.handlers:
        formatter = MicrosecondFormatter(
            fmt="%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S.%f"
        )

        if log_file is not None:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = TimedRotatingFileHandler(
                log_file, when="midnight", backupCount=7, encoding="utf-8"
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        if console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

    return logger
