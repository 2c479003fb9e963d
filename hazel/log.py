"""Engine and client loggers."""

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

CORE_LOGGER_NAME = "HAZEL"
CLIENT_LOGGER_NAME = "APP"

_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"
_RESET = "\033[m"
_COLORS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m\033[1m",
    logging.ERROR: "\033[31m\033[1m",
    logging.CRITICAL: "\033[1m\033[41m",
}


class _ColorStdoutHandler(logging.Handler):
    """Writes records to the current standard output, coloured on a terminal."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = sys.stdout
            message = self.format(record)
            isatty = getattr(stream, "isatty", None)
            if isatty is not None and isatty():
                color = _COLORS.get(record.levelno, "")
                message = f"{color}{message}{_RESET}"
            stream.write(message + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)


def _configure(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    for handler in [h for h in logger.handlers if isinstance(h, _ColorStdoutHandler)]:
        logger.removeHandler(handler)
    handler = _ColorStdoutHandler()
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(TRACE)
    logger.propagate = False
    return logger


def init() -> None:
    """Set up the core and client loggers to write every level to stdout."""
    _configure(CORE_LOGGER_NAME)
    _configure(CLIENT_LOGGER_NAME)


def core_logger() -> logging.Logger:
    """The logger used by the engine itself."""
    return logging.getLogger(CORE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    """The logger used by applications."""
    return logging.getLogger(CLIENT_LOGGER_NAME)