import logging
import sys

LOGGER_NAME = "github_diff_parser"
HANDLER_NAME = "github_diff_parser.stderr"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Calling it again replaces the handler installed by the previous call.
    Propagation is turned off so records are not emitted twice when the
    caller also configures the root logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
