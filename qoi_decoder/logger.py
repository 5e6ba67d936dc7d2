import sys
import logging

LOGGER_NAME = "qoi_decoder"

LEVEL_COLORS = {
    logging.DEBUG: "\033[90m",    # Grey
    logging.INFO: "\033[94m",     # Blue
    logging.WARNING: "\033[93m",  # Yellow
    logging.ERROR: "\033[91m",    # Red
}
RESET = "\033[0m"

CONSOLE_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


class LevelColorFormatter(logging.Formatter):
    """Colors the level name only, and only when the output is a terminal."""

    def __init__(self, fmt: str, datefmt: str = None, use_color: bool = True):
        super().__init__(fmt, datefmt)
        self.use_color = use_color

    def formatMessage(self, record) -> str:
        if not self.use_color:
            return super().formatMessage(record)
        color = LEVEL_COLORS.get(record.levelno, "\033[95m")
        plain = record.levelname
        record.levelname = f"{color}{plain}{RESET}"
        try:
            return super().formatMessage(record)
        finally:
            record.levelname = plain


def setup_logger(
        level=logging.INFO,
        log_file: str = None,
        stream=None,
) -> logging.Logger:
    """Send the decoder's log records to ``stream`` (stdout by default).

    ``level`` may be a number or a level name such as ``"debug"``. Calling
    this again replaces the handlers installed by the previous call.
    """
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream = stream or sys.stdout
    console = logging.StreamHandler(stream)
    use_color = hasattr(stream, "isatty") and stream.isatty()
    console.setFormatter(LevelColorFormatter(CONSOLE_FORMAT, "%H:%M:%S", use_color))
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, "%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    return logger
