import logging
import sys
from typing import ClassVar

from config.settings import settings

SUCCESS_LEVEL_NUM = 25  # Between INFO (20) and WARNING (30)
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")


def success(self, message: str, *args, **kws) -> None:
    """Log a completed clip run or command at the SUCCESS level."""
    if self.isEnabledFor(SUCCESS_LEVEL_NUM):
        self._log(SUCCESS_LEVEL_NUM, message, args, **kws)


logging.Logger.success = success


class Colors:
    """ANSI color codes for terminal output."""

    DEBUG = "\033[0;36m"  # Cyan
    INFO = "\033[0;34m"  # Blue
    SUCCESS = "\033[0;32m"  # Green
    WARNING = "\033[0;33m"  # Yellow
    ERROR = "\033[0;31m"  # Red
    RESET = "\033[0m"


class CategoryFormatter(logging.Formatter):
    """Color-coded `[CATEGORY] | message` formatting.

    Multi-line messages get the category prefix on every line so clipped
    coordinate dumps stay readable.
    """

    LEVEL_COLORS: ClassVar[dict[int, str]] = {
        logging.DEBUG: Colors.DEBUG,
        logging.INFO: Colors.INFO,
        SUCCESS_LEVEL_NUM: Colors.SUCCESS,
        logging.WARNING: Colors.WARNING,
        logging.ERROR: Colors.ERROR,
        logging.CRITICAL: Colors.ERROR,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Prefix each line of the rendered message with its colored category."""
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            prefix = f"[{record.levelname}]"
        else:
            prefix = f"{color}[{record.levelname}]{Colors.RESET}"

        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return "\n".join(f"{prefix} | {line}" for line in message.split("\n"))


def get_logger(name: str = "PlotClip") -> logging.Logger:
    """Returns a modular logger instance."""
    logger = logging.getLogger(name)

    # Only add handlers if they haven't been added already
    if not logger.handlers:
        logger.setLevel(settings.LOG_LEVEL.upper())

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(CategoryFormatter())
        logger.addHandler(handler)

    return logger
