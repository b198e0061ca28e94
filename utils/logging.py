import atexit
import json
import logging
import logging.handlers
import os
import queue
from pathlib import Path

DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_queue_listener: logging.handlers.QueueListener | None = None
_atexit_registered = False


class CustomJsonFormatter(logging.Formatter):
    def __init__(self, datefmt: str | None = None) -> None:
        super().__init__(datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        record_dict = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "module": record.name,
            "funcName": record.funcName,
            "lineno": record.lineno,
            "message": record.getMessage(),
        }

        if hasattr(record, "config_path"):
            record_dict["config_path"] = record.config_path  # type: ignore[attr-defined]
        if record.exc_info:
            record_dict["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(record_dict, ensure_ascii=False)


def resolve_log_level(level_name: str | None = None) -> int:
    """
    Turn a level name into a logging level.

    Falls back to LOG_LEVEL from the environment, then DEFAULT_LOG_LEVEL.
    Unknown names resolve to DEFAULT_LOG_LEVEL.
    """
    name = (level_name or os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if name not in VALID_LOG_LEVELS:
        logging.getLogger(__name__).warning(
            "Invalid logging level '%s'. Defaulting to '%s'.", name, DEFAULT_LOG_LEVEL
        )
        name = DEFAULT_LOG_LEVEL
    return getattr(logging, name)


def setup_logging(level_name: str | None = None, log_file: str | None = None) -> None:
    """
    Setup structured logging with JSON formatting and queue-based handling.

    Args:
        level_name: Logging level name; defaults to LOG_LEVEL env or WARNING.
        log_file: Optional path of a daily-rotated log file. Console only when None.
    """
    log_level = resolve_log_level(level_name)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    # Stop any existing listener before creating a new one (e.g., during tests)
    global _queue_listener
    if _queue_listener:
        _queue_listener.stop()
        _queue_listener = None

    if log_file is not None:
        logs_dir = Path(log_file).parent
        if not logs_dir.exists():
            logs_dir.mkdir(parents=True)

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(maxsize=1000)
    queue_listener = _build_queue_listener(log_queue, log_level, log_file)

    queue_handler = logging.handlers.QueueHandler(log_queue)
    queue_handler.setLevel(log_level)
    root_logger.addHandler(queue_handler)

    queue_listener.start()
    _queue_listener = queue_listener

    _register_logging_shutdown()


def _build_queue_listener(
    log_queue: queue.Queue, log_level: int, log_file: str | None
) -> logging.handlers.QueueListener:
    """
    Creates a QueueListener that will dispatch logs from the queue
    to the console handler and, when requested, a file handler.
    """
    formatter = CustomJsonFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    if log_file is not None:
        file_handler = logging.handlers.TimedRotatingFileHandler(
            filename=log_file,
            when="midnight",
            interval=1,
            backupCount=30,
            utc=True,
            encoding="utf-8",
        )
        file_handler.suffix = "%Y-%m-%d"
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    return logging.handlers.QueueListener(
        log_queue,
        *handlers,
        respect_handler_level=True,
    )


def shutdown_logging() -> None:
    """Stop the queue listener, flushing pending records."""
    global _queue_listener
    if _queue_listener:
        _queue_listener.stop()
        _queue_listener = None


def _register_logging_shutdown() -> None:
    """Ensure the queue listener is stopped during interpreter shutdown."""

    global _atexit_registered

    if _atexit_registered:
        return

    atexit.register(shutdown_logging)
    _atexit_registered = True


def get_logger(name: str) -> logging.Logger:
    """
    Convenience method for retrieving a logger
    """
    return logging.getLogger(name)
