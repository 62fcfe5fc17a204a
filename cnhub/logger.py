import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FILE = "cnhub.jsonl"


class JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    # LogRecord attributes that are not user-supplied extras
    _skip_keys = {
        "name", "msg", "args", "levelname", "levelno",
        "pathname", "filename", "module", "exc_info",
        "exc_text", "stack_info", "lineno", "funcName",
        "created", "msecs", "relativeCreated", "thread",
        "threadName", "processName", "process", "asctime",
        "message", "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in self._skip_keys:
                log_record[key] = value

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record, ensure_ascii=False, default=str)


class BasicLogger:
    """
    Named logger with a stderr console handler and, when asked, a JSON-lines
    file under `log_dir`.

    Each kind of handler is attached at most once per logger name; a later
    call with log_to_file=True still adds the file handler.
    """

    def __init__(
        self,
        name: str,
        level: int = logging.INFO,
        log_to_file: bool = False,
        log_dir: str = "logs",
    ):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        handlers = self.logger.handlers
        has_file = any(isinstance(h, RotatingFileHandler) for h in handlers)
        has_console = any(
            isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
            for h in handlers
        )

        # stdout is reserved for command output
        if not has_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(
                logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            )
            self.logger.addHandler(console_handler)

        if log_to_file and not has_file:
            Path(log_dir).mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                Path(log_dir) / LOG_FILE,
                maxBytes=1_000_000,
                backupCount=3,
                encoding="utf-8",
            )
            file_handler.setFormatter(JsonFormatter())
            self.logger.addHandler(file_handler)

    def get_logger(self) -> logging.Logger:
        return self.logger
