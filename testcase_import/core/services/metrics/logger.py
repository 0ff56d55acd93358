"""
Structured logging for import events.

Provides JSON-formatted logs with timestamps and structured fields.
"""
import json
import logging
import sys
from datetime import datetime
from typing import Any, List, Optional, Union


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter."""

    EXCLUDED_ATTRS = {
        'name', 'msg', 'args', 'levelname', 'levelno',
        'pathname', 'filename', 'module', 'exc_info',
        'exc_text', 'stack_info', 'lineno', 'funcName',
        'created', 'msecs', 'relativeCreated', 'thread',
        'threadName', 'processName', 'process', 'message',
        'asctime', 'taskName'
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON formatted string
        """
        log_data = {
            "timestamp": datetime.now().isoformat(),
            "level": record.levelname,
            "event": record.getMessage(),
            "logger": record.name,
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields
        for key, value in record.__dict__.items():
            if key not in self.EXCLUDED_ATTRS:
                # Handle non-serializable objects
                try:
                    json.dumps(value)
                    log_data[key] = value
                except (TypeError, ValueError):
                    log_data[key] = str(value)

        return json.dumps(log_data)


class StructuredLogger:
    """Structured logger wrapper with convenience methods."""

    def __init__(
        self,
        name: str = "testcase_import.pipeline",
        level: Union[int, str] = logging.INFO,
        enable_console: bool = True,
        enable_file: bool = False,
        log_file: Optional[str] = None
    ):
        """Initialize structured logger.

        Args:
            name: Logger name
            level: Logging level (number or name such as "INFO")
            enable_console: Output to console
            enable_file: Output to file
            log_file: Path to log file
        """
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                level = logging.INFO

        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        self._logger.handlers = []  # Clear existing handlers

        formatter = StructuredFormatter()

        if enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self._logger.addHandler(console_handler)

        if enable_file and log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

    @property
    def name(self) -> str:
        return self._logger.name

    def info(self, event: str, **kwargs: Any) -> None:
        """Log info level message.

        Args:
            event: Event name/message
            **kwargs: Additional structured fields
        """
        self._logger.info(event, extra=kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        """Log warning level message.

        Args:
            event: Event name/message
            **kwargs: Additional structured fields
        """
        self._logger.warning(event, extra=kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        """Log error level message.

        Args:
            event: Event name/message
            **kwargs: Additional structured fields
        """
        self._logger.error(event, extra=kwargs)

    def debug(self, event: str, **kwargs: Any) -> None:
        """Log debug level message.

        Args:
            event: Event name/message
            **kwargs: Additional structured fields
        """
        self._logger.debug(event, extra=kwargs)

    def log_title_column_missing(self, headers: List[str]) -> None:
        """Log that no header column could be mapped to the title field."""
        self._logger.warning(
            "csv_title_column_missing",
            extra={"headers": headers}
        )

    def log_row_skipped(self, line_number: int, reason: str) -> None:
        """Log a data line that was dropped.

        Args:
            line_number: 1-based line number in the source file
            reason: Why the row was skipped
        """
        self._logger.warning(
            "csv_row_skipped",
            extra={
                "line_number": line_number,
                "reason": reason
            }
        )

    def log_import_completed(
        self,
        user_story_id: int,
        rows_accepted: int,
        rows_skipped: int,
        groups: int,
        records: int,
        duration_ms: float
    ) -> None:
        """Log import completion.

        Args:
            user_story_id: Parent requirement id
            rows_accepted: Canonical rows accepted by the row mapper
            rows_skipped: Lines dropped with a warning
            groups: Test case groups found
            records: Records returned (base + variants)
            duration_ms: Total duration
        """
        self._logger.info(
            "csv_import_completed",
            extra={
                "user_story_id": user_story_id,
                "rows_accepted": rows_accepted,
                "rows_skipped": rows_skipped,
                "groups": groups,
                "records": records,
                "duration_ms": round(duration_ms, 2)
            }
        )

    def log_import_failed(self, user_story_id: int, error: str) -> None:
        self._logger.error(
            "csv_import_failed",
            extra={
                "user_story_id": user_story_id,
                "error": error
            }
        )
