"""
Structured logging for pipeline events.

Provides JSON-formatted logs with timestamps and structured fields.
"""
import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Optional


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

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in self.EXCLUDED_ATTRS:
                try:
                    json.dumps(value)
                    log_data[key] = value
                except (TypeError, ValueError):
                    log_data[key] = str(value)

        return json.dumps(log_data, ensure_ascii=False)


class StructuredLogger:
    """Structured logger wrapper with convenience methods.

    Handlers are only attached when configure() is called, so library use
    of the pipeline stays silent unless the application opts in.
    """

    def __init__(self, name: str = "req2test"):
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def configure(
        self,
        level: int = logging.INFO,
        enable_console: bool = True,
        log_file: Optional[str] = None
    ) -> 'StructuredLogger':
        """Attach JSON handlers to the underlying logger.

        Args:
            level: Logging level
            enable_console: Output to stderr
            log_file: Optional path to a log file

        Returns:
            self
        """
        self._logger.setLevel(level)
        self._logger.handlers = []

        formatter = StructuredFormatter()

        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self._logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

        self._logger.propagate = False
        return self

    def info(self, event: str, **kwargs: Any) -> None:
        self._logger.info(event, extra=kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        self._logger.warning(event, extra=kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        self._logger.error(event, extra=kwargs)

    def debug(self, event: str, **kwargs: Any) -> None:
        self._logger.debug(event, extra=kwargs)

    def log_extraction(self, title: str, counts: Dict[str, int], duration_ms: float) -> None:
        """Log requirement extraction completion.

        Args:
            title: Extracted document title
            counts: Entity counts per requirement sequence
            duration_ms: Extraction duration in milliseconds
        """
        self._logger.info(
            "requirements_extracted",
            extra={
                "title": title,
                "counts": counts,
                "total_entities": sum(counts.values()),
                "duration_ms": round(duration_ms, 2),
            }
        )

    def log_generation(
        self,
        num_test_cases: int,
        per_category: Dict[str, int],
        duration_ms: float,
        options: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log test case synthesis completion.

        Args:
            num_test_cases: Number of test cases generated
            per_category: Count per test category
            duration_ms: Total duration
            options: Generation options used
        """
        self._logger.info(
            "test_generation_completed",
            extra={
                "num_test_cases": num_test_cases,
                "per_category": per_category,
                "duration_ms": round(duration_ms, 2),
                "options": options,
            }
        )

    def log_export(self, fmt: str, path: str, num_test_cases: int) -> None:
        """Log an export file being written."""
        self._logger.info(
            "test_cases_exported",
            extra={"format": fmt, "path": path, "num_test_cases": num_test_cases}
        )


def get_logger(component: str) -> StructuredLogger:
    """Structured logger for a pipeline component (child of 'req2test')."""
    return StructuredLogger(f"req2test.{component}")
