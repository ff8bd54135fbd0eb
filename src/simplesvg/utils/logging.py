"""Logging utilities for simplesvg."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers added by configure_logging, replaced on each call
_installed_handlers: list[logging.Handler] = []


@dataclass
class RenderStats:
    """Statistics from a render run."""

    shapes_by_kind: Counter[str] = field(default_factory=Counter)
    bytes_written: int = 0
    error_count: int = 0
    errors: list[str] = field(default_factory=list)
    output_path: Path | None = None
    start_time: float | None = None
    end_time: float | None = None

    @property
    def shape_count(self) -> int:
        return sum(self.shapes_by_kind.values())

    @property
    def duration_seconds(self) -> float:
        """Calculate render duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def reset_logging() -> None:
    """Remove and close the handlers installed by configure_logging."""
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging on top of the standard library.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, only errors reach the console

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    reset_logging()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("simplesvg")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking render progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_scene_loaded(self, scene_path: Path, shape_count: int) -> None:
        """Log a successfully validated scene."""
        self._logger.info("Scene loaded", scene=str(scene_path), shapes=shape_count)

    def log_shape_appended(self, kind: str, index: int) -> None:
        """Log a shape rendered into the document."""
        self._logger.debug("Shape appended", kind=kind, index=index)
        self._stats.shapes_by_kind[kind] += 1

    def log_document_written(self, output_path: Path, size_bytes: int) -> None:
        """Log the rendered document being written."""
        self._logger.info("Document written", output=str(output_path), bytes=size_bytes)
        self._stats.output_path = output_path
        self._stats.bytes_written = size_bytes

    def log_error(self, error: Exception) -> None:
        """Log a render failure."""
        self._logger.error(
            "Render failed",
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append(str(error))

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
