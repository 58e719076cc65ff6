"""Logging utilities for glyphcore."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

FILE_HANDLER_NAME = "glyphcore.file"
CONSOLE_HANDLER_NAME = "glyphcore.console"


@dataclass
class LoadStats:
    """Statistics from one font load."""

    glyph_count: int = 0
    simple_count: int = 0
    composite_count: int = 0
    empty_count: int = 0
    point_count: int = 0
    inserted_points: int = 0
    mapped_codepoints: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate load duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers installed by an earlier call are replaced, so configuring again
    (for example once per CLI command) never duplicates output.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if handler.get_name() in (FILE_HANDLER_NAME, CONSOLE_HANDLER_NAME):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

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

    logger = structlog.get_logger("glyphcore")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


class LoadLogger:
    """Logger for tracking glyph decoding and load statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = LoadStats()

    def log_glyph_decoded(self, glyph_id: int, contours: int, points: int, inserted: int) -> None:
        """Log a decoded simple glyph."""
        self._logger.debug(
            "Glyph decoded",
            glyph_id=glyph_id,
            contours=contours,
            points=points,
            inserted=inserted,
        )
        self._stats.simple_count += 1
        self._stats.point_count += points
        self._stats.inserted_points += inserted

    def log_glyph_skipped(self, glyph_id: int, reason: str) -> None:
        """Log a glyph that decoded to an empty outline."""
        self._logger.debug("Glyph has no outline", glyph_id=glyph_id, reason=reason)
        if reason == "composite glyph":
            self._stats.composite_count += 1
        else:
            self._stats.empty_count += 1

    def log_glyph_error(self, glyph_id: int, offset: int, error: Exception) -> None:
        """Log the glyph whose decoding aborted the load."""
        self._logger.error(
            "Glyph decoding failed",
            glyph_id=glyph_id,
            offset=offset,
            error=str(error),
            error_type=type(error).__name__,
        )

    def log_cmap(self, mapped: int) -> None:
        """Log the size of the decoded codepoint map."""
        self._stats.mapped_codepoints = mapped
        self._logger.debug("Codepoint map decoded", mapped=mapped)

    @property
    def stats(self) -> LoadStats:
        """Get current load statistics."""
        return self._stats
