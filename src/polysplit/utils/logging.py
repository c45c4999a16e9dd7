"""Logging utilities for Polysplit."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

LOGGER_NAME = "polysplit"

# Marks handlers installed here so reconfiguring replaces them
_HANDLER_MARKER = "_polysplit_handler"


@dataclass
class SplitStats:
    """Statistics from a split run."""

    iterations: int = 0
    edge_pairs_evaluated: int = 0
    candidate_cuts: int = 0
    error_count: int = 0
    cut_lengths: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate split duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def _install(logger: logging.Logger, handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers are attached to the ``polysplit`` logger only. Calling this
    again replaces the handlers of the previous call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            package_logger.removeHandler(handler)
            handler.close()

    levels: list[int] = []

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _install(package_logger, file_handler)
        levels.append(file_handler.level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _install(package_logger, console_handler)
    levels.append(console_handler.level)

    package_logger.setLevel(min(levels))

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

    logger = structlog.get_logger(LOGGER_NAME)
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level if log_file else console_level,
    )

    return logger


class SplitLogger:
    """Logger for tracking split progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = SplitStats()

    def log_split_start(self, vertex_count: int, area: float, parts: int, target_area: float) -> None:
        """Log start of a split."""
        self._logger.info(
            "Split started",
            vertices=vertex_count,
            area=area,
            parts=parts,
            target_area=target_area,
        )

    def log_polygon_warning(self, reason: str, **details: object) -> None:
        """Log an input polygon outside the supported shape class."""
        self._logger.warning("Unsupported polygon shape; result is undefined", reason=reason, **details)

    def log_iteration(
        self,
        iteration: int,
        edge_pairs: int,
        candidates: int,
        cut_length: float,
        cut_area: float,
    ) -> None:
        """Log the cut selected in one greedy iteration."""
        self._logger.debug(
            "Cut selected",
            iteration=iteration,
            edge_pairs=edge_pairs,
            candidates=candidates,
            cut_length=round(cut_length, 6),
            cut_area=round(cut_area, 6),
        )
        self._stats.iterations += 1
        self._stats.edge_pairs_evaluated += edge_pairs
        self._stats.candidate_cuts += candidates
        self._stats.cut_lengths.append(cut_length)

    def log_split_complete(self, parts: int, duration_ms: float) -> None:
        """Log successful split."""
        self._logger.info(
            "Split complete",
            parts=parts,
            iterations=self._stats.iterations,
            candidates=self._stats.candidate_cuts,
            duration_ms=round(duration_ms, 2),
        )

    def log_split_error(self, error: Exception) -> None:
        """Log split failure."""
        self._logger.error(
            "Split failed",
            error=str(error),
            error_type=type(error).__name__,
            iteration=self._stats.iterations,
        )
        self._stats.error_count += 1

    @property
    def stats(self) -> SplitStats:
        """Get current split statistics."""
        return self._stats
