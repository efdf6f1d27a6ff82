"""Logging utilities for figsync."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


_installed_handlers: list[logging.Handler] = []


@dataclass
class ExportStats:
    """Statistics from an export run."""

    component_count: int = 0
    variant_count: int = 0
    color_style_count: int = 0
    text_style_count: int = 0
    effect_style_count: int = 0
    skipped_style_count: int = 0
    unresolved_style_refs: int = 0
    unresolved_components: int = 0
    dropped_variant_segments: int = 0
    component_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate export duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_component_time_ms(self) -> float | None:
        """Average time spent per component, None before any component."""
        if not self.component_timings_ms:
            return None
        return sum(self.component_timings_ms) / len(self.component_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers from an earlier call in the same process
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

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

    logger = structlog.get_logger("figsync")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class ExportLogger:
    """Logger for tracking export progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("figsync")
        self._stats = ExportStats()

    def log_component_exported(
        self,
        node_id: str,
        name: str,
        variant_count: int,
        duration_ms: float,
    ) -> None:
        """Log a finished component record."""
        self._logger.debug(
            "Component exported",
            node_id=node_id,
            component=name,
            variants=variant_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.component_count += 1
        self._stats.variant_count += variant_count
        self._stats.component_timings_ms.append(duration_ms)

    def log_style_unresolved(self, node_id: str, style_id: str, reason: str) -> None:
        """Log a style binding whose name could not be resolved."""
        self._logger.debug(
            "Style reference unresolved",
            node_id=node_id,
            style_id=style_id,
            reason=reason,
        )
        self._stats.unresolved_style_refs += 1

    def log_component_unresolved(self, node_id: str, main_component_id: str | None) -> None:
        """Log an instance whose backing component is gone."""
        self._logger.debug(
            "Instance main component unresolved",
            node_id=node_id,
            main_component_id=main_component_id,
        )
        self._stats.unresolved_components += 1

    def log_variant_segments_dropped(self, node_id: str, name: str, dropped: int) -> None:
        """Log variant name segments that did not parse."""
        self._logger.debug(
            "Variant name segments dropped",
            node_id=node_id,
            variant=name,
            dropped=dropped,
        )
        self._stats.dropped_variant_segments += dropped

    def log_style_skipped(self, style_id: str, name: str, reason: str) -> None:
        """Log a shared style left out of the export."""
        self._logger.debug("Style skipped", style_id=style_id, style=name, reason=reason)
        self._stats.skipped_style_count += 1

    def log_styles_collected(self, colors: int, text: int, effects: int) -> None:
        """Log the result of style collection."""
        self._logger.info(
            "Styles collected",
            colors=colors,
            text=text,
            effects=effects,
        )
        self._stats.color_style_count = colors
        self._stats.text_style_count = text
        self._stats.effect_style_count = effects

    @property
    def stats(self) -> ExportStats:
        """Get current export statistics."""
        return self._stats
