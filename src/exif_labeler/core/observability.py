"""Observability utilities: contextual log lines and per-file timings."""

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .logging_config import get_logger


@dataclass(frozen=True)
class LogContext:
    """Context information carried through one file's processing."""

    correlation_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])
    operation: str = ""
    component: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)

    def with_operation(self, operation: str) -> "LogContext":
        """Create new context with operation set."""
        return LogContext(
            correlation_id=self.correlation_id,
            operation=operation,
            component=self.component,
            metadata=dict(self.metadata),
        )

    def with_metadata(self, **kwargs: Any) -> "LogContext":
        """Create new context with additional metadata."""
        return LogContext(
            correlation_id=self.correlation_id,
            operation=self.operation,
            component=self.component,
            metadata={**self.metadata, **kwargs},
        )

    def render(self, message: str) -> str:
        formatted = f"[{self.correlation_id}] {message}"
        if self.operation:
            formatted = f"[{self.operation}] {formatted}"
        if self.metadata:
            details = ", ".join(f"{k}={v}" for k, v in self.metadata.items())
            formatted = f"{formatted} ({details})"
        return formatted


class StructuredLogger:
    """Wraps a logger so every line can carry a LogContext."""

    def __init__(self, logger: Optional[Any] = None, name: str = "exif-labeler"):
        self._logger = logger if logger is not None else get_logger(name)

    def _format(self, message: str, context: Optional[LogContext]) -> str:
        return context.render(message) if context else message

    def debug(self, message: str, context: Optional[LogContext] = None) -> None:
        self._logger.debug(self._format(message, context))

    def info(self, message: str, context: Optional[LogContext] = None) -> None:
        self._logger.info(self._format(message, context))

    def warning(self, message: str, context: Optional[LogContext] = None) -> None:
        self._logger.warning(self._format(message, context))

    def error(
        self, message: str, context: Optional[LogContext] = None, exc_info: bool = False
    ) -> None:
        if isinstance(self._logger, logging.Logger):
            self._logger.error(self._format(message, context), exc_info=exc_info)
        else:
            self._logger.error(self._format(message, context))


@dataclass
class PerformanceMetrics:
    """Timing of a single operation."""

    operation: str
    start_time: float
    end_time: float
    success: bool
    error_message: Optional[str] = None

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    @property
    def duration_ms(self) -> float:
        return self.duration * 1000


class MetricsCollector:
    """Collector for performance metrics."""

    def __init__(self) -> None:
        self._metrics: List[PerformanceMetrics] = []

    def record(
        self,
        operation: str,
        start_time: float,
        success: bool,
        error_message: Optional[str] = None,
    ) -> PerformanceMetrics:
        metric = PerformanceMetrics(
            operation=operation,
            start_time=start_time,
            end_time=time.perf_counter(),
            success=success,
            error_message=error_message,
        )
        self._metrics.append(metric)
        return metric

    def get_metrics(self, operation: Optional[str] = None) -> List[PerformanceMetrics]:
        """Get recorded metrics, optionally filtered by operation."""
        if operation:
            return [m for m in self._metrics if m.operation == operation]
        return list(self._metrics)

    def get_summary(self, operation: Optional[str] = None) -> Dict[str, Any]:
        """Get summary statistics for metrics."""
        metrics = self.get_metrics(operation)
        if not metrics:
            return {}

        durations = [m.duration for m in metrics]
        successful = [m for m in metrics if m.success]
        return {
            "total_operations": len(metrics),
            "successful_operations": len(successful),
            "failed_operations": len(metrics) - len(successful),
            "avg_duration": sum(durations) / len(durations),
            "max_duration": max(durations),
            "total_duration": sum(durations),
        }
