"""Factory classes for creating configured service instances."""

import logging
from typing import Any, Optional

from .compositor import PillowImageCompositor
from .logging_config import setup_logger
from .metadata import PillowMetadataReader
from .observability import MetricsCollector, StructuredLogger
from .protocols import ImageCompositorProtocol, MetadataReaderProtocol
from .services import (
    ImageLabelingService,
    LabelingOrchestrator,
    LocalFileDiscoveryService,
)


class LoggerFactory:
    """Factory for creating logger instances."""

    @staticmethod
    def create_logger(name: str = "exif-labeler", level: Optional[int] = None) -> StructuredLogger:
        """Create a structured logger on top of the shared logging setup."""
        logger = setup_logger(name)
        if level is not None:
            logger.setLevel(level)
        return StructuredLogger(logger)


class LabelingPipelineFactory:
    """Factory for creating the complete labeling pipeline."""

    @staticmethod
    def create_pipeline(
        metadata_reader: Optional[MetadataReaderProtocol] = None,
        compositor: Optional[ImageCompositorProtocol] = None,
        logger: Optional[Any] = None,
        metrics_collector: Optional[MetricsCollector] = None,
        debug: bool = False,
    ) -> LabelingOrchestrator:
        """
        Create a fully wired orchestrator.

        Any collaborator left out gets its Pillow-backed default. ``logger``
        may be a StructuredLogger or anything with debug/info/warning/error.
        """
        if metadata_reader is None:
            metadata_reader = PillowMetadataReader()

        if compositor is None:
            compositor = PillowImageCompositor()

        if logger is None:
            structured = LoggerFactory.create_logger(
                "exif-labeler", logging.DEBUG if debug else None
            )
        elif isinstance(logger, StructuredLogger):
            structured = logger
        else:
            structured = StructuredLogger(logger)

        if metrics_collector is None:
            metrics_collector = MetricsCollector()

        file_discovery = LocalFileDiscoveryService(structured)
        labeling_service = ImageLabelingService(
            metadata_reader, compositor, structured, metrics_collector
        )

        return LabelingOrchestrator(
            file_discovery=file_discovery,
            labeling_service=labeling_service,
            logger=structured,
            metrics_collector=metrics_collector,
        )
