"""Service implementations for the labeling pipeline."""

import asyncio
import time
from pathlib import Path
from typing import List, Optional, Sequence

from .caption import make_caption
from .error_handling import RunContext
from .exceptions import ImageIOError
from .label import render_label
from .models import LabelerConfig, LabelResult, RunState, RunSummary
from .observability import LogContext, MetricsCollector, StructuredLogger
from .protocols import (
    FileDiscoveryService,
    ImageCompositorProtocol,
    LabelingService,
    MetadataReaderProtocol,
    Orchestrator,
)


class LocalFileDiscoveryService(FileDiscoveryService):
    """Service for discovering images in a local directory."""

    def __init__(self, logger: StructuredLogger):
        self._logger = logger

    def discover_files(self, directory: Path, extensions: Sequence[str]) -> List[Path]:
        """
        List the regular files in ``directory`` with an allowed extension.

        Extensions are compared case-insensitively; results come back sorted by
        name. Anything else in the directory is ignored.
        """
        allowed = {ext.lower() for ext in extensions}
        self._logger.debug(f"Discovering {sorted(allowed)} files in {directory}")

        try:
            entries = sorted(Path(directory).iterdir(), key=lambda p: p.name)
        except OSError as exc:
            raise ImageIOError(f"Cannot list input directory {directory}: {exc}") from exc

        files = [p for p in entries if p.is_file() and p.suffix.lower() in allowed]
        self._logger.info(f"Found {len(files)} image(s) in {directory}")
        return files


class ImageLabelingService(LabelingService):
    """Labels a single image: metadata → caption → label → composite."""

    def __init__(
        self,
        metadata_reader: MetadataReaderProtocol,
        compositor: ImageCompositorProtocol,
        logger: StructuredLogger,
        metrics_collector: Optional[MetricsCollector] = None,
    ):
        self._metadata_reader = metadata_reader
        self._compositor = compositor
        self._logger = logger
        self._metrics_collector = metrics_collector

    async def label_image(
        self, source: Path, dest: Path, config: LabelerConfig
    ) -> LabelResult:
        """
        Label ``source`` and write it to ``dest``.

        The metadata read and the decode/composite/write chain run in a worker
        thread and are awaited one after the other. Errors are not caught here.
        """
        start_time = time.perf_counter()
        log_context = LogContext(component="labeling_service").with_metadata(
            source=source.name
        )

        try:
            self._logger.debug(
                "Reading metadata", log_context.with_operation("read_metadata")
            )
            record = await asyncio.to_thread(self._metadata_reader.read, source)

            caption = make_caption(record, config)
            self._logger.debug(
                f"Caption: {caption!r}", log_context.with_operation("make_caption")
            )

            label = render_label(caption, config)

            self._logger.debug(
                f"Writing {dest}", log_context.with_operation("composite")
            )
            await asyncio.to_thread(
                self._compositor.composite, source, dest, label, config.jpeg_quality
            )
        except BaseException as exc:
            if self._metrics_collector is not None:
                self._metrics_collector.record(
                    "label_image", start_time, success=False, error_message=str(exc)
                )
            raise

        elapsed = time.perf_counter() - start_time
        if self._metrics_collector is not None:
            self._metrics_collector.record("label_image", start_time, success=True)

        return LabelResult(
            filename=source.name,
            source_path=source,
            output_path=dest,
            caption=caption,
            processing_time=elapsed,
        )


class LabelingOrchestrator(Orchestrator):
    """
    Runs a whole batch: scan the input directory, then label file after file.

    The first failure aborts the run. Outputs already written stay in place and
    the remaining inputs are left untouched.
    """

    def __init__(
        self,
        file_discovery: FileDiscoveryService,
        labeling_service: LabelingService,
        logger: StructuredLogger,
        metrics_collector: Optional[MetricsCollector] = None,
    ):
        self._file_discovery = file_discovery
        self._labeling_service = labeling_service
        self._logger = logger
        self._metrics_collector = metrics_collector
        self.last_summary: Optional[RunSummary] = None

    def _prepare_output_dir(self, output_dir: Path) -> None:
        try:
            Path(output_dir).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ImageIOError(f"Cannot create output directory {output_dir}: {exc}") from exc

    async def run(self, config: LabelerConfig) -> RunSummary:
        """Label every matching file in ``config.input_dir``."""
        start_time = time.perf_counter()
        summary = RunSummary(state=RunState.SCANNING)
        self.last_summary = summary

        try:
            with RunContext("Labeling run") as run_context:
                sources = self._file_discovery.discover_files(
                    Path(config.input_dir), config.extensions
                )
                self._prepare_output_dir(Path(config.output_dir))
                summary.total_files = len(sources)

                if not sources:
                    self._logger.info("No files found to process")

                summary.state = RunState.PROCESSING
                for source in sources:
                    run_context.start_item(source.name)
                    dest = Path(config.output_dir) / source.name
                    result = await self._labeling_service.label_image(
                        source, dest, config
                    )
                    summary.processed.append(result)
                    self._logger.info(f"{result.filename} {result.caption}")
                    run_context.finish_item()
        except BaseException:
            summary.state = RunState.FAILED
            summary.processing_time = time.perf_counter() - start_time
            raise

        summary.state = RunState.DONE
        summary.processing_time = time.perf_counter() - start_time
        self._log_statistics(summary)
        return summary

    def _log_statistics(self, summary: RunSummary) -> None:
        if self._metrics_collector is None:
            return
        stats = self._metrics_collector.get_summary("label_image")
        if stats:
            self._logger.debug(
                f"Labeled {stats['successful_operations']} file(s) in "
                f"{summary.processing_time:.2f}s "
                f"(avg {stats['avg_duration'] * 1000:.0f}ms, "
                f"max {stats['max_duration'] * 1000:.0f}ms)"
            )


def run_labeling(
    config: LabelerConfig, orchestrator: Optional[Orchestrator] = None
) -> RunSummary:
    """
    Synchronous entry point: run the batch on a fresh event loop.

    Args:
        config: Run configuration
        orchestrator: Pre-built orchestrator, the default Pillow-backed one if omitted

    Returns:
        Summary of the finished run
    """
    if orchestrator is None:
        from .factories import LabelingPipelineFactory

        orchestrator = LabelingPipelineFactory.create_pipeline()
    return asyncio.run(orchestrator.run(config))
