"""Core components of the EXIF labeler."""

from .logging_config import get_logger, set_debug_logging, setup_logger
from .exceptions import (
    ExifLabelerError,
    MetadataDecodeError,
    RenderError,
    ImageIOError,
    ConfigurationError,
    with_error_handling,
)
from .models import (
    ExifRecord,
    ExifTags,
    ImageTags,
    LabelerConfig,
    LabelResult,
    RunState,
    RunSummary,
)
from .exposure import format_exposure_time, format_number
from .caption import (
    compose_caption,
    extract_camera_info,
    extract_lens_info,
    extract_settings_info,
    make_caption,
)
from .label import label_size, load_font, render_label
from .metadata import PillowMetadataReader
from .compositor import PillowImageCompositor
from .services import (
    ImageLabelingService,
    LabelingOrchestrator,
    LocalFileDiscoveryService,
    run_labeling,
)
from .factories import LabelingPipelineFactory, LoggerFactory

__all__ = [
    "LabelerConfig",
    "ExifRecord",
    "ExifTags",
    "ImageTags",
    "LabelResult",
    "RunState",
    "RunSummary",
    "format_exposure_time",
    "format_number",
    "extract_settings_info",
    "extract_lens_info",
    "extract_camera_info",
    "compose_caption",
    "make_caption",
    "label_size",
    "load_font",
    "render_label",
    "PillowMetadataReader",
    "PillowImageCompositor",
    "LocalFileDiscoveryService",
    "ImageLabelingService",
    "LabelingOrchestrator",
    "LabelingPipelineFactory",
    "LoggerFactory",
    "run_labeling",
    "setup_logger",
    "get_logger",
    "set_debug_logging",
    "ExifLabelerError",
    "MetadataDecodeError",
    "RenderError",
    "ImageIOError",
    "ConfigurationError",
    "with_error_handling",
]
