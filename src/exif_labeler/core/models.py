"""Shared data models for the EXIF labeler."""

from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import ConfigurationError


class LabelerConfig(BaseModel):
    """Run configuration, built once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    input_dir: Path = Path("images/original/")
    output_dir: Path = Path("images/output/")
    extensions: Tuple[str, ...] = (".jpg", ".jpeg")
    font_size: int = Field(default=70, gt=0)
    margin: int = Field(default=10, ge=0)
    padding: int = Field(default=32, ge=0)
    exposure_threshold: float = 0.3
    lens_placeholder: str = "----"
    font_families: Tuple[str, ...] = ("Inconsolata", "Osaka")
    jpeg_quality: int = Field(default=95, ge=1, le=100)
    debug: bool = False

    @field_validator("extensions")
    @classmethod
    def _normalise_extensions(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ConfigurationError("At least one file extension is required")
        for extension in value:
            if not extension.startswith(".") or len(extension) < 2:
                raise ConfigurationError(
                    f"Extension {extension!r} must look like '.jpg'"
                )
        return tuple(extension.lower() for extension in value)


class ImageTags(BaseModel):
    """Camera body tags from the primary IFD."""

    model_config = ConfigDict(frozen=True)

    make: Optional[str] = None
    model: Optional[str] = None


class ExifTags(BaseModel):
    """Shooting settings and lens tags from the Exif sub-IFD."""

    model_config = ConfigDict(frozen=True)

    focal_length: Optional[float] = None
    f_number: Optional[float] = None
    iso: Optional[float] = None
    exposure_time: Optional[float] = None
    lens_make: Optional[str] = None
    lens_model: Optional[str] = None


class ExifRecord(BaseModel):
    """Metadata read from one image. Every field may be missing."""

    model_config = ConfigDict(frozen=True)

    image: ImageTags = Field(default_factory=ImageTags)
    exif: ExifTags = Field(default_factory=ExifTags)


class LabelResult(BaseModel):
    """Outcome of labeling a single image."""

    filename: str
    source_path: Path
    output_path: Path
    caption: str = ""
    processing_time: float = 0.0


class RunState(str, Enum):
    """States of a batch run."""

    SCANNING = "scanning"
    PROCESSING = "processing"
    DONE = "done"
    FAILED = "failed"


class RunSummary(BaseModel):
    """What a completed run produced."""

    state: RunState = RunState.DONE
    total_files: int = 0
    processed: List[LabelResult] = Field(default_factory=list)
    processing_time: float = 0.0

    @property
    def processed_count(self) -> int:
        return len(self.processed)
