"""Protocol definitions for dependency injection and testability."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Protocol, Sequence

from PIL import Image

from .models import ExifRecord, LabelerConfig, LabelResult, RunSummary


class MetadataReaderProtocol(Protocol):
    """Protocol for the metadata decoder."""

    def read(self, path: Path) -> ExifRecord:
        """Read the EXIF record of an image file."""
        ...


class ImageCompositorProtocol(Protocol):
    """Protocol for the image codec/compositor."""

    def composite(
        self, source: Path, dest: Path, label: Image.Image, quality: int = 95
    ) -> Path:
        """Write ``source`` with ``label`` overlaid to ``dest``."""
        ...


class FileDiscoveryService(ABC):
    """Abstract service for discovering files to process."""

    @abstractmethod
    def discover_files(self, directory: Path, extensions: Sequence[str]) -> List[Path]:
        """Discover files to process."""
        ...


class LabelingService(ABC):
    """Abstract service for labeling one image."""

    @abstractmethod
    async def label_image(
        self, source: Path, dest: Path, config: LabelerConfig
    ) -> LabelResult:
        """Label ``source`` and write it to ``dest``."""
        ...


class Orchestrator(ABC):
    """Abstract batch run."""

    @abstractmethod
    async def run(self, config: LabelerConfig) -> RunSummary:
        """Label every matching file in the input directory."""
        ...
