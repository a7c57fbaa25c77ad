"""Reading camera metadata out of image files with Pillow."""

import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

from PIL import Image, UnidentifiedImageError
from PIL.ExifTags import IFD, Base

from .exceptions import ImageIOError, MetadataDecodeError, with_error_handling
from .logging_config import get_logger
from .models import ExifRecord, ExifTags, ImageTags

PathLike = Union[str, Path]


def _as_text(value: Any) -> Optional[str]:
    """ASCII tags arrive NUL-padded, sometimes as bytes."""
    if value is None:
        return None
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    text = str(value).strip("\x00").strip()
    return text or None


def _as_number(value: Any) -> Optional[float]:
    """Rationals and ints become floats; zero-denominator rationals are dropped."""
    if value is None:
        return None
    if isinstance(value, (tuple, list)):
        if not value:
            return None
        value = value[0]
    try:
        number = float(value)
    except (TypeError, ValueError, ZeroDivisionError):
        return None
    if not math.isfinite(number):
        return None
    return number


def exif_record_from_tags(base: Mapping, exif_ifd: Mapping) -> ExifRecord:
    """Build an ExifRecord from the primary IFD and the Exif sub-IFD."""
    return ExifRecord(
        image=ImageTags(
            make=_as_text(base.get(Base.Make)),
            model=_as_text(base.get(Base.Model)),
        ),
        exif=ExifTags(
            focal_length=_as_number(exif_ifd.get(Base.FocalLength)),
            f_number=_as_number(exif_ifd.get(Base.FNumber)),
            iso=_as_number(exif_ifd.get(Base.ISOSpeedRatings)),
            exposure_time=_as_number(exif_ifd.get(Base.ExposureTime)),
            lens_make=_as_text(exif_ifd.get(Base.LensMake)),
            lens_model=_as_text(exif_ifd.get(Base.LensModel)),
        ),
    )


class PillowMetadataReader:
    """Metadata decoder backed by ``Image.getexif``."""

    def __init__(self) -> None:
        self._logger = get_logger("exif-labeler.metadata")

    @with_error_handling(MetadataDecodeError)
    def read(self, path: PathLike) -> ExifRecord:
        """
        Read the EXIF record of ``path``.

        Raises:
            ImageIOError: If the file does not exist or cannot be read
            MetadataDecodeError: If the file is not an image Pillow knows,
                or carries no EXIF block at all
        """
        path = Path(path)
        self._logger.debug(f"Reading EXIF from {path}")
        try:
            with Image.open(path) as image:
                exif = image.getexif()
                if not exif:
                    raise MetadataDecodeError(f"No EXIF data found in {path.name}")
                exif_ifd = exif.get_ifd(IFD.Exif)
                return exif_record_from_tags(exif, exif_ifd)
        except UnidentifiedImageError as exc:
            raise MetadataDecodeError(f"Unsupported image format: {path.name}") from exc
        except (FileNotFoundError, PermissionError, IsADirectoryError) as exc:
            raise ImageIOError(f"Cannot read {path}: {exc}") from exc
