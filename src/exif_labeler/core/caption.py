"""Caption building from EXIF records."""

from typing import List, Optional

from .exposure import format_exposure_time, format_number
from .models import ExifRecord, LabelerConfig


def extract_settings_info(
    record: ExifRecord, threshold: float = LabelerConfig().exposure_threshold
) -> str:
    """
    Describe the shooting settings, e.g. ``50mm, F1.8, 1/200s, ISO 100``.

    A focal length or f-number of 0 means "unknown" in EXIF and is left out.
    """
    exif = record.exif
    fragments: List[str] = []

    if exif.focal_length:
        fragments.append(f"{format_number(exif.focal_length)}mm")
    if exif.f_number:
        fragments.append(f"F{format_number(exif.f_number)}")

    exposure = format_exposure_time(exif.exposure_time, threshold)
    if exposure is not None:
        fragments.append(exposure)

    if exif.iso is not None:
        fragments.append(f"ISO {format_number(exif.iso)}")

    return ", ".join(fragments)


def extract_lens_info(
    record: ExifRecord, placeholder: str = LabelerConfig().lens_placeholder
) -> str:
    """Lens make and model joined by a space, skipping the ``----`` filler."""
    candidates: List[Optional[str]] = [record.exif.lens_make, record.exif.lens_model]
    return " ".join(part for part in candidates if part and part != placeholder)


def extract_camera_info(record: ExifRecord) -> str:
    make = record.image.make
    model = record.image.model
    if make and model:
        return f"{make} {model}"
    if make:
        return make
    if model:
        return model
    return ""


def compose_caption(settings: str, camera: str, lens: str) -> str:
    """
    Join the three caption parts.

    ``"<settings> by <camera>, <lens>"`` when everything is present; missing
    parts drop out together with their connective.
    """
    caption = ""
    if settings:
        caption = settings
        if camera or lens:
            caption += " by "
    if camera:
        caption += camera
    if lens:
        caption += f", {lens}" if camera else lens
    return caption


def make_caption(record: ExifRecord, config: Optional[LabelerConfig] = None) -> str:
    """Build the full caption for one record."""
    config = config or LabelerConfig()
    return compose_caption(
        extract_settings_info(record, config.exposure_threshold),
        extract_camera_info(record),
        extract_lens_info(record, config.lens_placeholder),
    )
