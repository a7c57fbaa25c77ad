"""Compositing labels onto photos and writing the results with Pillow."""

from pathlib import Path
from typing import Any, Dict, Tuple, Union

from PIL import Image, ImageOps, UnidentifiedImageError

from .exceptions import ImageIOError, RenderError, with_error_handling
from .logging_config import get_logger

PathLike = Union[str, Path]


def bottom_right_offset(
    image_size: Tuple[int, int], label_size: Tuple[int, int]
) -> Tuple[int, int]:
    """Top-left corner that puts the label flush with the bottom-right edge."""
    image_width, image_height = image_size
    label_width, label_height = label_size
    if label_width > image_width or label_height > image_height:
        raise RenderError(
            f"Label {label_width}x{label_height} does not fit on "
            f"{image_width}x{image_height} image"
        )
    return image_width - label_width, image_height - label_height


class PillowImageCompositor:
    """Image codec/compositor: orient, overlay, keep metadata, save."""

    def __init__(self) -> None:
        self._logger = get_logger("exif-labeler.compositor")

    @with_error_handling(ImageIOError)
    def composite(
        self,
        source: PathLike,
        dest: PathLike,
        label: Image.Image,
        quality: int = 95,
    ) -> Path:
        """
        Write ``source`` with ``label`` in its bottom-right corner to ``dest``.

        The photo is rotated upright according to its Orientation tag first,
        so the label always lands in the visual bottom-right. EXIF (with the
        orientation reset), the ICC profile and any XMP packet are carried
        over, and the output keeps the source's format. An existing ``dest``
        is replaced.
        """
        source = Path(source)
        dest = Path(dest)

        try:
            with Image.open(source) as image:
                image_format = image.format or "JPEG"
                icc_profile = image.info.get("icc_profile")
                oriented = ImageOps.exif_transpose(image)
                xmp = oriented.info.get("xmp")
        except UnidentifiedImageError as exc:
            raise ImageIOError(f"Cannot decode {source.name}") from exc
        except OSError as exc:
            raise ImageIOError(f"Cannot read {source}: {exc}") from exc

        exif = oriented.getexif()
        offset = bottom_right_offset(oriented.size, label.size)
        self._logger.debug(
            f"Placing {label.size[0]}x{label.size[1]} label at {offset} "
            f"on {source.name}"
        )

        canvas = oriented.convert("RGBA")
        canvas.alpha_composite(label.convert("RGBA"), dest=offset)
        output = canvas.convert(oriented.mode) if oriented.mode != "RGBA" else canvas

        save_kwargs: Dict[str, Any] = {"format": image_format}
        if image_format == "JPEG":
            save_kwargs["quality"] = quality
        if exif:
            save_kwargs["exif"] = exif
        if icc_profile:
            save_kwargs["icc_profile"] = icc_profile
        if xmp:
            save_kwargs["xmp"] = xmp

        try:
            output.save(dest, **save_kwargs)
        except OSError as exc:
            raise ImageIOError(f"Cannot write {dest}: {exc}") from exc

        return dest
