"""Rendering of caption labels."""

import math
from typing import Iterable, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from .exceptions import RenderError, with_error_handling
from .logging_config import get_logger
from .models import LabelerConfig

BACKGROUND_RGBA = (0x33, 0x33, 0x33, round(255 * 0.3))
TEXT_RGBA = (0xEE, 0xEE, 0xEE, round(255 * 0.6))

FontType = ImageFont.FreeTypeFont


def label_size(caption: str, config: LabelerConfig) -> Tuple[int, int]:
    """
    Width and height of the label for ``caption``.

    The width assumes half an em per character, which is exact for a
    monospace face and close enough for anything else.
    """
    width = len(caption) * (config.font_size / 2) + config.padding + config.margin
    height = config.font_size * 1.2 + config.margin
    return math.ceil(width), math.ceil(height)


def load_font(size: int, families: Iterable[str] = ()) -> FontType:
    """First installed TrueType face among ``families``, else Pillow's default."""
    logger = get_logger("exif-labeler.label")
    for family in families:
        try:
            return ImageFont.truetype(f"{family}.ttf", size)
        except OSError:
            logger.debug(f"Font {family!r} not available")
    return ImageFont.load_default(size=size)  # type: ignore[return-value]


@with_error_handling(RenderError)
def render_label(
    caption: str,
    config: Optional[LabelerConfig] = None,
    font: Optional[FontType] = None,
) -> Image.Image:
    """
    Render ``caption`` on a translucent dark box.

    Args:
        caption: Text to draw, drawn on one line however long it is
        config: Sizing and font settings
        font: Preloaded font, looked up from ``config.font_families`` if omitted

    Returns:
        An RGBA image ready to be composited onto a photo
    """
    config = config or LabelerConfig()
    font = font or load_font(config.font_size, config.font_families)
    width, height = label_size(caption, config)
    box_width = width - config.margin
    box_height = height - config.margin

    label = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    ImageDraw.Draw(label).rectangle(
        (0, 0, box_width - 1, box_height - 1), fill=BACKGROUND_RGBA
    )

    # Text goes on its own layer so its alpha blends over the box.
    text_layer = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    if caption:
        ImageDraw.Draw(text_layer).text(
            (box_width / 2, config.font_size / 1.1),
            caption,
            font=font,
            fill=TEXT_RGBA,
            anchor="ms",
        )

    return Image.alpha_composite(label, text_layer)
