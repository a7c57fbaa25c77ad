"""Tests for label rendering."""

import pytest
from unittest.mock import patch

from exif_labeler.core.exceptions import RenderError
from exif_labeler.core.label import (
    BACKGROUND_RGBA,
    label_size,
    load_font,
    render_label,
)
from exif_labeler.core.models import LabelerConfig


class TestLabelSize:
    """Tests for label_size."""

    def test_default_config(self):
        # 10 chars * 35px + 32 padding + 10 margin; 70 * 1.2 + 10
        assert label_size("0123456789", LabelerConfig()) == (392, 94)

    def test_empty_caption_is_padding_plus_margin(self):
        assert label_size("", LabelerConfig()) == (42, 94)

    def test_width_grows_with_caption_height_does_not(self):
        config = LabelerConfig()
        short_width, short_height = label_size("F2", config)
        long_width, long_height = label_size("F2" * 50, config)
        assert long_width > short_width
        assert long_height == short_height

    def test_odd_font_size_rounds_up(self):
        config = LabelerConfig(font_size=11, margin=0, padding=0)
        assert label_size("abc", config) == (17, 14)


class TestRenderLabel:
    """Tests for render_label."""

    def test_returns_rgba_image_of_computed_size(self):
        config = LabelerConfig(font_size=20)
        caption = "50mm, F1.8 by Canon EOS R5"

        label = render_label(caption, config)

        assert label.mode == "RGBA"
        assert label.size == label_size(caption, config)

    def test_background_box_is_translucent_dark(self):
        config = LabelerConfig(font_size=20)
        label = render_label("ISO 100", config)

        # Top-left corner is inside the box, away from the text.
        assert label.getpixel((0, 0)) == BACKGROUND_RGBA

    def test_margin_strip_is_transparent(self):
        config = LabelerConfig(font_size=20, margin=10)
        label = render_label("ISO 100", config)
        width, height = label.size

        assert label.getpixel((width - 1, height - 1))[3] == 0
        assert label.getpixel((width - 5, 0))[3] == 0

    def test_text_is_drawn(self):
        config = LabelerConfig(font_size=30)
        blank = render_label("", config.model_copy(update={"padding": 32 + 15 * 4}))
        with_text = render_label("WWWW", config)

        assert blank.size == with_text.size
        assert blank.tobytes() != with_text.tobytes()

    def test_empty_caption_still_renders(self):
        label = render_label("", LabelerConfig())
        assert label.size == (42, 94)

    def test_defaults_without_config(self):
        label = render_label("F4")
        assert label.size == label_size("F4", LabelerConfig())

    def test_drawing_failure_becomes_render_error(self):
        with patch(
            "exif_labeler.core.label.ImageDraw.Draw", side_effect=ValueError("bad box")
        ):
            with pytest.raises(RenderError, match="bad box"):
                render_label("F4", LabelerConfig(font_size=20))


class TestLoadFont:
    """Tests for load_font."""

    def test_falls_back_to_default_font(self):
        font = load_font(24, ("DefinitelyNotAnInstalledFont",))
        assert font is not None
        assert font.getbbox("A")[3] > 0

    def test_uses_first_available_family(self):
        sentinel = object()
        with patch(
            "exif_labeler.core.label.ImageFont.truetype",
            side_effect=[OSError("missing"), sentinel],
        ) as mock_truetype:
            assert load_font(24, ("Missing", "Present")) is sentinel
        assert mock_truetype.call_args_list[1].args == ("Present.ttf", 24)
