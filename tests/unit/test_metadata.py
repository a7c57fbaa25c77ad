"""Unit tests for the Pillow metadata reader."""

import pytest
from PIL.ExifTags import Base
from PIL.TiffImagePlugin import IFDRational

from exif_labeler.core.exceptions import ImageIOError, MetadataDecodeError
from exif_labeler.core.metadata import PillowMetadataReader, exif_record_from_tags
from exif_labeler.testing.fakes import build_exif, create_test_image, create_test_jpeg


class TestExifRecordFromTags:
    """Tests for exif_record_from_tags value normalisation."""

    def test_text_is_stripped_of_padding(self):
        record = exif_record_from_tags(
            {Base.Make: "Canon\x00\x00", Base.Model: b"EOS R5 "},
            {Base.LensModel: "  "},
        )
        assert record.image.make == "Canon"
        assert record.image.model == "EOS R5"
        assert record.exif.lens_model is None

    def test_rationals_become_floats(self):
        record = exif_record_from_tags(
            {},
            {
                Base.FocalLength: IFDRational(50, 1),
                Base.FNumber: IFDRational(18, 10),
                Base.ExposureTime: IFDRational(1, 200),
            },
        )
        assert record.exif.focal_length == 50.0
        assert record.exif.f_number == 1.8
        assert record.exif.exposure_time == 0.005

    def test_zero_denominator_rational_is_absent(self):
        record = exif_record_from_tags({}, {Base.FNumber: IFDRational(0, 0)})
        assert record.exif.f_number is None

    def test_iso_tuple_uses_first_value(self):
        record = exif_record_from_tags({}, {Base.ISOSpeedRatings: (400, 0)})
        assert record.exif.iso == 400.0

    def test_empty_tags_give_empty_record(self):
        record = exif_record_from_tags({}, {})
        assert record.image.make is None
        assert record.exif.iso is None


class TestPillowMetadataReader:
    """Tests for PillowMetadataReader against real JPEG files."""

    def test_reads_full_record(self, tmp_path):
        path = create_test_jpeg(
            tmp_path / "full.jpg",
            width=64,
            height=48,
            exif=build_exif(
                make="Canon",
                model="EOS R5",
                focal_length=50,
                f_number=1.8,
                iso=100,
                exposure_time=0.005,
                lens_make="Canon",
                lens_model="RF50mm F1.8 STM",
            ),
        )

        record = PillowMetadataReader().read(path)

        assert record.image.make == "Canon"
        assert record.image.model == "EOS R5"
        assert record.exif.focal_length == 50.0
        assert record.exif.f_number == pytest.approx(1.8)
        assert record.exif.iso == 100.0
        assert record.exif.exposure_time == pytest.approx(0.005)
        assert record.exif.lens_make == "Canon"
        assert record.exif.lens_model == "RF50mm F1.8 STM"

    def test_reads_camera_only_record(self, tmp_path):
        path = create_test_jpeg(
            tmp_path / "camera.jpg", 32, 32, exif=build_exif(make="Nikon", model="Z6")
        )

        record = PillowMetadataReader().read(path)

        assert record.image.make == "Nikon"
        assert record.exif.focal_length is None
        assert record.exif.lens_model is None

    def test_file_without_exif_raises_decode_error(self, tmp_path):
        path = create_test_jpeg(tmp_path / "bare.jpg", 32, 32)

        with pytest.raises(MetadataDecodeError, match="No EXIF"):
            PillowMetadataReader().read(path)

    def test_non_image_raises_decode_error(self, tmp_path):
        path = tmp_path / "notes.jpg"
        path.write_bytes(b"definitely not a jpeg")

        with pytest.raises(MetadataDecodeError, match="Unsupported image format"):
            PillowMetadataReader().read(path)

    def test_png_without_exif_raises_decode_error(self, tmp_path):
        path = tmp_path / "image.png"
        path.write_bytes(create_test_image(16, 16, fmt="PNG"))

        with pytest.raises(MetadataDecodeError):
            PillowMetadataReader().read(path)

    def test_missing_file_raises_io_error(self, tmp_path):
        with pytest.raises(ImageIOError):
            PillowMetadataReader().read(tmp_path / "missing.jpg")
