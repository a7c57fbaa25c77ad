"""Tests for core data models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from exif_labeler.core.exceptions import ConfigurationError
from exif_labeler.core.models import (
    ExifRecord,
    LabelerConfig,
    LabelResult,
    RunState,
    RunSummary,
)


class TestLabelerConfig:
    """Tests for LabelerConfig."""

    def test_defaults(self):
        config = LabelerConfig()
        assert config.input_dir == Path("images/original")
        assert config.output_dir == Path("images/output")
        assert config.extensions == (".jpg", ".jpeg")
        assert config.font_size == 70
        assert config.margin == 10
        assert config.padding == 32
        assert config.exposure_threshold == 0.3
        assert config.lens_placeholder == "----"
        assert config.jpeg_quality == 95
        assert config.debug is False

    def test_paths_are_coerced(self, tmp_path):
        config = LabelerConfig(input_dir=str(tmp_path / "in"), output_dir=str(tmp_path))
        assert config.input_dir == tmp_path / "in"
        assert isinstance(config.output_dir, Path)

    def test_config_is_immutable(self):
        config = LabelerConfig()
        with pytest.raises(ValidationError):
            config.font_size = 12  # type: ignore[misc]

    @pytest.mark.parametrize(
        "field,value",
        [("font_size", 0), ("margin", -1), ("padding", -5), ("jpeg_quality", 101)],
    )
    def test_invalid_values_rejected(self, field, value):
        with pytest.raises(ValidationError):
            LabelerConfig(**{field: value})

    def test_extensions_are_lowercased(self):
        config = LabelerConfig(extensions=(".JPG", ".Jpeg"))
        assert config.extensions == (".jpg", ".jpeg")

    @pytest.mark.parametrize("extensions", [(), ("jpg",), (".jpg", "."), ("",)])
    def test_invalid_extensions_raise_configuration_error(self, extensions):
        with pytest.raises(ConfigurationError):
            LabelerConfig(extensions=extensions)


class TestExifRecord:
    """Tests for ExifRecord."""

    def test_all_fields_optional(self):
        record = ExifRecord()
        assert record.image.make is None
        assert record.image.model is None
        assert record.exif.focal_length is None
        assert record.exif.f_number is None
        assert record.exif.iso is None
        assert record.exif.exposure_time is None
        assert record.exif.lens_make is None
        assert record.exif.lens_model is None

    def test_nested_construction_from_dict(self):
        record = ExifRecord.model_validate(
            {"image": {"make": "Canon"}, "exif": {"iso": 100, "f_number": "1.8"}}
        )
        assert record.image.make == "Canon"
        assert record.exif.iso == 100.0
        assert record.exif.f_number == 1.8

    def test_record_is_read_only(self):
        record = ExifRecord()
        with pytest.raises(ValidationError):
            record.image = None  # type: ignore[misc,assignment]


class TestRunSummary:
    """Tests for RunSummary."""

    def test_defaults(self):
        summary = RunSummary()
        assert summary.state is RunState.DONE
        assert summary.total_files == 0
        assert summary.processed == []
        assert summary.processed_count == 0

    def test_processed_count(self):
        result = LabelResult(
            filename="a.jpg",
            source_path=Path("in/a.jpg"),
            output_path=Path("out/a.jpg"),
            caption="F2",
        )
        summary = RunSummary(processed=[result], total_files=3)
        assert summary.processed_count == 1
