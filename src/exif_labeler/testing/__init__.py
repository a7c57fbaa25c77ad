"""Testing utilities and fakes for the EXIF labeler."""

from .fakes import (
    FakeImageCompositor,
    FakeLogger,
    FakeMetadataReader,
    build_exif,
    create_test_image,
    create_test_jpeg,
    make_record,
)

__all__ = [
    "FakeImageCompositor",
    "FakeLogger",
    "FakeMetadataReader",
    "build_exif",
    "create_test_image",
    "create_test_jpeg",
    "make_record",
]
