"""Custom exceptions and error translation for the EXIF labeler."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Type, TypeVar

from .logging_config import get_logger


class ExifLabelerError(Exception):
    """Base exception for all EXIF labeler errors."""


class MetadataDecodeError(ExifLabelerError):
    """Raised when a file is unreadable or carries no usable EXIF block."""


class RenderError(ExifLabelerError):
    """Raised when the caption label cannot be built or placed."""


class ImageIOError(ExifLabelerError):
    """Raised when a source can't be read, or an output can't be written."""


class ConfigurationError(ExifLabelerError):
    """Error raised for invalid configuration options."""


F = TypeVar("F", bound=Callable[..., Any])


def with_error_handling(
    error_cls: Type[ExifLabelerError] = ExifLabelerError,
) -> Callable[[F], F]:
    """
    Wrap a collaborator call so that foreign exceptions surface as ``error_cls``.

    Errors already belonging to the labeler hierarchy pass through untouched,
    anything else is logged and re-raised as ``error_cls`` chained to the
    original exception.
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            logger = get_logger("exif-labeler.errors")
            try:
                return func(*args, **kwargs)
            except ExifLabelerError:
                raise
            except Exception as exc:  # noqa: BLE001
                logger.debug(
                    f"Translating {type(exc).__name__} from {func.__name__} "
                    f"into {error_cls.__name__}"
                )
                raise error_cls(f"{func.__name__} failed: {exc}") from exc

        return wrapper  # type: ignore[return-value]

    return decorator
