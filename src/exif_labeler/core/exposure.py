"""Formatting of exposure times and other numeric EXIF values."""

from fractions import Fraction
from typing import Optional, Union

from .models import LabelerConfig

Number = Union[int, float]

MAX_DENOMINATOR = 1_000_000
RELATIVE_TOLERANCE = 1e-9


def format_number(value: Number) -> str:
    """Render a number the way it reads on a camera display: ``50`` not ``50.0``."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return str(number)


def exposure_fraction(exposure_time: Number) -> Fraction:
    """
    Reduced fraction for an exposure time.

    Starts from the shortest decimal repr so 0.005 is read as 5/1000, not as
    the binary float's exact value. The denominator is capped to fold
    repeating decimals (1/60) back into their fraction, unless the capped
    value drifts from the input, as it does for sub-microsecond exposures.
    """
    exact = Fraction(repr(float(exposure_time)))
    bounded = exact.limit_denominator(MAX_DENOMINATOR)
    if abs(bounded - exact) > abs(exact) * RELATIVE_TOLERANCE:
        return exact
    return bounded


def format_exposure_time(
    exposure_time: Optional[Number],
    threshold: float = LabelerConfig().exposure_threshold,
) -> Optional[str]:
    """
    Format an exposure time in seconds for a caption.

    Long exposures (above ``threshold``) are shown in decimal seconds with a
    trailing double quote, e.g. ``2.5"``. Everything else becomes a reduced
    fraction, e.g. ``1/200s``.

    Args:
        exposure_time: Exposure in seconds, or None when the tag is missing
        threshold: Boundary between decimal and fractional display

    Returns:
        The formatted string, or None when there is nothing to format
    """
    if exposure_time is None:
        return None

    if exposure_time > threshold:
        return f'{format_number(exposure_time)}"'

    fraction = exposure_fraction(exposure_time)
    return f"{fraction.numerator}/{fraction.denominator}s"
