"""
Input validation for raw weight/height text.

Rules run in a fixed order and the first failing rule wins:
  1. both fields present          -> MISSING_INPUT
  2. both fields numeric          -> NOT_NUMERIC
  3. both fields positive         -> NON_POSITIVE
  4. weight at most 1000 kg       -> WEIGHT_OUT_OF_RANGE
  5. height in the unit's range   -> HEIGHT_OUT_OF_RANGE
"""

import logging
import math
import re
import typing
from dataclasses import dataclass
from enum import Enum

from .measurement import HeightUnit, Measurement

MAX_WEIGHT_KG = 1000.0

# optional sign, digits with optional fraction (or a bare fraction), optional exponent
_DECIMAL_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")


class FailureKind(Enum):
    """
    Kinds of user-correctable input errors, each with the headline shown to the user.
    """
    MISSING_INPUT = "Input Error"
    NOT_NUMERIC = "Invalid Input"
    NON_POSITIVE = "Invalid Values"
    WEIGHT_OUT_OF_RANGE = "Invalid Weight"
    HEIGHT_OUT_OF_RANGE = "Invalid Height"


@dataclass(frozen=True)
class ValidationFailure:
    """
    Represents rejected input.

    Attributes:
        kind: Which rule rejected the input.
        message: Text telling the user how to fix it.
    """

    kind: FailureKind
    message: str

    @property
    def title(self) -> str:
        return self.kind.value


def _parse_decimal(raw: str) -> typing.Optional[float]:
    if not _DECIMAL_PATTERN.match(raw):
        return None
    value = float(raw)
    return value if math.isfinite(value) else None


def validate(
    weight_raw: str, height_raw: str, height_unit: HeightUnit
) -> typing.Union[Measurement, ValidationFailure]:
    """
    Turn raw form text into a Measurement, or explain why it cannot be one.
    The height unit is preserved as given; conversion to meters is left to `compute`.
    """
    weight_text = (weight_raw or "").strip()
    height_text = (height_raw or "").strip()

    if not weight_text or not height_text:
        return ValidationFailure(
            FailureKind.MISSING_INPUT, "Please enter both weight and height values."
        )

    weight = _parse_decimal(weight_text)
    height = _parse_decimal(height_text)
    if weight is None or height is None:
        logging.debug(f"Rejected non-numeric input: weight={weight_text!r} height={height_text!r}")
        return ValidationFailure(
            FailureKind.NOT_NUMERIC, "Please enter valid numeric values."
        )

    if weight <= 0 or height <= 0:
        return ValidationFailure(
            FailureKind.NON_POSITIVE, "Weight and height must be positive values."
        )

    if weight > MAX_WEIGHT_KG:
        return ValidationFailure(
            FailureKind.WEIGHT_OUT_OF_RANGE, "Please enter a realistic weight value."
        )

    if not height_unit.minimum <= height <= height_unit.maximum:
        if height_unit is HeightUnit.CENTIMETER:
            bounds = "50-300 cm"
        else:
            bounds = "0.5-3.0 m"
        return ValidationFailure(
            FailureKind.HEIGHT_OUT_OF_RANGE,
            f"Please enter a realistic height value ({bounds}).",
        )

    return Measurement(weight_kg=weight, height_value=height, height_unit=height_unit)
