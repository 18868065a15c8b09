"""
BMI computation.

`calculate` is the single operation a presentation layer needs: raw text in,
a BMIResult or a ValidationFailure out. `compute` and `categorize` are exposed
separately so each step can be tested on its own.
"""

import logging
import math
import typing
from dataclasses import dataclass

from .category import Category, categorize
from .measurement import HeightUnit, InvariantViolation, Measurement
from .validation import ValidationFailure, validate


@dataclass(frozen=True)
class BMIResult:
    """
    Represents a computed BMI.

    Attributes:
        value: BMI rounded to one decimal place.
        category: Category of the rounded value.
        description: Range description of the category (e.g. 'BMI 18.5 - 24.9').
    """

    value: float
    category: Category
    description: str

    @property
    def summary(self) -> str:
        return f"Your BMI is {self.value} ({self.category.label})"


def round_half_away(value: float, digits: int = 1) -> float:
    """
    Round to `digits` decimals with ties going away from zero.
    Unlike the built-in `round`, ties never go to the even neighbour.
    """
    scale = 10 ** digits
    return math.copysign(math.floor(abs(value) * scale + 0.5), value) / scale


def compute(measurement: Measurement) -> BMIResult:
    """
    Compute BMI from a validated Measurement.
    The category is derived from the rounded value so the shown number and category never disagree.
    """
    if not isinstance(measurement, Measurement):
        raise InvariantViolation(
            f"compute expects a validated Measurement, got {type(measurement).__name__}"
        )

    height_m = measurement.height_m
    bmi_raw = measurement.weight_kg / (height_m * height_m)
    value = round_half_away(bmi_raw)
    category = categorize(value)
    return BMIResult(value=value, category=category, description=category.description)


def calculate(
    weight_raw: str, height_raw: str, height_unit: HeightUnit
) -> typing.Union[BMIResult, ValidationFailure]:
    """Validate raw form text and, if it passes, compute the BMI."""
    validated = validate(weight_raw, height_raw, height_unit)
    if isinstance(validated, ValidationFailure):
        logging.info(f"Input rejected ({validated.kind.name}): {validated.message}")
        return validated
    result = compute(validated)
    logging.debug(
        f"BMI {result.value} ({result.category.name}) from "
        f"{validated.weight_kg} kg / {validated.height_value} {height_unit.abbreviation}"
    )
    return result
