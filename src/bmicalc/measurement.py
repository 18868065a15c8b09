"""
Measurement domain model.

Defines the HeightUnit enumeration and the Measurement dataclass holding a
validated weight/height pair.
"""

import math
from dataclasses import dataclass
from enum import Enum


class InvariantViolation(ValueError):
    """
    Raised when a caller hands the engine data that never went through validation.
    Expected bad user input is reported as a ValidationFailure instead.
    """


class HeightUnit(Enum):
    """
    Units accepted for height input.
    Each member carries its abbreviation and its realistic height range.
    """
    CENTIMETER = ("cm", 50.0, 300.0)
    METER = ("m", 0.5, 3.0)

    def __init__(self, abbreviation: str, minimum: float, maximum: float):
        self.abbreviation = abbreviation
        self.minimum = minimum
        self.maximum = maximum

    @classmethod
    def from_label(cls, label: str) -> "HeightUnit":
        """
        Convert a human-readable unit label into the corresponding enum.
        Accepts abbreviations and British/American spellings, singular or plural.
        """
        key = str(label).strip().lower().rstrip(".")
        mapping = {
            "cm": cls.CENTIMETER,
            "centimeter": cls.CENTIMETER,
            "centimeters": cls.CENTIMETER,
            "centimetre": cls.CENTIMETER,
            "centimetres": cls.CENTIMETER,
            "m": cls.METER,
            "meter": cls.METER,
            "meters": cls.METER,
            "metre": cls.METER,
            "metres": cls.METER,
        }
        try:
            return mapping[key]
        except KeyError:
            raise ValueError(f"Unknown height unit label: {label!r}")

    def toggled(self) -> "HeightUnit":
        return HeightUnit.METER if self is HeightUnit.CENTIMETER else HeightUnit.CENTIMETER


@dataclass(frozen=True)
class Measurement:
    """
    A validated weight/height pair.

    Attributes:
        weight_kg: Body weight in kilograms.
        height_value: Height as entered, in `height_unit`.
        height_unit: Unit of `height_value`; conversion to meters happens at compute time.
    """

    weight_kg: float
    height_value: float
    height_unit: HeightUnit

    def __post_init__(self):
        if not isinstance(self.height_unit, HeightUnit):
            raise InvariantViolation(
                f"height_unit must be a HeightUnit, got {type(self.height_unit).__name__}"
            )
        for name in ("weight_kg", "height_value"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvariantViolation(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value) or value <= 0:
                raise InvariantViolation(f"{name} must be finite and positive, got {value!r}")

    @property
    def height_m(self) -> float:
        if self.height_unit is HeightUnit.CENTIMETER:
            return self.height_value / 100
        return self.height_value
