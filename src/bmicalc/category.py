"""
Category domain model.

Defines the six weight-status categories and the lookup from a BMI value.
"""

from enum import Enum


class Category(Enum):
    """
    Ordered weight-status classifications.
    Each member carries its display label, its description and its inclusive lower bound.
    """
    UNDERWEIGHT = ("Underweight", "BMI less than 18.5", 0.0)
    NORMAL = ("Normal Weight", "BMI 18.5 - 24.9", 18.5)
    OVERWEIGHT = ("Overweight", "BMI 25.0 - 29.9", 25.0)
    OBESITY_I = ("Obesity Class I", "BMI 30.0 - 34.9", 30.0)
    OBESITY_II = ("Obesity Class II", "BMI 35.0 - 39.9", 35.0)
    OBESITY_III = ("Obesity Class III", "BMI 40.0 and above", 40.0)

    def __init__(self, label: str, description: str, lower_bound: float):
        self.label = label
        self.description = description
        self.lower_bound = lower_bound


def categorize(bmi: float) -> Category:
    """
    Map a BMI value to its category.
    Lower bounds are inclusive, so a value sitting on a boundary belongs to the higher category.
    """
    found = Category.UNDERWEIGHT
    for category in Category:
        if bmi >= category.lower_bound:
            found = category
    return found
