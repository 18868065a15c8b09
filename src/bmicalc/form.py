"""
Form state for an interactive BMI calculator.

The engine is stateless; whatever the user has typed so far lives here and is
passed back in on every call. Transitions return a new FormState together with
the notification the presentation layer should show.
"""

import typing
from collections import namedtuple
from dataclasses import dataclass, replace

from .engine import BMIResult, calculate
from .measurement import HeightUnit
from .validation import ValidationFailure

Notification = namedtuple("Notification", ["title", "description", "destructive"])


@dataclass(frozen=True)
class FormState:
    """
    Snapshot of the calculator form.

    Attributes:
        weight: Weight text as typed (kilograms).
        height: Height text as typed, in `height_unit`.
        height_unit: Unit the height field is currently in.
        result: Last successful calculation, if any.
        failure: Last rejected submission, if any.
    """

    weight: str = ""
    height: str = ""
    height_unit: HeightUnit = HeightUnit.CENTIMETER
    result: typing.Optional[BMIResult] = None
    failure: typing.Optional[ValidationFailure] = None

    def submit(self) -> tuple["FormState", Notification]:
        outcome = calculate(self.weight, self.height, self.height_unit)
        if isinstance(outcome, ValidationFailure):
            state = replace(self, result=None, failure=outcome)
            return state, Notification(outcome.title, outcome.message, True)
        state = replace(self, result=outcome, failure=None)
        return state, Notification("BMI Calculated", outcome.summary, False)

    def clear(self) -> tuple["FormState", Notification]:
        state = FormState(height_unit=self.height_unit)
        return state, Notification("Inputs Cleared", "All fields have been reset.", False)

    def toggle_unit(self) -> "FormState":
        # the height text belongs to the old unit
        return replace(self, height="", height_unit=self.height_unit.toggled())
