import pytest
from bmicalc.category import Category
from bmicalc.engine import BMIResult, calculate, compute, round_half_away
from bmicalc.measurement import HeightUnit, InvariantViolation, Measurement
from bmicalc.validation import FailureKind, ValidationFailure


def test_compute_rounds_to_one_decimal():
    """70 / 1.75² = 22.857… which shows as 22.9."""
    result = compute(Measurement(70.0, 175.0, HeightUnit.CENTIMETER))
    assert result.value == 22.9
    assert result.category is Category.NORMAL
    assert result.description == "BMI 18.5 - 24.9"


def test_centimeters_and_meters_agree():
    in_cm = compute(Measurement(70.0, 175.0, HeightUnit.CENTIMETER))
    in_m = compute(Measurement(70.0, 1.75, HeightUnit.METER))
    assert in_cm == in_m


def test_compute_is_idempotent():
    m = Measurement(82.5, 181.0, HeightUnit.CENTIMETER)
    assert compute(m) == compute(m)


def test_category_follows_rounded_value():
    """24.96 rounds to 25.0, so the shown category must be Overweight, not Normal."""
    # 78 / 1.7677² ≈ 24.962
    result = compute(Measurement(78.0, 176.77, HeightUnit.CENTIMETER))
    assert result.value == 25.0
    assert result.category is Category.OVERWEIGHT


@pytest.mark.parametrize(
    "value, digits, expected",
    [(228.5, 0, 229.0), (0.25, 1, 0.3), (-0.25, 1, -0.3), (17.578, 1, 17.6), (22.857, 1, 22.9)],
)
def test_round_half_away(value, digits, expected):
    assert round_half_away(value, digits) == expected


def test_compute_refuses_unvalidated_input():
    with pytest.raises(InvariantViolation):
        compute(("70", "175", "cm"))


@pytest.mark.parametrize(
    "weight, height, unit, value, category",
    [
        ("70", "175", HeightUnit.CENTIMETER, 22.9, Category.NORMAL),
        ("45", "160", HeightUnit.CENTIMETER, 17.6, Category.UNDERWEIGHT),
        ("120", "1.7", HeightUnit.METER, 41.5, Category.OBESITY_III),
    ],
)
def test_calculate_end_to_end(weight, height, unit, value, category):
    result = calculate(weight, height, unit)
    assert isinstance(result, BMIResult)
    assert result.value == value
    assert result.category is category


def test_calculate_returns_failure_instead_of_raising():
    failure = calculate("abc", "175", HeightUnit.CENTIMETER)
    assert isinstance(failure, ValidationFailure)
    assert failure.kind is FailureKind.NOT_NUMERIC


def test_summary_matches_notification_text():
    result = calculate("70", "175", HeightUnit.CENTIMETER)
    assert result.summary == "Your BMI is 22.9 (Normal Weight)"
