import pandas as pd
import pytest


@pytest.fixture
def measurement_frame() -> pd.DataFrame:
    """
    Four subjects: three valid, one with a weight nobody weighs.
    Headers use the spellings people type into spreadsheets.
    """
    return pd.DataFrame(
        {
            "Weight (kg)": [70, 45, 120, 1500],
            "Height": [175, 160, 1.7, 180],
            "Unit": ["cm", "cm", "m", "cm"],
        },
        index=pd.Index(["S1", "S2", "S3", "S4"], name="subject"),
    )


@pytest.fixture
def measurement_workbook(tmp_path, measurement_frame) -> str:
    path = tmp_path / "measurements.xlsx"
    with pd.ExcelWriter(path, engine="openpyxl") as w:
        measurement_frame.to_excel(w, sheet_name="clinic")
    return str(path)


@pytest.fixture
def measurement_csv(tmp_path, measurement_frame) -> str:
    path = tmp_path / "measurements.csv"
    measurement_frame.to_csv(path)
    return str(path)
