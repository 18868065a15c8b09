import pathlib

import pandas as pd

# Columns that need renaming → canonical measurement fields
RENAME_MAP = {
    "wt": "weight",
    "mass": "weight",
    "weight_kg": "weight",
    "ht": "height",
    "stature": "height",
    "unit": "height_unit",
    "units": "height_unit",
    "height_units": "height_unit",
}

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}


def _normalize_headers(df: pd.DataFrame) -> pd.DataFrame:
    # CLEAN & NORMALIZE headers:
    df.columns = (
        df.columns.astype(str)
        .str.strip()
        .str.replace(r"\s*\(.*?\)", "", regex=True)  # drop any "(…)"
        .str.replace(r"\s+", "_", regex=True)  # spaces → underscore
        .str.replace(":", "", regex=False)  # drop colons
        .str.lower()
    )

    # apply specific renames (e.g. "wt" → "weight")
    return df.rename(
        columns={
            orig: target
            for orig, target in RENAME_MAP.items()
            if orig in df.columns
        }
    )


def load_measurement_tables(path: str) -> dict[str, pd.DataFrame]:
    """
    Read a CSV file or every worksheet of an Excel workbook into DataFrames:
      - first row = header
      - first column = index (subject identifier)
      - normalize all headers to snake_case lowercase
      - apply renames from RENAME_MAP
    A CSV file yields a single table named after the file stem.
    """
    source = pathlib.Path(path)
    suffix = source.suffix.lower()
    tables: dict[str, pd.DataFrame] = {}

    if suffix == ".csv":
        df = pd.read_csv(source, header=0, index_col=0, dtype=str, keep_default_na=False)
        tables[source.stem] = _normalize_headers(df)
    elif suffix in EXCEL_SUFFIXES:
        excel = pd.ExcelFile(source, engine="openpyxl")
        for sheet_name in excel.sheet_names:
            df = pd.read_excel(
                excel, sheet_name=sheet_name, header=0, index_col=0, engine="openpyxl"
            )
            tables[sheet_name] = _normalize_headers(df)
    else:
        raise ValueError(f"Unsupported measurement file type {suffix!r}: expected .csv or .xlsx")

    return tables
