import abc
import logging
import typing

import pandas as pd
from stairval.notepad import Notepad

from .engine import calculate
from .measurement import HeightUnit
from .validation import ValidationFailure

# Minimal required columns (after renaming) for a measurement table
REQUIRED_COLUMNS = {"weight", "height"}

RESULT_COLUMNS = [
    "table",
    "subject_id",
    "weight_kg",
    "height",
    "height_unit",
    "bmi",
    "category",
    "description",
]


class TableCalculator(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def apply(self, tables: dict[str, pd.DataFrame], notepad: Notepad) -> pd.DataFrame:
        # return one output row per accepted measurement; problems go to the notepad
        raise NotImplementedError


class BatchCalculator(TableCalculator):
    def __init__(self, default_unit: HeightUnit = HeightUnit.CENTIMETER):
        """
        `default_unit` applies to rows without a `height_unit` value of their own.
        """
        self.default_unit = default_unit

    def apply(self, tables: dict[str, pd.DataFrame], notepad: Notepad) -> pd.DataFrame:
        """
        Process:
        1) check each table carries weight and height columns, each exactly once
        2) run every row through the engine
        3) record rejected rows on the notepad
        4) return the accepted rows as one DataFrame
        """
        rows: list[dict[str, typing.Any]] = []
        for table_name, df in tables.items():
            missing = REQUIRED_COLUMNS - set(df.columns)
            if missing:
                notepad.add_error(f"Table {table_name!r}: missing required columns: {sorted(missing)}")
                continue
            duplicated = sorted(set(df.columns[df.columns.duplicated()]))
            if duplicated:
                notepad.add_error(f"Table {table_name!r}: duplicate columns after renaming: {duplicated}")
                continue
            logging.debug(f"Table {table_name!r}: {len(df)} rows")
            rows.extend(self._map_table(table_name, df, notepad))
        return pd.DataFrame(rows, columns=RESULT_COLUMNS)

    def _map_table(self, table_name: str, df: pd.DataFrame, notepad: Notepad) -> list[dict[str, typing.Any]]:
        records: list[dict[str, typing.Any]] = []
        for index, row in df.iterrows():
            try:
                unit = self._row_unit(row.get("height_unit"))
            except ValueError as exception:
                notepad.add_error(f"Table {table_name!r}, row {index!r}: {exception}")
                continue

            outcome = calculate(self._to_text(row["weight"]), self._to_text(row["height"]), unit)
            if isinstance(outcome, ValidationFailure):
                notepad.add_error(f"Table {table_name!r}, row {index!r}: {outcome.title}: {outcome.message}")
                continue

            records.append(
                {
                    "table": table_name,
                    "subject_id": str(index),
                    "weight_kg": float(self._to_text(row["weight"])),
                    "height": float(self._to_text(row["height"])),
                    "height_unit": unit.abbreviation,
                    "bmi": outcome.value,
                    "category": outcome.category.label,
                    "description": outcome.description,
                }
            )
        return records

    def _row_unit(self, value: typing.Any) -> HeightUnit:
        text = self._to_text(value)
        if not text:
            return self.default_unit
        return HeightUnit.from_label(text)

    @staticmethod
    def _to_text(value: typing.Any) -> str:
        """
        Cells arrive as strings (CSV) or numbers (Excel):
        - None, NaN and blank strings -> empty string
        - everything else -> its trimmed string form
        """
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            return ""
        return str(value).strip()
