"""
loader.py - Input File Loader
==============================
This module reads company numbers from an Excel (.xlsx, .xls) or CSV file.

Input Layout:
-------------
Company numbers are read from column B starting at row 3 (rows 1-2 hold a
title and headers). Reading stops at the first empty cell in column B, so
the numbers must form one unbroken run:

        A           B
    1   Companies to check
    2   Name        Company Number
    3   Acme Ltd    01234567      <- first number read
    4   Beta Ltd    SC123456
    5                             <- stops here, row 6 is never read
    6   Gamma Ltd   09876543

Both formats are parsed with pandas and exposed through the same
TabularSource interface, so the scan rule lives in one place.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

import pandas as pd


# Column B, row 3 (both 1-based, as shown in a spreadsheet)
COMPANY_NUMBER_COLUMN = 2
FIRST_DATA_ROW = 3

CSV_SUFFIXES = ('.csv',)
EXCEL_SUFFIXES = ('.xlsx', '.xls')


# =============================================================================
# TABULAR SOURCES
# =============================================================================

class TabularSource(ABC):
    """Read-only grid of cells addressed by 1-based (row, column)."""

    @abstractmethod
    def cell(self, row: int, col: int) -> str | None:
        """
        Return the trimmed text of a cell.

        Returns None when the cell is outside the data or blank.
        """


class DataFrameSource(TabularSource):
    """A TabularSource over a header-less DataFrame read with dtype=str."""

    def __init__(self, frame: pd.DataFrame):
        self.frame = frame

    def cell(self, row: int, col: int) -> str | None:
        r, c = row - 1, col - 1
        if r < 0 or c < 0 or r >= self.frame.shape[0] or c >= self.frame.shape[1]:
            return None

        value = self.frame.iat[r, c]
        if value is None or pd.isna(value):
            return None

        text = str(value).strip()
        return text if text else None


class CsvSource(DataFrameSource):
    """
    CSV input. Blank lines are skipped before rows are numbered, so a
    blank line between the header and the data does not count as a row.
    """

    def __init__(self, filepath: str | Path):
        frame = pd.read_csv(
            filepath,
            header=None,           # No header row: positions are what matter
            dtype=str,             # Keep leading zeros in company numbers
            keep_default_na=False, # "NA" is a valid string, not a missing value
            skip_blank_lines=True,
        )
        super().__init__(frame)


class ExcelSource(DataFrameSource):
    """First worksheet of an .xlsx (openpyxl) or .xls (xlrd) workbook."""

    def __init__(self, filepath: str | Path):
        frame = pd.read_excel(
            filepath,
            sheet_name=0,
            header=None,
            dtype=str,
        )
        super().__init__(frame)


# =============================================================================
# MAIN DATA LOADER
# =============================================================================

def open_source(filepath: str | Path) -> TabularSource:
    """
    Open an input file as a TabularSource, choosing the parser by extension.

    Raises:
        FileNotFoundError: If the input file doesn't exist
        ValueError: If the file type is unsupported or the file can't be parsed
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {filepath}")

    suffix = path.suffix.lower()
    try:
        if suffix in CSV_SUFFIXES:
            return CsvSource(path)
        if suffix in EXCEL_SUFFIXES:
            return ExcelSource(path)
    except pd.errors.EmptyDataError:
        # An empty CSV has no cells at all
        return DataFrameSource(pd.DataFrame())
    except pd.errors.ParserError as e:
        raise ValueError(f"Could not parse {path.name}: {e}") from e

    raise ValueError(
        f"Unsupported file type: {path.suffix or '(none)'}. "
        "Only .csv, .xlsx, and .xls files are supported."
    )


def extract_company_numbers(
    source: TabularSource,
    column: int = COMPANY_NUMBER_COLUMN,
    start_row: int = FIRST_DATA_ROW,
) -> List[str]:
    """
    Read company numbers down one column until the first blank cell.

    Args:
        source: Any TabularSource
        column: 1-based column to read (default: B)
        start_row: 1-based row to start from (default: 3)

    Returns:
        Trimmed company numbers in file order. Empty when the first cell is blank.
    """
    numbers = []
    row = start_row
    while True:
        value = source.cell(row, column)
        if value is None:
            break
        numbers.append(value)
        row += 1
    return numbers


def load_company_numbers(filepath: str | Path) -> List[str]:
    """
    Load company numbers from column B (row 3 onwards) of a CSV or Excel file.

    The list is not capped here; run_report applies the configured limit.

    Example:
        load_company_numbers("companies.xlsx") -> ['01234567', 'SC123456']
    """
    return extract_company_numbers(open_source(filepath))
