"""Tests for reading company numbers from input files."""

import pandas as pd
import pytest

from chargecheck.loader import (
    DataFrameSource,
    extract_company_numbers,
    load_company_numbers,
    open_source,
)


HEADER = "Companies to check,\nName,Company Number\n"


class TestCsvInput:
    """Company numbers from CSV files."""

    def test_reads_column_b_from_row_3(self, make_csv):
        path = make_csv(HEADER + "Acme Ltd,01234567\nBeta Ltd, SC123456 \n")

        assert load_company_numbers(path) == ["01234567", "SC123456"]

    def test_stops_at_first_blank_cell(self, make_csv):
        path = make_csv(
            HEADER
            + "Acme Ltd,01234567\n"
            + "Beta Ltd,SC123456\n"
            + "Gap Ltd,\n"
            + "Gamma Ltd,09876543\n"
        )

        assert load_company_numbers(path) == ["01234567", "SC123456"]

    def test_whitespace_only_cell_counts_as_blank(self, make_csv):
        path = make_csv(HEADER + "Acme Ltd,01234567\nBeta Ltd,   \nGamma Ltd,09876543\n")

        assert load_company_numbers(path) == ["01234567"]

    def test_blank_lines_are_not_counted_as_rows(self, make_csv):
        path = make_csv("Companies to check,\n\nName,Company Number\nAcme Ltd,01234567\n")

        assert load_company_numbers(path) == ["01234567"]

    def test_header_only_file_yields_nothing(self, make_csv):
        path = make_csv(HEADER)

        assert load_company_numbers(path) == []

    def test_empty_file_yields_nothing(self, make_csv):
        path = make_csv("")

        assert load_company_numbers(path) == []

    def test_uppercase_extension_is_accepted(self, make_csv):
        path = make_csv(HEADER + "Acme Ltd,01234567\n", name="COMPANIES.CSV")

        assert load_company_numbers(path) == ["01234567"]

    def test_does_not_cap_long_lists(self, make_csv):
        body = "".join(f"Company {i},{i:08d}\n" for i in range(600))
        path = make_csv(HEADER + body)

        assert len(load_company_numbers(path)) == 600


class TestExcelInput:
    """Company numbers from .xlsx workbooks."""

    def test_reads_column_b_from_row_3(self, make_xlsx):
        path = make_xlsx({"A3": "Acme Ltd", "B3": "01234567", "A4": "Beta Ltd", "B4": "SC123456"})

        assert load_company_numbers(path) == ["01234567", "SC123456"]

    def test_gap_in_column_b_truncates(self, make_xlsx):
        path = make_xlsx({
            "B3": "01234567",
            "B4": "SC123456",
            "A5": "no number here",
            "B6": "09876543",
        })

        assert load_company_numbers(path) == ["01234567", "SC123456"]

    def test_numeric_cells_are_read_as_text(self, make_xlsx):
        path = make_xlsx({"B3": 1234567, "B4": "OC301234"})

        assert load_company_numbers(path) == ["1234567", "OC301234"]

    def test_values_are_trimmed(self, make_xlsx):
        path = make_xlsx({"B3": "  01234567  "})

        assert load_company_numbers(path) == ["01234567"]


class TestFileErrors:
    """Unreadable and unsupported inputs."""

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "companies.txt"
        path.write_text("01234567\n")

        with pytest.raises(ValueError, match="Unsupported file type"):
            load_company_numbers(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_company_numbers(tmp_path / "missing.csv")


class TestTabularSource:
    """The shared cell(row, col) view."""

    def test_cell_is_one_based(self):
        source = DataFrameSource(pd.DataFrame([["a", "b"], ["c", "d"]]))

        assert source.cell(1, 1) == "a"
        assert source.cell(2, 2) == "d"

    def test_cell_outside_grid_is_none(self):
        source = DataFrameSource(pd.DataFrame([["a", "b"]]))

        assert source.cell(5, 1) is None
        assert source.cell(1, 9) is None
        assert source.cell(0, 1) is None

    def test_missing_values_are_none(self):
        source = DataFrameSource(pd.DataFrame([[None, float("nan"), ""]]))

        assert source.cell(1, 1) is None
        assert source.cell(1, 2) is None
        assert source.cell(1, 3) is None

    def test_extract_with_custom_position(self):
        source = DataFrameSource(pd.DataFrame([["x"], ["01234567"], ["SC123456"]]))

        assert extract_company_numbers(source, column=1, start_row=2) == ["01234567", "SC123456"]

    def test_open_source_dispatches_by_extension(self, make_csv, make_xlsx):
        csv_source = open_source(make_csv(HEADER + "Acme Ltd,01234567\n"))
        xlsx_source = open_source(make_xlsx({"B3": "SC123456"}))

        assert csv_source.cell(3, 2) == "01234567"
        assert xlsx_source.cell(3, 2) == "SC123456"
