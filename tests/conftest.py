"""Pytest configuration and fixtures.

Sets the required environment variables before any test module imports
the package, and provides helpers that build input files in tmp_path.
"""

import os

os.environ.setdefault("COMPANIES_HOUSE_API_KEY", "test-api-key")

import pytest
from openpyxl import Workbook

from chargecheck.config import Settings


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a fake base URL and a tmp report path."""
    return Settings(
        api_key="test-api-key",
        base_url="https://registry.example.test",
        output_path=tmp_path / "matched_charges.xlsx",
    )


@pytest.fixture
def make_csv(tmp_path):
    """Write CSV text to tmp_path and return the path."""

    def _make(text, name="companies.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _make


@pytest.fixture
def make_xlsx(tmp_path):
    """Build an .xlsx with a title row, a header row, and the given cells.

    `cells` maps addresses like "B3" to values.
    """

    def _make(cells, name="companies.xlsx"):
        wb = Workbook()
        ws = wb.active
        ws["A1"] = "Companies to check"
        ws["A2"] = "Name"
        ws["B2"] = "Company Number"
        for address, value in cells.items():
            ws[address] = value
        path = tmp_path / name
        wb.save(path)
        return path

    return _make


class FakeRegistry:
    """In-memory stand-in for RegistryClient that records every lookup."""

    def __init__(self, charges=None, profiles=None, officers=None):
        self.charges = charges or {}
        self.profiles = profiles or {}
        self.officers = officers or {}
        self.calls = []

    def fetch_charges(self, company_number):
        self.calls.append(("charges", company_number))
        return list(self.charges.get(company_number, []))

    def fetch_profile(self, company_number):
        self.calls.append(("profile", company_number))
        return dict(self.profiles.get(company_number, {}))

    def fetch_officers(self, company_number):
        self.calls.append(("officers", company_number))
        return list(self.officers.get(company_number, []))


@pytest.fixture
def three_company_registry():
    """Three companies with 0, 1 and 2 charges."""
    return FakeRegistry(
        charges={
            "00000001": [],
            "00000002": [{"persons_entitled": [{"name": "Swishfund LTD"}]}],
            "00000003": [
                {"persons_entitled": [{"name": "Barclays Bank PLC"}]},
                {"persons_entitled": [{"name": "Liquid Link Limited"}, {"name": "HSBC UK Bank PLC"}]},
            ],
        },
        profiles={
            "00000002": {
                "company_name": "BETA LTD",
                "type": "ltd",
                "date_of_creation": "2015-03-01",
                "registered_office_address": {"address_line_1": "2 Lane", "locality": "Leeds"},
                "accounts": {"overdue": True, "last_accounts": {"type": "dormant"}},
                "confirmation_statement": {"overdue": False},
            },
            "00000003": {
                "company_name": "GAMMA LTD",
                "type": "ltd",
                "date_of_creation": "2009-11-20",
                "registered_office_address": {"address_line_1": "3 Street", "postal_code": "M1 1AA"},
                "accounts": {"overdue": False, "last_accounts": {"type": "full"}},
                "confirmation_statement": {"overdue": True},
            },
        },
        officers={
            "00000002": [{"name": "BROWN, Sam", "officer_role": "director"}],
            "00000003": [
                {"name": "GREEN, Pat", "officer_role": "secretary"},
                {"name": "WHITE, Alex", "officer_role": "director"},
                {"name": "BLACK, Jo", "officer_role": "director"},
            ],
        },
    )
