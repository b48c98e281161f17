"""
rows.py - Output Row Builder
=============================
Turns one company's charges, profile and officers into flat report rows,
one row per charge. The row keys are the report's column headers.
"""

import logging
from typing import Any, Dict, List, Mapping

logger = logging.getLogger(__name__)


# Column order of the report; every output row has exactly these keys
OUTPUT_COLUMNS = [
    "Company Name",
    "Company Number",
    "Company Type",
    "Incorporation Date",
    "Registered Office Address",
    "Director Name",
    "Dormant Latest Accounts?",
    "Accounts Overdue?",
    "Confirmation Statement Overdue?",
    "Charge Holders",
]


def yes_no(flag: Any) -> str:
    return "Yes" if flag else "No"


def format_address(address: Mapping[str, Any] | None) -> str:
    """
    Render a registered office address as one line.

    All values are joined with ", " in the order the mapping provides them:
        {"address_line_1": "1 Road", "locality": "Town", "postal_code": "AB1 2CD"}
        -> "1 Road, Town, AB1 2CD"
    """
    if not address:
        return ""
    return ", ".join("" if value is None else str(value) for value in address.values())


def find_director(officers: List[Dict[str, Any]]) -> Dict[str, Any]:
    """First officer whose role is "director", or {} when there is none."""
    for officer in officers:
        if officer.get("officer_role") == "director":
            return officer
    return {}


def charge_holders(charge: Mapping[str, Any]) -> str:
    """Names of the persons entitled to a charge, joined with "; "."""
    parties = charge.get("persons_entitled") or []
    return "; ".join((party or {}).get("name") or "" for party in parties)


def build_output_rows(
    company_number: str,
    charges: List[Dict[str, Any]],
    profile: Dict[str, Any],
    officers: List[Dict[str, Any]],
) -> List[Dict[str, str]]:
    """
    Build the report rows for one company.

    Args:
        company_number: Number as read from the input file
        charges: Charges to report (already filtered)
        profile: Company profile, {} when the lookup failed
        officers: Company officers, [] when the lookup failed

    Returns:
        One row per charge (an empty list when there are no charges).
        Every row shares the company and director fields and differs
        only in "Charge Holders".
    """
    if not charges:
        return []

    director = find_director(officers)
    accounts = profile.get("accounts") or {}
    last_accounts = accounts.get("last_accounts") or {}
    confirmation = profile.get("confirmation_statement") or {}

    company_fields = {
        "Company Name": profile.get("company_name") or "",
        "Company Number": company_number,
        "Company Type": profile.get("type") or "",
        "Incorporation Date": profile.get("date_of_creation") or "",
        "Registered Office Address": format_address(profile.get("registered_office_address")),
        "Director Name": director.get("name") or "",
        "Dormant Latest Accounts?": yes_no(last_accounts.get("type") == "dormant"),
        "Accounts Overdue?": yes_no(accounts.get("overdue")),
        "Confirmation Statement Overdue?": yes_no(confirmation.get("overdue")),
    }

    return [
        {**company_fields, "Charge Holders": charge_holders(charge)}
        for charge in charges
    ]


def collect_company_rows(registry, company_number: str) -> List[Dict[str, str]]:
    """
    Look up one company and build its rows.

    Profile and officers are only fetched when the company has at least one
    charge, and only once however many charges it has.
    """
    charges = registry.fetch_charges(company_number)
    if not charges:
        logger.debug(f"No charges for {company_number}")
        return []

    profile = registry.fetch_profile(company_number)
    officers = registry.fetch_officers(company_number)
    rows = build_output_rows(company_number, charges, profile, officers)
    logger.info(f"{company_number}: {len(rows)} charge(s) found")
    return rows
