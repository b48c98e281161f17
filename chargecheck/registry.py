"""
registry.py - Companies House Lookups
======================================
The three per-company lookups the report needs:

- fetch_charges  : GET /company/{number}/charges   -> list of charges
- fetch_profile  : GET /company/{number}           -> company profile dict
- fetch_officers : GET /company/{number}/officers  -> list of officers

Every lookup degrades to an empty value on failure ([] or {}) and logs the
error with the company number, so one unreachable company never stops the run.
"""

import logging
from typing import Any, Dict, List

from .http_client import HttpClient, RegistryRequestError
from .selector import ChargeFilter, keep_all_charges


logger = logging.getLogger(__name__)


class RegistryClient:
    """
    Companies House lookups for one company at a time.

    Args:
        http: Authenticated HttpClient
        charge_filter: Strategy applied by fetch_charges (see selector.py);
            defaults to keeping every charge
    """

    def __init__(self, http: HttpClient, charge_filter: ChargeFilter = keep_all_charges):
        self.http = http
        self.charge_filter = charge_filter

    # -------------------------------------------------------------------------
    # CHARGES
    # -------------------------------------------------------------------------

    def fetch_charges(self, company_number: str) -> List[Dict[str, Any]]:
        """
        Charges for a company after applying the configured filter.

        Returns [] when the lookup fails or the company has no charges.
        """
        try:
            data = self.http.get_json(f"/company/{company_number}/charges")
        except RegistryRequestError as e:
            logger.error(f"Error fetching charges for company {company_number}: {e}")
            return []
        return self.charge_filter(_items(data))

    # -------------------------------------------------------------------------
    # PROFILE AND OFFICERS
    # -------------------------------------------------------------------------

    def fetch_profile(self, company_number: str) -> Dict[str, Any]:
        try:
            data = self.http.get_json(f"/company/{company_number}")
        except RegistryRequestError as e:
            logger.error(f"Error fetching profile for company {company_number}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def fetch_officers(self, company_number: str) -> List[Dict[str, Any]]:
        try:
            data = self.http.get_json(f"/company/{company_number}/officers")
        except RegistryRequestError as e:
            logger.error(f"Error fetching officers for company {company_number}: {e}")
            return []
        return _items(data)


def _items(data: Any) -> List[Dict[str, Any]]:
    # Registry list endpoints wrap results in {"items": [...]}; a missing key means none
    if not isinstance(data, dict):
        return []
    return list(data.get("items") or [])
