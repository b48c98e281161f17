from typing import Any, Callable, Dict, Iterable, List

Charge = Dict[str, Any]
ChargeFilter = Callable[[List[Charge]], List[Charge]]


def charge_matches_lenders(charge: Charge, lender_names: Iterable[str]) -> bool:
    """
    Check whether any person entitled to the charge is one of the lenders.

    A party matches when its name contains a lender name, ignoring case
    (e.g. "SWISHFUND LTD (AS SECURITY TRUSTEE)" matches "Swishfund LTD").
    Parties without a name never match.
    """
    lenders = [name.lower() for name in lender_names]
    for party in charge.get('persons_entitled') or []:
        party_name = (party or {}).get('name')
        if not party_name:
            continue
        party_name = party_name.lower()
        if any(lender in party_name for lender in lenders):
            return True
    return False


def keep_all_charges(charges: List[Charge]) -> List[Charge]:
    return list(charges)


def select_charge_filter(mode: str, lender_names: Iterable[str] = ()) -> ChargeFilter:
    """
    Pick the charge filter for a run.

    Modes:
    - "all":          every registered charge is reported
    - "lender_match": only charges held by one of `lender_names`

    Args:
        mode: Charge filter mode from settings or the command line
        lender_names: Lender roster used by "lender_match"

    Returns:
        A function that takes a company's charges and returns the ones to report
    """
    if mode == "all":
        return keep_all_charges

    if mode == "lender_match":
        lenders = tuple(lender_names)
        if not lenders:
            raise ValueError("lender_match mode needs at least one lender name")

        def keep_lender_charges(charges: List[Charge]) -> List[Charge]:
            return [c for c in charges if charge_matches_lenders(c, lenders)]

        return keep_lender_charges

    raise ValueError(f"Unknown charge filter mode: {mode!r}")
