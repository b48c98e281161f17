"""
config.py - Configuration Management
=====================================
This module loads the run configuration from environment variables.
It reads settings from a .env file at the project root so the API key
never has to live in source code.

Environment Variables Used:
---------------------------
- COMPANIES_HOUSE_API_KEY : (Required) Companies House REST API key
- CH_BASE_URL             : (Optional) API base URL (default: public Companies House API)
- CH_TIMEOUT_SEC          : (Optional) Request timeout in seconds (default: requests default, no timeout)
- CH_CHARGE_FILTER        : (Optional) "all" or "lender_match" (default: "all")
- CH_LENDERS_FILE         : (Optional) Text file of lender names, one per line
- CH_MAX_COMPANIES        : (Optional) How many company numbers to check, 1-500 (default: 500)
- CH_OUTPUT_PATH          : (Optional) Report location (default: ~/Downloads/matched_charges.xlsx)

Example .env file:
------------------
COMPANIES_HOUSE_API_KEY=c501755c-...
CH_CHARGE_FILTER=lender_match
CH_LENDERS_FILE=lenders.txt
"""

from dataclasses import dataclass, field
import os
from pathlib import Path
from dotenv import load_dotenv


BASE_URL = "https://api.company-information.service.gov.uk"

DEFAULT_MAX_COMPANIES = 500

CHARGE_FILTER_MODES = ("all", "lender_match")

# Lenders checked when CH_CHARGE_FILTER=lender_match and no CH_LENDERS_FILE is given
DEFAULT_LENDER_NAMES = (
    "Nationwide Finance Limited",
    "Sellersfunding International Portfolio LTD",
    "Capitalrise Finance Limited",
    "Peak Cashflow Limited",
    "Sevcap I Limited",
    "Seneca Trade Partners LTD",
    "Finbiz Funding Limited",
    "Swishfund LTD",
    "Optimum Sme Finance Limited",
    "Liquid Link Limited",
    "Reward Capital Limited",
)


def default_output_path() -> Path:
    """Where the report lands when nothing else is configured."""
    return Path.home() / "Downloads" / "matched_charges.xlsx"


# =============================================================================
# SETTINGS DATACLASS
# =============================================================================

@dataclass
class Settings:
    """Container for all application configuration values."""

    # Required: Companies House API key, sent as the basic-auth username
    api_key: str

    base_url: str = BASE_URL

    # None leaves requests with its own default (wait indefinitely)
    timeout_sec: float | None = None

    # Which charges count as a match: "all" or "lender_match"
    charge_filter_mode: str = "all"

    lender_names: tuple[str, ...] = DEFAULT_LENDER_NAMES

    max_companies: int = DEFAULT_MAX_COMPANIES

    output_path: Path = field(default_factory=default_output_path)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _clean(v: str | None) -> str | None:
    """
    Clean and normalize an environment variable value.

    Strips whitespace and surrounding quotes; empty strings become None.

    Examples:
        _clean('  hello  ')     -> 'hello'
        _clean('"quoted"')      -> 'quoted'
        _clean('')              -> None
        _clean(None)            -> None
    """
    if v is None:
        return None

    v = v.strip()

    if (v.startswith('"') and v.endswith('"')) or (v.startswith("'") and v.endswith("'")):
        v = v[1:-1]

    return v if v else None


def load_lender_names(path: str | Path) -> tuple[str, ...]:
    """
    Read a lender roster file: one name per line, blank lines and
    lines starting with '#' are ignored.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file contains no names
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Lenders file not found: {path}")

    names = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            names.append(line)

    if not names:
        raise ValueError(f"Lenders file {path} does not contain any names")
    return tuple(names)


def validate_filter_mode(mode: str) -> str:
    mode = mode.strip().lower()
    if mode not in CHARGE_FILTER_MODES:
        raise ValueError(
            f"Unknown charge filter mode: {mode!r}. "
            f"Expected one of: {', '.join(CHARGE_FILTER_MODES)}"
        )
    return mode


# =============================================================================
# MAIN CONFIGURATION LOADER
# =============================================================================

def load_settings() -> Settings:
    """
    Load application configuration from environment variables.

    This function:
    1. Loads the .env file from the project root (if present)
    2. Reads COMPANIES_HOUSE_API_KEY and the CH_* variables
    3. Cleans and validates the values
    4. Returns a Settings object

    Returns:
        Settings: A dataclass containing all configuration values

    Raises:
        RuntimeError: If COMPANIES_HOUSE_API_KEY is not set
        ValueError: If a numeric or mode value is malformed
        FileNotFoundError: If CH_LENDERS_FILE points to a missing file
    """
    # The .env file sits one level up from chargecheck/
    root_env = Path(__file__).resolve().parents[1] / ".env"
    load_dotenv(dotenv_path=root_env)

    api_key = _clean(os.getenv("COMPANIES_HOUSE_API_KEY"))
    if not api_key:
        raise RuntimeError(
            "COMPANIES_HOUSE_API_KEY is not set in environment. "
            "Please add it to your .env file."
        )

    base = _clean(os.getenv("CH_BASE_URL")) or BASE_URL
    if not base.startswith("http"):
        base = "https://" + base
    base = base.rstrip("/")

    timeout_raw = _clean(os.getenv("CH_TIMEOUT_SEC"))
    timeout = float(timeout_raw) if timeout_raw else None

    mode = validate_filter_mode(_clean(os.getenv("CH_CHARGE_FILTER")) or "all")

    lenders_file = _clean(os.getenv("CH_LENDERS_FILE"))
    lender_names = load_lender_names(lenders_file) if lenders_file else DEFAULT_LENDER_NAMES

    max_companies = int(_clean(os.getenv("CH_MAX_COMPANIES")) or DEFAULT_MAX_COMPANIES)
    if not 1 <= max_companies <= DEFAULT_MAX_COMPANIES:
        raise ValueError(
            f"CH_MAX_COMPANIES must be between 1 and {DEFAULT_MAX_COMPANIES}"
        )

    output = _clean(os.getenv("CH_OUTPUT_PATH"))
    output_path = Path(output).expanduser() if output else default_output_path()

    return Settings(
        api_key=api_key,
        base_url=base,
        timeout_sec=timeout,
        charge_filter_mode=mode,
        lender_names=lender_names,
        max_companies=max_companies,
        output_path=output_path,
    )
